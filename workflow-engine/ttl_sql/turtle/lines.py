# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Line classification shared by the abstract and category readers.

Not a Turtle grammar: each stripped line is classified on its own by
prefix and substring tests. Anything unrecognised is the caller's to skip.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from ttl_sql.config import VocabularyConfig

_BRACKETED = re.compile(r"<([^<>\s]+)>")


@dataclass(frozen=True, slots=True)
class LinePatterns:
    subject_start: str
    type_name: re.Pattern[str]
    comment: re.Pattern[str]
    category_uri: re.Pattern[str]


@lru_cache(maxsize=8)
def patterns_for(vocabulary: VocabularyConfig) -> LinePatterns:
    """Compile the regexes for one vocabulary (cached, vocabularies are frozen)."""
    category_ns = re.escape(vocabulary.resource_namespace + vocabulary.category_marker)
    return LinePatterns(
        subject_start="<" + vocabulary.resource_namespace,
        type_name=re.compile(re.escape(vocabulary.type_prefix) + r"([A-Za-z0-9_]+)"),
        # Greedy: the literal runs to the last "@lang on the line.
        comment=re.compile(r'"(.+)"@' + re.escape(vocabulary.language) + r"(?![\w-])"),
        category_uri=re.compile("<(" + category_ns + "[^>]+)>"),
    )


def is_ignorable(line: str, vocabulary: VocabularyConfig) -> bool:
    """Blank lines and namespace declarations."""
    return not line or line.startswith(vocabulary.prefix_keywords)


def subject_uri(line: str, vocabulary: VocabularyConfig) -> str | None:
    """URI of a subject-introducing line, brackets and terminator stripped."""
    if not line.startswith(patterns_for(vocabulary).subject_start):
        return None
    match = _BRACKETED.match(line)
    if match:
        return match.group(1)
    # Unterminated bracket
    return line[1:].rstrip(" \t.;,>")


def type_name(line: str, vocabulary: VocabularyConfig) -> str | None:
    match = patterns_for(vocabulary).type_name.search(line)
    return match.group(1) if match else None


def comment_literal(line: str, vocabulary: VocabularyConfig) -> str | None:
    """Raw text of the language-tagged literal, or None if the shape is off."""
    match = patterns_for(vocabulary).comment.search(line)
    return match.group(1) if match else None


def category_uris(line: str, vocabulary: VocabularyConfig) -> list[str]:
    """Every category URI object on a membership line, in line order."""
    return patterns_for(vocabulary).category_uri.findall(line)
