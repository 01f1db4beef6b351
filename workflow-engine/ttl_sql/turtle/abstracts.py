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

"""Artist abstract reader.

Statements about one subject sit on consecutive lines after the subject
line, e.g.

    <http://dbpedia.org/resource/Miles_Davis>
        rdf:type dbo:MusicalArtist ;
        rdfs:comment "An American jazz trumpeter."@en .

Fields are accumulated on a current-subject holder and turned into an
Artist when the next subject starts and once more at end of input.
Subjects without an English comment never become artists.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ttl_sql.config import VocabularyConfig
from ttl_sql.logger import StepCounter, get_logger
from ttl_sql.models import Artist
from ttl_sql.text import escape_sql, name_from_uri
from ttl_sql.turtle.lines import comment_literal, is_ignorable, subject_uri, type_name

log = get_logger(__name__)


class SubjectState(Enum):
    EMPTY = "empty"
    PENDING = "pending"
    DESCRIBED = "described"


@dataclass
class CurrentSubject:
    """Fields gathered so far for the subject being read."""

    uri: str | None = None
    type: str | None = None
    description: str | None = None

    @property
    def state(self) -> SubjectState:
        if not self.uri:
            return SubjectState.EMPTY
        if not self.description:
            return SubjectState.PENDING
        return SubjectState.DESCRIBED

    def start(self, uri: str) -> None:
        self.uri = uri
        self.type = None
        self.description = None

    def finalize(self, artists: dict[str, Artist]) -> bool:
        """Store the subject as an Artist if it has a description.

        A URI seen again overwrites the earlier record but keeps its
        position in `artists`.
        """
        if self.state is not SubjectState.DESCRIBED:
            return False
        artists[self.uri] = Artist(
            uri=self.uri,
            name=name_from_uri(self.uri),
            type=self.type or "",
            description=self.description,
        )
        return True


def parse_abstracts(
    text: str,
    vocabulary: VocabularyConfig | None = None,
    counter: StepCounter | None = None,
) -> dict[str, Artist]:
    """Build URI -> Artist from the abstract dump, in first-appearance order."""
    vocabulary = vocabulary or VocabularyConfig()
    artists: dict[str, Artist] = {}
    current = CurrentSubject()
    subjects = 0

    def _close() -> None:
        if current.state is SubjectState.PENDING and counter is not None:
            counter.dropped += 1
        current.finalize(artists)

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if is_ignorable(line, vocabulary):
            continue

        uri = subject_uri(line, vocabulary)
        if uri is not None:
            _close()
            current.start(uri)
            subjects += 1
        elif vocabulary.type_predicate in line:
            found = type_name(line, vocabulary)
            if found:
                current.type = found
        elif vocabulary.comment_predicate in line:
            literal = comment_literal(line, vocabulary)
            if literal is not None:
                current.description = escape_sql(literal)

    _close()

    if counter is not None:
        counter.ok = len(artists)
    log.info("Found %d artists with descriptions (%d subjects read)", len(artists), subjects)
    return artists
