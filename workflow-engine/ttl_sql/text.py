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

"""SQL literal escaping and display-name derivation.

escape_sql is the single path by which source text reaches a quoted
literal in the generated SQL.
"""

from __future__ import annotations

from urllib.parse import unquote


def escape_sql(value: str | None) -> str:
    """Escape text for embedding inside '...'.

    Backslashes are doubled before quotes so the quote doubling is not
    itself re-escaped. Line breaks collapse to spaces, CR is dropped.
    """
    if not value:
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace("'", "''")
        .replace("\n", " ")
        .replace("\r", "")
        .replace("\t", " ")
    )


def _last_segment(uri: str) -> str:
    return uri.rsplit("/", 1)[-1]


def _display(segment: str) -> str:
    return escape_sql(unquote(segment).replace("_", " "))


def name_from_uri(uri: str | None) -> str:
    """`.../resource/Miles_Davis` -> `Miles Davis` (SQL-escaped)."""
    if not uri:
        return ""
    return _display(_last_segment(uri))


def category_label(uri: str | None, marker: str = "Category:") -> str:
    """`.../resource/Category:Jazz_musicians` -> `Jazz musicians` (SQL-escaped)."""
    if not uri:
        return ""
    segment = _last_segment(uri)
    if segment.startswith(marker):
        segment = segment[len(marker):]
    return _display(segment)
