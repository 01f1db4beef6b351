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

"""Referential integrity check: runs between parsing and SQL output.

Advisory only: never blocks the pipeline, just logs what a PostgreSQL
load of the generated files would trip over.

Checks:
  1. Every artist has a non-empty description
  2. Every link points at a known artist
  3. Every link points at a known category
  4. Repeated (artist, category) pairs, which the join table's primary
     key rejects at load time
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from ttl_sql.logger import get_logger
from ttl_sql.models import Artist, CategoryGraph
from ttl_sql.result import Ok, Result

log = get_logger(__name__)


@dataclass
class IntegrityReport:
    artist_count: int
    category_count: int
    link_count: int
    empty_descriptions: list[str] = field(default_factory=list)
    unknown_artists: list[str] = field(default_factory=list)
    unknown_categories: list[str] = field(default_factory=list)
    duplicate_links: int = 0

    @property
    def clean(self) -> bool:
        return not (self.empty_descriptions or self.unknown_artists or self.unknown_categories)


def _log_report(report: IntegrityReport) -> None:
    log.info("Integrity: %d artists, %d categories, %d links",
             report.artist_count, report.category_count, report.link_count)
    if report.empty_descriptions:
        log.warning("  Artists without description: %s", ", ".join(report.empty_descriptions))
    if report.unknown_artists:
        log.warning("  Links to unknown artists: %s", ", ".join(report.unknown_artists))
    if report.unknown_categories:
        log.warning("  Links to unknown categories: %s", ", ".join(report.unknown_categories))
    if report.duplicate_links:
        log.info("  Repeated artist-category pairs kept: %d", report.duplicate_links)


def validate_graph(
    artists: dict[str, Artist],
    graph: CategoryGraph,
) -> Result[IntegrityReport]:
    """Run all checks. Always returns Ok."""
    pairs = Counter((link.artist_uri, link.category_uri) for link in graph.links)

    report = IntegrityReport(
        artist_count=len(artists),
        category_count=len(graph.categories),
        link_count=len(graph.links),
        empty_descriptions=[uri for uri, a in artists.items() if not a.description],
        unknown_artists=sorted(
            {link.artist_uri for link in graph.links if link.artist_uri not in artists}
        ),
        unknown_categories=sorted(
            {link.category_uri for link in graph.links if link.category_uri not in graph.categories}
        ),
        duplicate_links=sum(n - 1 for n in pairs.values()),
    )

    _log_report(report)

    return Ok(data=report)
