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

"""Artist category reader.

Membership statements follow their artist's subject line, with all the
objects of one statement on the same line:

    <http://dbpedia.org/resource/Miles_Davis>
        dct:subject <.../Category:Jazz_musicians> , <.../Category:American_trumpeters> .

Continuation lines carrying only more objects are not membership lines.
Categories are registered whenever they are referenced. Links are kept
only for artists that came out of the abstract reader.
"""

from __future__ import annotations

from ttl_sql.config import VocabularyConfig
from ttl_sql.logger import StepCounter, get_logger
from ttl_sql.models import Artist, ArtistCategory, Category, CategoryGraph
from ttl_sql.text import category_label
from ttl_sql.turtle.lines import category_uris, is_ignorable, subject_uri

log = get_logger(__name__)


def parse_categories(
    text: str,
    artists: dict[str, Artist],
    vocabulary: VocabularyConfig | None = None,
    categories_counter: StepCounter | None = None,
    links_counter: StepCounter | None = None,
) -> CategoryGraph:
    """Collect categories (first seen wins) and artist links (source order, duplicates kept)."""
    vocabulary = vocabulary or VocabularyConfig()
    graph = CategoryGraph()
    current_artist: str | None = None
    dropped_links = 0

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if is_ignorable(line, vocabulary):
            continue

        uri = subject_uri(line, vocabulary)
        if uri is not None and vocabulary.category_marker not in line:
            current_artist = uri
        elif vocabulary.subject_predicate in line and current_artist:
            for category_uri in category_uris(line, vocabulary):
                if category_uri not in graph.categories:
                    graph.categories[category_uri] = Category(
                        uri=category_uri,
                        name=category_label(category_uri, vocabulary.category_marker),
                    )

                if current_artist in artists:
                    graph.links.append(ArtistCategory(current_artist, category_uri))
                else:
                    dropped_links += 1

    if categories_counter is not None:
        categories_counter.ok = len(graph.categories)
    if links_counter is not None:
        links_counter.ok = len(graph.links)
        links_counter.dropped = dropped_links

    log.info("Found %d unique categories", len(graph.categories))
    log.info("Found %d artist-category relationships", len(graph.links))
    return graph
