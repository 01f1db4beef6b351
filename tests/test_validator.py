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
"""Tests for ttl_sql.validator."""

from ttl_sql.models import Artist, ArtistCategory, Category, CategoryGraph
from ttl_sql.validator import validate_graph

MILES = "http://dbpedia.org/resource/Miles_Davis"
JAZZ = "http://dbpedia.org/resource/Category:Jazz_musicians"
ARTISTS = {MILES: Artist(MILES, "Miles Davis", "MusicalArtist", "Trumpeter.")}
CATEGORIES = {JAZZ: Category(JAZZ, "Jazz musicians")}


class TestValidateGraph:
    def test_clean_graph(self) -> None:
        graph = CategoryGraph(categories=CATEGORIES, links=[ArtistCategory(MILES, JAZZ)])
        report = validate_graph(ARTISTS, graph).data
        assert report.clean
        assert report.link_count == 1
        assert report.duplicate_links == 0

    def test_dangling_links_reported(self) -> None:
        ghost = "http://dbpedia.org/resource/Ghost"
        graph = CategoryGraph(
            categories={},
            links=[ArtistCategory(ghost, JAZZ)],
        )
        result = validate_graph(ARTISTS, graph)
        assert result.ok
        assert not result.data.clean
        assert result.data.unknown_artists == [ghost]
        assert result.data.unknown_categories == [JAZZ]

    def test_duplicate_pairs_counted(self) -> None:
        links = [ArtistCategory(MILES, JAZZ)] * 3
        report = validate_graph(ARTISTS, CategoryGraph(categories=CATEGORIES, links=links)).data
        assert report.duplicate_links == 2
        assert report.clean

    def test_empty_description_reported(self) -> None:
        artists = {MILES: Artist(MILES, "Miles Davis", "MusicalArtist", "")}
        report = validate_graph(artists, CategoryGraph()).data
        assert report.empty_descriptions == [MILES]
