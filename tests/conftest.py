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
"""Shared graph dump fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

ABSTRACTS_TTL = """\
@prefix dbo: <http://dbpedia.org/ontology/> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>

<http://dbpedia.org/resource/Miles_Davis>
    rdf:type dbo:MusicalArtist ;
    rdfs:comment "An American jazz trumpeter."@en .

<http://dbpedia.org/resource/Nobody_Special>
    rdf:type dbo:Band .

<http://dbpedia.org/resource/Sin%C3%A9ad_O'Connor>
    rdf:type dbo:MusicalArtist ;
    rdfs:comment "Irish singer, known as O'Connor."@en .
"""

CATEGORIES_TTL = """\
@prefix dct: <http://purl.org/dc/terms/> .

<http://dbpedia.org/resource/Miles_Davis>
    dct:subject <http://dbpedia.org/resource/Category:Jazz_musicians> , <http://dbpedia.org/resource/Category:American_trumpeters> .

<http://dbpedia.org/resource/Nobody_Special>
    dct:subject <http://dbpedia.org/resource/Category:Rock_bands> .
"""


@pytest.fixture
def workflow(tmp_path: Path) -> Path:
    """data.yaml plus both dumps laid out like the repository root."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "artist_abstract_graph.ttl").write_text(ABSTRACTS_TTL, encoding="utf-8")
    (data_dir / "artist_category_graph.ttl").write_text(CATEGORIES_TTL, encoding="utf-8")

    path = tmp_path / "data.yaml"
    path.write_text(
        "source:\n"
        "  abstract_file: data/artist_abstract_graph.ttl\n"
        "  category_file: data/artist_category_graph.ttl\n"
        "output:\n"
        "  dir: sql\n",
        encoding="utf-8",
    )
    return path
