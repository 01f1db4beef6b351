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

"""Records produced by the two graph parsers.

Text fields on Artist and Category are already SQL-escaped; URIs are
raw and get escaped when rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Artist:
    uri: str
    name: str
    type: str
    description: str


@dataclass(frozen=True, slots=True)
class Category:
    uri: str
    name: str


@dataclass(frozen=True, slots=True)
class ArtistCategory:
    """One membership row for the join table."""
    artist_uri: str
    category_uri: str


@dataclass
class CategoryGraph:
    """Categories keyed by URI (first seen wins) and links in source order."""
    categories: dict[str, Category] = field(default_factory=dict)
    links: list[ArtistCategory] = field(default_factory=list)
