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

"""SQL writer: turns parsed artists and categories into PostgreSQL files.

Produces, in apply order: schema DDL, artist inserts, category inserts,
artist-category inserts. Rendering is pure; emit_sql does the writing.
Nothing time-dependent goes into the files, so reruns are byte-identical.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ttl_sql.config import OutputConfig
from ttl_sql.logger import PipelineSummary, get_logger
from ttl_sql.models import Artist, ArtistCategory, Category, CategoryGraph
from ttl_sql.result import Fail, Ok, Result
from ttl_sql.text import escape_sql

log = get_logger(__name__)

SCHEMA_SQL = """-- MusicLynx DBpedia Artist Database Schema

DROP TABLE IF EXISTS artist_categories CASCADE;
DROP TABLE IF EXISTS categories CASCADE;
DROP TABLE IF EXISTS artists CASCADE;

-- Artists table
CREATE TABLE artists (
  uri TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  type TEXT NOT NULL,
  description TEXT NOT NULL,
  created_at TIMESTAMP DEFAULT NOW()
);

-- Categories table
CREATE TABLE categories (
  uri TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  created_at TIMESTAMP DEFAULT NOW()
);

-- Artist-Category junction table
CREATE TABLE artist_categories (
  artist_uri TEXT NOT NULL REFERENCES artists(uri) ON DELETE CASCADE,
  category_uri TEXT NOT NULL REFERENCES categories(uri) ON DELETE CASCADE,
  PRIMARY KEY (artist_uri, category_uri),
  created_at TIMESTAMP DEFAULT NOW()
);

-- Indexes for performance
CREATE INDEX idx_artists_name ON artists(name);
CREATE INDEX idx_artists_type ON artists(type);
CREATE INDEX idx_categories_name ON categories(name);
CREATE INDEX idx_artist_categories_artist ON artist_categories(artist_uri);
CREATE INDEX idx_artist_categories_category ON artist_categories(category_uri);

-- Full-text search on descriptions
CREATE INDEX idx_artists_description_fts ON artists USING GIN(to_tsvector('english', description));
"""


def render_schema() -> str:
    return SCHEMA_SQL


def _render(header: str, statements: Iterable[str]) -> str:
    lines = [f"-- {header}", ""]
    lines.extend(statements)
    return "\n".join(lines) + "\n"


def render_artists(artists: Iterable[Artist]) -> str:
    """One INSERT per artist. Name and description are escaped at parse time."""
    return _render("Insert artists", (
        "INSERT INTO artists (uri, name, type, description) VALUES "
        f"('{escape_sql(a.uri)}', '{a.name}', '{a.type}', '{a.description}');"
        for a in artists
    ))


def render_categories(categories: Iterable[Category]) -> str:
    return _render("Insert categories", (
        "INSERT INTO categories (uri, name) VALUES "
        f"('{escape_sql(c.uri)}', '{c.name}');"
        for c in categories
    ))


def render_artist_categories(links: Iterable[ArtistCategory]) -> str:
    """One INSERT per link, in the order given. Duplicates are not collapsed."""
    return _render("Insert artist-category relationships", (
        "INSERT INTO artist_categories (artist_uri, category_uri) VALUES "
        f"('{escape_sql(link.artist_uri)}', '{escape_sql(link.category_uri)}');"
        for link in links
    ))


def _discard(paths: Iterable[Path]) -> None:
    for path in paths:
        path.unlink(missing_ok=True)


def emit_sql(
    artists: dict[str, Artist],
    graph: CategoryGraph,
    config: OutputConfig,
    summary: PipelineSummary,
) -> Result[list[Path]]:
    """Write the four SQL files into config.dir, overwriting earlier runs.

    Args:
        artists: URI -> Artist from the abstract reader.
        graph: Categories and links from the category reader.
        config: Output directory and file names.
        summary: Pipeline summary; the "files" counter tracks writes.
    """
    files = config.files
    contents = {
        files.schema: render_schema(),
        files.artists: render_artists(artists.values()),
        files.categories: render_categories(graph.categories.values()),
        files.artist_categories: render_artist_categories(graph.links),
    }

    try:
        config.dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return Fail.from_os_error("create", config.dir, exc)

    counter = summary.counter("files")

    # Existing output is not touched until all four files are staged.
    staged: list[tuple[Path, Path]] = []
    for filename in files.in_order():
        target = config.dir / filename
        tmp = config.dir / f".{filename}.tmp"
        try:
            tmp.write_text(contents[filename], encoding="utf-8")
        except OSError as exc:
            counter.dropped += 1
            _discard(path for path, _ in staged)
            return Fail.from_os_error("write", tmp, exc)
        staged.append((tmp, target))

    written: list[Path] = []
    for tmp, target in staged:
        try:
            tmp.replace(target)
        except OSError as exc:
            counter.dropped += 1
            _discard(path for path, _ in staged if path.exists())
            return Fail.from_os_error("replace", target, exc)
        counter.ok += 1
        written.append(target)
        log.info("Written %s", target)

    return Ok(data=written)
