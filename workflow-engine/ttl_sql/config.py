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

"""Loads data.yaml into typed dataclasses.

The YAML file names the two graph dumps, the vocabulary the line parser
recognises, and where the SQL files go. Every vocabulary and output key
is optional and falls back to the DBpedia defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ttl_sql.result import Fail, Ok, Result


# ── Source ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class SourceConfig:
    abstract_file: Path
    category_file: Path


# ── Vocabulary ─────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class VocabularyConfig:
    """Tokens the line classifier looks for."""
    resource_namespace: str = "http://dbpedia.org/resource/"
    category_marker: str = "Category:"
    type_predicate: str = "rdf:type"
    type_prefix: str = "dbo:"
    comment_predicate: str = "rdfs:comment"
    subject_predicate: str = "dct:subject"
    language: str = "en"
    prefix_keywords: tuple[str, ...] = ("PREFIX", "@prefix")


# ── Output ─────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class OutputFiles:
    schema: str = "01-schema.sql"
    artists: str = "02-artists.sql"
    categories: str = "03-categories.sql"
    artist_categories: str = "04-artist-categories.sql"

    def in_order(self) -> list[str]:
        """File names in the order they must be applied."""
        return [self.schema, self.artists, self.categories, self.artist_categories]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    dir: Path
    database: str = "musiclynx"
    files: OutputFiles = field(default_factory=OutputFiles)


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class PipelineConfig:
    source: SourceConfig
    output: OutputConfig
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)


# ── Loader ─────────────────────────────────────────────────────

def _resolve(base: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else (base / path).resolve()


def _build_vocabulary(raw: dict[str, Any]) -> VocabularyConfig:
    values = dict(raw)
    keywords = values.get("prefix_keywords")
    if isinstance(keywords, str):
        values["prefix_keywords"] = (keywords,)
    elif keywords is not None:
        values["prefix_keywords"] = tuple(keywords)
    return VocabularyConfig(**values)


def _build_output(raw: dict[str, Any], base: Path) -> OutputConfig:
    return OutputConfig(
        dir=_resolve(base, raw.get("dir", "sql")),
        database=raw.get("database", "musiclynx"),
        files=OutputFiles(**raw.get("files", {})),
    )


def load_config(path: Path) -> Result[PipelineConfig]:
    """Load data.yaml into PipelineConfig. Relative paths resolve against its directory."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    base = path.resolve().parent

    try:
        config = PipelineConfig(
            source=SourceConfig(
                abstract_file=_resolve(base, raw["source"]["abstract_file"]),
                category_file=_resolve(base, raw["source"]["category_file"]),
            ),
            output=_build_output(raw.get("output") or {}, base),
            vocabulary=_build_vocabulary(raw.get("vocabulary") or {}),
        )
    except (KeyError, TypeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    return Ok(data=config)
