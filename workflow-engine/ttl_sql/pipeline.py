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

"""Pipeline orchestrator.

Runs the conversion as one linear batch:
  1. Read: load both graph dumps (fails before anything is written)
  2. Abstracts: build artists from subjects with an English comment
  3. Categories: build categories and links for known artists
  4. Integrity: advisory referential checks
  5. Emit: write schema + three insert files

Each stage hands its output to the next as a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ttl_sql.config import OutputConfig, PipelineConfig
from ttl_sql.emitter import emit_sql
from ttl_sql.logger import PipelineSummary, get_logger
from ttl_sql.models import Artist, CategoryGraph
from ttl_sql.reader import read_sources
from ttl_sql.result import Ok, Result
from ttl_sql.turtle.abstracts import parse_abstracts
from ttl_sql.turtle.categories import parse_categories
from ttl_sql.validator import IntegrityReport, validate_graph

log = get_logger(__name__)


@dataclass
class Conversion:
    """Everything one run produced."""

    artists: dict[str, Artist]
    graph: CategoryGraph
    integrity: IntegrityReport
    files: list[Path] = field(default_factory=list)


def import_commands(output: OutputConfig) -> list[str]:
    """Shell commands that load the generated files, in apply order."""
    commands = [f"createdb {output.database}"]
    for filename in output.files.in_order():
        commands.append(f"psql {output.database} < {output.dir / filename}")
    return commands


def run_pipeline(config: PipelineConfig) -> Result[Conversion]:
    """Run read -> abstracts -> categories -> integrity -> emit."""
    summary = PipelineSummary()
    vocabulary = config.vocabulary

    log.info("Starting TTL to PostgreSQL conversion")

    # 1. Read
    read_result = read_sources(config.source)
    if not read_result.ok:
        log.error("Read failed: %s", read_result.error)
        return read_result  # type: ignore[return-value]
    abstract_text, category_text = read_result.data

    # 2. Abstracts
    log.info("── Parsing artist abstracts ──")
    artists = parse_abstracts(abstract_text, vocabulary, summary.counter("artists"))

    # 3. Categories
    log.info("── Parsing artist categories ──")
    graph = parse_categories(
        category_text,
        artists,
        vocabulary,
        categories_counter=summary.counter("categories"),
        links_counter=summary.counter("links"),
    )

    # 4. Integrity (advisory)
    integrity = validate_graph(artists, graph).data
    if not integrity.clean:
        log.warning("Integrity check found dangling rows; the load may fail")

    # 5. Emit
    log.info("── Generating SQL ──")
    emit_result = emit_sql(artists, graph, config.output, summary)
    if not emit_result.ok:
        log.error("Emit failed: %s", emit_result.error)
        log.info(summary.report())
        return emit_result  # type: ignore[return-value]

    log.info(summary.report())
    log.info("Conversion complete. To import into PostgreSQL:")
    for command in import_commands(config.output):
        log.info("  %s", command)

    return Ok(data=Conversion(
        artists=artists, graph=graph, integrity=integrity, files=emit_result.data,
    ))
