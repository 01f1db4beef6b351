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
"""End-to-end tests for ttl_sql.pipeline and ttl_sql.reader."""

from pathlib import Path

from ttl_sql.config import OutputConfig, load_config
from ttl_sql.pipeline import import_commands, run_pipeline
from ttl_sql.reader import read_source

FILE_NAMES = ["01-schema.sql", "02-artists.sql", "03-categories.sql", "04-artist-categories.sql"]


class TestRunPipeline:
    def test_full_conversion(self, workflow: Path) -> None:
        config = load_config(workflow).data
        result = run_pipeline(config)

        assert result.ok
        conversion = result.data
        assert len(conversion.artists) == 2
        assert len(conversion.graph.categories) == 3
        assert len(conversion.graph.links) == 2
        assert [p.name for p in conversion.files] == FILE_NAMES
        assert conversion.integrity.clean
        assert conversion.integrity.link_count == 2

        artists_sql = (config.output.dir / "02-artists.sql").read_text(encoding="utf-8")
        assert "'Sinéad O''Connor'" in artists_sql
        assert "Nobody_Special" not in artists_sql

        links_sql = (config.output.dir / "04-artist-categories.sql").read_text(encoding="utf-8")
        assert "Nobody_Special" not in links_sql
        categories_sql = (config.output.dir / "03-categories.sql").read_text(encoding="utf-8")
        assert "'Rock bands'" in categories_sql

    def test_rerun_is_byte_identical(self, workflow: Path) -> None:
        config = load_config(workflow).data
        run_pipeline(config)
        first = [(config.output.dir / name).read_bytes() for name in FILE_NAMES]
        run_pipeline(config)
        second = [(config.output.dir / name).read_bytes() for name in FILE_NAMES]
        assert first == second

    def test_missing_input_writes_nothing(self, workflow: Path) -> None:
        config = load_config(workflow).data
        config.source.category_file.unlink()

        result = run_pipeline(config)
        assert not result.ok
        assert "not found" in result.error
        assert not config.output.dir.exists()


class TestReadSource:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.ttl"
        path.write_text("<http://dbpedia.org/resource/Bj%C3%B6rk> # Björk\n", encoding="utf-8")
        result = read_source(path)
        assert result.ok
        assert "Björk" in result.data

    def test_directory_is_not_an_input(self, tmp_path: Path) -> None:
        result = read_source(tmp_path)
        assert not result.ok
        assert result.context == str(tmp_path)


class TestImportCommands:
    def test_commands_in_apply_order(self, tmp_path: Path) -> None:
        commands = import_commands(OutputConfig(dir=tmp_path, database="lynx"))
        assert commands[0] == "createdb lynx"
        assert commands[1:] == [f"psql lynx < {tmp_path / name}" for name in FILE_NAMES]
