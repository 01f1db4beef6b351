#!/usr/bin/env python3
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
"""Convert the DBpedia artist graph dumps into PostgreSQL files.

Reads data.yaml next to this script; takes no arguments.

Usage:
    python build.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Engine lives in workflow-engine/
_ENGINE_DIR = Path(__file__).resolve().parent / "workflow-engine"
sys.path.insert(0, str(_ENGINE_DIR))

from ttl_sql.config import load_config
from ttl_sql.logger import get_logger
from ttl_sql.pipeline import run_pipeline

log = get_logger("build")


def main() -> int:
    workflow = Path(__file__).resolve().parent / "data.yaml"

    cfg_result = load_config(workflow)
    if not cfg_result.ok:
        log.error(cfg_result.error)
        return 1

    config = cfg_result.data
    log.info("Abstracts: %s", config.source.abstract_file)
    log.info("Categories: %s", config.source.category_file)
    log.info("Output: %s", config.output.dir)

    result = run_pipeline(config)
    if not result.ok:
        log.error("Conversion failed: %s", result.error)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
