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

"""Graph dump reader: loads a whole TTL file into memory.

Both dumps are read before anything is parsed or written, so a missing
input stops the run with no partial SQL output.
"""

from __future__ import annotations

from pathlib import Path

from ttl_sql.config import SourceConfig
from ttl_sql.logger import get_logger
from ttl_sql.result import Fail, Ok, Result

log = get_logger(__name__)


def read_source(path: Path) -> Result[str]:
    """Read one UTF-8 graph dump."""
    if not path.is_file():
        return Fail(error=f"Input file not found: {path}", context=str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Fail.from_os_error("read", path, exc)
    except UnicodeDecodeError as exc:
        return Fail(error=f"Input is not valid UTF-8: {exc}", context=str(path))

    log.info("Read %s (%d bytes)", path.name, len(text.encode("utf-8")))
    return Ok(data=text)


def read_sources(config: SourceConfig) -> Result[tuple[str, str]]:
    """Read the abstract dump and the category dump, in that order."""
    abstracts = read_source(config.abstract_file)
    if not abstracts.ok:
        return abstracts  # type: ignore[return-value]

    categories = read_source(config.category_file)
    if not categories.ok:
        return categories  # type: ignore[return-value]

    return Ok(data=(abstracts.data, categories.data))
