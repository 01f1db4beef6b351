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

"""Result pattern for stage outcomes.

Stages that touch the filesystem return Result[T] = Ok[T] | Fail instead
of raising, so the orchestrator can stop cleanly before writing output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Stage succeeded; `data` is its output."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Stage failed; `context` usually names the offending path."""

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)

    @classmethod
    def from_os_error(cls, action: str, path: Path, exc: OSError) -> Fail:
        reason = exc.strerror or type(exc).__name__
        return cls(error=f"Cannot {action} {path}: {reason}", context=str(path))


Result = Ok[T] | Fail
