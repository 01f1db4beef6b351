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

"""Stdout logger plus per-stage counters for the run summary.

Progress lines and the closing summary are the converter's user-facing
output, so everything goes to stdout.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger writing to stdout with the shared format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class StepCounter:
    """Kept/dropped counts for one stage (artists, categories, links...)."""

    name: str
    ok: int = 0
    dropped: int = 0


@dataclass
class PipelineSummary:
    steps: dict[str, StepCounter] = field(default_factory=dict)

    def counter(self, name: str) -> StepCounter:
        """Get or create the counter for a named stage."""
        if name not in self.steps:
            self.steps[name] = StepCounter(name=name)
        return self.steps[name]

    def report(self) -> str:
        lines: list[str] = ["", "Conversion Summary", "=" * 40]
        for step in self.steps.values():
            parts = [f"{step.name}: {step.ok} found"]
            if step.dropped:
                parts.append(f"{step.dropped} dropped")
            lines.append("  ".join(parts))
        lines.append("=" * 40)
        return "\n".join(lines)
