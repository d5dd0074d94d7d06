#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed SLHA data

Raw records are the frozen output of the splitter; decoded records are
the output of the decoder layer and the values returned by the query API.
"""

from __future__ import annotations

from slhakit.models.records import (
    RawLine,
    RawBlock,
    RawDecay,
    Block,
    BlockSingle,
    BlockStr,
    Decay,
    DecayTable,
)

__all__ = [
    "RawLine",
    "RawBlock",
    "RawDecay",
    "Block",
    "BlockSingle",
    "BlockStr",
    "Decay",
    "DecayTable",
]
