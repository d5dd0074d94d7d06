#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed decoders for raw SLHA records

This sub-package turns raw records into decoded values:

* :class:`~slhakit.decoders.blocks.KeyedBlockShape`: key/value blocks
* :class:`~slhakit.decoders.blocks.SingleBlockShape`: single-value blocks
* :class:`~slhakit.decoders.blocks.StrBlockShape`: raw-token-keyed blocks
* :func:`~slhakit.decoders.decay.decode_decay`: decay tables

All block decoders share the :class:`~slhakit.decoders.base.BlockShape`
interface.
"""

from __future__ import annotations

from slhakit.decoders.base import BlockShape, KeyShape, ScalarKey, StrSequenceKey, TupleKey
from slhakit.decoders.blocks import (
    KeyedBlockShape,
    SingleBlockShape,
    StrBlockShape,
    block_of,
    single_of,
    standard_shape,
    str_block_of,
)
from slhakit.decoders.decay import decode_decay, parse_decay_line

__all__ = [
    "BlockShape",
    "KeyShape",
    "ScalarKey",
    "TupleKey",
    "StrSequenceKey",
    "KeyedBlockShape",
    "SingleBlockShape",
    "StrBlockShape",
    "block_of",
    "single_of",
    "str_block_of",
    "standard_shape",
    "decode_decay",
    "parse_decay_line",
]
