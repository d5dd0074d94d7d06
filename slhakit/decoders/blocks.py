#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Block decoders: fixed-key, single-value and string-keyed

Three concrete :class:`~slhakit.decoders.base.BlockShape` classes, one per
decoded block type, and the factory functions used to request them:

* :func:`block_of` → :class:`KeyedBlockShape` → :class:`~slhakit.models.records.Block`
* :func:`single_of` → :class:`SingleBlockShape` → :class:`~slhakit.models.records.BlockSingle`
* :func:`str_block_of` → :class:`StrBlockShape` → :class:`~slhakit.models.records.BlockStr`

Examples
--------
>>> from slhakit import parse
>>> doc = parse("BLOCK NMIX\\n 1 1 0.98\\n 1 2 -0.05\\n")
>>> doc.get_block("nmix", block_of((int, int), float))[(1, 2)]
-0.05
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from slhakit.decoders.base import (
    BlockShape,
    KeyShape,
    StrSequenceKey,
    ValueShape,
    check_value_shape,
    key_shape,
    parse_value,
)
from slhakit.exceptions import DecodeError, DuplicateKeyError, WrongLineCountError
from slhakit.models.records import Block, BlockSingle, BlockStr, RawBlock
from slhakit.utils.constants import STANDARD_BLOCKS

logger = logging.getLogger(__name__)


def _decode_entries(raw: RawBlock, key: KeyShape, value: ValueShape) -> dict:
    """Decode every line of *raw* into an insertion-ordered key/value dict"""
    entries: dict = {}
    first_seen: dict = {}
    for line in raw.lines:
        try:
            k, v = key.split(line.data, value)
        except DecodeError as exc:
            exc.add_context(block=raw.name, lineno=line.lineno)
            raise
        if k in entries:
            raise DuplicateKeyError(
                f"Duplicate key {k!r} (first defined at line {first_seen[k]})",
                block=raw.name,
                lineno=line.lineno,
            )
        entries[k] = v
        first_seen[k] = line.lineno
    logger.debug("Decoded block %s: %d entries", raw.name, len(entries))
    return entries


@dataclass(frozen=True)
class KeyedBlockShape(BlockShape):
    """Decoder for blocks with a fixed key shape

    Parameters
    ----------
    key : KeyShape
        Shape of the leading key tokens.
    value : ValueShape
        Shape of the remaining tokens.
    """

    key: KeyShape
    value: ValueShape

    def decode(self, raw: RawBlock) -> Block:
        return Block(_decode_entries(raw, self.key, self.value), raw.scale)


@dataclass(frozen=True)
class SingleBlockShape(BlockShape):
    """Decoder for blocks holding exactly one data line with one value

    Parameters
    ----------
    value : ValueShape
        Shape of the single line.
    """

    value: ValueShape

    def decode(self, raw: RawBlock) -> BlockSingle:
        if len(raw.lines) != 1:
            raise WrongLineCountError(
                f"Expected exactly one data line, found {len(raw.lines)}",
                block=raw.name,
                lineno=raw.lineno,
            )
        line = raw.lines[0]
        try:
            value = parse_value(line.data, self.value)
        except DecodeError as exc:
            exc.add_context(block=raw.name, lineno=line.lineno)
            raise
        return BlockSingle(value, raw.scale)


@dataclass(frozen=True)
class StrBlockShape(BlockShape):
    """Decoder for blocks whose keys are kept as raw token tuples

    Parameters
    ----------
    value : ValueShape
        Shape of the trailing value tokens.
    """

    value: ValueShape
    key: KeyShape = field(default=StrSequenceKey(), init=False)

    def decode(self, raw: RawBlock) -> BlockStr:
        return BlockStr(_decode_entries(raw, self.key, self.value), raw.scale)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def block_of(key: object, value: object) -> KeyedBlockShape:
    """Shape of a key/value block

    Parameters
    ----------
    key : type | tuple[type, ...] | KeyShape
        Scalar kind or tuple of scalar kinds of the key.
    value : type | tuple[type, ...]
        Scalar kind or tuple of scalar kinds of the value.

    Raises
    ------
    TypeError
        If either shape uses an unsupported kind.
    """
    return KeyedBlockShape(key_shape(key), check_value_shape(value))


def single_of(value: object) -> SingleBlockShape:
    """Shape of a single-valued block such as ``BLOCK ALPHA``"""
    return SingleBlockShape(check_value_shape(value))


def str_block_of(value: object) -> StrBlockShape:
    """Shape of a block keyed by raw token tuples"""
    return StrBlockShape(check_value_shape(value))


def standard_shape(name: str) -> BlockShape | None:
    """Decoder for a standard SLHA1/SLHA2 block name, or ``None`` if unknown

    Examples
    --------
    >>> standard_shape("ALPHA")
    SingleBlockShape(value=<class 'float'>)
    >>> standard_shape("MyPrivateBlock") is None
    True
    """
    entry = STANDARD_BLOCKS.get(name.casefold())
    if entry is None:
        return None
    key, value = entry
    if key is None:
        return single_of(value)
    return block_of(key, value)
