#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Binding of dataclass fields to SLHA blocks

Declares, per dataclass field, which block it is read from and how
absence and repetition are handled, then fills an instance from SLHA text
through the :class:`~slhakit.document.Document` query API.  Each bound
field makes exactly one query call.

Modes
-----
==============  ==========================  =================================
Mode            Query                       Absent block
==============  ==========================  =================================
``required``    ``get_block``               :class:`MissingBlockError`
``optional``    ``get_block``               ``None``
``repeated``    ``get_blocks``              ``[]``
``unchecked``   ``get_blocks_unchecked``    ``[]``
``first``       ``get_raw_blocks`` [0]      :class:`MissingBlockError`
``last``        ``get_raw_blocks`` [-1]     :class:`MissingBlockError`
==============  ==========================  =================================

``first`` and ``last`` accept any number of occurrences and decode only
the selected one.  Errors raised while filling a field carry the field
name (``err.field``).

Examples
--------
>>> from dataclasses import dataclass
>>> from slhakit import Block, block_of
>>> @dataclass
... class Spectrum:
...     mass: Block = block_field(block_of(int, float))
...     ye: list = block_field(block_of((int, int), float), mode="repeated")
>>> s = deserialize(Spectrum, "BLOCK MASS\\n 6 173.2\\n")
>>> s.mass[6], s.ye
(173.2, [])
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Literal, TypeVar

from slhakit.decoders.base import BlockShape
from slhakit.document import Document, parse
from slhakit.exceptions import MissingBlockError, SlhaError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BindingMode = Literal["required", "optional", "repeated", "unchecked", "first", "last"]

BINDING_MODES: tuple[str, ...] = (
    "required", "optional", "repeated", "unchecked", "first", "last",
)

_METADATA_KEY = "slhakit"


def block_field(
    shape: BlockShape,
    *,
    mode: BindingMode = "required",
    name: str | None = None,
):
    """Declare a dataclass field read from an SLHA block

    Parameters
    ----------
    shape : BlockShape
        Decoder for the block, e.g. ``block_of(int, float)``.
    mode : str, optional
        One of :data:`BINDING_MODES`.  Default ``"required"``.
    name : str, optional
        Block name; defaults to the field name.  Matched case-insensitively.

    Returns
    -------
    dataclasses.Field
        A field without a default; instances are expected to be built
        with :func:`deserialize`.
    """
    if mode not in BINDING_MODES:
        raise ValueError(f"Unknown binding mode {mode!r}, expected one of {BINDING_MODES}")
    if not isinstance(shape, BlockShape):
        raise TypeError(f"Expected a BlockShape, got {shape!r}")
    return dataclasses.field(
        metadata={_METADATA_KEY: {"kind": "block", "shape": shape, "mode": mode, "name": name}}
    )


def decays_field():
    """Declare a dataclass field holding every decay table, keyed by PDG id"""
    return dataclasses.field(metadata={_METADATA_KEY: {"kind": "decays"}})


def _read_block(doc: Document, block: str, shape: BlockShape, mode: str):
    if mode == "required":
        value = doc.get_block(block, shape)
        if value is None:
            raise MissingBlockError("Required block is missing", block=block)
        return value
    if mode == "optional":
        return doc.get_block(block, shape)
    if mode == "repeated":
        return doc.get_blocks(block, shape)
    if mode == "unchecked":
        return doc.get_blocks_unchecked(block, shape)

    occurrences = doc.get_raw_blocks(block)
    if not occurrences:
        raise MissingBlockError("Required block is missing", block=block)
    index = 0 if mode == "first" else len(occurrences) - 1
    try:
        return shape.decode(occurrences[index])
    except SlhaError as exc:
        exc.add_context(occurrence=index)
        raise


def bind(cls: type[T], doc: Document) -> T:
    """Build an instance of dataclass *cls* from a parsed document

    Fields declared with :func:`block_field` or :func:`decays_field` are
    read from *doc*; all other fields keep their defaults.

    Raises
    ------
    TypeError
        If *cls* is not a dataclass.
    SlhaError
        Any query or decode error, tagged with the field name.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")

    values = {}
    for f in dataclasses.fields(cls):
        entry = f.metadata.get(_METADATA_KEY)
        if entry is None:
            continue
        try:
            if entry["kind"] == "decays":
                values[f.name] = doc.get_decays()
            else:
                block = entry["name"] or f.name
                values[f.name] = _read_block(doc, block, entry["shape"], entry["mode"])
        except SlhaError as exc:
            exc.add_context(field=f.name)
            raise
        logger.debug("Bound field %s.%s", cls.__name__, f.name)
    return cls(**values)


def deserialize(cls: type[T], text: str, *, strict: bool = False) -> T:
    """Parse SLHA *text* and bind it to dataclass *cls*

    Parameters
    ----------
    cls : type
        Dataclass whose fields are declared with :func:`block_field` /
        :func:`decays_field`.
    text : str
        Complete SLHA document.
    strict : bool, optional
        Passed to :func:`~slhakit.document.parse`.

    Raises
    ------
    StructuralError
        If the document itself cannot be parsed.
    SlhaError
        Any query or decode error, tagged with the field name.
    """
    return bind(cls, parse(text, strict=strict))
