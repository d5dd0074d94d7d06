#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
slhakit - Python library for reading SUSY Les Houches Accord files

Parse SLHA spectrum and decay files, as written by SUSY spectrum
generators and decay calculators, into a read-only document and decode
its blocks and decay tables into typed values on demand.

Pipeline
--------
1. **Parse** the text once:
   ``doc = slhakit.parse(text)``

2. **Query** a block with an explicit shape:
   ``doc.get_block("mass", block_of(int, float))``

3. **Query** a decay table:
   ``doc.get_decay(1000021)``

4. **Bind** a whole dataclass in one step:
   ``slhakit.deserialize(Spectrum, text)``

Modules
-------
document
    The parsed document, its query API, and :func:`parse`.
decoders
    Block and decay decoders, and the shape factories.
models
    Typed dataclass records, raw and decoded.
binding
    Dataclass field binding on top of the query API.
utils
    Line-level parsing helpers, format constants and occurrence checks.

Examples
--------
>>> import slhakit
>>> doc = slhakit.parse("BLOCK ALPHA\\n -1.13716828E-01\\n")
>>> doc.get_block("alpha", slhakit.single_of(float)).value
-0.113716828
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from slhakit.document import Document, parse
from slhakit.decoders import (
    BlockShape,
    block_of,
    single_of,
    standard_shape,
    str_block_of,
)
from slhakit.binding import bind, block_field, decays_field, deserialize
from slhakit.models.records import (
    Block,
    BlockSingle,
    BlockStr,
    Decay,
    DecayTable,
    RawBlock,
    RawDecay,
    RawLine,
)
from slhakit.exceptions import (
    SlhaError,
    StructuralError,
    UnterminatedSectionError,
    DuplicateDecayError,
    MalformedHeaderError,
    DecodeError,
    MissingFieldError,
    ExtraFieldError,
    UnparsableScalarError,
    DuplicateKeyError,
    WrongLineCountError,
    DaughterCountMismatchError,
    QueryError,
    MultipleOccurrencesError,
    DuplicateScaleError,
    MissingBlockError,
)

__all__ = [
    # Version
    "__version__",
    # Document
    "Document",
    "parse",
    # Shapes
    "BlockShape",
    "block_of",
    "single_of",
    "str_block_of",
    "standard_shape",
    # Binding
    "bind",
    "block_field",
    "decays_field",
    "deserialize",
    # Records
    "Block",
    "BlockSingle",
    "BlockStr",
    "Decay",
    "DecayTable",
    "RawBlock",
    "RawDecay",
    "RawLine",
    # Exceptions
    "SlhaError",
    "StructuralError",
    "UnterminatedSectionError",
    "DuplicateDecayError",
    "MalformedHeaderError",
    "DecodeError",
    "MissingFieldError",
    "ExtraFieldError",
    "UnparsableScalarError",
    "DuplicateKeyError",
    "WrongLineCountError",
    "DaughterCountMismatchError",
    "QueryError",
    "MultipleOccurrencesError",
    "DuplicateScaleError",
    "MissingBlockError",
]
