#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
SLHA format constants and standard block table

Keywords and markers of the SUSY Les Houches Accord text grammar, plus the
key/value shapes of the standard SLHA1 and SLHA2 blocks.

Shapes are written as plain Python types: a scalar kind (``int``,
``float``, ``str``), a tuple of scalar kinds for multi-index keys, or
``None`` as the key of a single-valued block (ALPHA).  The decoder layer
turns these into decoders, see :func:`slhakit.decoders.blocks.standard_shape`.

References
----------
.. [1] P. Skands et al., *SUSY Les Houches Accord*, JHEP 0407 (2004) 036,
   arXiv:hep-ph/0311123.
.. [2] B. Allanach et al., *SUSY Les Houches Accord 2*, Comput. Phys.
   Commun. 180 (2009) 8, arXiv:0801.0045.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

BLOCK_KEYWORD: str = "block"
"""Case-folded first token of a block header line."""

DECAY_KEYWORD: str = "decay"
"""Case-folded first token of a decay header line."""

COMMENT_MARKER: str = "#"
"""Starts a comment running to the end of the line."""

COMMENT_ESCAPE: str = "\\"
"""A comment marker preceded by this character is literal data."""

SCALE_KEYWORD: str = "q"
"""Case-folded keyword of the ``Q= <scale>`` block header annotation."""

FORTRAN_EXPONENT_MARKERS: tuple[str, ...] = ("D", "d")
"""Double-precision exponent markers replaced by ``E`` before conversion."""

# ---------------------------------------------------------------------------
# Standard blocks
# ---------------------------------------------------------------------------

_MATRIX = (int, int)

STANDARD_BLOCKS: dict[str, tuple[object, object]] = {
    # SLHA1 input
    "modsel": (int, int),
    "sminputs": (int, float),
    "minpar": (int, float),
    "extpar": (int, float),
    # SLHA1 spectrum
    "mass": (int, float),
    "nmix": (_MATRIX, float),
    "umix": (_MATRIX, float),
    "vmix": (_MATRIX, float),
    "stopmix": (_MATRIX, float),
    "sbotmix": (_MATRIX, float),
    "staumix": (_MATRIX, float),
    "alpha": (None, float),
    "hmix": (int, float),
    "gauge": (int, float),
    "msoft": (int, float),
    "au": (_MATRIX, float),
    "ad": (_MATRIX, float),
    "ae": (_MATRIX, float),
    "yu": (_MATRIX, float),
    "yd": (_MATRIX, float),
    "ye": (_MATRIX, float),
    # Program information
    "spinfo": (int, str),
    "dcinfo": (int, str),
    # SLHA2 extensions
    "qextpar": (int, float),
    "vckmin": (int, float),
    "upmnsin": (int, float),
    "msq2in": (_MATRIX, float),
    "msu2in": (_MATRIX, float),
    "msd2in": (_MATRIX, float),
    "msl2in": (_MATRIX, float),
    "mse2in": (_MATRIX, float),
    "tuin": (_MATRIX, float),
    "tdin": (_MATRIX, float),
    "tein": (_MATRIX, float),
    "vckm": (_MATRIX, float),
    "upmns": (_MATRIX, float),
    "msq2": (_MATRIX, float),
    "msu2": (_MATRIX, float),
    "msd2": (_MATRIX, float),
    "msl2": (_MATRIX, float),
    "mse2": (_MATRIX, float),
    "tu": (_MATRIX, float),
    "td": (_MATRIX, float),
    "te": (_MATRIX, float),
    "usqmix": (_MATRIX, float),
    "dsqmix": (_MATRIX, float),
    "selmix": (_MATRIX, float),
    "snumix": (_MATRIX, float),
    "rvnmix": (_MATRIX, float),
    "nmnmix": (_MATRIX, float),
    "nmhmix": (_MATRIX, float),
    "nmamix": (_MATRIX, float),
}
"""Key/value shapes of the standard SLHA blocks, keyed by case-folded name.

A ``None`` key marks a single-valued block.
"""
