#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared SLHA line-level parsing helpers for the slhakit package

All low-level text handling lives here: comment splitting, whitespace
tokenizing, scalar conversion, and the classification of a physical line
as a block header, a decay header, a data line, or a blank line.  Neither
the splitter nor the decoders duplicate any of this logic.

SLHA Line Grammar
-----------------
One statement per line, keywords case-insensitive::

    BLOCK <name> [Q= <scale>]   [# comment]
    DECAY <pdg id> <width>      [# comment]
    <token> <token> ...         [# comment]

A comment starts at the first ``#`` that is not escaped by a backslash and
runs to the end of the line.  Lines that are empty after the comment is
removed are blank and carry no meaning.

Numeric Syntax
--------------
Integers are an optional sign followed by ASCII decimal digits.  Floats follow
Python's float syntax, except that digit-group underscores and non-ASCII
digits are rejected, and the Fortran double-precision exponent marker ``D``
is accepted in place of ``E`` (``1.5D+02``), as written by several spectrum
generators.

References
----------
.. [1] P. Skands et al., *SUSY Les Houches Accord*, arXiv:hep-ph/0311123, §3.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np

from slhakit.exceptions import MalformedHeaderError, UnparsableScalarError
from slhakit.utils.constants import (
    BLOCK_KEYWORD,
    COMMENT_ESCAPE,
    COMMENT_MARKER,
    DECAY_KEYWORD,
    FORTRAN_EXPONENT_MARKERS,
    SCALE_KEYWORD,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

COMMENT_PATTERN: re.Pattern[str] = re.compile(
    rf"(?<!{re.escape(COMMENT_ESCAPE)}){re.escape(COMMENT_MARKER)}"
)
"""First unescaped comment marker on a line."""

INT_PATTERN: re.Pattern[str] = re.compile(r"[+-]?\d+\Z", re.ASCII)
"""Complete integer token."""

FORTRAN_FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"([+-]?(?:\d+\.?\d*|\.\d+))"
    rf"[{''.join(re.escape(c) for c in FORTRAN_EXPONENT_MARKERS)}]"
    r"([+-]?\d+)\Z",
    re.ASCII,
)
"""Float token using a Fortran ``D`` exponent marker."""

SCALE_PATTERN: re.Pattern[str] = re.compile(
    rf"{SCALE_KEYWORD}\s*=\s*(\S+)\Z", re.IGNORECASE
)
"""``Q= <scale>`` annotation following a block name (spacing optional)."""

LineKind = Literal["blank", "block", "decay", "data"]


# ---------------------------------------------------------------------------
# Tokenizing
# ---------------------------------------------------------------------------

def physical_lines(text: str) -> Iterator[str]:
    """Yield the lines of *text* without their terminators

    Only ``\\n`` and ``\\r\\n`` end a line.  Other characters that
    :meth:`str.splitlines` treats as boundaries (form feed, ``\\x85``,
    ``\\u2028``, ...) stay inside the line.

    Examples
    --------
    >>> list(physical_lines("BLOCK MASS\\r\\n 6 173.2 # M_t\\x0bpole\\n"))
    ['BLOCK MASS', ' 6 173.2 # M_t\\x0bpole']
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def split_comment(line: str) -> tuple[str, str | None]:
    """Split a physical line into its data text and trailing comment

    Parameters
    ----------
    line : str
        One line of SLHA text without the line terminator.

    Returns
    -------
    data : str
        Text before the first unescaped ``#``, escaped markers unescaped.
    comment : str | None
        The comment verbatim, including the ``#`` marker, or ``None``.

    Examples
    --------
    >>> split_comment("   6   1.732E+02   # M_t")
    ('   6   1.732E+02   ', '# M_t')
    >>> split_comment("  1  SDECAY")
    ('  1  SDECAY', None)
    """
    m = COMMENT_PATTERN.search(line)
    if m is None:
        data, comment = line, None
    else:
        data, comment = line[: m.start()], line[m.start():]
    escaped = COMMENT_ESCAPE + COMMENT_MARKER
    if escaped in data:
        data = data.replace(escaped, COMMENT_MARKER)
    return data, comment


def next_word(text: str) -> tuple[str, str] | None:
    """Return the first whitespace-delimited word of *text* and the rest

    The rest keeps its leading whitespace so that free-text values
    preserve their internal spacing.  Returns ``None`` when *text* holds
    only whitespace.

    Examples
    --------
    >>> next_word("   bar\\t  foogh")
    ('bar', '\\t  foogh')
    >>> next_word("foo")
    ('foo', '')
    >>> next_word("  ") is None
    True
    """
    text = text.lstrip()
    if not text:
        return None
    for i, ch in enumerate(text):
        if ch.isspace():
            return text[:i], text[i:]
    return text, ""


# ---------------------------------------------------------------------------
# Scalar conversion
# ---------------------------------------------------------------------------

def int_slha(token: str) -> int:
    """Convert an SLHA integer token to a Python int

    Raises
    ------
    UnparsableScalarError
        If *token* is not an optionally signed run of decimal digits.

    Examples
    --------
    >>> int_slha("-1000021")
    -1000021
    """
    if INT_PATTERN.match(token) is None:
        raise UnparsableScalarError(f"Cannot convert {token!r} to an integer")
    return int(token)


def float_slha(token: str) -> float:
    """Convert an SLHA float token to a Python float

    Parameters
    ----------
    token : str
        A single whitespace-free token.

    Returns
    -------
    float
        The converted value.

    Raises
    ------
    UnparsableScalarError
        If the token cannot be converted after replacing a Fortran ``D``
        exponent marker.

    Examples
    --------
    >>> float_slha("1.73200000E+02")
    173.2
    >>> float_slha("1.5D-01")
    0.15
    """
    # float() also takes digit-group underscores and non-ASCII digits
    if "_" in token or not token.isascii():
        raise UnparsableScalarError(f"Cannot convert {token!r} to a float")
    m = FORTRAN_FLOAT_PATTERN.match(token)
    t = f"{m.group(1)}E{m.group(2)}" if m else token
    try:
        return float(t)
    except ValueError as exc:
        raise UnparsableScalarError(f"Cannot convert {token!r} to a float") from exc


def is_scalar_kind(kind: object) -> bool:
    """Whether *kind* is a supported scalar kind

    Supported kinds are ``int``, ``float``, ``str`` and the numpy integer
    and floating scalar types (``numpy.int8``, ``numpy.float32``, ...).
    """
    if kind in (int, float, str):
        return True
    return isinstance(kind, type) and issubclass(kind, (np.integer, np.floating))


def kind_name(kind: type) -> str:
    """Short display name of a scalar kind (``int``, ``uint8``, ...)"""
    return getattr(kind, "__name__", repr(kind))


def parse_scalar(token: str, kind: type) -> object:
    """Convert one token to a value of the given scalar kind

    Parameters
    ----------
    token : str
        A single whitespace-free token.
    kind : type
        One of the kinds accepted by :func:`is_scalar_kind`.

    Returns
    -------
    object
        ``token`` itself for ``str``; a Python ``int``/``float``; or an
        instance of the numpy scalar type.

    Raises
    ------
    UnparsableScalarError
        If the syntax is wrong for *kind*, or the value does not fit a
        numpy kind's range.

    Examples
    --------
    >>> parse_scalar("255", np.uint8)
    np.uint8(255)
    >>> parse_scalar("256", np.uint8)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    slhakit.exceptions.UnparsableScalarError: ...
    """
    if kind is str:
        return token
    if kind is int:
        return int_slha(token)
    if kind is float:
        return float_slha(token)

    if issubclass(kind, np.integer):
        value = int_slha(token)
        info = np.iinfo(kind)
        if not (info.min <= value <= info.max):
            raise UnparsableScalarError(
                f"Integer {value} is outside the range of {kind_name(kind)} "
                f"[{info.min}, {info.max}]"
            )
        return kind(value)

    value = float_slha(token)
    finfo = np.finfo(kind)
    if math.isfinite(value) and abs(value) > float(finfo.max):
        raise UnparsableScalarError(
            f"Float {value!r} is outside the range of {kind_name(kind)}"
        )
    return kind(value)


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedLine:
    """One physical line after comment splitting and classification

    Parameters
    ----------
    kind : {"blank", "block", "decay", "data"}
        Line category.
    lineno : int
        One-based line number in the source text.
    data : str
        Data text with surrounding whitespace stripped.
    comment : str | None
        Trailing comment including the ``#`` marker.
    name : str | None
        Block name as written (``kind == "block"`` only).
    scale : float | None
        ``Q=`` scale (``kind == "block"`` only, when annotated).
    pdg_id : int | None
        Decaying particle id (``kind == "decay"`` only).
    width : float | None
        Total width (``kind == "decay"`` only).
    """

    kind: LineKind
    lineno: int
    data: str
    comment: str | None = None
    name: str | None = None
    scale: float | None = None
    pdg_id: int | None = None
    width: float | None = None


def parse_block_header(rest: str, lineno: int) -> tuple[str, float | None]:
    """Parse the text following ``BLOCK`` into a name and optional scale

    Accepted scale spellings are ``Q= 1.0``, ``Q = 1.0`` and ``Q=1.0``,
    with ``Q`` in either case.

    Raises
    ------
    MalformedHeaderError
        If the name is missing, the scale is not a float, or anything else
        follows the name.
    """
    found = next_word(rest)
    if found is None:
        raise MalformedHeaderError("Missing block name", lineno=lineno)
    name, rest = found
    rest = rest.strip()
    if not rest:
        return name, None

    m = SCALE_PATTERN.match(rest)
    if m is None:
        raise MalformedHeaderError(
            f"Unexpected text {rest!r} after block name, expected 'Q= <scale>'",
            block=name,
            lineno=lineno,
        )
    try:
        scale = float_slha(m.group(1))
    except UnparsableScalarError as exc:
        raise MalformedHeaderError(
            f"Invalid scale {m.group(1)!r}", block=name, lineno=lineno
        ) from exc
    return name, scale


def parse_decay_header(rest: str, lineno: int) -> tuple[int, float]:
    """Parse the text following ``DECAY`` into a PDG id and a total width

    Raises
    ------
    MalformedHeaderError
        If either field is missing or not numeric, or extra tokens follow.
    """
    words = rest.split()
    if not words:
        raise MalformedHeaderError("Missing decaying particle id", lineno=lineno)
    try:
        pdg_id = int_slha(words[0])
    except UnparsableScalarError as exc:
        raise MalformedHeaderError(
            f"Invalid decaying particle id {words[0]!r}", lineno=lineno
        ) from exc
    if len(words) < 2:
        raise MalformedHeaderError("Missing total width", pdg_id=pdg_id, lineno=lineno)
    if len(words) > 2:
        raise MalformedHeaderError(
            f"Unexpected text {' '.join(words[2:])!r} after total width",
            pdg_id=pdg_id,
            lineno=lineno,
        )
    try:
        width = float_slha(words[1])
    except UnparsableScalarError as exc:
        raise MalformedHeaderError(
            f"Invalid total width {words[1]!r}", pdg_id=pdg_id, lineno=lineno
        ) from exc
    return pdg_id, width


def classify_line(line: str, lineno: int) -> ClassifiedLine:
    """Classify one physical line of SLHA text

    Parameters
    ----------
    line : str
        The line without its terminator.
    lineno : int
        One-based line number, used in error messages.

    Returns
    -------
    ClassifiedLine
        Blank lines (empty or comment-only) have ``kind == "blank"``.
        Headers carry their parsed fields.  Every other line is data.

    Raises
    ------
    MalformedHeaderError
        If the line starts with ``BLOCK`` or ``DECAY`` but the rest of
        the header cannot be parsed.

    Examples
    --------
    >>> classify_line("Block MASS  # Mass spectrum", 1).name
    'MASS'
    >>> classify_line("DECAY 6 1.35", 2).width
    1.35
    >>> classify_line("   # only a comment", 3).kind
    'blank'
    """
    data, comment = split_comment(line)
    data = data.strip()
    found = next_word(data)
    if found is None:
        return ClassifiedLine("blank", lineno, "", comment)

    keyword, rest = found
    keyword = keyword.casefold()
    if keyword == BLOCK_KEYWORD:
        name, scale = parse_block_header(rest, lineno)
        return ClassifiedLine("block", lineno, data, comment, name=name, scale=scale)
    if keyword == DECAY_KEYWORD:
        pdg_id, width = parse_decay_header(rest, lineno)
        return ClassifiedLine(
            "decay", lineno, data, comment, pdg_id=pdg_id, width=width
        )
    return ClassifiedLine("data", lineno, data, comment)
