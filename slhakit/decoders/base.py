#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Key shapes, value shapes and the abstract block decoder

A block line is ``<key tokens> <value tokens>``.  How many tokens form the
key, and how each token is typed, is described by a *key shape*; there is
a small closed family of them:

* :class:`ScalarKey`: one token of one scalar kind (``MASS``: ``int``).
* :class:`TupleKey`: a fixed number of tokens (``NMIX``: ``(int, int)``).
* :class:`StrSequenceKey`: however many leading tokens precede a value
  that decodes, kept as raw strings (used by ``BlockStr``).

A *value shape* is a scalar kind or a tuple of scalar kinds.  A ``str``
kind in the final position takes the rest of the line, so free-text
values such as program names and version strings keep their spacing.

Every concrete block decoder inherits from :class:`BlockShape` and
implements :meth:`BlockShape.decode`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from slhakit.exceptions import DecodeError, ExtraFieldError, MissingFieldError
from slhakit.models.records import Block, BlockSingle, BlockStr, RawBlock
from slhakit.utils.parsing import is_scalar_kind, kind_name, next_word, parse_scalar

logger = logging.getLogger(__name__)

ValueShape = Union[type, tuple[type, ...]]
"""A scalar kind or a tuple of scalar kinds."""

DecodedBlock = Union[Block, BlockSingle, BlockStr]
"""Type alias for the union of all decoded block types."""


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def check_value_shape(shape: object) -> ValueShape:
    """Return *shape* unchanged if it is a valid value shape

    Raises
    ------
    TypeError
        If *shape* is neither a scalar kind nor a non-empty tuple of them.
    """
    if isinstance(shape, tuple):
        if shape and all(is_scalar_kind(k) for k in shape):
            return shape
    elif is_scalar_kind(shape):
        return shape
    raise TypeError(f"Unsupported value shape {shape!r}")


def take_scalar(text: str, kind: type, *, last: bool = False) -> tuple[object, str]:
    """Decode the next scalar of *text*, returning it and the remaining text

    With ``last=True`` a ``str`` kind consumes the whole remaining text.

    Raises
    ------
    MissingFieldError
        If *text* holds no more tokens.
    UnparsableScalarError
        If the token does not match *kind*.
    """
    if kind is str and last:
        value = text.strip()
        if not value:
            raise MissingFieldError("Missing str field")
        return value, ""

    found = next_word(text)
    if found is None:
        raise MissingFieldError(f"Missing {kind_name(kind)} field")
    word, rest = found
    return parse_scalar(word, kind), rest


def parse_value(text: str, shape: ValueShape) -> object:
    """Decode the whole of *text* as a value of the given shape

    Raises
    ------
    MissingFieldError
        If *text* runs out of tokens.
    ExtraFieldError
        If tokens remain after the value.
    UnparsableScalarError
        If a token does not match its kind.
    """
    kinds = shape if isinstance(shape, tuple) else (shape,)
    values = []
    rest = text
    for i, kind in enumerate(kinds):
        value, rest = take_scalar(rest, kind, last=(i == len(kinds) - 1))
        values.append(value)
    if rest.strip():
        raise ExtraFieldError(f"Unexpected trailing text {rest.strip()!r}")
    return tuple(values) if isinstance(shape, tuple) else values[0]


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

class KeyShape(ABC):
    """Abstract base of the key shapes

    A key shape splits one data line into its key and its decoded value.
    """

    @abstractmethod
    def split(self, text: str, value: ValueShape) -> tuple[object, object]:
        """Decode one line's data text into ``(key, value)``"""
        ...


@dataclass(frozen=True)
class ScalarKey(KeyShape):
    """Key made of a single token of one scalar kind"""

    kind: type

    def split(self, text: str, value: ValueShape) -> tuple[object, object]:
        key, rest = take_scalar(text, self.kind)
        return key, parse_value(rest, value)


@dataclass(frozen=True)
class TupleKey(KeyShape):
    """Key made of a fixed number of tokens, one scalar kind each"""

    kinds: tuple[type, ...]

    def split(self, text: str, value: ValueShape) -> tuple[object, object]:
        key = []
        rest = text
        for kind in self.kinds:
            part, rest = take_scalar(rest, kind)
            key.append(part)
        return tuple(key), parse_value(rest, value)


@dataclass(frozen=True)
class StrSequenceKey(KeyShape):
    """Key made of the raw leading tokens before a value that decodes

    The value shape is first tried against the whole line; on failure one
    more leading token is moved into the key, until the value decodes or
    the line is used up.
    """

    def split(self, text: str, value: ValueShape) -> tuple[object, object]:
        keys: list[str] = []
        rest = text
        last_error: DecodeError | None = None
        informative: DecodeError | None = None
        while True:
            try:
                return tuple(keys), parse_value(rest, value)
            except DecodeError as exc:
                last_error = exc
                if not isinstance(exc, MissingFieldError):
                    informative = exc
            found = next_word(rest)
            if found is None:
                raise informative or last_error
            keys.append(found[0])
            rest = found[1]


def key_shape(key: object) -> KeyShape:
    """Build a key shape from a scalar kind, a tuple of kinds, or a KeyShape

    Examples
    --------
    >>> key_shape(int)
    ScalarKey(kind=<class 'int'>)
    >>> key_shape((int, int))
    TupleKey(kinds=(<class 'int'>, <class 'int'>))
    """
    if isinstance(key, KeyShape):
        return key
    if isinstance(key, tuple):
        if key and all(is_scalar_kind(k) for k in key):
            return TupleKey(key)
    elif is_scalar_kind(key):
        return ScalarKey(key)
    raise TypeError(f"Unsupported key shape {key!r}")


# ---------------------------------------------------------------------------
# Block decoders
# ---------------------------------------------------------------------------

class BlockShape(ABC):
    """Abstract base for block decoders

    A block shape is passed to the query methods of
    :class:`~slhakit.document.Document` and turns one
    :class:`~slhakit.models.records.RawBlock` into a decoded block.

    Notes
    -----
    Decoding never mutates the raw block; every call returns a fresh
    value.  Failures raise a :class:`~slhakit.exceptions.DecodeError`
    carrying the block name and the line number of the offending line.
    """

    @abstractmethod
    def decode(self, raw: RawBlock) -> DecodedBlock:
        """Decode one raw block occurrence

        Parameters
        ----------
        raw : RawBlock
            The occurrence to decode.

        Returns
        -------
        DecodedBlock
            One of :class:`~slhakit.models.records.Block`,
            :class:`~slhakit.models.records.BlockSingle`, or
            :class:`~slhakit.models.records.BlockStr`.

        Raises
        ------
        DecodeError
            If any line does not fit the shape.
        """
        ...
