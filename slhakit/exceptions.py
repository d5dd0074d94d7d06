#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the slhakit package

All exceptions raised by slhakit inherit from :class:`SlhaError`, making it
possible to catch every library-specific error with a single ``except``
clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    SlhaError
    ├── StructuralError               # Raised by parse(), no Document built
    │   ├── UnterminatedSectionError  # Data line outside any section (strict)
    │   ├── DuplicateDecayError       # Two DECAY headers for one PDG id
    │   └── MalformedHeaderError      # Bad BLOCK / DECAY header line
    ├── DecodeError                   # Raised while decoding one block/decay
    │   ├── MissingFieldError
    │   ├── ExtraFieldError
    │   ├── UnparsableScalarError
    │   ├── DuplicateKeyError
    │   ├── WrongLineCountError
    │   └── DaughterCountMismatchError
    └── QueryError                    # Raised while resolving a lookup
        ├── MultipleOccurrencesError
        ├── DuplicateScaleError
        └── MissingBlockError

Context
-------
Errors are raised close to the failing token and gain context as they
propagate outward: the decoder adds the line number, the query layer adds
the block name and occurrence index, the binding layer adds the field
name.  :meth:`SlhaError.add_context` only fills attributes that are still
unset, so the innermost (most precise) value always wins.
"""

from __future__ import annotations


class SlhaError(Exception):
    """Base exception for all slhakit errors

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    block : str, optional
        Display name of the block being parsed or decoded.
    pdg_id : int, optional
        PDG id of the decay table being parsed or decoded.
    occurrence : int, optional
        Zero-based index of the block occurrence (repeated blocks).
    lineno : int, optional
        One-based line number in the source text.
    field : str, optional
        Name of the bound dataclass field (see :mod:`slhakit.binding`).
    """

    def __init__(
        self,
        message: str,
        *,
        block: str | None = None,
        pdg_id: int | None = None,
        occurrence: int | None = None,
        lineno: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.block = block
        self.pdg_id = pdg_id
        self.occurrence = occurrence
        self.lineno = lineno
        self.field = field

    def add_context(self, **context) -> SlhaError:
        """Fill unset context attributes and return ``self``

        Unknown keys raise :class:`TypeError` so that typos do not
        silently drop diagnostics.
        """
        for key, value in context.items():
            if key not in ("block", "pdg_id", "occurrence", "lineno", "field"):
                raise TypeError(f"Unknown error context {key!r}")
            if getattr(self, key) is None:
                setattr(self, key, value)
        return self

    def __str__(self) -> str:
        parts: list[str] = []
        if self.field is not None:
            parts.append(f"field {self.field!r}")
        if self.block is not None:
            parts.append(f"block {self.block!r}")
        if self.pdg_id is not None:
            parts.append(f"decay {self.pdg_id}")
        if self.occurrence is not None:
            parts.append(f"occurrence {self.occurrence}")
        if self.lineno is not None:
            parts.append(f"line {self.lineno}")
        if not parts:
            return self.message
        return f"{', '.join(parts)}: {self.message}"


# ---------------------------------------------------------------------------
# Document-build time
# ---------------------------------------------------------------------------

class StructuralError(SlhaError):
    """Raised by :func:`~slhakit.document.parse` when the document layout is broken

    A structural error aborts parsing entirely; no partial
    :class:`~slhakit.document.Document` is returned.
    """


class UnterminatedSectionError(StructuralError):
    """Raised in strict mode for a data line that belongs to no open section

    In the default (permissive) mode such lines, typically a preamble
    before the first header, are logged and ignored.
    """


class DuplicateDecayError(StructuralError):
    """Raised when a second DECAY header names an already recorded PDG id"""


class MalformedHeaderError(StructuralError):
    """Raised for a BLOCK or DECAY header that cannot be parsed

    Covers a missing block name, a non-numeric ``Q=`` scale, trailing
    tokens after the header, and a missing or non-numeric decay width or
    particle id.
    """


# ---------------------------------------------------------------------------
# Decode time
# ---------------------------------------------------------------------------

class DecodeError(SlhaError):
    """Raised when a raw block or decay record does not fit the requested shape

    Decode errors are scoped to the single value requested and never
    invalidate the rest of the document.
    """


class MissingFieldError(DecodeError):
    """Raised when a data line has fewer tokens than the shape requires"""


class ExtraFieldError(DecodeError):
    """Raised when a data line has tokens left over after the value"""


class UnparsableScalarError(DecodeError):
    """Raised when a token is not valid syntax for its scalar kind, or out of range"""


class DuplicateKeyError(DecodeError):
    """Raised when two lines of one block decode to the same key"""


class WrongLineCountError(DecodeError):
    """Raised when a single-valued block does not hold exactly one line"""


class DaughterCountMismatchError(DecodeError):
    """Raised when a decay line's declared daughter count disagrees with its ids"""


# ---------------------------------------------------------------------------
# Query time
# ---------------------------------------------------------------------------

class QueryError(SlhaError):
    """Raised when a block lookup cannot be resolved unambiguously"""


class MultipleOccurrencesError(QueryError):
    """Raised by ``get_block`` when the name occurs more than once

    Callers expecting repeated blocks should use ``get_blocks`` or
    ``get_blocks_unchecked`` instead.
    """


class DuplicateScaleError(QueryError):
    """Raised by ``get_blocks`` when two occurrences share a scale

    Two occurrences without a ``Q=`` annotation count as sharing the
    (absent) scale.  ``get_blocks_unchecked`` skips this check.
    """


class MissingBlockError(QueryError):
    """Raised by the binding layer when a required block is absent"""
