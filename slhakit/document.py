#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Parsed SLHA document and its query API

:func:`parse` turns SLHA text into a :class:`Document`: the ordered raw
block occurrences per block name and at most one raw decay record per
particle.  The document is read-only; typed values are decoded from it on
demand by the ``get_*`` methods, which never mutate it and may be called
concurrently from several threads.

Lookup Policy
-------------
===========================  =============  ==============  ================
Method                       0 occurrences  1 occurrence    n > 1
===========================  =============  ==============  ================
``get_block``                ``None``       decoded block   MultipleOccurrencesError
``get_blocks``               ``[]``         ``[block]``     list, if scales distinct
``get_blocks_unchecked``     ``[]``         ``[block]``     list
``get_raw_blocks``           ``()``         ``(raw,)``      tuple of raws
===========================  =============  ==============  ================

Block names are matched case-insensitively; the raw records keep the
spelling of the header for diagnostics.

Examples
--------
>>> from slhakit import parse, block_of
>>> doc = parse('''
... BLOCK MASS   # Mass spectrum
...     6   173.2   # M_t
... DECAY 6 1.35
...     1.0   2   5   24
... ''')
>>> doc.get_block("mass", block_of(int, float)).map
{6: 173.2}
>>> doc.get_decay(6).decays[0].daughters
[5, 24]
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from slhakit.decoders.base import BlockShape, DecodedBlock
from slhakit.decoders.decay import decode_decay
from slhakit.exceptions import DecodeError
from slhakit.models.records import DecayTable, RawBlock, RawDecay
from slhakit.splitter import split_lines
from slhakit.utils.parsing import classify_line, physical_lines
from slhakit.utils.validation import validate_single_occurrence, validate_unique_scales

logger = logging.getLogger(__name__)


class Document:
    """A parsed SLHA document

    Instances are built by :func:`parse` (or :meth:`Document.parse`); the
    constructor is for the splitter's output and tests.

    Parameters
    ----------
    blocks : Mapping[str, Sequence[RawBlock]]
        Occurrences per block name, in source order.  Keys are case-folded
        on construction.
    decays : Mapping[int, RawDecay]
        Raw decay record per PDG id.
    """

    def __init__(
        self,
        blocks: Mapping[str, list[RawBlock]] | None = None,
        decays: Mapping[int, RawDecay] | None = None,
    ) -> None:
        self._blocks: dict[str, tuple[RawBlock, ...]] = {}
        for name, occurrences in (blocks or {}).items():
            key = name.casefold()
            self._blocks[key] = self._blocks.get(key, ()) + tuple(occurrences)
        self._decays: dict[int, RawDecay] = dict(decays or {})

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> Document:
        """Parse SLHA *text*; see :func:`parse`"""
        return parse(text, strict=strict)

    # -- raw store ---------------------------------------------------------

    @property
    def blocks(self) -> Mapping[str, tuple[RawBlock, ...]]:
        """Read-only view of the raw occurrences per case-folded block name."""
        return MappingProxyType(self._blocks)

    @property
    def decays(self) -> Mapping[int, RawDecay]:
        """Read-only view of the raw decay records per PDG id."""
        return MappingProxyType(self._decays)

    def block_names(self) -> list[str]:
        """Block names as spelled at their first occurrence, in source order."""
        return [occurrences[0].name for occurrences in self._blocks.values()]

    def decay_ids(self) -> list[int]:
        """PDG ids with a decay table, in source order."""
        return list(self._decays)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._blocks

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._blocks == other._blocks and self._decays == other._decays

    def __repr__(self) -> str:
        return (
            f"Document(blocks={self.block_names()!r}, "
            f"decays={self.decay_ids()!r})"
        )

    # -- query API ---------------------------------------------------------

    def get_raw_blocks(self, name: str) -> tuple[RawBlock, ...]:
        """Return every occurrence of block *name*, undecoded, in source order

        Returns an empty tuple when the block is absent.
        """
        return self._blocks.get(name.casefold(), ())

    def get_block(self, name: str, shape: BlockShape) -> DecodedBlock | None:
        """Decode the single occurrence of block *name*

        Parameters
        ----------
        name : str
            Block name, any case.
        shape : BlockShape
            Decoder, e.g. ``block_of(int, float)`` or ``single_of(float)``.

        Returns
        -------
        DecodedBlock | None
            The decoded block, or ``None`` if the document has no block of
            that name.

        Raises
        ------
        MultipleOccurrencesError
            If the block occurs more than once.
        DecodeError
            If the occurrence does not fit *shape*.
        """
        occurrences = self.get_raw_blocks(name)
        if not occurrences:
            logger.debug("Block %s not present", name)
            return None
        validate_single_occurrence(occurrences[0].name, len(occurrences))
        return shape.decode(occurrences[0])

    def get_blocks(self, name: str, shape: BlockShape) -> list[DecodedBlock]:
        """Decode every occurrence of block *name*, requiring distinct scales

        Raises
        ------
        DuplicateScaleError
            If two occurrences share a scale (or both lack one).  Retry
            with :meth:`get_blocks_unchecked` to accept them anyway.
        DecodeError
            If any occurrence does not fit *shape*; the error carries the
            occurrence index.
        """
        occurrences = self.get_raw_blocks(name)
        if occurrences:
            validate_unique_scales(occurrences[0].name, [b.scale for b in occurrences])
        return self._decode_all(occurrences, shape)

    def get_blocks_unchecked(self, name: str, shape: BlockShape) -> list[DecodedBlock]:
        """Decode every occurrence of block *name* without the scale check

        Raises
        ------
        DecodeError
            If any occurrence does not fit *shape*.
        """
        return self._decode_all(self.get_raw_blocks(name), shape)

    def get_raw_decay(self, pdg_id: int) -> RawDecay | None:
        """Return the undecoded decay record of particle *pdg_id*, if any."""
        return self._decays.get(pdg_id)

    def get_decay(self, pdg_id: int) -> DecayTable | None:
        """Decode the decay table of particle *pdg_id*

        Returns
        -------
        DecayTable | None
            The decoded table, or ``None`` if the particle has none.

        Raises
        ------
        DecodeError
            If a channel line is malformed, e.g.
            :class:`~slhakit.exceptions.DaughterCountMismatchError`.
        """
        raw = self._decays.get(pdg_id)
        if raw is None:
            logger.debug("No decay table for particle %d", pdg_id)
            return None
        return decode_decay(raw)

    def get_decays(self) -> dict[int, DecayTable]:
        """Decode every decay table, keyed by PDG id in source order

        Raises
        ------
        DecodeError
            On the first malformed channel line.
        """
        return {pdg_id: decode_decay(raw) for pdg_id, raw in self._decays.items()}

    @staticmethod
    def _decode_all(occurrences: tuple[RawBlock, ...], shape: BlockShape) -> list[DecodedBlock]:
        decoded = []
        for index, raw in enumerate(occurrences):
            try:
                decoded.append(shape.decode(raw))
            except DecodeError as exc:
                exc.add_context(occurrence=index)
                raise
        return decoded


def parse(text: str, *, strict: bool = False) -> Document:
    """Parse SLHA text into a :class:`Document`

    Parameters
    ----------
    text : str
        Complete SLHA document.  Lines end with ``\\n`` or ``\\r\\n``.
    strict : bool, optional
        If ``True``, data lines outside any section raise
        :class:`~slhakit.exceptions.UnterminatedSectionError` instead of
        being ignored.  Default ``False``.

    Returns
    -------
    Document
        The parsed document.  Parsing the same text twice gives equal
        documents.

    Raises
    ------
    StructuralError
        :class:`~slhakit.exceptions.MalformedHeaderError`,
        :class:`~slhakit.exceptions.DuplicateDecayError`, or (strict mode)
        :class:`~slhakit.exceptions.UnterminatedSectionError`.  No partial
        document is returned.
    """
    classified = (
        classify_line(line, lineno)
        for lineno, line in enumerate(physical_lines(text), start=1)
    )
    blocks, decays = split_lines(classified, strict=strict)
    logger.debug(
        "Parsed SLHA document: %d block names (%d occurrences), %d decay tables",
        len(blocks),
        sum(len(v) for v in blocks.values()),
        len(decays),
    )
    return Document(blocks, decays)
