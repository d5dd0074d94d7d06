#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Grouping of classified SLHA lines into raw block and decay records

The splitter walks the classified lines top to bottom while tracking the
currently open section (none, a block, or a decay).  A header closes the
open section and opens a new one; data lines are appended to the open
section; end of input closes the last one.

Blocks may repeat: every occurrence is kept, in source order, under the
case-folded block name.  Decays may not: a second ``DECAY`` header for a
PDG id is a :class:`~slhakit.exceptions.DuplicateDecayError`, wherever it
appears in the document.
"""

from __future__ import annotations

import logging
from typing import Iterable

from slhakit.exceptions import DuplicateDecayError, UnterminatedSectionError
from slhakit.models.records import RawBlock, RawDecay, RawLine
from slhakit.utils.parsing import ClassifiedLine

logger = logging.getLogger(__name__)


class _Section:
    """Accumulator for the section currently being read"""

    def __init__(self, header: ClassifiedLine) -> None:
        self.header = header
        self.lines: list[RawLine] = []

    def close(self) -> RawBlock | RawDecay:
        h = self.header
        if h.kind == "block":
            return RawBlock(
                name=h.name,
                scale=h.scale,
                lines=tuple(self.lines),
                lineno=h.lineno,
            )
        return RawDecay(
            pdg_id=h.pdg_id,
            width=h.width,
            lines=tuple(self.lines),
            lineno=h.lineno,
        )


def split_lines(
    lines: Iterable[ClassifiedLine],
    *,
    strict: bool = False,
) -> tuple[dict[str, list[RawBlock]], dict[int, RawDecay]]:
    """Group classified lines into raw block and decay records

    Parameters
    ----------
    lines : Iterable[ClassifiedLine]
        Output of :func:`~slhakit.utils.parsing.classify_line`, in order.
    strict : bool, optional
        If ``True``, a data line with no open section raises
        :class:`~slhakit.exceptions.UnterminatedSectionError`.  If
        ``False`` (default) it is logged and ignored.

    Returns
    -------
    blocks : dict[str, list[RawBlock]]
        Occurrences per case-folded block name, in order of first
        appearance; occurrences in source order.
    decays : dict[int, RawDecay]
        One record per decaying particle, in source order.

    Raises
    ------
    DuplicateDecayError
        If two ``DECAY`` headers name the same PDG id.
    UnterminatedSectionError
        In strict mode, for a data line outside any section.
    """
    blocks: dict[str, list[RawBlock]] = {}
    decays: dict[int, RawDecay] = {}
    current: _Section | None = None

    def close_current() -> None:
        if current is None:
            return
        record = current.close()
        if isinstance(record, RawBlock):
            blocks.setdefault(record.key, []).append(record)
            logger.debug(
                "Closed block %s (Q=%s) from line %d: %d lines",
                record.name, record.scale, record.lineno, len(record.lines),
            )
        else:
            decays[record.pdg_id] = record
            logger.debug(
                "Closed decay %d from line %d: %d channels",
                record.pdg_id, record.lineno, len(record.lines),
            )

    for line in lines:
        if line.kind == "blank":
            continue

        if line.kind == "data":
            if current is None:
                if strict:
                    raise UnterminatedSectionError(
                        f"Data line {line.data!r} outside any BLOCK or DECAY section",
                        lineno=line.lineno,
                    )
                logger.warning(
                    "Ignoring line %d outside any BLOCK or DECAY section: %r",
                    line.lineno, line.data,
                )
                continue
            current.lines.append(RawLine(line.data, line.comment, line.lineno))
            continue

        close_current()
        current = None
        if line.kind == "decay" and line.pdg_id in decays:
            first = decays[line.pdg_id]
            raise DuplicateDecayError(
                f"Found a second decay table for particle {line.pdg_id} "
                f"(first at line {first.lineno})",
                pdg_id=line.pdg_id,
                lineno=line.lineno,
            )
        current = _Section(line)

    close_current()
    return blocks, decays
