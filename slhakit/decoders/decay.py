#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Decay table decoder

Each data line of a ``DECAY`` section describes one channel::

    <BR>  <NDA>  <ID1> ... <IDNDA>   [# comment]

where ``BR`` is the branching ratio (float), ``NDA`` the number of
daughters (non-negative integer) and ``ID1 ... IDNDA`` their PDG ids.  The
number of ids actually present must equal ``NDA``.

References
----------
.. [1] P. Skands et al., *SUSY Les Houches Accord*, arXiv:hep-ph/0311123, §3.5.
"""

from __future__ import annotations

import logging

from slhakit.exceptions import (
    DaughterCountMismatchError,
    DecodeError,
    MissingFieldError,
    UnparsableScalarError,
)
from slhakit.models.records import Decay, DecayTable, RawDecay
from slhakit.utils.parsing import float_slha, int_slha, next_word

logger = logging.getLogger(__name__)


def parse_decay_line(text: str) -> Decay:
    """Decode the data text of one decay channel line

    Raises
    ------
    MissingFieldError
        If the branching ratio or the daughter count is missing.
    UnparsableScalarError
        If a field is not numeric, or the daughter count is negative.
    DaughterCountMismatchError
        If the number of ids differs from the declared count.

    Examples
    --------
    >>> parse_decay_line("1.0  2  5  24")
    Decay(branching_ratio=1.0, daughters=[5, 24])
    """
    found = next_word(text)
    if found is None:
        raise MissingFieldError("Missing branching ratio")
    word, rest = found
    branching_ratio = float_slha(word)

    found = next_word(rest)
    if found is None:
        raise MissingFieldError("Missing number of daughters")
    word, rest = found
    n_daughters = int_slha(word)
    if n_daughters < 0:
        raise UnparsableScalarError(
            f"Number of daughters must be non-negative, found {n_daughters}"
        )

    ids = rest.split()
    if len(ids) != n_daughters:
        raise DaughterCountMismatchError(
            f"Declared {n_daughters} daughters but found {len(ids)}"
        )
    return Decay(branching_ratio, [int_slha(t) for t in ids])


def decode_decay(raw: RawDecay) -> DecayTable:
    """Decode a raw decay record into a :class:`~slhakit.models.records.DecayTable`

    Parameters
    ----------
    raw : RawDecay
        The record to decode.  It is not modified.

    Returns
    -------
    DecayTable
        Width from the header, channels in source order.

    Raises
    ------
    DecodeError
        If any channel line is malformed; the error carries the PDG id and
        the line number.
    """
    decays = []
    for line in raw.lines:
        try:
            decays.append(parse_decay_line(line.data))
        except DecodeError as exc:
            exc.add_context(pdg_id=raw.pdg_id, lineno=line.lineno)
            raise
    logger.debug("Decoded decay table %d: %d channels", raw.pdg_id, len(decays))
    return DecayTable(raw.width, decays)
