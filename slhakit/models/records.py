#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed SLHA documents

Two families of models live here.  The *raw* records are produced once by
the splitter, are frozen, and are owned by a
:class:`~slhakit.document.Document`.  The *decoded* records are produced
on demand by the decoders and are fresh, independent values on every call.

Hierarchy
---------
::

    RawLine        one data line: (data text, comment), plus line number
    RawBlock       name, optional Q= scale, ordered RawLines
    RawDecay       PDG id, total width, ordered RawLines

    Block          scale + {key: value}
    BlockSingle    scale + one value
    BlockStr       scale + {(token, ...): value}
    Decay          branching ratio + daughter PDG ids
    DecayTable     total width + ordered Decays

Units
-----
SLHA fixes masses, widths and scales in **GeV**; slhakit does not convert
or check them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np


# ---------------------------------------------------------------------------
# Raw records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawLine:
    """A data line of a block or decay section

    Parameters
    ----------
    data : str
        Data text, comment removed, surrounding whitespace stripped.
    comment : str | None
        Trailing comment verbatim including ``#``, or ``None``.
    lineno : int
        One-based line number in the source text.
    """

    data: str
    comment: str | None = None
    lineno: int = 0


@dataclass(frozen=True)
class RawBlock:
    """One occurrence of a ``BLOCK`` section, undecoded

    Parameters
    ----------
    name : str
        Block name as spelled in the header.  Compared case-insensitively
        through :attr:`key`.
    scale : float | None
        Value of the ``Q=`` annotation, ``None`` when absent.
    lines : tuple[RawLine, ...]
        Data lines in source order.
    lineno : int
        Line number of the header.
    """

    name: str
    scale: float | None = None
    lines: tuple[RawLine, ...] = ()
    lineno: int = 0

    @property
    def key(self) -> str:
        """Case-folded lookup key of the block name."""
        return self.name.casefold()


@dataclass(frozen=True)
class RawDecay:
    """A ``DECAY`` section, undecoded

    Parameters
    ----------
    pdg_id : int
        PDG id of the decaying particle.
    width : float
        Total decay width (GeV).
    lines : tuple[RawLine, ...]
        Decay channel lines in source order.
    lineno : int
        Line number of the header.
    """

    pdg_id: int
    width: float
    lines: tuple[RawLine, ...] = ()
    lineno: int = 0


# ---------------------------------------------------------------------------
# Decoded blocks
# ---------------------------------------------------------------------------

@dataclass
class Block:
    """A decoded key/value block

    Parameters
    ----------
    map : dict
        Entries in source order.  Keys are scalars or tuples of scalars,
        unique within the block.
    scale : float | None
        ``Q=`` scale of the occurrence this block was decoded from.

    Examples
    --------
    >>> mass = Block({6: 173.2, 25: 125.1})
    >>> mass[6]
    173.2
    >>> 25 in mass
    True
    """

    map: dict = field(default_factory=dict)
    scale: float | None = None

    def __getitem__(self, key):
        return self.map[key]

    def __contains__(self, key) -> bool:
        return key in self.map

    def __iter__(self) -> Iterator:
        return iter(self.map)

    def __len__(self) -> int:
        return len(self.map)

    def get(self, key, default=None):
        """Value for *key*, or *default* when the key is absent."""
        return self.map.get(key, default)

    def as_array(self, dtype: str = "f8") -> np.ndarray:
        """Return the block as a dense 1-D or 2-D numpy array

        SLHA vectors and matrices are indexed from 1.  An integer key *i*
        maps to element ``i - 1``; an integer pair *(i, j)* maps to
        ``[i - 1, j - 1]``.  The array extends to the largest index in
        each dimension and entries absent from the block are zero.

        Parameters
        ----------
        dtype : str, optional
            numpy dtype of the result.  Default ``"f8"``.

        Returns
        -------
        numpy.ndarray
            Shape ``(n,)`` for integer keys, ``(n, m)`` for pair keys.

        Raises
        ------
        ValueError
            If the keys are not all positive integers, or not all pairs of
            positive integers.

        Examples
        --------
        >>> Block({(1, 1): 0.5, (2, 2): -0.5}).as_array()
        array([[ 0.5,  0. ],
               [ 0. , -0.5]])
        """
        if not self.map:
            return np.zeros(0, dtype=dtype)

        keys = list(self.map)
        if all(_is_index(k) for k in keys):
            out = np.zeros(max(int(k) for k in keys), dtype=dtype)
            for k, v in self.map.items():
                out[int(k) - 1] = v
            return out

        if all(isinstance(k, tuple) and len(k) == 2 and all(map(_is_index, k)) for k in keys):
            rows = max(int(k[0]) for k in keys)
            cols = max(int(k[1]) for k in keys)
            out = np.zeros((rows, cols), dtype=dtype)
            for (i, j), v in self.map.items():
                out[int(i) - 1, int(j) - 1] = v
            return out

        raise ValueError(
            "Block keys must all be positive integers or all be pairs of "
            "positive integers to convert to an array"
        )


def _is_index(key) -> bool:
    return isinstance(key, (int, np.integer)) and not isinstance(key, bool) and key >= 1


@dataclass
class BlockSingle:
    """A decoded block holding exactly one value and no key

    Parameters
    ----------
    value : object
        The decoded value (e.g. the Higgs mixing angle of ``BLOCK ALPHA``).
    scale : float | None
        ``Q=`` scale of the occurrence.
    """

    value: object
    scale: float | None = None


@dataclass
class BlockStr:
    """A decoded block keyed by the raw leading tokens of each line

    Used for blocks whose key shape is not known in advance: the key is
    the tuple of tokens preceding the value.

    Parameters
    ----------
    map : dict[tuple[str, ...], object]
        Entries in source order.
    scale : float | None
        ``Q=`` scale of the occurrence.
    """

    map: dict[tuple[str, ...], object] = field(default_factory=dict)
    scale: float | None = None

    def __getitem__(self, key: tuple[str, ...]):
        return self.map[key]

    def __contains__(self, key) -> bool:
        return key in self.map

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self.map)

    def __len__(self) -> int:
        return len(self.map)


# ---------------------------------------------------------------------------
# Decoded decays
# ---------------------------------------------------------------------------

@dataclass
class Decay:
    """A single decay channel

    Parameters
    ----------
    branching_ratio : float
        Fraction of the total width going into this channel.
    daughters : list[int]
        PDG ids of the decay products, in source order.
    """

    branching_ratio: float
    daughters: list[int] = field(default_factory=list)


@dataclass
class DecayTable:
    """All decay channels of one particle

    Parameters
    ----------
    width : float
        Total decay width (GeV), taken from the ``DECAY`` header.
    decays : list[Decay]
        Channels in source order.
    """

    width: float
    decays: list[Decay] = field(default_factory=list)
