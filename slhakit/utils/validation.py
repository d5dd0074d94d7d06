#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Occurrence checks for repeated SLHA blocks

Every check raises a :class:`~slhakit.exceptions.QueryError` subclass when
violated.  The query layer calls these functions before decoding, so a
lookup that cannot be resolved unambiguously fails without decoding any
occurrence.

Checked Constraints
-------------------
* A singular lookup needs at most one occurrence of the name.
* A repeated lookup needs pairwise distinct scales, where two occurrences
  without a ``Q=`` annotation share the absent scale.

Design Note
-----------
Checks accept plain sequences of scales, **not** raw block records, so
that ``utils`` does not depend on ``models``.  Parameter values are never
checked for physical plausibility.
"""

from __future__ import annotations

import logging
from typing import Sequence

from slhakit.exceptions import DuplicateScaleError, MultipleOccurrencesError

logger = logging.getLogger(__name__)


def validate_single_occurrence(name: str, count: int) -> None:
    """Verify that block *name* occurs at most once

    Parameters
    ----------
    name : str
        Display name of the block, for the error message.
    count : int
        Number of occurrences in the document.

    Raises
    ------
    MultipleOccurrencesError
        If *count* exceeds one.

    Examples
    --------
    >>> validate_single_occurrence("MASS", 1)
    >>> validate_single_occurrence("YE", 2)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    slhakit.exceptions.MultipleOccurrencesError: ...
    """
    if count > 1:
        raise MultipleOccurrencesError(
            f"Found {count} occurrences where one was expected; "
            f"use get_blocks() for repeated blocks",
            block=name,
        )


def validate_unique_scales(name: str, scales: Sequence[float | None]) -> None:
    """Verify that the occurrences of block *name* have pairwise distinct scales

    Parameters
    ----------
    name : str
        Display name of the block, for the error message.
    scales : Sequence[float | None]
        Scale of each occurrence in source order, ``None`` when absent.

    Raises
    ------
    DuplicateScaleError
        If two occurrences have equal scales, including both ``None``.
        The error's ``occurrence`` is the index of the later one.

    Examples
    --------
    >>> validate_unique_scales("YE", [1.0, 2.0])
    >>> validate_unique_scales("YE", [None, None])  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    slhakit.exceptions.DuplicateScaleError: ...
    """
    seen: dict[float | None, int] = {}
    for index, scale in enumerate(scales):
        if scale in seen:
            shown = "no scale" if scale is None else f"scale Q={scale!r}"
            raise DuplicateScaleError(
                f"Occurrences {seen[scale]} and {index} both have {shown}",
                block=name,
                occurrence=index,
            )
        seen[scale] = index
    logger.debug("Block %s: %d occurrences with distinct scales", name, len(scales))
