#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises the line-level SLHA tokenizer, scalar
conversion helpers, format constants, and the scale-uniqueness checks so
that no logic is duplicated between the splitter, the decoders and the
query layer.
"""

from __future__ import annotations
