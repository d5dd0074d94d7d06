#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
slhakit command-line interface

Provides inspection commands for SLHA spectrum files:

1. **summary** : List every block occurrence and decay table
2. **block**   : Decode and print one block
3. **decay**   : Decode and print the decay table of one particle

Usage
-----
::

    # Overview of a spectrum file
    python -m slhakit.cli summary spectrum.slha

    # Standard blocks are decoded with their standard shape
    python -m slhakit.cli block spectrum.slha NMIX

    # Any other block needs explicit key/value kinds
    python -m slhakit.cli block spectrum.slha MYBLOCK --key int,int --value float

    # Every occurrence of a repeated block
    python -m slhakit.cli block spectrum.slha YE --all

    # Decay table of the gluino
    python -m slhakit.cli decay spectrum.slha 1000021

Kinds are ``int``, ``float``, ``str`` or a numpy scalar type name
(``int8``, ``uint16``, ``float32``, ...), comma separated for tuples.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from slhakit.decoders.base import BlockShape
from slhakit.decoders.blocks import block_of, single_of, standard_shape
from slhakit.document import Document, parse
from slhakit.exceptions import SlhaError
from slhakit.models.records import BlockSingle, RawBlock
from slhakit.utils.parsing import is_scalar_kind

logger = logging.getLogger("slhakit.cli")

_BUILTIN_KINDS = {"int": int, "float": float, "str": str}


def _kinds(text: str) -> type | tuple[type, ...]:
    """argparse type: ``"int"`` -> int, ``"int,int"`` -> (int, int)."""
    kinds = []
    for name in text.split(","):
        name = name.strip()
        kind = _BUILTIN_KINDS.get(name) or getattr(np, name, None)
        if not is_scalar_kind(kind):
            raise argparse.ArgumentTypeError(f"unknown scalar kind {name!r}")
        kinds.append(kind)
    return kinds[0] if len(kinds) == 1 else tuple(kinds)


def _load(args) -> Document:
    path = Path(args.file)
    logger.debug("Reading %s", path)
    return parse(path.read_text(encoding="utf-8"), strict=args.strict)


def _scale_label(scale: float | None) -> str:
    return "" if scale is None else f"Q={scale:g}"


def _format_key(key) -> str:
    if isinstance(key, tuple):
        return " ".join(str(k) for k in key)
    return str(key)


def _print_block(name: str, scale: float | None, block) -> None:
    print(f"BLOCK {name} {_scale_label(scale)}".rstrip())
    if isinstance(block, BlockSingle):
        print(f"    {block.value}")
        return
    for key, value in block.map.items():
        print(f"    {_format_key(key):<12s} {_format_key(value)}")


def _print_raw(raw: RawBlock) -> None:
    print(f"BLOCK {raw.name} {_scale_label(raw.scale)}".rstrip())
    for line in raw.lines:
        print(f"    {line.data}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_summary(args) -> int:
    """Print every block occurrence and decay table of a file."""
    doc = _load(args)
    names = doc.block_names()
    n_occurrences = sum(len(doc.get_raw_blocks(n)) for n in names)
    print(f"{args.file}: {n_occurrences} blocks, {len(doc.decay_ids())} decay tables")

    for name in names:
        for raw in doc.get_raw_blocks(name):
            print(
                f"  BLOCK {raw.name:<12s} {_scale_label(raw.scale):<14s} "
                f"{len(raw.lines):4d} lines"
            )
    for pdg_id in doc.decay_ids():
        raw = doc.get_raw_decay(pdg_id)
        print(f"  DECAY {pdg_id:<12d} width={raw.width:<12g} {len(raw.lines):4d} channels")
    return 0


def _block_shape(args) -> BlockShape | None:
    if args.key is not None:
        return block_of(args.key, args.value if args.value is not None else float)
    if args.value is not None:
        return single_of(args.value)
    return standard_shape(args.name)


def cmd_block(args) -> int:
    """Decode and print one block (or every occurrence with ``--all``)."""
    doc = _load(args)
    occurrences = doc.get_raw_blocks(args.name)
    if not occurrences:
        print(f"error: no block {args.name!r} in {args.file}", file=sys.stderr)
        return 1

    shape = _block_shape(args)
    if shape is None:
        logger.info("No standard shape for block %s, printing raw lines", args.name)
        for raw in occurrences if args.all else occurrences[:1]:
            _print_raw(raw)
        return 0

    name = occurrences[0].name
    if args.all:
        for block in doc.get_blocks_unchecked(args.name, shape):
            _print_block(name, block.scale, block)
    else:
        block = doc.get_block(args.name, shape)
        _print_block(name, block.scale, block)
    return 0


def cmd_decay(args) -> int:
    """Decode and print the decay table of one particle."""
    doc = _load(args)
    table = doc.get_decay(args.pdg_id)
    if table is None:
        print(f"error: no decay table for particle {args.pdg_id} in {args.file}", file=sys.stderr)
        return 1

    print(f"DECAY {args.pdg_id} {table.width:g}")
    for decay in table.decays:
        daughters = " ".join(str(d) for d in decay.daughters)
        print(f"    {decay.branching_ratio:<14.6e} {len(decay.daughters):2d}    {daughters}")
    total = sum(d.branching_ratio for d in table.decays)
    print(f"# {len(table.decays)} channels, sum of branching ratios {total:.6g}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="slhakit",
        description="Inspect SUSY Les Houches Accord (SLHA) files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    slhakit summary spectrum.slha                           # list contents
    slhakit block spectrum.slha MASS                        # standard block
    slhakit block spectrum.slha YE --all                    # every scale
    slhakit block spectrum.slha MYBLOCK --key int,int --value float
    slhakit decay spectrum.slha 1000021                     # gluino decays
""",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject data lines outside any BLOCK or DECAY section",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p = sub.add_parser("summary", help="List blocks and decay tables")
    p.add_argument("file", help="SLHA file")

    p = sub.add_parser("block", help="Decode and print one block")
    p.add_argument("file", help="SLHA file")
    p.add_argument("name", help="Block name (any case)")
    p.add_argument(
        "--key",
        type=_kinds,
        default=None,
        help="Key kind(s), e.g. int or int,int (default: standard shape)",
    )
    p.add_argument(
        "--value",
        type=_kinds,
        default=None,
        help="Value kind(s), e.g. float; without --key decodes a single-value block",
    )
    p.add_argument(
        "--all",
        action="store_true",
        help="Print every occurrence of a repeated block",
    )

    p = sub.add_parser("decay", help="Decode and print a decay table")
    p.add_argument("file", help="SLHA file")
    p.add_argument("pdg_id", type=int, help="PDG id of the decaying particle")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "summary": cmd_summary,
        "block": cmd_block,
        "decay": cmd_decay,
    }

    try:
        return commands[args.command](args)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except SlhaError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
