#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the parsed document and its query API

Covers parse idempotence, single / repeated / unchecked block lookups,
scale uniqueness, decay tables, case-insensitive names, error context,
and isolation of failing lookups from the rest of the document.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from slhakit import (
    Block,
    Decay,
    DecayTable,
    DecodeError,
    Document,
    DuplicateDecayError,
    DuplicateScaleError,
    MalformedHeaderError,
    MultipleOccurrencesError,
    QueryError,
    RawBlock,
    SlhaError,
    StructuralError,
    UnparsableScalarError,
    UnterminatedSectionError,
    block_of,
    parse,
    single_of,
)

MASS = block_of(int, float)
MATRIX = block_of((int, int), float)


class TestParse:
    """Tests for document construction"""

    @pytest.mark.parametrize("fixture", [
        "slha_input", "slha_mixing", "slha_running", "slha_decay", "slha_top", "slha_repeated",
    ])
    def test_idempotent(self, fixture: str, request: pytest.FixtureRequest) -> None:
        text = request.getfixturevalue(fixture)
        assert parse(text) == parse(text)

    def test_different_texts_differ(self, slha_input: str, slha_top: str) -> None:
        assert parse(slha_input) != parse(slha_top)

    def test_empty_input(self) -> None:
        doc = parse("")
        assert doc.block_names() == []
        assert doc.decay_ids() == []
        assert doc.get_block("mass", MASS) is None
        assert doc.get_decay(6) is None
        assert doc.get_blocks("mass", MASS) == []

    def test_comment_only_input(self) -> None:
        assert parse("# nothing here\n\n   \n") == parse("")

    def test_classmethod(self, slha_top: str) -> None:
        assert Document.parse(slha_top) == parse(slha_top)

    def test_windows_line_endings(self, slha_top: str) -> None:
        doc = parse(slha_top.replace("\n", "\r\n"))
        assert doc == parse(slha_top)

    @pytest.mark.parametrize("ch", ["\x0b", "\x0c", "\x85", "\u2028"])
    def test_control_character_in_comment(self, ch: str) -> None:
        doc = parse(f"BLOCK MASS\n    6   173.2   # M_t{ch}pole\nBLOCK ALPHA\n  -0.11\n")
        (raw,) = doc.get_raw_blocks("mass")
        assert len(raw.lines) == 1
        assert raw.lines[0].comment == f"# M_t{ch}pole"
        assert doc.get_block("mass", MASS).map == {6: 173.2}
        assert doc.get_raw_blocks("alpha")[0].lines[0].lineno == 4

    def test_fortran_exponent(self) -> None:
        doc = parse("BLOCK MASS\n    6   1.732D+02\n")
        assert doc.get_block("mass", MASS)[6] == pytest.approx(173.2)

    def test_structural_errors_abort(self) -> None:
        with pytest.raises(MalformedHeaderError) as info:
            parse("BLOCK MASS\n 6 173.2\nBLOCK\n 1 1\n")
        assert info.value.lineno == 3
        assert isinstance(info.value, StructuralError)

    def test_duplicate_decay(self, slha_top: str) -> None:
        with pytest.raises(DuplicateDecayError) as info:
            parse(slha_top + "BLOCK OTHER\n 1 1\n" * 10 + "DECAY 6 1.40\n")
        assert info.value.pdg_id == 6

    def test_strict_mode(self) -> None:
        text = "preamble line\nBLOCK MASS\n 6 173.2\n"
        assert parse(text).block_names() == ["MASS"]
        with pytest.raises(UnterminatedSectionError):
            parse(text, strict=True)

    def test_repr(self, slha_top: str) -> None:
        assert repr(parse(slha_top)) == "Document(blocks=['MASS'], decays=[6])"


class TestRawStore:
    """Tests for access to undecoded records"""

    def test_raw_block(self, slha_top: str) -> None:
        (raw,) = parse(slha_top).get_raw_blocks("mass")
        assert isinstance(raw, RawBlock)
        assert raw.name == "MASS"
        assert raw.lines[0].data == "6   173.2"
        assert raw.lines[0].comment == "# M_t"

    def test_raw_blocks_absent(self, slha_top: str) -> None:
        assert parse(slha_top).get_raw_blocks("nmix") == ()

    def test_raw_decay(self, slha_top: str) -> None:
        doc = parse(slha_top)
        assert doc.get_raw_decay(6).width == pytest.approx(1.35)
        assert doc.get_raw_decay(5) is None

    def test_names_and_ids(self, slha_decay: str, slha_top: str) -> None:
        doc = parse(slha_decay + slha_top)
        assert doc.block_names() == ["DCINFO", "MASS"]
        assert doc.decay_ids() == [1000021, 6]

    def test_contains(self, slha_top: str) -> None:
        doc = parse(slha_top)
        assert "mass" in doc
        assert "MaSs" in doc
        assert "nmix" not in doc
        assert 6 not in doc

    def test_views_are_read_only(self, slha_top: str) -> None:
        doc = parse(slha_top)
        with pytest.raises(TypeError):
            doc.blocks["mass"] = ()
        with pytest.raises(TypeError):
            doc.decays[6] = None

    def test_constructor_merges_case_variants(self) -> None:
        a = RawBlock("Mass", None, (), 1)
        b = RawBlock("MASS", 2.0, (), 3)
        doc = Document({"Mass": [a], "MASS": [b]})
        assert doc.get_raw_blocks("mass") == (a, b)


class TestGetBlock:
    """Tests for single-occurrence lookups"""

    def test_mass(self, slha_top: str) -> None:
        block = parse(slha_top).get_block("mass", MASS)
        assert block.scale is None
        assert block.map == {6: 173.2}

    def test_case_insensitive(self, slha_top: str) -> None:
        doc = parse(slha_top)
        assert doc.get_block("MASS", MASS) == doc.get_block("mAsS", MASS)

    def test_absent(self, slha_top: str) -> None:
        assert parse(slha_top).get_block("alpha", single_of(float)) is None

    def test_multiple_occurrences(self, repeated_doc: Document) -> None:
        with pytest.raises(MultipleOccurrencesError) as info:
            repeated_doc.get_block("ye", MATRIX)
        assert info.value.block == "ye"
        assert isinstance(info.value, QueryError)

    def test_multiple_occurrences_with_distinct_scales(self, repeated_doc: Document) -> None:
        with pytest.raises(MultipleOccurrencesError):
            repeated_doc.get_block("YE", MATRIX)

    def test_scaled_block(self, slha_running: str) -> None:
        block = parse(slha_running).get_block("yu", MATRIX)
        assert block.scale == pytest.approx(4.64649125e+02)
        assert block[(3, 3)] == pytest.approx(8.88194465e-01)

    def test_fresh_value_per_call(self, slha_top: str) -> None:
        doc = parse(slha_top)
        first = doc.get_block("mass", MASS)
        first.map[25] = 125.0
        second = doc.get_block("mass", MASS)
        assert second.map == {6: 173.2}
        assert first is not second


class TestGetBlocks:
    """Tests for repeated-block lookups"""

    def test_distinct_scales(self, repeated_doc: Document) -> None:
        blocks = repeated_doc.get_blocks("ye", MATRIX)
        assert [b.scale for b in blocks] == [1.0, 2.0]
        assert all((3, 3) in b for b in blocks)
        assert blocks[0][(3, 3)] == pytest.approx(4.2)
        assert blocks[1][(3, 3)] == pytest.approx(8.4)

    def test_single_occurrence(self, slha_top: str) -> None:
        assert parse(slha_top).get_blocks("mass", MASS) == [Block({6: 173.2})]

    def test_both_unscaled(self, repeated_doc: Document) -> None:
        with pytest.raises(DuplicateScaleError) as info:
            repeated_doc.get_blocks("nmix", MATRIX)
        assert info.value.block == "nmix"
        assert info.value.occurrence == 1

    def test_equal_scales(self) -> None:
        doc = parse("Block yf Q= 4.64649125e+02\n 3 3 0.88\nBlock yf Q= 4.64649125e+02\n 3 3 0.09\n")
        with pytest.raises(DuplicateScaleError, match="Q="):
            doc.get_blocks("yf", MATRIX)

    def test_scaled_and_unscaled(self) -> None:
        doc = parse("Block yf\n 3 3 0.88\nBlock yf Q= 464.6\n 3 3 0.09\n")
        assert [b.scale for b in doc.get_blocks("yf", MATRIX)] == [None, pytest.approx(464.6)]

    def test_unchecked(self, repeated_doc: Document) -> None:
        blocks = repeated_doc.get_blocks_unchecked("nmix", MATRIX)
        assert [b[(1, 1)] for b in blocks] == [0.98, 0.97]
        assert [b.scale for b in blocks] == [None, None]

    def test_unchecked_absent(self, repeated_doc: Document) -> None:
        assert repeated_doc.get_blocks_unchecked("umix", MATRIX) == []

    def test_scale_checked_before_decoding(self) -> None:
        doc = parse("BLOCK x\n a b\nBLOCK x\n c d\n")
        with pytest.raises(DuplicateScaleError):
            doc.get_blocks("x", MATRIX)

    def test_decode_error_names_occurrence(self) -> None:
        doc = parse("BLOCK ye Q= 1\n 3 3 4.2\nBLOCK ye Q= 2\n 3 3 x\n")
        with pytest.raises(UnparsableScalarError) as info:
            doc.get_blocks("ye", MATRIX)
        assert info.value.occurrence == 1
        assert info.value.lineno == 4
        assert str(info.value).startswith("block 'ye', occurrence 1, line 4:")


class TestGetDecay:
    """Tests for decay table lookups"""

    def test_top(self, slha_top: str) -> None:
        table = parse(slha_top).get_decay(6)
        assert table == DecayTable(1.35, [Decay(1.0, [5, 24])])

    def test_absent(self, slha_top: str) -> None:
        assert parse(slha_top).get_decay(-6) is None

    def test_daughter_count_mismatch(self, slha_top: str) -> None:
        doc = parse(slha_top.replace("1.0   2   5   24", "1.0   3   5   24"))
        with pytest.raises(DecodeError) as info:
            doc.get_decay(6)
        assert type(info.value).__name__ == "DaughterCountMismatchError"
        assert info.value.pdg_id == 6
        assert info.value.lineno == 4

    def test_get_decays(self, slha_decay: str, slha_top: str) -> None:
        decays = parse(slha_decay + slha_top).get_decays()
        assert list(decays) == [1000021, 6]
        assert len(decays[1000021].decays) == 20
        assert decays[6].width == pytest.approx(1.35)

    def test_empty_table(self) -> None:
        assert parse("DECAY 22 0.0\n").get_decay(22) == DecayTable(0.0, [])


class TestIsolation:
    """Tests that failures stay local to one lookup"""

    TEXT = "BLOCK MASS\n 6 173.2\nBLOCK BROKEN\n 1 not-a-number\nDECAY 6 1.35\n 1.0 3 5 24\nDECAY 24 2.085\n 1.0 2 -11 12\n"

    def test_broken_block_does_not_affect_others(self) -> None:
        doc = parse(self.TEXT)
        with pytest.raises(SlhaError):
            doc.get_block("broken", MASS)
        assert doc.get_block("mass", MASS)[6] == pytest.approx(173.2)

    def test_broken_decay_does_not_affect_others(self) -> None:
        doc = parse(self.TEXT)
        with pytest.raises(DecodeError):
            doc.get_decay(6)
        assert doc.get_decay(24).decays[0].daughters == [-11, 12]

    def test_failed_lookup_leaves_document_unchanged(self) -> None:
        doc = parse(self.TEXT)
        with pytest.raises(DecodeError):
            doc.get_decay(6)
        assert doc == parse(self.TEXT)

    def test_concurrent_queries(self, slha_decay: str) -> None:
        doc = parse(slha_decay)
        with ThreadPoolExecutor(max_workers=4) as pool:
            tables = list(pool.map(lambda _: doc.get_decay(1000021), range(16)))
        assert all(t == tables[0] for t in tables)
