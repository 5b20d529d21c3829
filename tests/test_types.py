import pytest

from tagfuzz.types import (
    EditOp,
    Editops,
    EditType,
    LevenshteinWeightTable,
    Opcode,
    Opcodes,
    ScoreAlignment,
)

R, I, D, N = EditType.REPLACE, EditType.INSERT, EditType.DELETE, EditType.NONE


def apply_opcodes(opcodes, s1, s2):
    parts = []
    for op in opcodes:
        if op.type is N:
            parts.append(s1[op.src_begin:op.src_end])
        elif op.type in (R, I):
            parts.append(s2[op.dest_begin:op.dest_end])
    return "".join(parts)


SAMPLES = [
    ("abc", "axcd", Editops([EditOp(R, 1, 1), EditOp(I, 3, 3)], 3, 4)),
    ("abcd", "acd", Editops([EditOp(D, 1, 1)], 4, 3)),
    ("abc", "xyc", Editops([EditOp(R, 0, 0), EditOp(R, 1, 1)], 3, 3)),
    ("ab", "ab", Editops([], 2, 2)),
    ("", "xy", Editops([EditOp(I, 0, 0), EditOp(I, 0, 1)], 0, 2)),
]


def test_edit_type_values_in_converted_opcodes():
    opcodes = Opcodes.from_editops(SAMPLES[0][2])
    assert [op.type.value for op in opcodes] == [0, 1, 0, 2]
    inverse = Opcodes.from_editops(SAMPLES[1][2]).inverse()
    assert [op.type.value for op in inverse] == [0, 2, 0]


def test_weight_table_fields():
    table = LevenshteinWeightTable(1, 2, 3)
    assert (table.insert_cost, table.delete_cost, table.replace_cost) == (1, 2, 3)


@pytest.mark.parametrize("s1,s2,ed", SAMPLES)
def test_opcodes_apply_to_destination(s1, s2, ed):
    opcodes = Opcodes.from_editops(ed)
    assert apply_opcodes(opcodes, s1, s2) == s2


@pytest.mark.parametrize("s1,s2,ed", SAMPLES)
def test_opcodes_cover_both_strings(s1, s2, ed):
    opcodes = Opcodes.from_editops(ed)
    assert (opcodes.src_len, opcodes.dest_len) == (len(s1), len(s2))
    src = dest = 0
    for op in opcodes:
        assert (op.src_begin, op.dest_begin) == (src, dest)
        src, dest = op.src_end, op.dest_end
    assert (src, dest) == (len(s1), len(s2))
    for left, right in zip(opcodes, list(opcodes)[1:]):
        assert left.type != right.type


@pytest.mark.parametrize("s1,s2,ed", SAMPLES)
def test_editops_opcodes_round_trip(s1, s2, ed):
    assert Editops.from_opcodes(Opcodes.from_editops(ed)) == ed


@pytest.mark.parametrize("s1,s2,ed", SAMPLES)
def test_inverse_transforms_back(s1, s2, ed):
    inv = ed.inverse()
    assert (inv.src_len, inv.dest_len) == (ed.dest_len, ed.src_len)
    assert apply_opcodes(Opcodes.from_editops(inv), s2, s1) == s1
    assert inv.inverse() == ed


@pytest.mark.parametrize("s1,s2,ed", SAMPLES)
def test_opcodes_inverse_matches_editops_inverse(s1, s2, ed):
    assert Opcodes.from_editops(ed).inverse() == Opcodes.from_editops(ed.inverse())


def test_inverse_swaps_insert_and_delete():
    ed = Editops([EditOp(I, 2, 5), EditOp(D, 3, 6), EditOp(R, 4, 7)], 10, 12)
    inv = ed.inverse()
    assert [op.type for op in inv] == [D, I, R]
    assert [(op.src_pos, op.dest_pos) for op in inv] == [(5, 2), (6, 3), (7, 4)]


def test_slice_full_is_identity():
    ed = SAMPLES[0][2]
    assert ed.slice(0, len(ed)) == ed
    assert ed[:] == ed


def test_slice_keeps_lengths_and_selects_like_list():
    ed = Editops([EditOp(R, k, k) for k in range(7)], 7, 7)
    part = ed.slice(1, -1, 2)
    assert list(part) == list(ed)[1:-1:2]
    assert (part.src_len, part.dest_len) == (ed.src_len, ed.dest_len)
    assert len(ed.slice(5, 2)) == 0


@pytest.mark.parametrize("step", [0, -1])
def test_slice_rejects_bad_step(step):
    ed = SAMPLES[0][2]
    with pytest.raises(ValueError):
        ed.slice(0, 2, step)
    with pytest.raises(ValueError):
        Opcodes.from_editops(ed).slice(0, 2, step)


def test_remove_slice():
    ops = [EditOp(R, k, k) for k in range(6)]
    ed = Editops(ops, 6, 6)
    ed.remove_slice(0, 5, 2)
    expected = [op for k, op in enumerate(ops) if k not in (0, 2, 4)]
    assert list(ed) == expected
    with pytest.raises(ValueError):
        ed.remove_slice(0, 2, 0)


def test_reverse_is_a_copy():
    ed = SAMPLES[0][2]
    rev = ed.reverse()
    assert list(rev) == list(reversed(list(ed)))
    assert rev.reverse() == ed
    opcodes = Opcodes.from_editops(ed)
    assert opcodes.reverse().reverse() == opcodes


def test_equality_includes_lengths():
    ops = [EditOp(R, 0, 0)]
    assert Editops(ops, 1, 1) == Editops(ops, 1, 1)
    assert not Editops(ops, 1, 1) == Editops(ops, 1, 2)


def test_remove_subsequence_of_itself_is_empty():
    ed = SAMPLES[0][2]
    result = ed.remove_subsequence(ed)
    assert len(result) == 0
    assert (result.src_len, result.dest_len) == (ed.src_len, ed.dest_len)


def test_remove_subsequence_shifts_source_positions():
    ed = Editops([EditOp(I, 0, 0), EditOp(D, 2, 3)], 3, 3)
    result = ed.remove_subsequence(Editops([ed[0]]))
    assert list(result) == [EditOp(D, ed[1].src_pos + 1, ed[1].dest_pos)]


def test_remove_subsequence_errors():
    ed = Editops([EditOp(R, 0, 0)], 1, 1)
    with pytest.raises(ValueError):
        ed.remove_subsequence(Editops([EditOp(D, 0, 0)], 1, 1))
    with pytest.raises(ValueError):
        ed.remove_subsequence(Editops([EditOp(R, 0, 0), EditOp(R, 0, 0)]))


def test_score_alignment_equality():
    a = ScoreAlignment(50.0, 0, 3, 1, 4)
    assert a == ScoreAlignment(50.0, 0, 3, 1, 4)
    assert not a == ScoreAlignment(50.0, 0, 3, 1, 5)


def test_opcode_defaults_are_none():
    assert Opcode() == Opcode(N, 0, 0, 0, 0)
    assert EditOp() == EditOp(N, 0, 0)