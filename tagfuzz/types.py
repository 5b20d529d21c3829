"""Edit operation types shared by the distance metrics."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass, replace
from typing import Generic, TypeVar, Union


class EditType(enum.IntEnum):
    """Kind of an edit operation."""

    NONE = 0
    REPLACE = 1
    INSERT = 2
    DELETE = 3


@dataclass(frozen=True)
class LevenshteinWeightTable:
    """Costs of insertion, deletion and substitution."""

    insert_cost: int = 1
    delete_cost: int = 1
    replace_cost: int = 1


@dataclass(frozen=True)
class EditOp:
    """A single edit applied to the source string.

    Replace: replace s1[src_pos] by s2[dest_pos].
    Insert: insert s2[dest_pos] at src_pos.
    Delete: delete s1[src_pos].
    """

    type: EditType = EditType.NONE
    src_pos: int = 0
    dest_pos: int = 0


@dataclass(frozen=True)
class Opcode:
    """An edit applied to a block of the source string."""

    type: EditType = EditType.NONE
    src_begin: int = 0
    src_end: int = 0
    dest_begin: int = 0
    dest_end: int = 0


S = TypeVar("S")


@dataclass
class ScoreAlignment(Generic[S]):
    """A score together with the aligned regions of both strings."""

    score: S = 0  # type: ignore[assignment]
    src_start: int = 0
    src_end: int = 0
    dest_start: int = 0
    dest_end: int = 0


T = TypeVar("T", EditOp, Opcode)
_Self = TypeVar("_Self", bound="_EditSequence")


def _check_step(step: int) -> None:
    if step == 0:
        raise ValueError("slice step cannot be zero")
    if step < 0:
        raise ValueError("step sizes below 0 lead to an invalid order of editops")


class _EditSequence(MutableSequence, Generic[T]):
    """List of edit operations that also knows both string lengths."""

    def __init__(self, ops: Iterable[T] = (), src_len: int = 0, dest_len: int = 0) -> None:
        self._ops: list[T] = list(ops)
        self.src_len = src_len
        self.dest_len = dest_len

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._slice(
                0 if index.start is None else index.start,
                len(self) if index.stop is None else index.stop,
                1 if index.step is None else index.step,
            )
        return self._ops[index]

    def __setitem__(self, index, value) -> None:
        self._ops[index] = value

    def __delitem__(self, index) -> None:
        del self._ops[index]

    def __len__(self) -> int:
        return len(self._ops)

    def insert(self, index: int, value: T) -> None:
        self._ops.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.src_len == other.src_len
            and self.dest_len == other.dest_len
            and self._ops == other._ops
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._ops!r}, src_len={self.src_len}, "
            f"dest_len={self.dest_len})"
        )

    def _slice(self: _Self, start: int, stop: int, step: int) -> _Self:
        _check_step(step)
        return type(self)(self._ops[start:stop:step], self.src_len, self.dest_len)

    def _reversed(self: _Self) -> _Self:
        return type(self)(reversed(self._ops), self.src_len, self.dest_len)


_Swapped = {EditType.DELETE: EditType.INSERT, EditType.INSERT: EditType.DELETE}


class Editops(_EditSequence[EditOp]):
    """Sequence of :class:`EditOp` turning a source into a destination."""

    def __init__(self, ops: Iterable[EditOp] = (), src_len: int = 0, dest_len: int = 0) -> None:
        super().__init__(ops, src_len, dest_len)

    @classmethod
    def from_opcodes(cls, opcodes: Opcodes) -> Editops:
        """Expand block opcodes into single-character edit operations."""
        ops: list[EditOp] = []
        for op in opcodes:
            if op.type is EditType.REPLACE:
                ops.extend(
                    EditOp(EditType.REPLACE, op.src_begin + j, op.dest_begin + j)
                    for j in range(op.src_end - op.src_begin)
                )
            elif op.type is EditType.INSERT:
                ops.extend(
                    EditOp(EditType.INSERT, op.src_begin, op.dest_begin + j)
                    for j in range(op.dest_end - op.dest_begin)
                )
            elif op.type is EditType.DELETE:
                ops.extend(
                    EditOp(EditType.DELETE, op.src_begin + j, op.dest_begin)
                    for j in range(op.src_end - op.src_begin)
                )
        return cls(ops, opcodes.src_len, opcodes.dest_len)

    def slice(self, start: int, stop: int, step: int = 1) -> Editops:
        """Return the operations selected like ``ops[start:stop:step]``; step must be positive."""
        return self._slice(start, stop, step)

    def remove_slice(self, start: int, stop: int, step: int = 1) -> None:
        """Delete the operations selected like ``ops[start:stop:step]`` in place."""
        _check_step(step)
        del self._ops[start:stop:step]

    def reverse(self) -> Editops:  # type: ignore[override]
        """Return a copy with the operations in reverse order."""
        return self._reversed()

    def inverse(self) -> Editops:
        """Return the operations turning the destination back into the source."""
        return Editops(
            (
                EditOp(_Swapped.get(op.type, op.type), op.dest_pos, op.src_pos)
                for op in self._ops
            ),
            self.dest_len,
            self.src_len,
        )

    def remove_subsequence(self, subsequence: Editops) -> Editops:
        """Remove ``subsequence`` and shift the remaining source positions to match."""
        if len(subsequence) > len(self):
            raise ValueError("subsequence is not a subsequence")

        result: list[EditOp] = []
        offset = 0
        remaining = iter(self._ops)
        for sop in subsequence:
            for op in remaining:
                if op == sop:
                    break
                result.append(replace(op, src_pos=op.src_pos + offset))
            else:
                raise ValueError("subsequence is not a subsequence")

            if sop.type is EditType.INSERT:
                offset += 1
            elif sop.type is EditType.DELETE:
                offset -= 1

        result.extend(replace(op, src_pos=op.src_pos + offset) for op in remaining)
        return Editops(result, self.src_len, self.dest_len)


class Opcodes(_EditSequence[Opcode]):
    """Sequence of :class:`Opcode` covering both strings completely."""

    def __init__(self, ops: Iterable[Opcode] = (), src_len: int = 0, dest_len: int = 0) -> None:
        super().__init__(ops, src_len, dest_len)

    @classmethod
    def from_editops(cls, editops: Editops) -> Opcodes:
        """Group edit operations into blocks, filling the gaps with NONE blocks."""
        ops: list[Opcode] = []
        src_pos = dest_pos = 0
        count = len(editops)
        i = 0
        while i < count:
            first = editops[i]
            if src_pos < first.src_pos or dest_pos < first.dest_pos:
                ops.append(Opcode(EditType.NONE, src_pos, first.src_pos, dest_pos, first.dest_pos))
                src_pos, dest_pos = first.src_pos, first.dest_pos

            src_begin, dest_begin, kind = src_pos, dest_pos, first.type
            while True:
                if kind is EditType.REPLACE:
                    src_pos += 1
                    dest_pos += 1
                elif kind is EditType.INSERT:
                    dest_pos += 1
                elif kind is EditType.DELETE:
                    src_pos += 1
                i += 1
                if i >= count:
                    break
                nxt = editops[i]
                if nxt.type != kind or nxt.src_pos != src_pos or nxt.dest_pos != dest_pos:
                    break

            ops.append(Opcode(kind, src_begin, src_pos, dest_begin, dest_pos))

        if src_pos < editops.src_len or dest_pos < editops.dest_len:
            ops.append(Opcode(EditType.NONE, src_pos, editops.src_len, dest_pos, editops.dest_len))

        return cls(ops, editops.src_len, editops.dest_len)

    def slice(self, start: int, stop: int, step: int = 1) -> Opcodes:
        """Return the opcodes selected like ``ops[start:stop:step]``; step must be positive."""
        return self._slice(start, stop, step)

    def reverse(self) -> Opcodes:  # type: ignore[override]
        """Return a copy with the opcodes in reverse order."""
        return self._reversed()

    def inverse(self) -> Opcodes:
        """Return the opcodes turning the destination back into the source."""
        return Opcodes(
            (
                Opcode(
                    _Swapped.get(op.type, op.type),
                    op.dest_begin,
                    op.dest_end,
                    op.src_begin,
                    op.src_end,
                )
                for op in self._ops
            ),
            self.dest_len,
            self.src_len,
        )


EditSequence = Union[Editops, Opcodes]