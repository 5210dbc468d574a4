## brainfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Instruction:
    INCREMENT = 1
    DECREMENT = 2
    MOVE_RIGHT = 3
    MOVE_LEFT = 4
    PRINT = 5
    INPUT = 6
    LOOP_OPEN = 7
    LOOP_CLOSE = 8

    kind: int
    target: int | None = None     # Index of the matching bracket, loops only.
    meta: dict = field(default_factory=dict, compare=False, hash=False)

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.kind]

    @property
    def is_loop(self) -> bool:
        return self.kind in (Instruction.LOOP_OPEN, Instruction.LOOP_CLOSE)

    def __repr__(self):
        if self.target is None: return self.symbol
        return f"{self.symbol}→{self.target}"


SYMBOLS: dict[int, str] = {
    Instruction.INCREMENT: '+', Instruction.DECREMENT: '-',
    Instruction.MOVE_RIGHT: '>', Instruction.MOVE_LEFT: '<',
    Instruction.PRINT: '.', Instruction.INPUT: ',',
    Instruction.LOOP_OPEN: '[', Instruction.LOOP_CLOSE: ']',
}

KINDS: dict[str, int] = {sym: kind for kind, sym in SYMBOLS.items()}


class Tape:
    """Byte cells indexed by any signed integer, zero until written.

    Cells at index >= 0 live in `forward`, cells at index < 0 in `backward` where
    index -k is stored at position k-1. Storage only grows one cell at a time as
    the pointer first steps past either end.
    """

    __slots__ = ('forward', 'backward')

    def __init__(self):
        self.forward = bytearray(1)
        self.backward = bytearray()

    def _locate(self, index: int) -> tuple[bytearray, int]:
        return (self.forward, index) if index >= 0 else (self.backward, -index - 1)

    def ensure(self, index: int) -> None:
        cells, pos = self._locate(index)
        if pos == len(cells):
            cells.append(0)
        elif pos > len(cells):
            raise IndexError(f"Cell {index} is more than one step beyond the materialized tape.")

    def read(self, index: int) -> int:
        cells, pos = self._locate(index)
        return cells[pos] if pos < len(cells) else 0

    def write(self, index: int, value: int) -> None:
        cells, pos = self._locate(index)
        cells[pos] = value % 256

    @property
    def extent(self) -> tuple[int, int]:
        return -len(self.backward), len(self.forward) - 1

    def window(self, center: int, radius: int = 4) -> list[tuple[int, int]]:
        return [(i, self.read(i)) for i in range(center - radius, center + radius + 1)]

    def __len__(self):
        return len(self.forward) + len(self.backward)

    def __repr__(self):
        lo, hi = self.extent
        return "<Tape " + " ".join(str(self.read(i)) for i in range(lo, hi + 1)) + ">"


@dataclass
class RunState:
    tape: Tape = field(default_factory=Tape)
    pointer: int = 0
    ip: int = 0
    steps: int = 0

    @property
    def cell(self) -> int:
        return self.tape.read(self.pointer)

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape.write(self.pointer, value)
