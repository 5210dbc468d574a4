## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from .types import Instruction, RunState


_ANSI_CODE = re.compile(r"\033\[[0-9;]*m")

def strip_ansi(text: str) -> str:
    return _ANSI_CODE.sub("", text)

def plain_writer(write_fn):
    def write(text):
        return write_fn(strip_ansi(text))
    return write


def format_tape(state: RunState, radius: int = 4) -> str:
    cells = []
    for index, value in state.tape.window(state.pointer, radius):
        text = f"{value:>3}"
        cells.append(f"\033[1;97m[{text}]\033[0m" if index == state.pointer else f" {text} ")
    return ''.join(cells)

def format_program(program: list[Instruction], ip: int, width=24) -> str:
    half = width // 2
    start = max(0, ip - half)
    before = ''.join(op.symbol for op in program[start:ip])
    current = program[ip].symbol if ip < len(program) else '∅'
    after = ''.join(op.symbol for op in program[ip+1:ip+1+half])
    return f"{before:>{half}}\033[36m{current}\033[0m{after:<{half}}"

def show_state(program: list[Instruction], state: RunState, file=None):
    file = sys.stderr if file is None else file
    print(f"\033[90m{state.steps:>5} :\033[0m {state.ip:>4} {format_program(program, state.ip)}"
          f" \033[36m <=> \033[0m {state.pointer:>4} {format_tape(state)}", file=file)
