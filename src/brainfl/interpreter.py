## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import BinaryIO

from .types import Instruction, RunState
from .errors import InputExhausted
from .formatting import show_state


def interpret_step(program: list[Instruction], state: RunState, input: BinaryIO, output: BinaryIO) -> RunState:
    op = program[state.ip]

    match op.kind:
        case Instruction.INCREMENT:
            state.cell = state.cell + 1
        case Instruction.DECREMENT:
            state.cell = state.cell - 1
        case Instruction.MOVE_RIGHT:
            state.pointer += 1
            state.tape.ensure(state.pointer)
        case Instruction.MOVE_LEFT:
            state.pointer -= 1
            state.tape.ensure(state.pointer)
        case Instruction.PRINT:
            output.write(bytes((state.cell,)))
        case Instruction.INPUT:
            output.flush()
            data = input.read(1)
            if not data:
                raise InputExhausted(f"Instruction {state.ip} `,` read past the end of input.",
                                     ip=state.ip, pointer=state.pointer)
            state.cell = data[0]
        case Instruction.LOOP_OPEN:
            if state.cell == 0:
                state.ip = op.target
                return state
        case Instruction.LOOP_CLOSE:
            if state.cell != 0:
                state.ip = op.target
                return state

    state.ip += 1
    return state


def interpret(program: list[Instruction], input: BinaryIO, output: BinaryIO, *, state=None, verbosity=0, stats=None) -> RunState:
    state = RunState() if state is None else state

    while state.ip < len(program):
        if verbosity == 2 or (verbosity == 1 and (program[state.ip].is_loop or state.steps == 0)):
            show_state(program, state)

        state = interpret_step(program, state, input, output)
        state.steps += 1

    output.flush()
    if verbosity > 0:
        show_state(program, state)
    if stats is not None:
        stats['steps'] = stats.get('steps', 0) + state.steps
        stats['cells'] = len(state.tape)

    return state
