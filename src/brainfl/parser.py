## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Instruction, KINDS
from .errors import UnmatchedClose, UnmatchedOpen


GRAMMAR = r"""start: INSTRUCTION*

INSTRUCTION: /[-+<>.,\[\]]/

// Anything outside the instruction alphabet is a comment.
COMMENT: /[^-+<>.,\[\]]+/
%ignore COMMENT
"""

_LARK = None

def _get_parser() -> lark.Lark:
    global _LARK
    if _LARK is None:
        _LARK = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="basic")
    return _LARK


def parse(source: str, filename=None) -> list[Instruction]:
    """Translate source text into instructions with each bracket pointing at its partner."""
    tree = _get_parser().parse(source)

    program: list[Instruction] = []
    pending: list[int] = []
    for token in tree.children:
        kind, here = KINDS[token.value], len(program)
        meta = {'filename': filename, 'line': token.line, 'column': token.column}

        if kind == Instruction.LOOP_OPEN:
            pending.append(here)
            program.append(Instruction(kind, None, meta))
        elif kind == Instruction.LOOP_CLOSE:
            if not pending:
                raise UnmatchedClose("Found `]` with no opening `[` to match.",
                                     filename=filename, line=token.line, column=token.column, token=']', index=here)
            start = pending.pop()
            program[start] = Instruction(Instruction.LOOP_OPEN, here, program[start].meta)
            program.append(Instruction(kind, start, meta))
        else:
            program.append(Instruction(kind, None, meta))

    if pending:
        meta = program[pending[-1]].meta
        raise UnmatchedOpen(f"Reached end of source with {len(pending)} `[` still open.",
                            filename=filename, line=meta['line'], column=meta['column'], token='[', index=pending[-1])
    return program


def minify(program: list[Instruction]) -> str:
    return ''.join(op.symbol for op in program)


def format_parse_error_context(filename, line: int, column: int, source: str, radius: int = 2) -> str:
    """Show the lines around a parse error with a caret under the offending bracket."""
    lines = source.splitlines()
    first, last = max(1, line - radius), min(len(lines), line + radius)
    result = [f"\033[97m  File \"{filename}\", line {line}, column {column}\033[0m"]

    for number in range(first, last + 1):
        colour = '\033[97m' if number == line else '\033[90m'
        result.append(f"{colour}{number:>5} |\033[0m {lines[number-1]}")
        if number == line:
            result.append(' ' * (7 + column) + '\033[1;33m^\033[0m')
    return '\n' + '\n'.join(result) + '\n'
