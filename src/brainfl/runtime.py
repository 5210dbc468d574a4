## brainfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io
from pathlib import Path
from typing import BinaryIO

from .types import Instruction, RunState
from .errors import SourceUnavailable
from .parser import parse as _parse, minify as _minify
from .interpreter import interpret, interpret_step


class Runtime:
    """Minimal runtime facade focused on embedding: load, parse and execute programs."""

    # Loading ─────────────────────────────────────────────────────────────────────────────────
    def load(self, path: str | Path) -> tuple[str, list[Instruction]]:
        source = self.read_source(path)
        return source, self.parse(source, filename=str(path))

    def read_source(self, path: str | Path) -> str:
        try:
            return Path(path).read_text(encoding='utf-8', errors='replace')
        except OSError as exc:
            raise SourceUnavailable(f"Cannot read `{path}`: {exc.strerror or exc}", filename=str(path)) from exc

    def parse(self, source: str, filename: str | None = None) -> list[Instruction]:
        return _parse(source, filename=filename)

    def minify(self, source: str) -> str:
        return _minify(self.parse(source))

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def execute(self, program: list[Instruction], input: BinaryIO, output: BinaryIO,
                verbosity: int = 0, stats: dict | None = None) -> RunState:
        return interpret(program, input, output, verbosity=verbosity, stats=stats)

    def do_step(self, program: list[Instruction], state: RunState, input: BinaryIO, output: BinaryIO) -> RunState:
        return interpret_step(program, state, input, output)

    def run(self, source: str, input: bytes | str = b'', filename: str | None = None,
            verbosity: int = 0, stats: dict | None = None) -> bytes:
        if isinstance(input, str): input = input.encode('utf-8')
        output = io.BytesIO()
        self.execute(self.parse(source, filename=filename), io.BytesIO(input), output,
                     verbosity=verbosity, stats=stats)
        return output.getvalue()
