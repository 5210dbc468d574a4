## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# brainfl — Interpreter for the eight-instruction byte tape language.
#

import os
import sys
import time
from dataclasses import dataclass

import click

from .errors import BrainError, BrainParseError, SourceUnavailable, InputExhausted
from .parser import format_parse_error_context
from .formatting import plain_writer

from . import api


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip() not in ('', '0')


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    stats: bool
    plain: bool

    @classmethod
    def from_environ(cls) -> "RuntimeConfig":
        raw = os.environ.get('BRAINFL_VERBOSE', '').strip() or '0'
        verbose = int(raw) if raw.isdigit() else 0
        return cls(verbose=min(verbose, 2), stats=_env_flag('BRAINFL_STATS'), plain=_env_flag('BRAINFL_PLAIN'))


class BrainRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.plain = config.plain
        self.runtime = api._RUNTIME
        self.total_stats = {'steps': 0, 'start': time.time()} if config.stats else None

        if self.plain:
            sys.stderr.write = plain_writer(sys.stderr.write)

    def _fatal_error(self, message: str, detail: str, exc_type: str, context: str = '') -> int:
        print(f'\033[30;43m {message} \033[0m {detail} (Exception: \033[33m{exc_type}\033[0m)\n{context}', file=sys.stderr)
        return 1

    def _handle_exception(self, exc: BrainError, filename: str, source: str | None) -> int:
        if isinstance(exc, BrainParseError):
            context = format_parse_error_context(filename, exc.line, exc.column, source)
            context += f"\n\033[90m{exc}\033[0m\n"
            return self._fatal_error("SYNTAX ERROR.", f"Parsing `\033[97m{filename}\033[0m` caused a problem!", type(exc).__name__, context)
        if isinstance(exc, SourceUnavailable):
            return self._fatal_error("FILE ERROR.", f"Loading `\033[97m{filename}\033[0m` failed: {exc}", type(exc).__name__)
        if isinstance(exc, InputExhausted):
            detail = f"Instruction \033[1;97m{exc.ip}\033[0m at cell \033[1;97m{exc.pointer}\033[0m read past the end of input."
            return self._fatal_error("INPUT ERROR.", detail, type(exc).__name__)
        return self._fatal_error("RUNTIME ERROR.", str(exc), type(exc).__name__)

    def run_file(self, filename: str) -> int:
        source = None
        try:
            source = self.runtime.read_source(filename)
            program = self.runtime.parse(source, filename=filename)
            self.runtime.execute(program, sys.stdin.buffer, sys.stdout.buffer,
                                 verbosity=self.verbose, stats=self.total_stats)
        except BrainError as exc:
            sys.stdout.buffer.flush()
            return self._handle_exception(exc, filename, source)
        return 0

    def finalize(self, status: int) -> int:
        if self.total_stats:
            elapsed_time = time.time() - self.total_stats['start']
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m", file=sys.stderr)
            print(f"step\t\033[97m{self.total_stats['steps']:,}\033[0m", file=sys.stderr)
            print(f"cells\t\033[97m{self.total_stats.get('cells', 0):,}\033[0m", file=sys.stderr)
            print(f"time\t\033[97m{elapsed_time:.3f}s\033[0m", file=sys.stderr)
        return status


@click.command(context_settings={'help_option_names': []})
@click.argument('script', type=click.Path(dir_okay=False))
@click.pass_context
def cli(ctx: click.Context, script: str) -> None:
    runner = BrainRunner(RuntimeConfig.from_environ())
    ctx.exit(runner.finalize(runner.run_file(script)))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='brainfl')


if __name__ == "__main__":
    main()
