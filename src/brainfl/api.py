## brainfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Embedding surface: one shared runtime, its entry points bound as plain functions.
#

from .types import Instruction, Tape, RunState
from .errors import BrainError, BrainParseError, UnmatchedClose, UnmatchedOpen, SourceUnavailable, InputExhausted
from .runtime import Runtime

_RUNTIME = Runtime()

load = _RUNTIME.load
read_source = _RUNTIME.read_source
parse = _RUNTIME.parse
minify = _RUNTIME.minify
execute = _RUNTIME.execute
do_step = _RUNTIME.do_step
run = _RUNTIME.run
