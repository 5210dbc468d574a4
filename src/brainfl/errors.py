## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class BrainError(Exception):
    """Base class for all errors raised while loading or running a program."""
    pass

class BrainParseError(BrainError, ValueError):
    def __init__(self, message, *, filename=None, line=None, column=None, token=None, index=None):
        super().__init__(message)
        self.filename = filename
        self.line = line
        self.column = column
        self.token = token
        self.index = index

class UnmatchedClose(BrainParseError):
    pass

class UnmatchedOpen(BrainParseError):
    pass


class SourceUnavailable(BrainError, OSError):
    def __init__(self, message, *, filename=None):
        super().__init__(message)
        self.filename = filename


class InputExhausted(BrainError, EOFError):
    """Runtime failure when `,` executes after the input stream has ended."""
    def __init__(self, message: str = "", *, ip: int = None, pointer: int = None):
        super().__init__(message)
        self.ip = ip
        self.pointer = pointer
