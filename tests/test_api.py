## brainfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

import pytest

import brainfl.api as B


def test_run_string_program():
    assert B.run("++.") == bytes([2])


def test_run_with_text_input():
    assert B.run(",.", "A") == b"A"


def test_run_without_output():
    assert B.run("+[-]") == b''


def test_run_rejects_bare_close():
    with pytest.raises(B.UnmatchedClose):
        B.run("]")


def test_run_input_exhausted():
    with pytest.raises(B.InputExhausted):
        B.run(",")


def test_errors_share_base_class():
    assert issubclass(B.UnmatchedOpen, B.BrainError)
    assert issubclass(B.SourceUnavailable, OSError)
    assert issubclass(B.InputExhausted, EOFError)


def test_load_reads_and_parses_file(tmp_path):
    path = tmp_path / "two.bf"
    path.write_text("plus plus ++ print .\n", encoding="utf-8")
    source, program = B.load(path)
    assert source.startswith("plus")
    assert B.minify(source) == "++."
    assert program[0].meta['filename'] == str(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(B.SourceUnavailable) as exc_info:
        B.load(tmp_path / "missing.bf")
    assert exc_info.value.filename.endswith("missing.bf")


def test_execute_with_streams_and_stats():
    program = B.parse(",[.,]")
    output, stats = io.BytesIO(), {}
    # Echo until a zero byte terminates the loop.
    state = B.execute(program, io.BytesIO(b"hi\x00"), output, stats=stats)
    assert output.getvalue() == b"hi"
    assert state.ip == len(program)
    assert stats['steps'] == state.steps


def test_do_step_from_fresh_state():
    program = B.parse("<+")
    state = B.do_step(program, B.RunState(), io.BytesIO(), io.BytesIO())
    assert (state.pointer, state.ip) == (-1, 1)


def test_run_encodes_text_input_as_utf8():
    assert B.run(",.,.,.", "€") == "€".encode("utf-8")
    assert B.run(",.,.", "é") == b"\xc3\xa9"
