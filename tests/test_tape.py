## brainfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from brainfl.types import Tape, RunState


def test_fresh_tape_has_only_origin():
    tape = Tape()
    assert len(tape) == 1
    assert tape.extent == (0, 0)
    assert tape.read(0) == 0


def test_unvisited_cells_read_zero():
    tape = Tape()
    assert tape.read(100) == 0
    assert tape.read(-100) == 0
    assert len(tape) == 1


def test_growth_is_one_cell_per_step_each_direction():
    tape = Tape()
    for i in range(1, 4):
        tape.ensure(i)
    for i in range(-1, -3, -1):
        tape.ensure(i)
    assert tape.extent == (-2, 3)
    assert len(tape.forward) == 4 and len(tape.backward) == 2


def test_ensure_existing_cell_is_noop():
    tape = Tape()
    tape.ensure(1)
    tape.write(1, 9)
    tape.ensure(1)
    tape.ensure(0)
    assert tape.read(1) == 9 and len(tape) == 2


def test_ensure_refuses_to_skip_cells():
    with pytest.raises(IndexError):
        Tape().ensure(2)


def test_negative_region_is_independent():
    tape = Tape()
    tape.ensure(-1)
    tape.write(-1, 7)
    assert tape.backward[0] == 7
    assert tape.read(0) == 0
    assert tape.read(-1) == 7


def test_write_wraps_modulo_256():
    tape = Tape()
    tape.write(0, 256)
    assert tape.read(0) == 0
    tape.write(0, -1)
    assert tape.read(0) == 255


def test_window_covers_unmaterialized_neighbours():
    tape = Tape()
    tape.write(0, 3)
    assert tape.window(0, radius=1) == [(-1, 0), (0, 3), (1, 0)]


def test_run_state_cell_follows_pointer():
    state = RunState()
    state.cell = 5
    state.pointer = -1
    state.tape.ensure(-1)
    assert state.cell == 0
    state.cell = 300
    assert state.tape.read(-1) == 44
    assert (state.ip, state.steps) == (0, 0)
