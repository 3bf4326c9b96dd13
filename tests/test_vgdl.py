from collections import deque

import pytest

from oscigraph.errors import VgdlError
from oscigraph.vgdl import State


def test_builtin_commands_present():
    names = set(State().env)
    assert names == {
        "draw", "define", "sequence", "load", "scale", "move", "row", "col", "text",
    }


def test_run_draw():
    assert State().run("draw 0 0 1 1 ;") == [[(0.0, 0.0), (1.0, 1.0)]]


def test_run_splits_on_any_ascii_whitespace():
    state = State()
    assert state.run("draw\t0 0\r\n1\f1 ;\n") == state.run("draw 0 0 1 1 ;")


def test_run_empty_program():
    with pytest.raises(VgdlError, match="No command to run"):
        State().run("   \n")


def test_run_unknown_command():
    with pytest.raises(VgdlError) as info:
        State().run("foo")
    assert str(info.value) == "Command 'foo' not found"


def test_run_extra_words():
    with pytest.raises(VgdlError) as info:
        State().run("draw 0 0 1 1 ; more")
    assert str(info.value) == "Extra words after running command: more"


def test_errors_carry_command_context():
    with pytest.raises(VgdlError) as info:
        State().run("move 1 1 draw 0 0 ;")
    assert str(info.value) == (
        "In command move: In command draw: Lines cannot have less than 2 points"
    )


def test_define_then_use_in_sequence():
    state = State()
    result = state.run("sequence define g draw 0 0 1 1 ; g g .")
    assert result == state.run("draw 0 0 1 1 , 0 0 1 1 ;")


def test_definitions_persist_across_runs():
    state = State()
    assert state.run("define g draw 0 0 1 1 ;") == []
    assert state.run("g") == state.run("draw 0 0 1 1 ;")


def test_redefine_replaces_binding():
    state = State()
    state.run("define g draw 0 0 1 1 ;")
    state.run("define g draw 2 2 3 3 ;")
    assert state.run("g") == state.run("draw 2 2 3 3 ;")


def test_exec_consumes_only_its_arguments():
    state = State()
    args = deque("draw 0 0 1 1 ; leftover words".split())
    assert state.exec(args) == [[(0.0, 0.0), (1.0, 1.0)]]
    assert list(args) == ["leftover", "words"]


def test_exec_empty_args():
    with pytest.raises(VgdlError, match="No command to run"):
        State().exec(deque())


def test_load_error_context(tmp_path):
    bad = tmp_path / "bad.vgdl"
    bad.write_text("draw 0 0 ;", encoding="utf-8")
    with pytest.raises(VgdlError) as info:
        State().run(f"load {bad}")
    message = str(info.value)
    assert message.startswith(f"In command load: While loading {bad}: In command draw")
    assert message.endswith("Lines cannot have less than 2 points")