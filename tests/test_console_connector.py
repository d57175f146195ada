# tests/test_console_connector.py

from __future__ import annotations

import io

from duke_bot.connectors.console_connector import run_console_loop
from duke_bot.core.state import AppState


def test_console_runs_until_bye(state: AppState) -> None:
    stdin = io.StringIO("todo read book\n\nlist\nbye\ntodo never read\n")
    stdout = io.StringIO()

    run_console_loop(state, input_stream=stdin, output=stdout)

    out = stdout.getvalue()
    assert "1. [T][ ] read book" in out
    assert "Bye." in out
    assert len(state.task_list) == 1


def test_console_stops_at_eof_and_reports_errors(state: AppState) -> None:
    stdin = io.StringIO("nonsense\n  todo padded  \n")
    stdout = io.StringIO()

    run_console_loop(state, input_stream=stdin, output=stdout)

    out = stdout.getvalue()
    assert "OOPS!!!" in out
    assert state.task_list.get(1).description == "padded"
    assert ">>> " not in out


def test_console_survives_handler_crash(state: AppState, monkeypatch) -> None:
    import duke_bot.connectors.console_connector as console

    def boom(state, line):
        raise RuntimeError("boom")

    monkeypatch.setattr(console, "handle_line", boom)
    stdout = io.StringIO()

    run_console_loop(state, input_stream=io.StringIO("list\n"), output=stdout)

    assert "Internal error" in stdout.getvalue()
