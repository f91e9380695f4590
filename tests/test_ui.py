import io

import pytest
from rich.console import Console

from golly.client import OllamaError
from golly.models import ChatResponseChunk, Message
from golly.ui import UI


def _console():
    return Console(file=io.StringIO(), force_terminal=False, width=80)


def _chunk(text, done=False):
    return ChatResponseChunk(model="m", message=Message(role="assistant", content=text), done=done)


def _output(ui):
    return ui.console.file.getvalue()


def _failing_stream():
    yield _chunk("partial")
    raise OllamaError("boom")


def test_print_ai_accumulates_content():
    ui = UI(console=_console())
    ui.print_ai([_chunk("Hello "), _chunk(""), _chunk("world", done=True)])
    assert ui.full_response == "Hello world"
    assert "Hello world" in _output(ui)


def test_print_ai_replaces_emoji_codes():
    ui = UI(console=_console())
    ui.print_ai([_chunk("hi :smi"), _chunk("le:")])
    assert ui.full_response.startswith("hi ")
    assert ":smile:" not in ui.full_response


def test_print_ai_reports_stream_error():
    ui = UI(console=_console())
    ui.print_ai(_failing_stream())
    assert ui.full_response == "partial"
    assert "Error: boom" in _output(ui)


def test_print_user_appends_query():
    ui = UI(console=_console())
    ui.print_user("hello")
    ui.print_user("again")
    assert ui.query.startswith("\n\n")
    assert ui.query.endswith("again\n")
    assert ui.query.count("\n\n") == 2


def test_scan_returns_line_and_resets_state():
    ui = UI(console=_console(), input_func=lambda: "  what is go?  ")
    ui.full_response = "old"
    assert ui.scan() == "what is go?"
    assert ui.full_response == ""
    assert "Type your message" in _output(ui)


@pytest.mark.parametrize("line", ["exit", " exit "])
def test_scan_exit_quits(line):
    ui = UI(console=_console(), input_func=lambda: line)
    assert ui.scan() is None


def test_scan_end_of_input_quits():
    def eof():
        raise EOFError

    ui = UI(console=_console(), input_func=eof)
    assert ui.scan() is None


def test_clear_resets_state():
    ui = UI(console=_console())
    ui.full_response = "answer"
    ui.query = "question"
    ui.clear()
    assert (ui.full_response, ui.query) == ("", "")


def test_print_end_of_message_draws_separator():
    ui = UI(console=_console())
    ui.print_end_of_message()
    assert "─" in _output(ui)