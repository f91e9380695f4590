"""Terminal display of a chat conversation."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from rich.console import Console
from rich.emoji import Emoji
from rich.markdown import Markdown

from golly.client import OllamaError
from golly.models import ChatResponseChunk

PROMPT = "## Type your message (or 'exit' to quit): "


class UI:
    """Renders streamed answers as Markdown and reads the user's messages."""

    def __init__(
        self,
        console: Console | None = None,
        input_func: Callable[[], str] = input,
    ) -> None:
        self.console = console if console is not None else Console()
        self.input_func = input_func
        self.full_response = ""
        self.query = ""

    def _show(self, text: str) -> None:
        self.console.clear()
        self.console.print(Markdown(text))

    def print_ai(self, chunks: Iterable[ChatResponseChunk]) -> None:
        """Show the answer, redrawing it as each chunk arrives."""
        try:
            for chunk in chunks:
                if not chunk.message.content:
                    continue
                self.full_response = Emoji.replace(
                    self.full_response + chunk.message.content
                )
                self._show(self.full_response)
        except OllamaError as exc:
            self.console.print(f"Error: {exc}", markup=False)

    def print_user(self, query: str) -> None:
        """Record the user's message and redraw the screen."""
        self.query += "\n\n" + Emoji.replace(":user: ") + query + "\n"
        self._show(self.full_response)

    def scan(self) -> str | None:
        """Prompt for the next message; return None when the user quits."""
        self.console.print(Markdown(PROMPT))
        self.query = ""
        self.full_response = ""
        try:
            line = self.input_func()
        except EOFError:
            return None
        self.query = line.strip()
        if self.query == "exit":
            return None
        return self.query

    def clear(self) -> None:
        """Forget the current exchange and clear the screen."""
        self.full_response = ""
        self.query = ""
        self.console.clear()

    def print_end_of_message(self) -> None:
        """Draw a separator after an answer."""
        self.console.print(Markdown("---"))