"""HTTP client for the Ollama server API."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator

import requests

from golly.models import (
    ChatMessage,
    ChatRequest,
    ChatResponseChunk,
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    ListResponse,
)


class OllamaError(Exception):
    """Raised when a request to the Ollama server fails."""


class Ollama:
    """A connection to one Ollama server."""

    def __init__(self, host: str, port: str) -> None:
        self.url = f"http://{host}:{port}"
        self.session = requests.Session()

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(method, self.url + path, **kwargs)
        except requests.RequestException as exc:
            raise OllamaError(f"request failed: {exc}") from exc

    def stream_chat(
        self, model: str, messages: Iterable[ChatMessage]
    ) -> Iterator[ChatResponseChunk]:
        """Send a chat request and yield response chunks until the last one.

        Lines that cannot be decoded are reported and skipped.
        """
        body = ChatRequest(model=model, stream=True, messages=list(messages))
        response = self._send(
            "POST", "/api/chat/", json=body.to_dict(), stream=True
        )
        with response:
            lines = response.iter_lines()
            while True:
                try:
                    raw = next(lines)
                except StopIteration:
                    return
                except requests.RequestException as exc:
                    raise OllamaError(str(exc)) from exc
                line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
                if not line:
                    continue
                try:
                    chunk = ChatResponseChunk.from_dict(json.loads(line))
                except ValueError:
                    print(f"Skipping invalid line: {line!r}")
                    continue
                yield chunk
                if chunk.done:
                    return

    def create(self, name: str, from_model: str, system: str) -> CreateResponse:
        """Create a custom model from a base model and a system prompt."""
        body = CreateRequest(name=name, from_model=from_model, system=system)
        with self._send("POST", "/api/create", json=body.to_dict()) as response:
            if response.status_code != 200:
                raise OllamaError(
                    f"failed to create model, status code: {response.status_code}"
                )
            try:
                result = CreateResponse.from_dict(response.json())
            except ValueError as exc:
                raise OllamaError(f"failed to decode response: {exc}") from exc
        print(f"Model created successfully: {result.status}")
        return result

    def list_models(self) -> ListResponse:
        """Return the models available on the server."""
        with self._send("GET", "/api/tags") as response:
            if response.status_code != 200:
                raise OllamaError(
                    f"failed to list models, status code: {response.status_code}"
                )
            try:
                return ListResponse.from_dict(response.json())
            except ValueError as exc:
                raise OllamaError(f"failed to decode response: {exc}") from exc

    def delete(self, model: str) -> None:
        """Delete a model from the server."""
        body = DeleteRequest(model=model)
        with self._send("DELETE", "/api/delete", json=body.to_dict()) as response:
            if response.status_code != 200:
                raise OllamaError(
                    f"failed to delete model, status code: {response.status_code}"
                )