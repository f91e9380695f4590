"""Request and response records exchanged with an Ollama server."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    """Return *data* as a mapping; ``None`` counts as an empty object."""
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"cannot decode {type(data).__name__} into {what}")
    return data


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    """Fetch *key* from *data*, checking its JSON type strictly."""
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(
            f"field {key!r}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass
class ChatMessage:
    """One message of a chat conversation, as sent to the server."""

    role: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class Message:
    """A message as it appears in a streamed chat response."""

    role: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Message:
        data = _as_mapping(data, "Message")
        return cls(
            role=_get(data, "role", str, ""),
            content=_get(data, "content", str, ""),
        )


@dataclass
class ChatRequest:
    """Body of a request to the chat endpoint."""

    model: str
    stream: bool = False
    messages: list[ChatMessage] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "stream": self.stream,
            "messages": [message.to_dict() for message in self.messages],
        }


@dataclass
class ChatResponseChunk:
    """One line of a streamed chat response."""

    model: str = ""
    message: Message = field(default_factory=Message)
    done: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> ChatResponseChunk:
        data = _as_mapping(data, "ChatResponseChunk")
        return cls(
            model=_get(data, "model", str, ""),
            message=Message.from_dict(data.get("message")),
            done=_get(data, "done", bool, False),
        )


@dataclass
class CreateRequest:
    """Body of a request to create a custom model."""

    name: str
    from_model: str
    system: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "from": self.from_model, "system": self.system}


@dataclass
class CreateResponse:
    """Server reply to a create request."""

    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CreateResponse:
        data = _as_mapping(data, "CreateResponse")
        return cls(status=_get(data, "status", str, ""))


@dataclass
class DeleteRequest:
    """Body of a request to delete a model."""

    model: str

    def to_dict(self) -> dict[str, Any]:
        return {"model": self.model}


@dataclass
class Model:
    """A model known to the server."""

    name: str = ""
    model: str = ""
    modified_at: str = ""
    size: int = 0
    digest: str = ""
    parameter_size: int = 0
    quantization: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Model:
        data = _as_mapping(data, "Model")
        return cls(
            name=_get(data, "name", str, ""),
            model=_get(data, "model", str, ""),
            modified_at=_get(data, "modified_at", str, ""),
            size=_get(data, "size", int, 0),
            digest=_get(data, "digest", str, ""),
            parameter_size=_get(data, "parameter_size", int, 0),
            quantization=_get(data, "quantization", str, ""),
        )


@dataclass
class ListResponse:
    """Server reply listing the available models."""

    models: list[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ListResponse:
        data = _as_mapping(data, "ListResponse")
        items = _get(data, "models", list, [])
        return cls(models=[Model.from_dict(item) for item in items])