"""Terminal client for managing and chatting with an Ollama server."""

__version__ = "0.1.0"