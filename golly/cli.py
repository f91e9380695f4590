"""Command-line interface for managing and chatting with an Ollama server."""

from __future__ import annotations

import argparse
import json
import subprocess
import sys
import time
from collections.abc import Sequence
from pathlib import Path

import requests
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown

from golly.client import Ollama, OllamaError
from golly.config import DEFAULT_CONFIG_PATH, DEFAULT_HOST, DEFAULT_MODEL, DEFAULT_PORT, Config, load_config
from golly.models import ChatMessage, ChatRequest, ChatResponseChunk
from golly.ui import UI
from golly.utils import print_struct

ROOT_QUESTION = "how can i write a function in python that prints 'hello world'?"
_CHAT_DELAY = 2.0


def _run_root(args: argparse.Namespace) -> int:
    model = args.root_model or DEFAULT_MODEL
    host = args.root_host or DEFAULT_HOST
    port = args.root_port or DEFAULT_PORT
    print("model: " + model)
    print("host: " + host)
    print("port: " + port)

    body = ChatRequest(
        model=model,
        stream=True,
        messages=[ChatMessage(role="user", content=ROOT_QUESTION)],
    )
    try:
        response = requests.post(
            f"http://{host}:{port}/api/chat", json=body.to_dict(), stream=True
        )
    except requests.RequestException as exc:
        print("Error making POST request:", exc)
        return 0

    console = Console()
    text = ""
    with response:
        try:
            for raw in response.iter_lines():
                line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
                if not line:
                    print("Received empty line, skipping...")
                    continue
                try:
                    chunk = ChatResponseChunk.from_dict(json.loads(line))
                except ValueError as exc:
                    print(f"JSON unmarshal error: {exc} ({line!r})")
                    continue
                text += chunk.message.content
                console.clear()
                console.print(Markdown(text))
                if chunk.done:
                    break
        except requests.RequestException as exc:
            print(f"Scanner err: {exc}", file=sys.stderr)
            return 1

    print("\nStreaming complete.")
    return 0


def _run_chat(args: argparse.Namespace) -> int:
    query = " ".join(args.words) if args.words else args.query
    print("model: " + args.model)
    print("host: " + args.host)
    print("port: " + args.port)
    print("query: " + query)

    time.sleep(_CHAT_DELAY)

    ui = UI(console=Console())
    client = Ollama(args.host, args.port)
    while True:
        ui.clear()
        chunks = client.stream_chat(args.model, [ChatMessage(role="user", content=query)])
        ui.print_ai(chunks)
        ui.print_end_of_message()
        reply = ui.scan()
        if reply is None:
            break
        ui.print_user(reply)
        query = reply
    return 0


def _run_create(args: argparse.Namespace) -> int:
    config: Config = args.config
    client = Ollama(config.host, config.port)
    try:
        response = client.create(args.name, args.from_model, args.system)
    except OllamaError as exc:
        print("Error creating custom model:", exc)
        return 0
    print(f"Created successfully \n{response.status}", end="")
    return 0


def _run_delete(args: argparse.Namespace) -> int:
    if not args.model:
        print("Model name is required. Use --model to specify the model to delete.")
        return 0
    config: Config = args.config
    client = Ollama(config.host, config.port)
    try:
        client.delete(args.model)
    except OllamaError as exc:
        print("Error deleting model:", exc)
        return 0
    print(f"Model '{args.model}' deleted successfully.")
    return 0


def _run_list(args: argparse.Namespace) -> int:
    config: Config = args.config
    client = Ollama(config.host, config.port)
    try:
        listing = client.list_models()
    except OllamaError as exc:
        print("Error listing models:", exc)
        return 0
    print("Available models:")
    if not listing.models:
        print("No models found.")
        return 0
    for model in listing.models:
        print_struct(model)
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    try:
        subprocess.Popen(["ollama", "serve", "&"])
    except OSError as exc:
        print("Error starting ollama server:", exc, file=sys.stderr)
        return 0
    print("Ollama server started successfully.", file=sys.stderr)
    return 0


def _announcer(name: str):
    def run(args: argparse.Namespace) -> int:
        print(f"{name} called")
        return 0

    return run


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand, using *config* for defaults."""
    parser = argparse.ArgumentParser(
        prog="golly",
        description=(
            "Golly is a command-line interface for managing and interacting "
            "with Ollama with style in the terminal."
        ),
    )
    parser.set_defaults(handler=_run_root, config=config)
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    parser.add_argument(
        "-m", "--model", dest="root_model", default=DEFAULT_MODEL,
        help="Model to use for Ollama (default: llama3.2)",
    )
    parser.add_argument(
        "-p", "--port", dest="root_port", default=DEFAULT_PORT,
        help="Port to use for Ollama server (default: 11434)",
    )
    parser.add_argument(
        "-H", "--host", dest="root_host", default=DEFAULT_HOST,
        help="Host to use for Ollama server (default: localhost)",
    )

    commands = parser.add_subparsers(title="commands")

    chat = commands.add_parser("chat", help="Chat with Ollama")
    chat.set_defaults(handler=_run_chat)
    chat.add_argument("words", nargs="*", help="Message to send")
    chat.add_argument("--query", default="Hello!", help="Query to send to the chat model")
    chat.add_argument("-m", "--model", default=config.model, help="Model to use for the chat")
    chat.add_argument("-H", "--host", default=config.host, help="Host of the Ollama instance")
    chat.add_argument("-p", "--port", default=config.port, help="Port of the Ollama instance")

    create = commands.add_parser("create", help="Create a new custom model")
    create.set_defaults(handler=_run_create)
    create.add_argument(
        "-n", "--name", required=True, default=config.model + "-custom",
        help="Name of the custom model",
    )
    create.add_argument(
        "-f", "--from", dest="from_model", required=True, default=config.model,
        help="Base model to create the custom model from",
    )
    create.add_argument(
        "-s", "--system", required=True, default="",
        help="System prompt for the custom model",
    )

    delete = commands.add_parser("delete", help="Delete a model")
    delete.set_defaults(handler=_run_delete)
    delete.add_argument("-m", "--model", required=True, help="Name of the model to delete")

    listing = commands.add_parser("list", help="List available models")
    listing.set_defaults(handler=_run_list)

    serve = commands.add_parser("serve", help="Start ollama server")
    serve.set_defaults(handler=_run_serve)

    for name in ("info", "setup", "update", "version"):
        sub = commands.add_parser(name)
        sub.set_defaults(handler=_announcer(name))

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    env_file = Path(".env")
    if not env_file.is_file():
        print("Error loading .env file", file=sys.stderr)
        return 1
    load_dotenv(env_file)

    config = load_config(DEFAULT_CONFIG_PATH)
    parser = build_parser(config)
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    return args.handler(args) or 0


if __name__ == "__main__":
    sys.exit(main())