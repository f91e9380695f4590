# golly

`golly` is a command-line interface for managing and chatting with an
Ollama server. Replies are streamed and rendered as Markdown in the
terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Start-up and configuration

`golly` expects a `.env` file in the current directory. If there is none,
it prints `Error loading .env file` and exits with status 1. If there is
one, its variables are loaded into the environment.

Connection settings are read from `config.yml` in the current directory.
All keys are optional. Missing or empty keys fall back to the defaults shown
here:

```yaml
host: localhost
port: "11434"
model: llama3.2
```

If the file cannot be read or parsed, `golly` prints the error and uses the
defaults.

## Usage

Run `golly` with no subcommand to send a fixed example question ("how can i
write a function in python that prints 'hello world'?") to the server. The
streamed answer is rendered as it arrives:

```
golly --model llama3.2 --host localhost --port 11434
```

Start an interactive chat. Words after the options form the first message;
without them, `--query` is used, and it defaults to `Hello!`. Type `exit`
to quit:

```
golly chat --model llama3.2 Hello there
```

The defaults for `chat --model`, `--host` and `--port` come from
`config.yml`.

List the models installed on the server:

```
golly list
```

Create a custom model from a base model with a system prompt. `--name`,
`--from` and `--system` are all required:

```
golly create --name llama3.2-custom --from llama3.2 --system "You are a helpful assistant."
```

Delete a model:

```
golly delete --model llama3.2-custom
```

`list`, `create` and `delete` connect to the host and port from
`config.yml`.

Start a local Ollama server in the background. This needs `ollama` on your
`PATH`:

```
golly serve
```

## Library use

`golly.client.Ollama` talks to the server directly:

```python
from golly.client import Ollama
from golly.models import ChatMessage

client = Ollama("localhost", "11434")
for chunk in client.stream_chat("llama3.2", [ChatMessage(role="user", content="Hi")]):
    print(chunk.message.content, end="")
```

`stream_chat` yields `ChatResponseChunk` objects and stops after the chunk
marked `done`. Lines it cannot decode are reported and skipped.

`Ollama.list_models()` returns a `ListResponse`. `Ollama.create(name,
from_model, system)` returns a `CreateResponse`. `Ollama.delete(model)`
returns nothing. All three raise `golly.client.OllamaError` when the request
fails or the server answers with a status other than 200.

Other helpers:

- `golly.config.load_config(path)` reads the settings into a `Config`.
- `golly.utils.format_struct(obj)` renders any dataclass instance field by
  field, and `print_struct(obj)` prints that rendering.
- `golly.ui.UI` draws a chat on a `rich` console and reads the user's
  input.

## Limitations

- The chat does not keep a conversation history. Each turn sends only the
  latest message.
- `info`, `setup`, `update` and `version` are placeholders. Each one only
  prints `<name> called`.
- The `-t/--toggle` option of the bare command is accepted but has no
  effect.