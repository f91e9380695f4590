from golly.config import Config, load_config


def test_missing_file_gives_defaults(tmp_path, capsys):
    config = load_config(str(tmp_path / "absent.yml"))
    assert config == Config(host="localhost", port="11434", model="llama3.2")
    out = capsys.readouterr().out
    assert "Error reading config file:" in out
    assert "Using default configuration: host: localhost port: 11434 model: llama3.2" in out


def test_full_file_is_loaded(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("host: server\nport: '9000'\nmodel: mistral\n")
    config = load_config(str(path))
    assert config == Config(host="server", port="9000", model="mistral")
    out = capsys.readouterr().out
    assert "Configuration loaded successfully: host: server port: 9000 model: mistral" in out


def test_partial_file_filled_with_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("model: mistral\n")
    config = load_config(str(path))
    assert config.model == "mistral"
    assert config.host == "localhost"
    assert config.port == "11434"


def test_numeric_port_read_as_text(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("port: 8080\n")
    assert load_config(str(path)).port == "8080"


def test_empty_file_gives_defaults(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("")
    assert load_config(str(path)) == Config()
    assert "Configuration loaded successfully" in capsys.readouterr().out


def test_invalid_yaml_gives_defaults(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("host: [unclosed\n")
    assert load_config(str(path)) == Config()
    assert "Error parsing config file:" in capsys.readouterr().out


def test_non_mapping_document_gives_defaults(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("- a\n- b\n")
    assert load_config(str(path)) == Config()
    assert "Error parsing config file:" in capsys.readouterr().out


def test_nested_value_is_rejected(tmp_path, capsys):
    path = tmp_path / "config.yml"
    path.write_text("host:\n  name: x\n")
    assert load_config(str(path)) == Config()
    assert "Error parsing config file:" in capsys.readouterr().out