"""Tests for the configuration loader."""

import pytest

from hooksmith.core import load_config, load_config_from_dict
from hooksmith.errors import ConfigNotFoundError, ConfigParseError


def test_load_valid_config(write_config):
    """Hooks and command order are preserved."""
    path = write_config(
        "pre-commit:\n"
        "  commands:\n"
        "    - ruff check .\n"
        "    - pytest -q\n"
        "pre-push:\n"
        "  commands:\n"
        "    - pytest\n"
    )

    config = load_config(path)

    assert set(config.hook_names) == {"pre-commit", "pre-push"}
    assert config.get_hook("pre-commit").commands == ["ruff check .", "pytest -q"]
    assert config.source_file == str(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_directory_is_not_a_config(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        load_config(tmp_path)


def test_malformed_yaml(write_config):
    path = write_config("pre-commit:\n  commands: [unterminated\n")

    with pytest.raises(ConfigParseError):
        load_config(path)


@pytest.mark.parametrize("content", ["- pre-commit\n- pre-push\n", "just a string\n", ""])
def test_top_level_must_be_mapping(write_config, content):
    path = write_config(content)

    with pytest.raises(ConfigParseError):
        load_config(path)


def test_duplicate_hook_is_rejected(write_config):
    path = write_config(
        "pre-commit:\n"
        "  commands: [a]\n"
        "pre-commit:\n"
        "  commands: [b]\n"
    )

    with pytest.raises(ConfigParseError, match="duplicate"):
        load_config(path)


def test_merge_key_reuses_commands(write_config):
    path = write_config(
        "pre-commit: &base\n"
        "  commands: [pytest]\n"
        "pre-push:\n"
        "  <<: *base\n"
        "post-merge:\n"
        "  <<: *base\n"
        "  commands: [ruff check .]\n"
    )

    config = load_config(path)

    assert config.get_hook("pre-push").commands == ["pytest"]
    assert config.get_hook("post-merge").commands == ["ruff check ."]


def test_missing_commands_field():
    with pytest.raises(ConfigParseError, match="commands"):
        load_config_from_dict({"pre-commit": {"cmds": ["true"]}})


@pytest.mark.parametrize("hook", [None, ["true"], "true"])
def test_hook_must_be_mapping(hook):
    with pytest.raises(ConfigParseError):
        load_config_from_dict({"pre-commit": hook})


@pytest.mark.parametrize("commands", ["true", None, {"a": 1}])
def test_commands_must_be_list(commands):
    with pytest.raises(ConfigParseError):
        load_config_from_dict({"pre-commit": {"commands": commands}})


def test_commands_must_be_strings():
    with pytest.raises(ConfigParseError, match="#1"):
        load_config_from_dict({"pre-commit": {"commands": ["true", 42]}})


def test_hook_name_must_be_string():
    with pytest.raises(ConfigParseError):
        load_config_from_dict({123: {"commands": []}})


def test_unknown_fields_are_ignored():
    config = load_config_from_dict(
        {"pre-commit": {"commands": ["true"], "description": "lint", "parallel": True}}
    )

    assert config.get_hook("pre-commit").commands == ["true"]


def test_empty_command_list_is_valid():
    config = load_config_from_dict({"pre-commit": {"commands": []}})

    assert config.get_hook("pre-commit").is_noop


def test_hook_names_are_not_validated_on_load():
    """Unknown git hook names load fine; validation is a separate step."""
    config = load_config_from_dict({"not-a-real-hook": {"commands": ["true"]}})

    assert "not-a-real-hook" in config
