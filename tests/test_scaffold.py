"""Tests for the starter configuration generator."""

import yaml

from hooksmith.core import load_config_from_dict
from hooksmith.core.scaffold import generate_hook_config, render_config


def test_known_hook_has_examples():
    block = generate_hook_config("pre-push")

    assert block.startswith("pre-push:\n  commands:\n")
    assert '    - echo "Running pre-push checks..."\n' in block
    assert "# - pytest" in block


def test_generic_hook():
    block = generate_hook_config("post-rewrite")

    assert 'echo "Running post-rewrite hook..."' in block
    assert "# Add your commands here" in block


def test_rendered_config_loads():
    content = render_config(["pre-commit", "commit-msg", "post-update"])

    config = load_config_from_dict(yaml.safe_load(content))

    assert config.hook_names == ["pre-commit", "commit-msg", "post-update"]
    for name in config.hook_names:
        assert len(config.get_hook(name).commands) == 1
