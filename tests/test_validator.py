"""Tests for the hook name validator."""

import pytest

from hooksmith.core import GIT_HOOKS, HookNameValidator, load_config_from_dict
from hooksmith.errors import InvalidHookNameError


def _config(*names):
    return load_config_from_dict({name: {"commands": []} for name in names})


def test_standard_hook_table():
    assert len(GIT_HOOKS) == 28
    assert len(set(GIT_HOOKS)) == 28
    assert GIT_HOOKS[0] == "applypatch-msg"
    assert GIT_HOOKS[-1] == "post-index-change"
    assert "pre-commit" in GIT_HOOKS
    assert "proc-receive" in GIT_HOOKS


def test_validate_partitions_all_names():
    validator = HookNameValidator()

    report = validator.validate(_config("pre-commit", "bogus", "pre-push", "also-bogus"))

    assert report.valid_count == 2
    assert sorted(report.invalid_names) == ["also-bogus", "bogus"]
    assert not report.is_valid


def test_validate_strict_reports_every_invalid_name():
    validator = HookNameValidator()

    with pytest.raises(InvalidHookNameError) as excinfo:
        validator.validate_strict(_config("pre-commit", "bogus", "also-bogus"))

    assert sorted(excinfo.value.names) == ["also-bogus", "bogus"]
    assert "bogus" in str(excinfo.value)
    assert "also-bogus" in str(excinfo.value)


def test_validate_strict_passes_for_valid_config():
    report = HookNameValidator().validate_strict(_config("pre-commit", "commit-msg"))

    assert report.is_valid
    assert report.valid_count == 2


def test_custom_hook_set():
    validator = HookNameValidator(known_hooks=["pre-commit", "future-hook"])

    report = validator.validate(_config("future-hook", "pre-push"))

    assert report.valid_names == ["future-hook"]
    assert report.invalid_names == ["pre-push"]


def test_empty_config_is_valid():
    assert HookNameValidator().validate(_config()).is_valid
