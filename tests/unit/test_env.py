from __future__ import annotations

import os
from pathlib import Path

import pytest

from streamscribe.config.env import get_int, load_env_file

_VAR = "STREAMSCRIBE_TEST_WINDOW"


@pytest.fixture
def clean_var(monkeypatch: pytest.MonkeyPatch) -> None:
    # Set then delete so the variable is removed again on teardown.
    monkeypatch.setenv(_VAR, "placeholder")
    monkeypatch.delenv(_VAR)


def test_env_file_in_working_directory_is_loaded(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_var: None
) -> None:
    (tmp_path / ".env").write_text(f"{_VAR}=7\n")
    monkeypatch.chdir(tmp_path)

    assert load_env_file() is True
    assert get_int(_VAR, 5) == 7


def test_env_file_does_not_override_existing_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_var: None
) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text(f"{_VAR}=7\n")
    monkeypatch.setenv(_VAR, "3")

    load_env_file(str(env_file))
    assert os.environ[_VAR] == "3"


@pytest.mark.parametrize("raw", ["", "  ", "not-a-number"])
def test_get_int_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(_VAR, raw)
    assert get_int(_VAR, 5) == 5
