# tests/conftest.py
# -*- coding: utf-8 -*-
from typing import Callable, Iterable

import pytest

from tesseract_installer.config_models import AppSettings

SERVICE_FILE_CONTENT = """\
[Unit]
Description=tesseract-olap server
After=network.target

[Service]
User=tesseract
Environment=TESSERACT_DATABASE_URL=127.0.0.1:9000
Environment=TESSERACT_SCHEMA_FILEPATH=schema.json
ExecStart=/usr/local/bin/tesseract-olap --address 0.0.0.0:7777
Restart=always

[Install]
WantedBy=multi-user.target
"""


@pytest.fixture
def service_file(tmp_path):
    """A copy of the packaged unit file in a temporary directory."""
    path = tmp_path / "tesseract-olap.service"
    path.write_text(SERVICE_FILE_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point HOME at a temporary directory."""
    home = tmp_path / "home" / "operator"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def app_settings(service_file):
    """AppSettings targeting the temporary unit file."""
    return AppSettings(service_file_path=service_file)


def scripted_input(answers: Iterable[str]) -> Callable[[str], str]:
    """An input() replacement returning `answers` in order, then EOF."""
    remaining = iter(answers)

    def _input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError(prompt)

    return _input


@pytest.fixture
def make_input():
    return scripted_input


@pytest.fixture
def service_file_content():
    return SERVICE_FILE_CONTENT
