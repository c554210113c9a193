# tests/test_cli_handler.py
# -*- coding: utf-8 -*-
import pytest

from tesseract_installer.cli_handler import Prompter
from tesseract_installer.config_models import AppSettings


@pytest.mark.parametrize("answer", ["y", "Y", "  y  "])
def test_confirm_accepts_affirmative(answer, make_input):
    prompter = Prompter(AppSettings(), input_func=make_input([answer]))

    assert prompter.confirm("Proceed?") is True


@pytest.mark.parametrize("answer", ["", "n", "N", "yes", "yy", "maybe"])
def test_confirm_treats_everything_else_as_no(answer, make_input):
    prompter = Prompter(AppSettings(), input_func=make_input([answer]))

    assert prompter.confirm("Proceed?") is False


def test_confirm_defaults_to_no_on_eof(caplog, make_input):
    prompter = Prompter(AppSettings(), input_func=make_input([]))

    assert prompter.confirm("Proceed?") is False
    assert "defaulting to 'N'" in caplog.text


def test_confirm_renders_prompt_with_default_hint():
    seen = []

    def fake_input(prompt):
        seen.append(prompt)
        return "n"

    Prompter(AppSettings(), input_func=fake_input).confirm("Proceed?")

    assert seen[0].endswith("Proceed? (y/N): ")


def test_ask_strips_whitespace(make_input):
    prompter = Prompter(
        AppSettings(), input_func=make_input(["  10.0.0.5:9000 \n"])
    )

    assert prompter.ask("Database address (host:port)") == "10.0.0.5:9000"


def test_ask_raises_on_eof(make_input):
    prompter = Prompter(AppSettings(), input_func=make_input([]))

    with pytest.raises(EOFError):
        prompter.ask("Schema file path")


def test_ask_eof_names_the_prompt(caplog, make_input):
    prompter = Prompter(AppSettings(), input_func=make_input([]))

    with pytest.raises(EOFError, match="Schema file path") as excinfo:
        prompter.ask("Schema file path")

    assert str(excinfo.value) == "No input given for prompt: 'Schema file path'"
    assert "No user input (EOF) for prompt: 'Schema file path'" in caplog.text
