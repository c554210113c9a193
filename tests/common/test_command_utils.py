# tests/common/test_command_utils.py
# -*- coding: utf-8 -*-
import logging
import subprocess
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from tesseract_installer.common.command_utils import (
    get_symbols,
    log_installer,
    run_command,
    run_elevated_command,
)
from tesseract_installer.config import SYMBOLS_DEFAULT
from tesseract_installer.config_models import AppSettings


@pytest.fixture
def app_settings():
    """Fixture to provide a basic AppSettings object."""
    return AppSettings(
        log_prefix="test_prefix",
        symbols={
            "warning": "!",
            "gear": "⚙️",
            "error": "❌",
        },
    )


@pytest.fixture
def mock_logger():
    """Fixture to create a mock logger for testing."""
    return MagicMock(spec=logging.Logger)


def test_get_symbols_falls_back_to_defaults():
    assert get_symbols(None) == SYMBOLS_DEFAULT


def test_log_installer_levels_and_prefix(mock_logger, app_settings):
    log_installer("hello", "warning", mock_logger, app_settings)
    log_installer("done", "success", mock_logger, app_settings)

    mock_logger.warning.assert_called_once_with(
        "test_prefix hello", exc_info=False
    )
    mock_logger.info.assert_called_once_with(
        "test_prefix done", exc_info=False
    )


def test_run_command_success(mocker: MockerFixture, mock_logger, app_settings):
    mock_run = mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess(
            ["id", "tesseract"], 0, stdout="uid=999(tesseract)", stderr=""
        ),
    )

    result = run_command(
        ["id", "tesseract"],
        app_settings,
        capture_output=True,
        current_logger=mock_logger,
    )

    assert result.returncode == 0
    mock_run.assert_called_once_with(
        ["id", "tesseract"],
        check=True,
        capture_output=True,
        text=True,
    )


def test_run_command_failure_logs_and_reraises(
    mocker: MockerFixture, mock_logger, app_settings
):
    mocker.patch(
        "subprocess.run",
        side_effect=subprocess.CalledProcessError(
            9, ["useradd", "tesseract"], stderr="useradd: user exists"
        ),
    )

    with pytest.raises(subprocess.CalledProcessError):
        run_command(
            ["useradd", "tesseract"], app_settings, current_logger=mock_logger
        )

    error_messages = [c.args[0] for c in mock_logger.error.call_args_list]
    assert any("failed (rc 9)" in m for m in error_messages)
    assert any("useradd: user exists" in m for m in error_messages)


def test_run_command_not_found(mocker: MockerFixture, mock_logger, app_settings):
    mocker.patch(
        "subprocess.run",
        side_effect=FileNotFoundError(2, "No such file", "useradd"),
    )

    with pytest.raises(FileNotFoundError):
        run_command(["useradd", "x"], app_settings, current_logger=mock_logger)

    assert "Command not found: useradd" in mock_logger.error.call_args.args[0]


def test_run_elevated_command_adds_sudo_when_not_root(
    mocker: MockerFixture, app_settings
):
    mocker.patch(
        "tesseract_installer.common.command_utils.os.geteuid", return_value=1000
    )
    mock_run_command = mocker.patch(
        "tesseract_installer.common.command_utils.run_command"
    )

    run_elevated_command(["useradd", "tesseract"], app_settings)

    assert mock_run_command.call_args.args[0] == ["sudo", "useradd", "tesseract"]


def test_run_elevated_command_no_sudo_as_root(
    mocker: MockerFixture, app_settings
):
    mocker.patch(
        "tesseract_installer.common.command_utils.os.geteuid", return_value=0
    )
    mock_run_command = mocker.patch(
        "tesseract_installer.common.command_utils.run_command"
    )

    run_elevated_command(["useradd", "tesseract"], app_settings)

    assert mock_run_command.call_args.args[0] == ["useradd", "tesseract"]


def test_run_elevated_command_checks_and_streams_output(
    mocker: MockerFixture, mock_logger, app_settings
):
    mocker.patch(
        "tesseract_installer.common.command_utils.os.geteuid", return_value=0
    )
    mock_run = mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess(["useradd", "tesseract"], 0),
    )

    run_elevated_command(
        ["useradd", "tesseract"], app_settings, current_logger=mock_logger
    )

    mock_run.assert_called_once_with(
        ["useradd", "tesseract"],
        check=True,
        capture_output=False,
        text=True,
    )
