"""Unit tests for the signal handler module in dirtree CLI."""

import os
import signal
from unittest.mock import patch

import pytest

from dirtree.cli import signal_handler as signal_module
from dirtree.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling

pytestmark = pytest.mark.skipif(not signal_module.HAS_SIGPIPE, reason="SIGPIPE not available on this platform")


@pytest.fixture
def mock_signal():
    with patch("signal.signal", autospec=True, return_value=signal.SIG_DFL) as mock:
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """A SignalHandler separate from the module singleton."""
    return SignalHandler()


def test_initial_state(fresh_signal_handler):
    assert fresh_signal_handler.received == set()
    assert not fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() is None


def test_install_remembers_previous_handlers(fresh_signal_handler, mock_signal):
    fresh_signal_handler.install()

    mock_signal.assert_any_call(signal.SIGPIPE, fresh_signal_handler.handle)
    mock_signal.assert_any_call(signal.SIGINT, fresh_signal_handler.handle)
    assert fresh_signal_handler._previous == {signal.SIGPIPE: signal.SIG_DFL, signal.SIGINT: signal.SIG_DFL}


def test_sigpipe_exits_141(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle(signal.SIGPIPE, None)

    assert fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() == 141
    mock_signal.assert_called_once_with(signal.SIGPIPE, signal.SIG_DFL)


def test_sigint_restores_previous_handler(fresh_signal_handler, mock_signal):
    previous = object()
    fresh_signal_handler._previous[signal.SIGINT] = previous

    fresh_signal_handler.handle(signal.SIGINT, None)

    assert fresh_signal_handler.exit_code() == 130
    mock_signal.assert_called_once_with(signal.SIGINT, previous)


def test_sigpipe_takes_precedence(fresh_signal_handler, mock_signal):
    fresh_signal_handler.handle(signal.SIGINT, None)
    fresh_signal_handler.handle(signal.SIGPIPE, None)
    assert fresh_signal_handler.exit_code() == 141


def test_setup_signal_handling_installs_singleton(mock_signal):
    with patch.object(signal_module, "signal_handler", SignalHandler()) as handler:
        setup_signal_handling()

    mock_signal.assert_any_call(signal.SIGPIPE, handler.handle)
    mock_signal.assert_any_call(signal.SIGINT, handler.handle)


def test_cleanup_without_signal_does_nothing():
    with patch.object(signal_module, "signal_handler", SignalHandler()), patch.object(signal_module.os, "dup2") as dup2:
        cleanup()
    dup2.assert_not_called()


def test_cleanup_after_signal_redirects_stdout(fresh_signal_handler):
    fresh_signal_handler.received.add(signal.SIGPIPE)
    with (
        patch.object(signal_module, "signal_handler", fresh_signal_handler),
        patch.object(signal_module.os, "open", return_value=123) as mock_open,
        patch.object(signal_module.os, "dup2") as dup2,
        patch.object(signal_module.sys, "stdout") as stdout,
    ):
        stdout.fileno.return_value = 1
        cleanup()

    mock_open.assert_called_once_with(os.devnull, os.O_WRONLY)
    dup2.assert_called_once_with(123, 1)
