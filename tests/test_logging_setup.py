"""Tests for log level resolution."""

import argparse
import logging

from neon_flap.logging_setup import ENV_LEVEL, resolve_level


def _args(quiet=False, basic_debug=False):
    return argparse.Namespace(quiet=quiet, basic_debug=basic_debug)


def test_default_is_info(monkeypatch):
    monkeypatch.delenv(ENV_LEVEL, raising=False)
    assert resolve_level() == logging.INFO
    assert resolve_level(_args()) == logging.INFO


def test_cli_flags(monkeypatch):
    monkeypatch.delenv(ENV_LEVEL, raising=False)
    assert resolve_level(_args(quiet=True)) == logging.WARNING
    assert resolve_level(_args(basic_debug=True)) == logging.DEBUG


def test_env_wins_over_flags(monkeypatch):
    monkeypatch.setenv(ENV_LEVEL, "error")
    assert resolve_level(_args(basic_debug=True)) == logging.ERROR


def test_unknown_env_level_ignored(monkeypatch):
    monkeypatch.setenv(ENV_LEVEL, "loud")
    assert resolve_level(_args(quiet=True)) == logging.WARNING


def test_env_level_aliases(monkeypatch):
    monkeypatch.setenv(ENV_LEVEL, " warn ")
    assert resolve_level() == logging.WARNING
    monkeypatch.setenv(ENV_LEVEL, "Debug")
    assert resolve_level(_args(quiet=True)) == logging.DEBUG
