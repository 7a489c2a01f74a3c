"""Shared fixtures for the behavioral-rules test suite."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_rules_env(monkeypatch):
    """Keep RULES_* variables from the outer shell out of Settings."""
    for key in list(os.environ):
        if key.startswith("RULES_"):
            monkeypatch.delenv(key)
