"""Shared pytest fixtures and configuration for the dcl-cli test suite.

Guidelines
----------
* No internet access in any test.
* httpx is driven through ``httpx.MockTransport``; web3 is faked at the
  contract boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the developer's environment or ``.env``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Iterator[None]:
    """Strip ``DCL_*`` variables, forced colors, and any local ``.env``."""
    for key in list(os.environ):
        if key.startswith("DCL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("DCL_ANALYTICS_ENABLED", "false")
    monkeypatch.chdir(tmp_path)

    yield

    # configure_logging() detaches the package logger from the root one.
    package_logger = logging.getLogger("dcl_cli")
    package_logger.handlers = []
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
