"""Shared pytest fixtures for pubky-app-specs tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from pubky_app_specs.config.logging import LOGGER_NAME
from pubky_app_specs.domain.owner import OwnerId
from pubky_app_specs.services.telemetry import disable_telemetry

USER_ID = "operrr8wsbpr3ue9d4qj41ge1kcc6r7fdiy6o3ugjrrhi4y77rdo"
OTHER_USER_ID = "pxnu33x7jtpx9ar1ytsi4yxbp6a5o36gwhffs8zoxmbuptici1jy"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def user_id() -> str:
    """A valid owner public key."""
    return USER_ID


@pytest.fixture
def other_user_id() -> str:
    """A second valid owner public key (follow/mute target)."""
    return OTHER_USER_ID


@pytest.fixture
def owner(user_id: str) -> OwnerId:
    return OwnerId(user_id)


@pytest.fixture
def post_uri(user_id: str) -> str:
    """URI of an existing post of :func:`user_id`."""
    return f"pubky://{user_id}/pub/pubky.app/posts/0032SSN7Q4EVG"


@pytest.fixture
def _isolated_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no config file override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PUBKY_SPECS_CONFIG", raising=False)
    monkeypatch.delenv("PUBKY_SPECS_OWNER", raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    specs = logging.getLogger(LOGGER_NAME)
    specs_level = specs.level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    specs.setLevel(specs_level)
    disable_telemetry()
