"""Tests for telemetry primitives: Span and @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from pubky_app_specs.services.result import ServiceResult
from pubky_app_specs.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    telemetry_enabled,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "annotations" not in d

    def test_to_dict_with_annotations(self) -> None:
        span = Span(name="test", annotations={"kind": "post"})
        span.end()
        assert span.to_dict()["annotations"] == {"kind": "post"}


class TestTraced:
    def test_disabled_is_passthrough(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        assert op().meta is None

    def test_enabled_injects_meta(self) -> None:
        enable_telemetry()

        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op", meta={"existing": 1})

        result = op()
        assert result.meta is not None
        assert result.meta["existing"] == 1
        assert result.meta["telemetry"]["name"].endswith("op")
        assert result.meta["telemetry"]["duration_ms"] >= 0

    def test_enabled_non_result_untouched(self) -> None:
        enable_telemetry()

        @traced
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == 5

    def test_preserves_name(self) -> None:
        @traced
        def parse_uri() -> None:
            """Docstring."""

        assert parse_uri.__name__ == "parse_uri"
        assert parse_uri.__doc__ == "Docstring."

    def test_toggle(self) -> None:
        assert telemetry_enabled() is False
        enable_telemetry()
        assert telemetry_enabled() is True
        disable_telemetry()
        assert telemetry_enabled() is False
