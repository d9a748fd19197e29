"""Tests for telemetry spans and the @traced decorator."""

from collections.abc import Generator

import pytest

from lpfcalc.services.design import DesignService
from lpfcalc.services.result import ServiceResult
from lpfcalc.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture
def _telemetry_on() -> Generator[None]:
    enable_telemetry()
    yield
    disable_telemetry()


class TestSpan:
    def test_duration_zero_until_ended(self) -> None:
        span = Span(name="x")
        assert span.duration_ms == 0.0
        span.end()
        assert span.duration_ms >= 0.0

    def test_to_dict_omits_empty_fields(self) -> None:
        span = Span(name="x")
        span.end()
        assert set(span.to_dict()) == {"name", "duration_ms"}

    def test_to_dict_nests_children(self) -> None:
        parent = Span(name="parent")
        child = Span(name="child")
        child.annotate("order", 2)
        parent.children.append(child)
        data = parent.to_dict()
        assert data["children"][0]["name"] == "child"
        assert data["children"][0]["annotations"] == {"order": 2}


class TestDisabled:
    def test_no_meta_when_disabled(self) -> None:
        result = DesignService().design(2, 10.0, 0.01)
        assert result.meta is None

    def test_trace_span_yields_none(self) -> None:
        with trace_span("anything") as span:
            assert span is None

    def test_no_current_span(self) -> None:
        assert get_current_span() is None


@pytest.mark.usefixtures("_telemetry_on")
class TestEnabled:
    def test_design_span_tree(self) -> None:
        result = DesignService().design(2, 10.0, 0.01)
        tree = result.meta["telemetry"]  # type: ignore[index]
        assert tree["name"] == "DesignService.design"
        (child,) = tree["children"]
        assert child["name"] == "designer.design"
        assert child["annotations"] == {"order": 2}

    def test_analyze_span_tree(self) -> None:
        result = DesignService().analyze(1, 10.0, 0.01, frequencies=[1.0, 2.0])
        tree = result.meta["telemetry"]  # type: ignore[index]
        names = [c["name"] for c in tree["children"]]
        assert names == ["designer.design", "analysis"]
        assert tree["children"][1]["annotations"] == {"points": 2}

    def test_failure_still_traced(self) -> None:
        result = DesignService().design(1, 0.0, 0.01)
        assert not result.ok
        assert "telemetry" in result.meta  # type: ignore[operator]

    def test_trace_span_without_parent_yields_none(self) -> None:
        with trace_span("orphan") as span:
            assert span is None

    def test_non_result_return_untouched(self) -> None:
        @traced
        def plain() -> int:
            return 42

        assert plain() == 42

    def test_preserves_existing_meta(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="x", meta={"keep": True})

        result = op()
        assert result.meta is not None
        assert result.meta["keep"] is True
        assert "telemetry" in result.meta

    def test_span_reset_after_exception(self) -> None:
        @traced
        def boom() -> ServiceResult:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            boom()
        assert get_current_span() is None
