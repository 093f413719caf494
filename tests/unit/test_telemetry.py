"""Span exporter selection and disabled telemetry."""

import pytest
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from searchhub.shared.telemetry.telemetry import TelemetryConfig, build_span_exporter


def test_none_exporter_disables_export() -> None:
    assert build_span_exporter("none") is None


@pytest.mark.parametrize(
    ("exporter_type", "endpoint"),
    [("console", None), ("otlp", None), ("zipkin", "http://collector:4317")],
)
def test_falls_back_to_console(exporter_type: str, endpoint: str | None) -> None:
    assert isinstance(build_span_exporter(exporter_type, endpoint), ConsoleSpanExporter)


def test_disabled_telemetry_sets_nothing_up() -> None:
    telemetry = TelemetryConfig("searchhub", "0.1.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    assert telemetry.tracer_provider is None
    telemetry.shutdown()
