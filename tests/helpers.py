"""Helpers for inspecting registry snapshots."""

from prometheus_client.parser import text_string_to_metric_families

from postfix_exporter.metrics import MetricsRegistry

SeriesValues = dict[tuple[str, frozenset[tuple[str, str]]], float]


def series_values(registry: MetricsRegistry) -> SeriesValues:
    """Parse a registry snapshot into series -> value."""
    values: SeriesValues = {}
    for family in text_string_to_metric_families(registry.snapshot().decode()):
        for sample in family.samples:
            if sample.name.endswith("_created"):
                continue
            key = (sample.name, frozenset(sample.labels.items()))
            assert key not in values, f"Duplicate series {key}"
            values[key] = sample.value
    return values
