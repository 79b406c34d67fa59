"""Prometheus metrics for revision value resolution."""

from prometheus_client import Counter

# Outcome of each attempted foreign key dereference
REFERENCE_RESOLUTIONS = Counter(
    "revisionist_reference_resolutions_total",
    "Reference resolutions by outcome",
    labelnames=["outcome"],
)

# Values rendered from the raw stored value after a failed reference attempt
VALUE_FALLBACKS = Counter(
    "revisionist_value_fallbacks_total",
    "Values that fell back to raw display",
    labelnames=["reason"],
)


def record_reference_outcome(outcome: str) -> None:
    """Count one reference resolution outcome."""
    REFERENCE_RESOLUTIONS.labels(outcome=outcome).inc()


def record_value_fallback(reason: str) -> None:
    """Count one raw-value fallback."""
    VALUE_FALLBACKS.labels(reason=reason).inc()
