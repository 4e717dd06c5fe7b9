"""
Prometheus Metrics — renderer observability.

Exposes counters and a histogram for:
- Extraction stage failures (a stage degraded to its default result)
- Extraction stage latency
- Sanitizer fail-closed events
- Extracted items per section
- Clipboard copy outcomes

Usage
-----
    from safe_email.metrics import record_stage_failure, timed_stage

    with timed_stage("financial"):
        items = extract_financial_data(text)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

STAGE_FAILURES: Counter = Counter(
    "email_extraction_stage_failures_total",
    "Extraction stages that raised and fell back to their default result",
    ["stage"],
)

STAGE_LATENCY: Histogram = Histogram(
    "email_extraction_stage_seconds",
    "Processing time per extraction stage in seconds",
    ["stage"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

SANITIZER_FAIL_CLOSED: Counter = Counter(
    "email_sanitizer_fail_closed_total",
    "Bodies escaped to inert text because the allow-list could not be guaranteed",
    ["reason"],
)

ITEMS_EXTRACTED: Counter = Counter(
    "email_extracted_items_total",
    "Items extracted per section",
    ["section"],
)

OUTPUT_CONTRACT_VIOLATIONS: Counter = Counter(
    "email_output_contract_violations_total",
    "Extraction results that failed schema validation",
)

CLIPBOARD_COPIES: Counter = Counter(
    "email_clipboard_copies_total",
    "Copy-to-clipboard actions by outcome",
    ["outcome"],
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_stage_failure(stage: str) -> None:
    """Increment the failure counter for *stage*."""
    STAGE_FAILURES.labels(stage=stage).inc()


def record_fail_closed(reason: str) -> None:
    SANITIZER_FAIL_CLOSED.labels(reason=reason).inc()


def record_items_extracted(section: str, count: int) -> None:
    if count > 0:
        ITEMS_EXTRACTED.labels(section=section).inc(count)


def record_contract_violation() -> None:
    OUTPUT_CONTRACT_VIOLATIONS.inc()


def record_copy(outcome: str) -> None:
    """Increment the clipboard counter; *outcome* is 'success' or 'failure'."""
    CLIPBOARD_COPIES.labels(outcome=outcome).inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("normalize"):
            text = normalize(html)
    """
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
