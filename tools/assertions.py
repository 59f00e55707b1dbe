"""
Assertion helpers — compare expected and actual values and raise
AssertionMismatch with a readable message when they differ.
"""

from typing import Optional

from models.errors import AssertionMismatch
from models.job import JobDetailRecord, JobListingSummary


def _clean(value) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def expect_present(label: str, value) -> None:
    if value is None:
        raise AssertionMismatch(label, "a value", None, f"❌ {label} not found!")


def expect_equal(label: str, expected, actual) -> None:
    """Exact comparison of trimmed strings (punctuation included)."""
    if _clean(expected) != _clean(actual):
        raise AssertionMismatch(label, expected, actual)


def expect_contains(label: str, text: str, keyword: str) -> None:
    """Case-insensitive substring check."""
    expect_present(label, text)
    if keyword.lower() not in text.lower():
        raise AssertionMismatch(
            label, keyword, text,
            f"❌ {label} does not contain keyword '{keyword}'! actual: {text!r}",
        )


def compare_listing_to_detail(summary: JobListingSummary, detail: JobDetailRecord) -> list[AssertionMismatch]:
    """
    Check the listing card against the detail page field by field.

    Returns:
        One AssertionMismatch per differing field (empty when they agree).
    """
    mismatches = []
    for label, expected, actual in (
        ("Job title", summary.title, detail.title),
        ("Job location", summary.location, detail.location),
        ("Job ID", summary.identifier, detail.identifier),
    ):
        try:
            expect_equal(label, expected, actual)
        except AssertionMismatch as e:
            mismatches.append(e)
    return mismatches
