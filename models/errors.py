"""
Error taxonomy for the careers acceptance suite.

Fatal errors abort the current scenario; behave still runs the
after_scenario hook, which tears the browser session down.
"""


class CareersSuiteError(Exception):
    """Base error for everything raised by the suite itself."""


class ParseError(CareersSuiteError):
    """Job description markup could not be parsed at all."""


class NavigationError(CareersSuiteError):
    """A required link target was missing or empty."""


class WaitTimeoutError(CareersSuiteError, TimeoutError):
    """A bounded wait on the browser elapsed without its condition."""


class DataShapeError(CareersSuiteError):
    """The embedded structured data is missing a required field."""


class AssertionMismatch(CareersSuiteError, AssertionError):
    """Expected and actual values differ. Reported as a failed scenario."""

    def __init__(self, label: str, expected, actual, message: str = None) -> None:
        self.label = label
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"❌ {label} mismatch! expected: {expected!r}, actual: {actual!r}"
        )
