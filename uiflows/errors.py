"""Error taxonomy for UI workflows.

Locator and assertion failures stay Playwright's own ``TimeoutError`` and
``AssertionError``; the classes here cover what the helper layer itself
decides.
"""

from __future__ import annotations


class UIFlowError(Exception):
    """Base class for errors raised by uiflows helpers."""


class WaitTimeoutError(UIFlowError, TimeoutError):
    """A polled condition did not become true before its deadline."""

    def __init__(self, message: str, timeout: float, attempts: int):
        super().__init__(f"{message} (gave up after {timeout:.1f}s, {attempts} attempts)")
        self.timeout = timeout
        self.attempts = attempts


class ColumnLayoutError(UIFlowError, AssertionError):
    """Declared column rules do not match the table's observed columns."""


class RowLookupError(UIFlowError, AssertionError):
    """Base for failures to resolve exactly one table row by key."""

    def __init__(self, key: str, matches: int):
        self.key = key
        self.matches = matches
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Expected exactly one row named {self.key!r}, found {self.matches}"


class RowNotFoundError(RowLookupError):
    """No row matched the lookup key."""

    def __init__(self, key: str):
        super().__init__(key, 0)

    def _describe(self) -> str:
        return f"No row named {self.key!r} found"


class DuplicateRowError(RowLookupError):
    """More than one row matched the lookup key."""

    def _describe(self) -> str:
        return f"{self.matches} rows named {self.key!r} found; refusing to mutate an ambiguous row"


class MissingCredentialsError(UIFlowError):
    """Admin credentials were not provided by the environment."""
