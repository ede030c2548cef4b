"""
Data-grid inspection.

Admin listings render each record as a CSS-grid row of ``div`` cells. A
:class:`ColumnSpec` names a column and says how to find its cell inside a
row; :class:`TableInspector` turns rows into ``{label: value}`` mappings and
resolves a row by key.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from playwright.sync_api import Locator, Page

from uiflows.errors import ColumnLayoutError, DuplicateRowError, RowNotFoundError, WaitTimeoutError
from uiflows.waits import wait_until

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSpec:
    """
    Extraction rule for one column.

    Attributes:
        label: Column name used as the mapping key.
        index: Position among the elements matched by ``selector``.
        selector: CSS selector evaluated inside the row.
    """

    label: str
    index: int
    selector: str = "div"


class TableInspector:
    """
    Reads rows of a grid identified by a row-marker selector.

    Rows are processed in DOM order and columns in declared order.
    """

    def __init__(self, page: Page, row_selector: str):
        """
        Initialize the inspector.

        Args:
            page: Playwright page instance.
            row_selector: CSS selector matching every data row.
        """
        self.page = page
        self.row_selector = row_selector

    @property
    def rows(self) -> Locator:
        """Locator matching all data rows."""
        return self.page.locator(self.row_selector)

    def row_count(self) -> int:
        """Return the number of rows currently rendered."""
        return self.rows.count()

    def cell_text(self, row: Locator, column: ColumnSpec) -> str:
        """
        Return the trimmed text of one cell.

        A row with fewer matching elements than ``column.index`` yields an
        empty string instead of failing.
        """
        cells = row.locator(column.selector)
        if column.index >= cells.count():
            return ""
        return (cells.nth(column.index).text_content() or "").strip()

    def read_row(self, row: Locator, columns: Sequence[ColumnSpec]) -> dict[str, str]:
        """Map each declared column label to its value in ``row``."""
        return {column.label: self.cell_text(row, column) for column in columns}

    def read_rows(self, columns: Sequence[ColumnSpec]) -> list[dict[str, str]]:
        """
        Read every row and log its values.

        Args:
            columns: Column rules in the order they should be read.

        Returns:
            One mapping per row, in DOM order.
        """
        count = self.row_count()
        logger.info("Total Rows: %d", count)
        records = []
        for i in range(count):
            logger.info("--- Row %d ---", i + 1)
            record = self.read_row(self.rows.nth(i), columns)
            for label, value in record.items():
                logger.info("%s: %s", label, value)
            records.append(record)
        return records

    def observed_column_count(self, cell_selector: str = "div") -> int | None:
        """Return how many cells the first rendered row has, or None if no row is rendered."""
        if self.row_count() == 0:
            return None
        return self.rows.nth(0).locator(cell_selector).count()

    @staticmethod
    def validate_columns(
        columns: Sequence[ColumnSpec],
        header_labels: Sequence[str],
        unread: Sequence[str] = (),
        observed: int | None = None,
    ) -> None:
        """
        Check declared column rules against the table's header labels.

        Every declared label must be a header, and together with the
        ``unread`` headers (columns deliberately not extracted, such as
        images or action buttons) they must cover all headers. When
        ``observed`` is given it is the cell count of a rendered row, and it
        must equal the number of headers.

        Raises:
            ColumnLayoutError: On any mismatch.
        """
        declared = [column.label for column in columns]
        unknown = [label for label in declared if label not in header_labels]
        if unknown:
            raise ColumnLayoutError(f"Declared columns not present in header: {unknown}")
        expected = len(header_labels) - len(unread)
        if len(set(declared)) != expected:
            raise ColumnLayoutError(
                f"Declared {len(set(declared))} columns but table shows {expected} "
                f"readable headers ({list(header_labels)}, unread {list(unread)})"
            )
        if observed is not None and observed != len(header_labels):
            raise ColumnLayoutError(
                f"Rows render {observed} cells but {len(header_labels)} headers are declared"
            )

    def matching_rows(self, column: ColumnSpec, value: str) -> list[Locator]:
        """Return every row whose ``column`` cell equals ``value``."""
        return [
            self.rows.nth(i)
            for i in range(self.row_count())
            if self.cell_text(self.rows.nth(i), column) == value
        ]

    def find_unique_row(self, column: ColumnSpec, value: str, timeout: float = 0.0) -> Locator:
        """
        Locate the single row whose cell equals ``value``.

        Comparison is exact, case-sensitive equality on trimmed text. All
        rows are scanned so that duplicates are detected.

        Args:
            column: Column holding the key.
            value: Key to match.
            timeout: Seconds to keep rescanning while nothing matches, for
                     grids that re-render after a mutation.

        Returns:
            Locator for the matching row.

        Raises:
            RowNotFoundError: If no row matches.
            DuplicateRowError: If more than one row matches.
        """
        try:
            matches = wait_until(
                lambda: self.matching_rows(column, value),
                timeout=timeout,
                message=f"row with {column.label} {value!r}",
            )
        except WaitTimeoutError as exc:
            raise RowNotFoundError(value) from exc

        if len(matches) > 1:
            raise DuplicateRowError(value, len(matches))
        logger.info("Found row with %s: %s", column.label, value)
        return matches[0]
