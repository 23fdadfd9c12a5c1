"""
Table element.

Reads tables as lists of header -> cell text dicts. Header texts are
cached until the next reload.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pagekit.core.selectors import Selector
from pagekit.elements.element import Element, ElementOptions
from pagekit.exceptions import InvalidElementTypeError


@dataclass
class TableOptions(ElementOptions):
    """Table options: where headers and data rows are found."""
    header_selector: str = "css:thead th"
    row_selector: str = "css:tbody tr"
    cell_selector: str = "xpath:./td|./th"


class TableElement(Element):
    """HTML <table> with a header row."""

    options_class = TableOptions

    def __init__(self, *args, **kwargs):
        self._headers: Optional[List[str]] = None
        super().__init__(*args, **kwargs)

    def normalize(self) -> None:
        if self.get_tag_name() != "table":
            raise InvalidElementTypeError(f"Element {self.by} is not a <table>")

    def invalidate(self) -> None:
        self._headers = None

    def get_headers(self) -> List[str]:
        if self._headers is None:
            header_query = self.query(Selector.parse(self.options.header_selector))
            self._headers = [header.get_text().strip() for header in header_query.all()]
        return self._headers

    def get_rows(self) -> List[Dict[str, str]]:
        """
        Read data rows.

        Cells beyond the last header are keyed by their column index.
        """
        headers = self.get_headers()
        rows = []
        for row in self.query(Selector.parse(self.options.row_selector)).all():
            cells = row.query(Selector.parse(self.options.cell_selector)).all()
            values = {}
            for index, cell in enumerate(cells):
                key = headers[index] if index < len(headers) else str(index)
                values[key] = cell.get_text().strip()
            rows.append(values)
        return rows

    def find_row(self, column: str, value: str) -> Optional[Dict[str, str]]:
        """First row whose `column` cell text equals `value`."""
        for row in self.get_rows():
            if row.get(column) == value:
                return row
        return None
