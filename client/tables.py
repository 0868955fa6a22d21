from typing import Iterable, List, Sequence

ENTRY_FILTER_FIELDS = ("product_name", "supplier_name", "invoice_number")
USER_FILTER_FIELDS = ("name", "email", "cpf")
DOCUMENT_FILTER_FIELDS = ("filename", "file_type")


class FilteredTable:
    """An already fetched list narrowed by a substring typed by the user.

    A row matches when any of ``fields`` contains the filter text, ignoring case.
    """

    def __init__(self, fields: Sequence[str], data: Iterable[dict] = ()):
        self.fields = tuple(fields)
        self.data = list(data)
        self.filter = ""

    def apply_filter(self, value: str) -> List[dict]:
        self.filter = (value or "").strip().lower()
        return self.rows

    def matches(self, row: dict) -> bool:
        if not self.filter:
            return True
        return any(self.filter in str(row.get(field) or "").lower() for field in self.fields)

    @property
    def rows(self) -> List[dict]:
        return [row for row in self.data if self.matches(row)]
