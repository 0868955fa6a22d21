"""State and event handlers behind the stock entry screen.

Everything the screen shows is derived from ``ProductEntryForm.values`` and the
lists loaded from the API; handlers mutate that state and recompute the
derived fields (total value, autocomplete options) on the spot.
"""
import base64
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List, Optional
import requests
from client.api import ApiError
from client.product_entry import ProductEntryService
from client.tables import FilteredTable, ENTRY_FILTER_FIELDS

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
MAX_FILE_SIZE = 30 * 1024
MIN_AMOUNT = Decimal("0.01")
CENTS = Decimal("0.01")

REQUIRED_FIELDS = ("product_id", "supplier_id", "entry_date", "quantity", "unit_value", "invoice_number")


def _to_decimal(value) -> Decimal:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal(0)
    return number if number.is_finite() else Decimal(0)


def _to_int(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def calculate_total(quantity, unit_value) -> str:
    """quantity x unit value with two decimals; unparsable input counts as zero."""
    return str((_to_decimal(quantity) * _to_decimal(unit_value)).quantize(CENTS))


def filter_by_name(items: List[dict], value: Optional[str]) -> List[dict]:
    needle = (value or "").lower()
    return [item for item in items if needle in item["name"].lower()]


def display_option(item: Optional[dict]) -> str:
    if not item:
        return ""
    return f"{item['id']} - {item['name']}"


@dataclass
class SelectedFile:
    name: str
    base64: str

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)


def _log_notice(message: str) -> None:
    logger.warning(message)


class ProductEntryForm:
    def __init__(
        self,
        service: ProductEntryService,
        notify: Callable[[str], None] = None,
        confirm: Callable[[str], bool] = None,
        max_file_size: int = MAX_FILE_SIZE,
    ):
        self.service = service
        self.notify = notify or _log_notice
        self.confirm = confirm or (lambda message: True)
        self.max_file_size = max_file_size
        self.products: List[dict] = []
        self.suppliers: List[dict] = []
        self.entries = FilteredTable(ENTRY_FILTER_FIELDS)
        self.upload_file: Optional[SelectedFile] = None
        self.file_error = False
        self.file_size_error = False
        self.errors: Dict[str, str] = {}
        self.values: Dict[str, object] = {}
        self.reset()

    def reset(self) -> None:
        self.values = {
            "product_id": None,
            "product_name": "",
            "supplier_id": None,
            "supplier_name": "",
            "entry_date": datetime.now(),
            "quantity": None,
            "unit_value": None,
            "total_value": None,
            "invoice_number": "",
            "batch": "",
            "category": "",
            "observations": "",
        }
        self.errors = {}
        self.upload_file = None
        self.file_error = False
        self.file_size_error = False

    def load(self) -> None:
        try:
            self.entries.data = self.service.get_entries()
        except (ApiError, requests.RequestException):
            logger.exception("could not load product entries")
            self.entries.data = []
        try:
            self.products = self.service.get_products()
        except (ApiError, requests.RequestException):
            logger.exception("could not load products")
            self.products = []
        try:
            self.suppliers = self.service.get_suppliers()
        except (ApiError, requests.RequestException):
            logger.exception("could not load suppliers")
            self.suppliers = []

    def load_entries(self) -> None:
        try:
            self.entries.data = self.service.get_entries()
        except (ApiError, requests.RequestException):
            logger.exception("could not load product entries")

    def set_value(self, field: str, value) -> None:
        self.values[field] = value
        if field in ("quantity", "unit_value"):
            self.values["total_value"] = calculate_total(self.values["quantity"], self.values["unit_value"])
        elif field == "product_id":
            product = self._find(self.products, value)
            self.values["product_name"] = product["name"] if product else ""
        elif field == "supplier_id":
            supplier = self._find(self.suppliers, value)
            if supplier:
                self.values["supplier_name"] = supplier["name"]

    @staticmethod
    def _find(items: List[dict], item_id) -> Optional[dict]:
        wanted = _to_int(item_id)
        if wanted is None:
            return None
        return next((item for item in items if item["id"] == wanted), None)

    # product / supplier pickers

    def on_product_id_blur(self) -> bool:
        product_id = _to_int(self.values["product_id"])
        if product_id is None or product_id <= 0:
            self.notify("Invalid product id")
            self.values.update(product_id=None, product_name="")
            return False

        product = self.service.get_product_by_id(product_id)
        if product:
            self.values.update(product_id=product["id"], product_name=product["name"])
            return True
        self.values.update(product_id=None, product_name="")
        self.notify("Product not found. Register it before recording an entry.")
        return False

    def on_supplier_id_blur(self) -> bool:
        supplier_id = _to_int(self.values["supplier_id"])
        if supplier_id is None or supplier_id <= 0:
            self.notify("Invalid supplier id")
            self.values.update(supplier_id=None, supplier_name="")
            return False

        supplier = self.service.get_supplier_by_id(supplier_id)
        if supplier:
            self.values.update(supplier_id=supplier["id"], supplier_name=supplier["name"])
            return True
        self.values.update(supplier_id=None, supplier_name="")
        self.notify("Supplier not found.")
        return False

    def filtered_products(self) -> List[dict]:
        return filter_by_name(self.products, self.values["product_name"])

    def filtered_suppliers(self) -> List[dict]:
        return filter_by_name(self.suppliers, self.values["supplier_name"])

    def select_product_name(self, name: str) -> None:
        product = next((p for p in self.products if p["name"] == name), None)
        if product:
            self.values.update(product_id=product["id"], product_name=product["name"])

    def select_supplier_name(self, name: str) -> None:
        supplier = next((s for s in self.suppliers if s["name"] == name), None)
        if supplier:
            self.values.update(supplier_id=supplier["id"], supplier_name=supplier["name"])

    # attachment

    def select_file(self, name: str, content_type: str, data: bytes) -> bool:
        if content_type != PDF_MEDIA_TYPE:
            self.notify("Only PDF files are allowed!")
            return False
        if len(data) > self.max_file_size:
            self.file_size_error = True
            return False
        self.file_size_error = False
        self.upload_file = SelectedFile(name=name, base64=base64.b64encode(data).decode("ascii"))
        return True

    def remove_file(self) -> None:
        self.upload_file = None

    # submission

    def validate(self) -> bool:
        errors = {}
        for field in REQUIRED_FIELDS:
            value = self.values.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors[field] = "required"
        for field in ("quantity", "unit_value"):
            if field not in errors and _to_decimal(self.values[field]) < MIN_AMOUNT:
                errors[field] = "min"
        self.errors = errors
        return not errors

    def payload(self) -> Dict[str, str]:
        entry_date = self.values["entry_date"]
        return {
            "product_id": str(self.values["product_id"]),
            "supplier_id": str(self.values["supplier_id"]),
            "entry_date": entry_date.isoformat() if isinstance(entry_date, datetime) else str(entry_date or ""),
            "quantity": str(self.values["quantity"]),
            "unit_value": str(self.values["unit_value"]),
            "total_value": str(self.values["total_value"]),
            "invoice_number": self.values["invoice_number"],
            "batch": self.values["batch"] or "",
            "category": self.values["category"] or "",
            "observations": self.values["observations"] or "",
        }

    def submit(self) -> Optional[dict]:
        """Send the entry; nothing goes over the wire unless the form is complete."""
        if not self.validate():
            return None
        if self.upload_file is None:
            self.file_error = True
            return None
        self.file_error = False

        file = (self.upload_file.name, self.upload_file.to_bytes(), PDF_MEDIA_TYPE)
        try:
            saved = self.service.create_entry(self.payload(), file)
        except ApiError as e:
            self.notify(f"Error saving: {e.message or 'check the data'}")
            return None

        self.entries.data = [saved] + self.entries.data
        self.reset()
        return saved

    def delete_entry(self, entry: dict) -> bool:
        if not entry.get("id") or not self.confirm("Are you sure you want to delete this entry?"):
            return False
        try:
            self.service.delete_entry(entry["id"])
        except ApiError:
            logger.exception("error deleting entry %s", entry["id"])
            return False
        self.load_entries()
        return True

    def apply_filter(self, value: str) -> List[dict]:
        return self.entries.apply_filter(value)
