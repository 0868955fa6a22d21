from typing import List, Optional, Tuple
from client.api import ApiClient, ApiError
from utils.identifiers import generate_entry_id


class ProductEntryService:
    """Stock entries plus the product and supplier lookups the entry form needs."""

    def __init__(self, api: ApiClient):
        self.api = api

    def get_entries(self) -> List[dict]:
        return self.api.get("/product-entry/").json()

    def create_entry(self, fields: dict, file: Tuple[str, bytes, str]) -> dict:
        return self.api.post("/product-entry/", data=fields, files={"file": file}).json()

    def delete_entry(self, entry_id: int) -> None:
        self.api.delete(f"/product-entry/{entry_id}")

    def get_products(self) -> List[dict]:
        return self.api.get("/products/").json()

    def get_product_by_id(self, product_id) -> Optional[dict]:
        """Return the product, or None when the id is bad or the lookup fails."""
        if not isinstance(product_id, int):
            return None
        try:
            return self.api.get(f"/products/{product_id}").json()
        except ApiError:
            return None

    def get_suppliers(self) -> List[dict]:
        return self.api.get("/suppliers/").json()

    def get_supplier_by_id(self, supplier_id) -> Optional[dict]:
        if not isinstance(supplier_id, int):
            return None
        try:
            return self.api.get(f"/suppliers/{supplier_id}").json()
        except ApiError:
            return None

    def generate_entry_id(self, product_name: str) -> str:
        return generate_entry_id(product_name)
