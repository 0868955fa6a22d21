import logging
from pathlib import Path
from typing import List, Optional
from client.api import ApiClient
from client.tables import FilteredTable, DOCUMENT_FILTER_FIELDS

logger = logging.getLogger(__name__)

FILTER_KEYS = ("filename", "id", "upload_date", "file_type", "user_id")


class DocumentService:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_documents(self, filters: Optional[dict] = None) -> List[dict]:
        """Fetch documents; only the filters that are set go on the query string."""
        filters = filters or {}
        params = {key: str(filters[key]) for key in FILTER_KEYS if filters.get(key)}
        return self.api.get("/documents/", params=params).json()

    def upload_document(self, filename: str, content: bytes, product_id: Optional[int] = None,
                        content_type: str = "application/pdf") -> dict:
        data = {"product_id": str(product_id)} if product_id else {}
        files = {"file": (filename, content, content_type)}
        return self.api.post("/documents/", data=data, files=files).json()

    def download_document(self, document_id: int) -> bytes:
        return self.api.get(f"/documents/{document_id}/download").content


class DocumentBrowser:
    def __init__(self, service: DocumentService):
        self.service = service
        self.table = FilteredTable(DOCUMENT_FILTER_FIELDS)

    def search(self, **filters) -> List[dict]:
        self.table.data = self.service.get_documents(filters)
        return self.table.rows

    def download(self, document: dict, directory) -> Path:
        target = Path(directory) / document["filename"]
        target.write_bytes(self.service.download_document(document["id"]))
        logger.info("saved document %s to %s", document["id"], target)
        return target
