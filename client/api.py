import json
import logging
from pathlib import Path
from typing import Optional
import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TOKEN_PATH = Path.home() / ".stock-entries" / "token.json"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TokenStore:
    """Keeps the access token in a small JSON file so it survives restarts."""

    def __init__(self, path=None):
        self.path = Path(path) if path else DEFAULT_TOKEN_PATH

    def get(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            return json.loads(self.path.read_text()).get("access_token")
        except ValueError:
            logger.warning("ignoring unreadable token file %s", self.path)
            return None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"access_token": token}))

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def _error_message(response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return response.text
    if isinstance(detail, list):
        return "; ".join(str(item.get("msg", item)) for item in detail)
    return str(detail)


class ApiClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None, token_store: TokenStore = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.token_store = token_store if token_store is not None else TokenStore()
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs):
        headers = dict(kwargs.pop("headers", None) or {})
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.session.request(method, self.url(path), headers=headers, timeout=self.timeout, **kwargs)
        if response.status_code >= 400:
            message = _error_message(response)
            logger.debug("%s %s -> %s %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)
        return response

    def get(self, path: str, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs):
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs):
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs):
        return self.request("DELETE", path, **kwargs)
