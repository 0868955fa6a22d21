import logging
from typing import List
import requests
from client.api import ApiClient, ApiError
from client.tables import FilteredTable, USER_FILTER_FIELDS

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, api: ApiClient):
        self.api = api

    def get_users(self) -> List[dict]:
        return self.api.get("/users/").json()["users"]

    def create_user(self, user: dict) -> dict:
        return self.api.post("/users/", json=user).json()

    def update_user(self, user_id: int, user: dict) -> dict:
        return self.api.put(f"/users/{user_id}", json=user).json()

    def delete_user(self, user_id: int) -> None:
        self.api.delete(f"/users/{user_id}")


class UserDirectory:
    """User list screen: fetched once, filtered locally."""

    def __init__(self, service: UserService):
        self.service = service
        self.table = FilteredTable(USER_FILTER_FIELDS)

    def load(self) -> None:
        try:
            self.table.data = self.service.get_users()
        except (ApiError, requests.RequestException):
            logger.exception("could not load users")
            self.table.data = []

    def apply_filter(self, value: str) -> List[dict]:
        return self.table.apply_filter(value)
