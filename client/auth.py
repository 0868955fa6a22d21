from client.api import ApiClient


class AuthService:
    """Talks to /auth and keeps the bearer token in the client's token store."""

    def __init__(self, api: ApiClient):
        self.api = api

    def register(self, user: dict) -> dict:
        return self.api.post("/auth/register", json=user).json()

    def login(self, email: str, password: str) -> dict:
        result = self.api.post("/auth/login", json={"email": email, "password": password}).json()
        self.api.token_store.set(result["access_token"])
        return result

    def logout(self) -> None:
        self.api.token_store.clear()

    def get_token(self):
        return self.api.token_store.get()

    def is_logged_in(self) -> bool:
        return bool(self.get_token())

    def whoami(self) -> dict:
        return self.api.get("/auth/whoami").json()
