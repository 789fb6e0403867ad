"""Credential variants for Google REST APIs."""

import threading
from collections.abc import Callable, Generator

import google.auth
import google.auth.transport.requests
import httpx
from google.auth.exceptions import DefaultCredentialsError
from google.oauth2 import service_account

from travel_assistant.logging import setup_logging

logger = setup_logging()

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

TokenProvider = Callable[[], str]


class BearerAuth(httpx.Auth):
    """Adds an OAuth bearer token obtained from a token provider."""

    def __init__(self, token_provider: TokenProvider):
        self._token_provider = token_provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token_provider()}"
        yield request


class ApiKeyAuth(httpx.Auth):
    """Appends a static API key as the `key` query parameter."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.url = request.url.copy_add_param("key", self._api_key)
        yield request


def service_account_token_provider(credentials_path: str | None = None) -> TokenProvider:
    """
    Builds a lazily initialised, self-refreshing access-token provider.

    Credentials are read from `credentials_path` when given, otherwise from
    Application Default Credentials. Nothing is loaded until the first
    token is requested.

    Raises (on call):
        google.auth.exceptions.GoogleAuthError: If credentials cannot be
            loaded or refreshed.
    """
    state: dict = {}
    lock = threading.Lock()
    auth_request = google.auth.transport.requests.Request()

    def provide() -> str:
        with lock:
            credentials = state.get("credentials")
            if credentials is None:
                if credentials_path:
                    try:
                        credentials = service_account.Credentials.from_service_account_file(
                            credentials_path, scopes=[CLOUD_PLATFORM_SCOPE]
                        )
                    except (OSError, ValueError) as e:
                        raise DefaultCredentialsError(
                            f"Cannot load service account file {credentials_path}: {e}"
                        ) from e
                else:
                    credentials, _ = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
                state["credentials"] = credentials
            if not credentials.valid:
                credentials.refresh(auth_request)
                logger.info("Google access token refreshed")
            return credentials.token

    return provide


def select_auth(api_key: str | None, credentials_path: str | None) -> httpx.Auth | None:
    """Bearer auth when service-account credentials exist, else API key, else None."""
    if credentials_path:
        return BearerAuth(service_account_token_provider(credentials_path))
    if api_key:
        return ApiKeyAuth(api_key)
    return None
