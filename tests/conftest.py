"""
Shared fixtures: settings, a fake directory, the app and a request signer.

The signer is written against hmac/hashlib directly so that the tests
check the server's digest instead of reusing it.
"""

import hashlib
import hmac
import json
import time

import pytest
from fastapi.testclient import TestClient

from adgate.core.config import Settings
from adgate.main import create_app
from fakes import FakeDirectory

SECRET = "test-secret"


def sign(
    method: str,
    url: str,
    body=None,
    secret: str = SECRET,
    algorithm: str = "sha512",
    timestamp_ms: int | None = None,
    identifier: str = "APP",
) -> dict[str, str]:
    """Return the authorization header for a request."""
    timestamp = str(timestamp_ms if timestamp_ms is not None else int(time.time() * 1000))
    mac = hmac.new(secret.encode(), digestmod=algorithm)
    mac.update(timestamp.encode())
    mac.update(method.upper().encode())
    mac.update(url.encode())
    if body:
        serialized = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        mac.update(hashlib.md5(serialized.encode()).hexdigest().encode())
    return {"authorization": f"{identifier} {timestamp}:{mac.hexdigest()}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        hmac_secret=SECRET,
        rate_limit_default="1000/minute",
        log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def client(settings: Settings, directory: FakeDirectory) -> TestClient:
    return TestClient(create_app(settings=settings, directory=directory))


class SignedClient:
    """Sends signed requests through a TestClient."""

    def __init__(self, client: TestClient) -> None:
        self.client = client

    def request(self, method: str, url: str, json_body=None, **kwargs):
        headers = sign(method, url, json_body)
        headers.update(kwargs.pop("headers", {}))
        if json_body is not None:
            kwargs["json"] = json_body
        return self.client.request(method, url, headers=headers, **kwargs)

    def get(self, url: str, **kwargs):
        return self.request("GET", url, **kwargs)

    def post(self, url: str, json_body=None, **kwargs):
        return self.request("POST", url, json_body, **kwargs)

    def put(self, url: str, json_body=None, **kwargs):
        return self.request("PUT", url, json_body, **kwargs)

    def delete(self, url: str, **kwargs):
        return self.request("DELETE", url, **kwargs)


@pytest.fixture
def signed(client: TestClient) -> SignedClient:
    return SignedClient(client)
