import asyncio
from typing import Any
from unittest.mock import MagicMock

import pytest


class FakeAdyenResult:
    """Stand-in for Adyen.client.AdyenResult: decoded body in `message`."""

    def __init__(self, message: Any, status_code: int = 200):
        self.message = message
        self.status_code = status_code
        self.raw_response = ""


class FakeAdyenError(Exception):
    """Shaped like Adyen.exceptions.AdyenError."""

    def __init__(self, message, raw_response="", status_code="", error_code="", psp=""):
        self.message = message
        self.raw_response = raw_response
        self.status_code = status_code
        self.error_code = error_code
        self.psp = psp
        super().__init__(message)


class FakeServiceFactory:
    """Replaces an Adyen service group class (AdyenManagementApi, ...) in a tool module.

    Records the client each instance was built with and hands back one
    MagicMock whose nested API attributes are the SDK methods under test.
    """

    def __init__(self):
        self.service = MagicMock(name="service")
        self.clients = []

    def __call__(self, client=None):
        self.clients.append(client)
        return self.service


@pytest.fixture
def client():
    # Tools only pass the client through to the service constructors
    return object()


@pytest.fixture
def patch_service(monkeypatch):
    def _patch(module, class_name: str) -> FakeServiceFactory:
        factory = FakeServiceFactory()
        monkeypatch.setattr(module, class_name, factory)
        return factory

    return _patch


def run(coro):
    return asyncio.run(coro)
