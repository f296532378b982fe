"""Tests for the global exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from kennel.api.middleware.error_handler import request_error_messages
from kennel.shared.core.exceptions import DogNotFoundError


@pytest.mark.unit
class TestRequestErrorMessages:
    def test_known_types(self) -> None:
        errors = [
            {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"},
            {"type": "dict_type", "loc": ("body",), "msg": "Input should be a valid dictionary"},
        ]
        assert request_error_messages(errors) == [
            "request body should be valid JSON",
            "request body should be an object",
        ]

    def test_unknown_type_keeps_message_once(self) -> None:
        errors = [
            {"type": "missing", "loc": ("query", "q"), "msg": "Field required"},
            {"type": "missing", "loc": ("query", "p"), "msg": "Field required"},
        ]
        assert request_error_messages(errors) == ["Field required"]


@pytest.mark.integration
class TestGlobalHandlers:
    def test_unexpected_error_is_hidden(self, kennel_app: FastAPI) -> None:
        @kennel_app.get("/explode")
        async def explode() -> None:
            raise RuntimeError("secret detail")

        with TestClient(kennel_app, raise_server_exceptions=False) as c:
            resp = c.get("/explode")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error"}

    def test_application_error_uses_its_status(self, kennel_app: FastAPI) -> None:
        @kennel_app.get("/missing")
        async def missing() -> None:
            raise DogNotFoundError()

        with TestClient(kennel_app) as c:
            resp = c.get("/missing")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Dog not found"}
