"""Pytest fixtures for API integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from calhousing import serve
from calhousing.predict import LoadedModel

# the function FastAPI registered as a dependency, captured before any patching
MODEL_DEPENDENCY = serve.get_loaded_model


@pytest.fixture
def client(loaded_model: LoadedModel, monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """TestClient serving the session model instead of artifacts/pretrained."""
    monkeypatch.setattr(serve, "get_loaded_model", lambda: loaded_model)
    serve.app.dependency_overrides[MODEL_DEPENDENCY] = lambda: loaded_model
    try:
        with TestClient(serve.app) as test_client:
            yield test_client
    finally:
        serve.app.dependency_overrides.clear()
