"""Test configuration for infographic tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

import infographic.config as config_module

API_KEY_VARS = (
    "API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "INFOGRAPHIC_TEXT_MODEL",
    "INFOGRAPHIC_IMAGE_MODEL",
    "INFOGRAPHIC_EDIT_MODEL",
)


# Configure pytest-asyncio markers
def pytest_configure(config):
    config.addinivalue_line("markers", "asyncio: mark test as async")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config at an empty home and a known API key."""
    for name in API_KEY_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", tmp_path / "config.json")
    monkeypatch.setenv("API_KEY", "test-key")


# -- Fake provider responses --------------------------------------------------


def make_text_response(text, chunks=None):
    """Research response with optional grounding chunks."""
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(grounding_metadata=metadata, content=None)],
    )


def make_chunk(uri, title):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


def make_image_response(*payloads, text=None):
    """Image response whose parts carry the given inline payloads (plus optional text)."""
    parts = []
    if text:
        parts.append(SimpleNamespace(text=text, inline_data=None))
    for data in payloads:
        parts.append(
            SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type="image/png"))
        )
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


def make_client(response):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response)
    return client
