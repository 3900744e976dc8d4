"""Shared test fixtures and configuration."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from notebox.api.app import create_app
from notebox.core import store as store_module
from notebox.core.store import NoteStore


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    """Set up mock environment variables."""
    env_vars = {
        "NOTEBOX_HOST": "127.0.0.1",
        "NOTEBOX_PORT": "9123",
        "NOTEBOX_CACHE": str(tmp_path / "env_notes.json"),
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def notes_path(tmp_path):
    """Path of a notes file that does not exist yet."""
    return tmp_path / "notes.json"


@pytest.fixture
def write_notes_file(notes_path):
    """Factory that writes raw records to the notes file."""

    def _write_notes_file(records):
        notes_path.write_text(json.dumps(records), encoding="utf-8")
        return notes_path

    return _write_notes_file


@pytest.fixture
def note_store(notes_path):
    """A NoteStore on a fresh temporary file."""
    return NoteStore(notes_path)


@pytest.fixture
def client(note_store):
    """Test client for an app serving note_store."""
    return TestClient(create_app(note_store))


@pytest.fixture(autouse=True)
def reset_default_store():
    """Keep the module-level default store from leaking between tests."""
    store_module.set_note_store(None)
    yield
    store_module.set_note_store(None)
