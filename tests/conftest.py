"""
Pytest configuration for the push dispatch service tests.

- Puts the repository root on sys.path so that `config`, `common` and
  `push_app` import the same way they do under uvicorn.
- Sets harmless environment values before `config` is imported. No real
  service-account material is ever used in tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # tests/conftest.py -> parents[1] is the repository root
    project_root = str(Path(__file__).resolve().parents[1])
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


def _ensure_test_env_vars() -> None:
    os.environ.setdefault("LOG_LEVEL", "INFO")
    for name in (
        "FIREBASE_CREDENTIALS_PATH",
        "FIREBASE_PROJECT_ID",
        "FIREBASE_PRIVATE_KEY",
        "FIREBASE_CLIENT_EMAIL",
    ):
        os.environ.pop(name, None)


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


class FakeMessagingSend:
    """Stands in for firebase_admin.messaging.send and records every call."""

    def __init__(self, message_id="msg-1", error=None):
        self.message_id = message_id
        self.error = error
        self.calls = []

    def __call__(self, message, dry_run=False, app=None):
        self.calls.append((message, app))
        if self.error is not None:
            raise self.error
        # same checks firebase_admin runs while encoding the message
        for field in ("title", "body"):
            value = getattr(message.notification, field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Notification.{field} must be a string.")
        return self.message_id


@pytest.fixture
def firebase_app_stub(monkeypatch):
    """Replaces provider app initialization with a sentinel object."""
    from push_app import app as push_module

    sentinel = object()
    monkeypatch.setattr(push_module, "get_firebase_app", lambda: sentinel)
    return sentinel


@pytest.fixture
def fake_send(monkeypatch):
    from firebase_admin import messaging

    fake = FakeMessagingSend()
    monkeypatch.setattr(messaging, "send", fake)
    return fake
