import threading

import firebase_admin
from fastapi.concurrency import run_in_threadpool
from firebase_admin import credentials, messaging

from config import (
    FIREBASE_CREDENTIALS_PATH,
    FIREBASE_PROJECT_ID,
    FIREBASE_PRIVATE_KEY,
    FIREBASE_CLIENT_EMAIL,
    FIREBASE_TOKEN_URI,
    PUSH_DEFAULT_TITLE,
    PUSH_DEFAULT_BODY,
    logger,
)

_firebase_lock = threading.Lock()


class FirebaseCredentialsError(RuntimeError):
    """Service-account credentials are not configured."""

    def __init__(self, missing):
        super().__init__(
            "Firebase service account is not configured, missing: " + ", ".join(missing))
        self.missing = missing


def load_service_account():
    """
    Returns what credentials.Certificate accepts: the JSON file path when
    FIREBASE_CREDENTIALS_PATH is set, otherwise a service-account mapping
    assembled from the inline FIREBASE_* variables.
    """
    if FIREBASE_CREDENTIALS_PATH:
        return FIREBASE_CREDENTIALS_PATH

    fields = {
        "FIREBASE_PROJECT_ID": FIREBASE_PROJECT_ID,
        "FIREBASE_PRIVATE_KEY": FIREBASE_PRIVATE_KEY,
        "FIREBASE_CLIENT_EMAIL": FIREBASE_CLIENT_EMAIL,
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise FirebaseCredentialsError(missing)

    return {
        "type": "service_account",
        "project_id": FIREBASE_PROJECT_ID,
        # keys pasted into env files usually carry literal "\n"
        "private_key": FIREBASE_PRIVATE_KEY.replace("\\n", "\n"),
        "client_email": FIREBASE_CLIENT_EMAIL,
        "token_uri": FIREBASE_TOKEN_URI,
    }


def get_firebase_app():
    with _firebase_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        cred = credentials.Certificate(load_service_account())
        app = firebase_admin.initialize_app(cred)
        logger.info(f"Firebase app initialized for project {app.project_id}")
        return app


def build_message(msg):
    return messaging.Message(
        token=msg.token,
        notification=messaging.Notification(
            title=msg.title or PUSH_DEFAULT_TITLE,
            body=msg.body or PUSH_DEFAULT_BODY),
        data=msg.data or {})


async def send_message(message, app=None):
    """Sends one message and returns the provider's message id."""
    return await run_in_threadpool(messaging.send, message, app=app)
