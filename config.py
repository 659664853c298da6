from dotenv import load_dotenv
import os
import logging

# Environments configuration

load_dotenv()

FIREBASE_CREDENTIALS_PATH = os.getenv("FIREBASE_CREDENTIALS_PATH")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")
FIREBASE_PRIVATE_KEY = os.getenv("FIREBASE_PRIVATE_KEY")
FIREBASE_CLIENT_EMAIL = os.getenv("FIREBASE_CLIENT_EMAIL")
FIREBASE_TOKEN_URI = os.getenv("FIREBASE_TOKEN_URI", "https://oauth2.googleapis.com/token")

PUSH_DEFAULT_TITLE = os.getenv("PUSH_DEFAULT_TITLE", "Kwaaijongens")
PUSH_DEFAULT_BODY = os.getenv("PUSH_DEFAULT_BODY", "Nieuw bericht!")

PUSH_APP_HOST = os.getenv("PUSH_APP_HOST", "0.0.0.0")
PUSH_APP_PORT = int(os.getenv("PUSH_APP_PORT", "1026"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Logging configuration

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

for uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(uvicorn_logger).setLevel(LOG_LEVEL)
