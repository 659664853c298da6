from .push_utils import (
    FirebaseCredentialsError,
    load_service_account,
    get_firebase_app,
    build_message,
    send_message
)
