from typing import Any

from pydantic import BaseModel


class PushMessage(BaseModel):
    # Values are passed to firebase_admin as received; it rejects bad types.
    token: Any = None
    title: Any = None
    body: Any = None
    data: Any = None


class PushSuccessResponse(BaseModel):
    success: bool = True
    messageId: str


class PushErrorResponse(BaseModel):
    error: str
