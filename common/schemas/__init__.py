from .push_schemas import PushMessage, PushSuccessResponse, PushErrorResponse
