from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from common.schemas import PushMessage, PushSuccessResponse, PushErrorResponse
from common.utils.push_utils import get_firebase_app, build_message, send_message
from config import PUSH_APP_HOST, PUSH_APP_PORT, logger


app = FastAPI()


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    response = await call_next(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok"}


push_responses = {500: {"model": PushErrorResponse}}


@app.post("/send_push", response_model=PushSuccessResponse, responses=push_responses)
@app.post("/api/send-fcm", response_model=PushSuccessResponse, responses=push_responses)
async def send_push(msg: PushMessage):
    firebase_app = await run_in_threadpool(get_firebase_app)
    logger.info(f"Dispatching push notification to token ending ...{str(msg.token or '')[-8:]}")

    try:
        message = build_message(msg)
        message_id = await send_message(message, app=firebase_app)
    except Exception as e:
        logger.error(f"Failed to send push notification: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e)})

    logger.info(f"Push notification sent: {message_id}")
    return {"success": True, "messageId": message_id}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=PUSH_APP_HOST, port=PUSH_APP_PORT)
