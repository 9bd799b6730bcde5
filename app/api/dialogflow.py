import json

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from app.core.errors import BadRequestError
from app.schemas.dialogflow import SessionRequest, SessionResponse
from app.services.session_logic import handle_session
from app.settings import Settings, get_settings

router = APIRouter()


@router.post("/dialogflow/session/", response_model=SessionResponse)
async def dialogflow_session(request: Request, settings: Settings = Depends(get_settings)):
    raw = await request.body()

    # 1) Parsear JSON a mano para responder con error1 (y no el 422 de FastAPI)
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise BadRequestError(str(e)) from e

    # `null` es JSON válido => mismos defaults que un body vacío
    if payload is None:
        payload = {}

    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")

    try:
        req = SessionRequest.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError(str(e)) from e

    # 2) Dialogflow + OpenAI son bloqueantes => threadpool
    return await run_in_threadpool(handle_session, settings, req)
