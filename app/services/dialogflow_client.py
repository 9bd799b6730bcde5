import json
import logging
from contextlib import contextmanager
from typing import Iterator

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import dialogflow_v2 as dialogflow
from google.oauth2 import service_account

from app.core.errors import IntentClientError, IntentDetectionError
from app.schemas.dialogflow import IntentResult
from app.settings import Settings

logger = logging.getLogger(__name__)


def build_session_path(project_id: str, session_id: str) -> str:
    return f"projects/{project_id}/agent/sessions/{session_id}"


def _load_credentials(credentials_json: str):
    """
    Credenciales de service account desde el JSON crudo de la config.
    Si no hay JSON devolvemos None y el cliente usa Application Default Credentials.
    """
    if not credentials_json.strip():
        return None

    info = json.loads(credentials_json)
    if not isinstance(info, dict):
        raise ValueError("GOOGLE_CREDENTIALS_JSON must be a JSON object")
    return service_account.Credentials.from_service_account_info(info)


def _build_client(settings: Settings) -> dialogflow.SessionsClient:
    try:
        credentials = _load_credentials(settings.GOOGLE_CREDENTIALS_JSON)
        return dialogflow.SessionsClient(credentials=credentials)
    except (ValueError, auth_exceptions.GoogleAuthError) as e:
        raise IntentClientError(str(e)) from e


@contextmanager
def open_sessions_client(settings: Settings) -> Iterator[dialogflow.SessionsClient]:
    """Un cliente por request; el transporte se cierra siempre al salir."""
    client = _build_client(settings)
    try:
        yield client
    finally:
        client.transport.close()


def detect_intent(client, session_path: str, text: str, language_code: str) -> IntentResult:
    text_input = dialogflow.TextInput(text=text, language_code=language_code)
    query_input = dialogflow.QueryInput(text=text_input)

    try:
        response = client.detect_intent(
            request={"session": session_path, "query_input": query_input}
        )
    except (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
        raise IntentDetectionError(str(e)) from e

    query_result = response.query_result
    result = IntentResult(
        display_name=query_result.intent.display_name or "",
        fulfillment_text=query_result.fulfillment_text or "",
    )
    logger.info(
        "Dialogflow intent detected",
        extra={"session": session_path, "intent": result.display_name},
    )
    return result
