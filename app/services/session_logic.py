import logging

from app.schemas.dialogflow import SessionRequest, SessionResponse
from app.services import dialogflow_client, llm_openai
from app.services.reply_policy import Fallback, decide_reply
from app.settings import Settings

logger = logging.getLogger(__name__)


def handle_session(settings: Settings, req: SessionRequest) -> SessionResponse:
    session_id = req.resolved_session_id()
    text = req.resolved_text()
    session_path = dialogflow_client.build_session_path(settings.DIALOGFLOW_PROJECT_ID, session_id)

    logger.info("Session request", extra={"session": session_path, "text": text})

    # 1) Dialogflow (cliente por request, se libera al salir del with)
    with dialogflow_client.open_sessions_client(settings) as client:
        intent = dialogflow_client.detect_intent(
            client, session_path, text, settings.DIALOGFLOW_LANGUAGE_CODE
        )

        # 2) Decidir: fulfillment de Dialogflow o fallback al LLM
        decision = decide_reply(intent, text)
        if not isinstance(decision, Fallback):
            return SessionResponse(fulfillmentText=decision.text)

        logger.info("No specific intent matched, falling back to LLM", extra={"intent": intent.display_name})
        reply = llm_openai.complete_chat(decision.prompt, settings)
        return SessionResponse(fulfillmentText=reply)
