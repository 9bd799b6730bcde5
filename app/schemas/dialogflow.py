from typing import Optional

from pydantic import BaseModel

DEFAULT_SESSION_ID = "default_session"
DEFAULT_TEXT = "Hello"


class SessionRequest(BaseModel):
    session_id: Optional[str] = None
    text: Optional[str] = None

    def resolved_session_id(self) -> str:
        return self.session_id or DEFAULT_SESSION_ID

    def resolved_text(self) -> str:
        return self.text or DEFAULT_TEXT


class SessionResponse(BaseModel):
    fulfillmentText: str


class IntentResult(BaseModel):
    display_name: str = ""
    fulfillment_text: str = ""
