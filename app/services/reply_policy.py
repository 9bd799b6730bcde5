from dataclasses import dataclass
from typing import Union

from app.schemas.dialogflow import IntentResult

FALLBACK_INTENT = "Default Fallback Intent"
FALLBACK_PROMPT_PREFIX = "Please provide general information or engage in a casual conversation about: "


@dataclass(frozen=True)
class MatchedIntent:
    text: str


@dataclass(frozen=True)
class Fallback:
    prompt: str


Decision = Union[MatchedIntent, Fallback]


def is_fallback_intent(display_name: str) -> bool:
    return not display_name or display_name == FALLBACK_INTENT


def build_fallback_prompt(text: str) -> str:
    return FALLBACK_PROMPT_PREFIX + text


def decide_reply(intent: IntentResult, text: str) -> Decision:
    """
    Sin intent específico (vacío o fallback) => se le pasa la consulta al LLM.
    Con intent real => se responde con el fulfillment de Dialogflow tal cual.
    """
    if is_fallback_intent(intent.display_name):
        return Fallback(prompt=build_fallback_prompt(text))
    return MatchedIntent(text=intent.fulfillment_text)
