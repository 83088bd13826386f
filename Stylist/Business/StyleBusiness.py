from typing import Callable, Optional

from Stylist.AI.ai_client import AIClient
from Stylist.AI.prompt_builder import build_prompt
from Stylist.AI.response_parser import extract_message_content, extract_suggestion_batch
from Stylist.Events.event_dispatcher import (
    EventDispatcher,
    GENERATION_FAILED,
    GENERATION_STARTED,
    GENERATION_SUCCEEDED,
)
from Stylist.Exception.StylistError import StylistError, ValidationError
from Stylist.Model.StylistSession import StylistSession
from Stylist.Model.Suggestion import SuggestionBatch

MIN_API_KEY_LENGTH = 10
MISSING_KEY_MESSAGE = "Please paste your OpenAI API key first."


def validate_api_key(api_key: Optional[str]) -> str:
    key = (api_key or "").strip()
    if len(key) < MIN_API_KEY_LENGTH:
        raise ValidationError(MISSING_KEY_MESSAGE)
    return key


class StyleBusiness:

    """Runs one generation attempt against a caller-owned StylistSession.
    Emits events via `EventDispatcher` (generation_started, generation_succeeded, generation_failed).
    """
    def __init__(self, client_factory: Callable[[str], AIClient] = AIClient, dispatcher: EventDispatcher = None):
        self.client_factory = client_factory
        self.dispatcher = dispatcher or EventDispatcher()

    def GenerateOutfits(self, session: StylistSession) -> SuggestionBatch:
        api_key = validate_api_key(session.api_key)
        preferences = session.preferences

        session.generating = True
        session.batch = None
        self.dispatcher.dispatch(GENERATION_STARTED, preferences=preferences)
        try:
            prompt = build_prompt(preferences)
            resp = self.client_factory(api_key).generate(prompt)
            content = extract_message_content(resp["text"])
            batch = extract_suggestion_batch(content)
            session.batch = batch
        except StylistError as e:
            self.dispatcher.dispatch(GENERATION_FAILED, preferences=preferences, error=e)
            raise
        finally:
            session.generating = False

        self.dispatcher.dispatch(GENERATION_SUCCEEDED, preferences=preferences, batch=batch)
        return batch
