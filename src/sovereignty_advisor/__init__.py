"""AI advisory gateway for the sovereignty assessment."""

from .exceptions import AdvisoryConfigError, AdvisoryError
from .gateway import AdviceResult, AdvisoryGateway, AdvisoryOutcome, ChatMessage, record_chat_turn
from .text import clean_ai_text

__all__ = [
    "AdviceResult",
    "AdvisoryConfigError",
    "AdvisoryError",
    "AdvisoryGateway",
    "AdvisoryOutcome",
    "ChatMessage",
    "clean_ai_text",
    "record_chat_turn",
]
