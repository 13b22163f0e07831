"""
Advisory Gateway.

The single entry point the app and CLI use to reach the hosted model. Every
operation returns an ``AdvisoryOutcome``: either a value or a localized
error message. Model, network and parsing errors never propagate to the
caller.

Model reload policy: models are created lazily on first use and cached per
tier. ``reload()`` drops the cache so the next call re-reads the API key
from the environment. Models injected through the constructor are never
dropped.
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, Optional, Sequence, TypeVar

from pydantic_ai import BinaryContent, ModelSettings
from pydantic_ai.messages import ModelMessage, ModelRequest, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models import Model

from sovereignty_scorer.app_logging import get_logger
from sovereignty_scorer.catalog import catalog_for, ui_strings
from sovereignty_scorer.config import AdvisorConfig, get_config
from sovereignty_scorer.schema import AutoAssessment, Language

from . import prompts
from .agents import AdvisorDeps, advice_agent, auto_assess_agent, chat_agent, image_agent
from .llm import LLM_TIER_TYPE, create_model
from .text import clean_ai_text

logger = get_logger('advisor.gateway')

T = TypeVar("T")


@dataclass(frozen=True)
class AdvisoryOutcome(Generic[T]):
    """Result of a gateway call: a value on success, an error message on failure."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "AdvisoryOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "AdvisoryOutcome[T]":
        return cls(error=error)


@dataclass
class ChatMessage:
    """A chat transcript entry."""
    role: Literal["user", "bot"]
    text: str


@dataclass
class AdviceResult:
    """Advice shown in the advisor panel for one objective."""
    objective: str
    text: str


@dataclass
class AdvisoryGateway:
    """
    Gateway to the hosted advisory model.

    Attributes:
        config: Advisor settings; defaults to the global configuration
        model: Optional model used for every tier (mainly for tests)
    """
    config: AdvisorConfig = field(default_factory=lambda: get_config().advisor)
    model: Optional[Model] = None
    _models: dict[str, Model] = field(default_factory=dict, init=False, repr=False)

    def reload(self) -> None:
        """Forget cached models so the next call rebuilds them."""
        self._models.clear()
        logger.info("Advisory models will be recreated on next use")

    def _model(self, tier: LLM_TIER_TYPE) -> Model:
        if self.model is not None:
            return self.model
        if tier not in self._models:
            self._models[tier] = create_model(self.config, tier)
        return self._models[tier]

    def _settings(self) -> ModelSettings:
        return ModelSettings(timeout=self.config.timeout_seconds)

    @staticmethod
    def _failure(lang: Language, operation: str, error: Exception) -> AdvisoryOutcome:
        logger.warning(f"Advisory {operation} failed: {type(error).__name__}: {error}")
        return AdvisoryOutcome.failure(ui_strings(lang).ai_error)

    async def get_advice(
        self,
        objective_name: str,
        factors: Sequence[str],
        evidence_text: str,
        lang: Optional[str] = None,
    ) -> AdvisoryOutcome[str]:
        """Ask for an expert analysis of the evidence given for one objective."""
        language = Language.from_string(lang)
        prompt = prompts.ADVICE_PROMPT[language].format(
            factors=prompts.bullet_list(factors),
            evidence=evidence_text,
        )
        try:
            result = await advice_agent.run(
                prompt,
                model=self._model("heavy"),
                deps=AdvisorDeps(lang=language, objective_name=objective_name),
                model_settings=self._settings(),
            )
        except Exception as e:
            return self._failure(language, "advice", e)

        logger.debug(f"Advice received for objective {objective_name!r}")
        return AdvisoryOutcome.success(clean_ai_text(result.output))

    async def auto_assess(
        self,
        description: str,
        lang: Optional[str] = None,
    ) -> AdvisoryOutcome[AutoAssessment]:
        """Propose scores for every objective from a free-text solution description."""
        language = Language.from_string(lang)
        objectives, seal_definitions = catalog_for(language)
        try:
            result = await auto_assess_agent.run(
                description,
                model=self._model("heavy"),
                deps=AdvisorDeps(
                    lang=language,
                    objectives=objectives,
                    seal_definitions=seal_definitions,
                ),
                model_settings=self._settings(),
            )
        except Exception as e:
            return self._failure(language, "auto-assessment", e)

        logger.debug(f"Auto-assessment returned {len(result.output.assessments)} items")
        return AdvisoryOutcome.success(result.output)

    async def describe_image(
        self,
        image_bytes: bytes,
        mime_type: str,
        lang: Optional[str] = None,
    ) -> AdvisoryOutcome[str]:
        """Describe an architecture diagram image."""
        language = Language.from_string(lang)
        try:
            result = await image_agent.run(
                [
                    prompts.IMAGE_PROMPT[language],
                    BinaryContent(data=image_bytes, media_type=mime_type),
                ],
                model=self._model("light"),
                deps=AdvisorDeps(lang=language),
                model_settings=self._settings(),
            )
        except Exception as e:
            return self._failure(language, "image description", e)

        return AdvisoryOutcome.success(clean_ai_text(result.output))

    async def chat(
        self,
        message: str,
        history: Sequence[ChatMessage] = (),
        lang: Optional[str] = None,
    ) -> AdvisoryOutcome[str]:
        """Answer a general question, given the previous transcript."""
        language = Language.from_string(lang)
        limit = self.config.max_chat_history
        recent = list(history)[-limit:] if limit > 0 else []
        try:
            result = await chat_agent.run(
                message,
                message_history=to_model_messages(recent) or None,
                model=self._model("light"),
                deps=AdvisorDeps(lang=language),
                model_settings=self._settings(),
            )
        except Exception as e:
            return self._failure(language, "chat", e)

        return AdvisoryOutcome.success(clean_ai_text(result.output))


def to_model_messages(history: Sequence[ChatMessage]) -> list[ModelMessage]:
    """Convert a chat transcript into pydantic-ai message history."""
    messages: list[ModelMessage] = []
    for entry in history:
        if entry.role == "user":
            messages.append(ModelRequest(parts=[UserPromptPart(content=entry.text)]))
        else:
            messages.append(ModelResponse(parts=[TextPart(content=entry.text)]))
    return messages


def record_chat_turn(
    history: Sequence[ChatMessage],
    question: str,
    outcome: AdvisoryOutcome,
) -> list[ChatMessage]:
    """Return the transcript after one chat turn.

    The question is always kept. The answer is only kept when the gateway
    succeeded, so an error message is never sent back to the model as history.
    """
    updated = list(history) + [ChatMessage(role="user", text=question)]
    if outcome.ok:
        updated.append(ChatMessage(role="bot", text=outcome.value))
    return updated
