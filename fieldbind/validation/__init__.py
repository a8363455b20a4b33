"""Field validation: validators, chains, name resolution and orchestration."""

from fieldbind.validation.base import BaseValidator, FieldError
from fieldbind.validation.chain import ValidationChain
from fieldbind.validation.orchestrator import ValidationOrchestrator
from fieldbind.validation.resolver import ValidatorNotFoundError, ValidatorResolver
from fieldbind.validation.translator import (
    DEFAULT_MESSAGES,
    DictTranslator,
    Translator,
    TranslatorLike,
    render_message,
)

__all__ = [
    "BaseValidator",
    "DEFAULT_MESSAGES",
    "DictTranslator",
    "FieldError",
    "Translator",
    "TranslatorLike",
    "ValidationChain",
    "ValidationOrchestrator",
    "ValidatorNotFoundError",
    "ValidatorResolver",
    "render_message",
]
