"""fieldbind: bind nested form submissions to fields, wrappers and validators."""

__version__ = "0.1.0"

from fieldbind.config import FormConfig
from fieldbind.form import Form
from fieldbind.store import FieldStore
from fieldbind.validation import (
    BaseValidator,
    DictTranslator,
    ValidationOrchestrator,
    ValidatorNotFoundError,
    ValidatorResolver,
)
from fieldbind.wrapping import WrapperEngine, WrapperMapping

__all__ = [
    "__version__",
    "BaseValidator",
    "DictTranslator",
    "FieldStore",
    "Form",
    "FormConfig",
    "ValidationOrchestrator",
    "ValidatorNotFoundError",
    "ValidatorResolver",
    "WrapperEngine",
    "WrapperMapping",
]
