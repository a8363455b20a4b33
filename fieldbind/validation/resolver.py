"""Resolution of validator names to validator instances.

A validator is appended by a qualified name such as ``"NotEmpty"`` or
``"strings.Regex"``. The resolver prefixes the name with each configured
namespace in turn (the empty namespace means the name as given) and uses
the first candidate that names an existing, instantiable validator class.

For every candidate, explicit registrations are consulted before the
import system, so validators can be provided without a module path.
"""

import importlib
import inspect
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from fieldbind.config import BUILTIN_VALIDATOR_NAMESPACE
from fieldbind.validation.base import BaseValidator

logger = logging.getLogger(__name__)

ValidatorFactory = Callable[..., BaseValidator]


class ValidatorNotFoundError(LookupError):
    """Raised when a validator name resolves in none of the namespaces."""

    def __init__(self, qualified_name: str, namespaces: Sequence[str]) -> None:
        self.qualified_name = qualified_name
        self.namespaces = tuple(namespaces)
        super().__init__(
            f"Could not find validator '{qualified_name}' "
            f"(searched namespaces: {list(self.namespaces)})"
        )


def _normalize_namespace(namespace: str) -> str:
    return namespace.strip(".")


def _import_validator(candidate: str) -> type[BaseValidator] | None:
    module_path, _, attribute = candidate.rpartition(".")
    if not module_path:
        return None

    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        # A miss only when the probed module or one of its parents is absent.
        if e.name and (module_path == e.name or module_path.startswith(e.name + ".")):
            return None
        raise

    found = getattr(module, attribute, None)
    if (
        inspect.isclass(found)
        and issubclass(found, BaseValidator)
        and not inspect.isabstract(found)
    ):
        return found
    return None


class ValidatorResolver:
    """Resolves qualified validator names against ordered namespaces."""

    def __init__(
        self,
        namespaces: Iterable[str] = ("", BUILTIN_VALIDATOR_NAMESPACE),
    ) -> None:
        """Initialize the resolver.

        Args:
            namespaces: Namespace prefixes, probed in order.
        """
        self._namespaces: list[str] = [_normalize_namespace(ns) for ns in namespaces]
        self._registry: dict[str, ValidatorFactory] = {}

    @property
    def namespaces(self) -> tuple[str, ...]:
        return tuple(self._namespaces)

    def append_namespace(self, namespace: str) -> None:
        """Add a namespace to probe after the existing ones."""
        self._namespaces.append(_normalize_namespace(namespace))

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Register a factory under a fully qualified name.

        Args:
            name: The fully qualified name, e.g. ``"myapp.validators.Zip"``.
            factory: A validator class or any callable returning a validator.
        """
        self._registry[_normalize_namespace(name)] = factory

    def candidates(self, qualified_name: str) -> list[str]:
        """Fully qualified names to probe for ``qualified_name``, in order."""
        name = _normalize_namespace(qualified_name)
        return [f"{ns}.{name}" if ns else name for ns in self._namespaces]

    def resolve(self, qualified_name: str) -> ValidatorFactory:
        """Return the factory for the first candidate that resolves.

        Raises:
            ValidatorNotFoundError: If no candidate resolves.
        """
        for candidate in self.candidates(qualified_name):
            factory = self._registry.get(candidate)
            if factory is None:
                factory = _import_validator(candidate)
            if factory is not None:
                logger.debug("Resolved validator %r to %s", qualified_name, candidate)
                return factory
            logger.debug("No validator at %s", candidate)

        raise ValidatorNotFoundError(qualified_name, self._namespaces)

    def create(
        self,
        qualified_name: str,
        constructor_args: Sequence[Any] = (),
    ) -> BaseValidator:
        """Resolve ``qualified_name`` and instantiate it with ``constructor_args``."""
        factory = self.resolve(qualified_name)
        return factory(*constructor_args)
