"""
Function Registry - Namespaced registry of provider functions

Responsibility:
- Register providers under unique namespaces
- Rewrite each descriptor into a namespaced identifier
  (namespace + separator + original name, description prefixed "[namespace] ")
- Provide lookup of (provider, original name) by namespaced name
- NO execution (that is the dispatcher)
- NO visibility rules (that is meta_mode)

Entries and namespaces only grow; nothing is ever removed.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from toolhub.core.function_definition import FunctionDescriptor, to_descriptor
from toolhub.core.provider import FunctionProvider
from toolhub.exceptions import (
    ConfigurationError,
    DuplicateFunctionError,
    DuplicateNamespaceError,
    InvalidNameError,
    MissingFunctionNameError,
)

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "_"


@dataclass(frozen=True)
class Namespace:
    """A registered namespace."""
    name: str
    description: str


@dataclass(frozen=True)
class RegistryEntry:
    """One namespaced function and the provider that owns it."""
    namespaced_name: str
    namespace: str
    original_name: str
    provider: FunctionProvider
    descriptor: FunctionDescriptor


class FunctionRegistry:
    """
    Central registry of namespaced functions.

    The registry knows contracts (descriptors) and owners (providers).
    It does not know how providers execute.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR):
        if not isinstance(separator, str) or len(separator) != 1:
            raise ConfigurationError(
                "Namespace separator must be exactly one character.",
                details={"separator": separator},
            )
        self.separator = separator
        self._entries: dict[str, RegistryEntry] = {}
        self._namespaces: dict[str, Namespace] = {}
        self._reserved: set[str] = set()

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(
        self,
        namespace: str,
        description: str,
        provider: FunctionProvider,
    ) -> list[str]:
        """
        Register every signature of a provider under a namespace.

        Registration is all-or-nothing: every descriptor is validated before
        any entry is stored.

        Args:
            namespace: Unique namespace name
            description: Human description of the namespace
            provider: Provider implementing list_signatures()/invoke()

        Returns:
            Namespaced names added, in provider order

        Raises:
            ConfigurationError: Invalid names, missing names, duplicates
        """
        self._validate_name("namespace", namespace)
        if namespace in self._namespaces:
            raise DuplicateNamespaceError(namespace)

        signatures = provider.list_signatures()
        if not isinstance(signatures, (list, tuple)):
            signatures = [signatures]

        pending: dict[str, RegistryEntry] = {}
        for signature in signatures:
            try:
                descriptor = to_descriptor(signature)
            except MissingFunctionNameError as exc:
                raise MissingFunctionNameError(namespace) from exc
            if not descriptor.name:
                raise MissingFunctionNameError(namespace)

            self._validate_name("function", descriptor.name)
            namespaced_name = self.namespaced_name(namespace, descriptor.name)

            if namespaced_name in pending:
                raise DuplicateFunctionError(namespaced_name)
            if namespaced_name in self._entries:
                raise DuplicateFunctionError(namespaced_name)
            if namespaced_name in self._reserved:
                raise DuplicateFunctionError(namespaced_name, reason="a reserved name")

            pending[namespaced_name] = RegistryEntry(
                namespaced_name=namespaced_name,
                namespace=namespace,
                original_name=descriptor.name,
                provider=provider,
                descriptor=descriptor.renamed(
                    namespaced_name, f"[{namespace}] {descriptor.description}"
                ),
            )

        self._namespaces[namespace] = Namespace(name=namespace, description=description)
        self._entries.update(pending)

        logger.info(
            "Registered namespace '%s' with %d function(s): %s",
            namespace,
            len(pending),
            ", ".join(pending) or "-",
        )
        return list(pending)

    def reserve(self, names: Iterable[str]) -> None:
        """
        Reserve names that registered functions may never take.

        Raises:
            DuplicateFunctionError: If a name is already registered
        """
        names = set(names)
        for name in names:
            if name in self._entries:
                raise DuplicateFunctionError(name)
        self._reserved |= names

    def namespaced_name(self, namespace: str, function_name: str) -> str:
        return f"{namespace}{self.separator}{function_name}"

    def _validate_name(self, kind: str, name: str) -> None:
        if not isinstance(name, str) or not name or self.separator in name:
            raise InvalidNameError(kind, str(name), self.separator)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_all_descriptors(self) -> list[FunctionDescriptor]:
        """Every stored descriptor, in registration order."""
        return [entry.descriptor for entry in self._entries.values()]

    def lookup(self, namespaced_name: str) -> RegistryEntry | None:
        """Owning provider and original name, or None if not registered."""
        return self._entries.get(namespaced_name)

    def names(self) -> list[str]:
        return list(self._entries)

    def namespaces(self) -> list[Namespace]:
        """Namespaces in registration order."""
        return list(self._namespaces.values())

    def get_namespace(self, name: str) -> Namespace | None:
        return self._namespaces.get(name)

    def entries(self, namespace: str | None = None) -> list[RegistryEntry]:
        """Entries in registration order, optionally limited to one namespace."""
        return [
            entry
            for entry in self._entries.values()
            if namespace is None or entry.namespace == namespace
        ]

    def is_reserved(self, name: str) -> bool:
        return name in self._reserved

    def __contains__(self, namespaced_name: object) -> bool:
        return namespaced_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(list(self._entries.values()))


__all__ = ["FunctionRegistry", "Namespace", "RegistryEntry", "DEFAULT_SEPARATOR"]
