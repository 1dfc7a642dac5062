"""
Function Hub - Per-session orchestrator

Wires one FunctionRegistry, one MetaModeController and one Dispatcher:

1. register():  providers are added under namespaces
2. list():      the caller asks what it may call (wire format)
3. dispatch():  the caller invokes a namespaced function

One hub per conversation/session; it is not meant to be shared across
threads without external locking.
"""

from typing import Any

from toolhub.config import Settings, get_settings
from toolhub.core.dispatcher import Dispatcher
from toolhub.core.function_definition import FunctionDescriptor
from toolhub.core.meta_mode import DEFAULT_MAX_ACTIVE, NAMESPACE_INTRO, MetaModeController
from toolhub.core.provider import FunctionProvider
from toolhub.core.registry import DEFAULT_SEPARATOR, FunctionRegistry
from toolhub.core.responses import Response
from toolhub.observability import MetricsStore


class FunctionHub:
    """Registry + meta mode + dispatch for one session."""

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        max_active: int = DEFAULT_MAX_ACTIVE,
        meta_mode: bool = False,
        namespace_intro: str = NAMESPACE_INTRO,
        metrics: MetricsStore | None = None,
    ):
        self.registry = FunctionRegistry(separator=separator)
        self.meta = MetaModeController(
            self.registry,
            max_active=max_active,
            enabled=meta_mode,
            namespace_intro=namespace_intro,
        )
        self.dispatcher = Dispatcher(self.registry, meta=self.meta, metrics=metrics)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, metrics: MetricsStore | None = None
    ) -> "FunctionHub":
        """Build a hub from application settings."""
        registry_settings = (settings or get_settings()).registry
        return cls(
            separator=registry_settings.separator,
            max_active=registry_settings.max_active,
            meta_mode=registry_settings.meta_mode,
            namespace_intro=registry_settings.namespace_intro,
            metrics=metrics,
        )

    def register(self, namespace: str, description: str, provider: FunctionProvider) -> list[str]:
        return self.registry.register(namespace, description, provider)

    def descriptors(self) -> list[FunctionDescriptor]:
        """Descriptors currently visible to the caller."""
        return self.meta.visible_descriptors()

    def list(self) -> list[dict[str, Any]]:
        """Visible descriptors in the tool-calling wire format."""
        return [descriptor.to_tool() for descriptor in self.descriptors()]

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> Response:
        return self.dispatcher.dispatch(name, arguments)

    def enable_meta_mode(self) -> "FunctionHub":
        self.meta.enable()
        return self

    def disable_meta_mode(self) -> "FunctionHub":
        self.meta.disable()
        return self

    @property
    def meta_mode_enabled(self) -> bool:
        return self.meta.enabled

    @property
    def active_functions(self) -> tuple[str, ...]:
        return self.meta.active_functions

    def namespaces_overview(self) -> str:
        return self.meta.namespaces_overview()


__all__ = ["FunctionHub"]
