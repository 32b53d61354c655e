"""Invocation state threaded through the hook pipeline.

One State is created per invocation and handed to every hook in turn.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

EMPTY_CONFIG: Mapping[str, Any] = MappingProxyType({})


def freeze_config(config: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Copy a caller supplied config into a read-only mapping.

    Args:
        config: Decoration-time config or None

    Returns:
        Read-only mapping (empty when config is None)
    """
    if not config:
        return EMPTY_CONFIG
    return MappingProxyType(dict(config))


@dataclass
class State:
    """Mutable state for a single pipeline run.

    Attributes:
        event: Inbound request payload, hooks may mutate it
        context: Invocation metadata from the host runtime
        exit: When True the pipeline stops after the current hook
        response: Value returned to the caller
        error: Exception captured before entering the error phase
        config: Read-only config shared by every invocation of a decorated handler
    """

    event: Any
    context: Any = None
    exit: bool = False
    response: Any = None
    error: Exception | None = None
    config: Mapping[str, Any] = field(default_factory=lambda: EMPTY_CONFIG, repr=False)

    def respond(self, response: Any) -> State:
        """Set the response and request an early exit.

        Args:
            response: Value to return from the decorated handler

        Returns:
            This state, so hooks can ``return state.respond(...)``
        """
        self.response = response
        self.exit = True
        return self
