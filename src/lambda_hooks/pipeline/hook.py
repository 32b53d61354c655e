"""Hook types and hook sets.

Defines the Hook contract, the HookSet container and combine_hooks,
which merges partial hook sets into a single normalized one.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State

logger = logging.getLogger(__name__)


# Type aliases
Hook = Callable[["State"], Awaitable["State"]]
HookCreator = Callable[..., Hook]
PartialHookSet = Union["HookSet", Mapping[str, Any], None]

# Accepted keys for partial hook sets given as mappings
_FIELD_KEYS: dict[str, str] = {
    "before": "before",
    "after": "after",
    "onError": "on_error",
    "on_error": "on_error",
}


def hook_name(hook: Any) -> str:
    """Get a readable name for a hook (function name or repr)."""
    return getattr(hook, "__name__", None) or repr(hook)


@dataclass(frozen=True)
class HookSet:
    """Ordered hooks for one decorated handler.

    Attributes:
        before: Hooks run before the handler
        after: Hooks run after the handler
        on_error: Hooks run when a before hook, the handler or an after hook raises
    """

    before: tuple[Hook, ...] = ()
    after: tuple[Hook, ...] = ()
    on_error: tuple[Hook, ...] = ()

    @classmethod
    def from_partial(cls, partial: PartialHookSet) -> HookSet:
        """Normalize a partial hook set.

        Args:
            partial: HookSet, mapping with any of before/after/onError
                     (on_error is accepted too), or None

        Returns:
            Fully populated HookSet
        """
        if partial is None:
            return cls()
        if isinstance(partial, HookSet):
            return partial

        fields: dict[str, tuple[Hook, ...]] = {"before": (), "after": (), "on_error": ()}
        for key, value in partial.items():
            field_name = _FIELD_KEYS.get(key)
            if field_name is None:
                logger.warning("Ignoring unknown hook set key '%s'", key)
                continue
            fields[field_name] = fields[field_name] + tuple(value or ())

        return cls(**fields)

    def __add__(self, other: HookSet) -> HookSet:
        if not isinstance(other, HookSet):
            return NotImplemented
        return HookSet(
            before=self.before + other.before,
            after=self.after + other.after,
            on_error=self.on_error + other.on_error,
        )

    def __len__(self) -> int:
        return len(self.before) + len(self.after) + len(self.on_error)

    def names(self) -> dict[str, list[str]]:
        """Get hook names per phase.

        Returns:
            Dict mapping phase name to hook names in execution order
        """
        return {
            "before": [hook_name(h) for h in self.before],
            "after": [hook_name(h) for h in self.after],
            "on_error": [hook_name(h) for h in self.on_error],
        }


def combine_hooks(partials: Iterable[PartialHookSet]) -> HookSet:
    """Combine partial hook sets into a single HookSet.

    Fields are concatenated in the order given. Hooks are never
    deduplicated or reordered.

    Args:
        partials: Partial hook sets to combine

    Returns:
        Combined HookSet (empty when partials is empty)

    Example:
        >>> combined = combine_hooks([{"before": [log_event]}, {"before": [parse_event]}])
        >>> combined.before == (log_event, parse_event)
        True
    """
    result = HookSet()
    for partial in partials:
        result = result + HookSet.from_partial(partial)
    return result
