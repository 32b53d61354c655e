"""use_hooks decorator factory."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any

from lambda_hooks.pipeline.executor import Handler, PipelineExecutor
from lambda_hooks.pipeline.hook import PartialHookSet, combine_hooks


def use_hooks(
    *hooks: PartialHookSet,
    config: Mapping[str, Any] | None = None,
    run_sync: bool = False,
) -> Callable[[Handler], Callable[..., Any]]:
    """Create a decorator that applies hooks to a handler.

    Partial hook sets are combined once, here. Hooks are not checked
    until they run.

    Args:
        *hooks: Partial hook sets, either one combined mapping or several
                composable ones, each with optional before/after/onError
        config: Optional config exposed read-only as ``state.config``
        run_sync: Return a synchronous handler (runs the pipeline with asyncio.run)

    Returns:
        with_hooks(handler) function that wraps a handler

    Example:
        with_hooks = use_hooks(
            {"before": [handle_scheduled_event, parse_event]},
            {"on_error": [handle_unexpected_error()]},
        )

        @with_hooks
        async def handler(event, context):
            return ok({"id": event["body"]["id"]})
    """
    hook_set = combine_hooks(hooks)

    def with_hooks(handler: Handler) -> Callable[..., Any]:
        executor = PipelineExecutor(hook_set, handler, config=config)

        if run_sync:

            @functools.wraps(handler)
            def sync_wrapper(event: Any, context: Any = None) -> Any:
                return executor.execute_sync(event, context)

            sync_wrapper.executor = executor  # type: ignore[attr-defined]
            return sync_wrapper

        @functools.wraps(handler)
        async def wrapper(event: Any, context: Any = None) -> Any:
            return await executor.execute(event, context)

        # Attach executor to function for introspection
        wrapper.executor = executor  # type: ignore[attr-defined]
        return wrapper

    return with_hooks
