"""Pipeline executor for before/after/on_error hooks.

Runs the hooks of a HookSet around a wrapped handler, one invocation at a time.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from lambda_hooks.errors import HookContractError
from lambda_hooks.pipeline.context import State, freeze_config
from lambda_hooks.pipeline.hook import Hook, HookSet, hook_name

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any], Awaitable[Any]]


class PipelineExecutor:
    """Executes hook phases around a handler.

    Attributes:
        hook_set: Hooks to run (immutable)
        handler: Wrapped handler called with (event, context)
        config: Read-only config exposed as ``state.config``
    """

    def __init__(
        self,
        hook_set: HookSet,
        handler: Handler,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            hook_set: Normalized hook set
            handler: Async handler to wrap
            config: Optional config shared read-only by all invocations
        """
        self.hook_set = hook_set
        self.handler = handler
        self.config = freeze_config(config)

        logger.info("Pipeline for '%s': %s", hook_name(handler), self.describe())

    async def execute(self, event: Any, context: Any = None) -> Any:
        """Run the pipeline for one invocation.

        Args:
            event: Inbound event payload
            context: Invocation context

        Returns:
            The handler response, possibly replaced by a hook

        Raises:
            Exception: Re-raised when no on_error hooks are configured, or
                       raised by an on_error hook itself
        """
        state = State(event=event, context=context, config=self.config)

        try:
            for hook in self.hook_set.before:
                state = await self._run_hook("before", hook, state)
                if state.exit:
                    return state.response

            logger.debug("Calling handler '%s'", hook_name(self.handler))
            response = self.handler(state.event, state.context)
            if inspect.isawaitable(response):
                response = await response
            state.response = response
            if not self.hook_set.after:
                return state.response

            for hook in self.hook_set.after:
                state = await self._run_hook("after", hook, state)
                if state.exit:
                    return state.response

        except Exception as e:
            logger.error("Pipeline failed: %s: %s", type(e).__name__, str(e))
            if not self.hook_set.on_error:
                raise

            state.error = e
            for hook in self.hook_set.on_error:
                state = await self._run_hook("on_error", hook, state)
                if state.exit:
                    return state.response

        return state.response

    async def _run_hook(self, phase: str, hook: Hook, state: State) -> State:
        """Run a single hook and check that it returned the state.

        Args:
            phase: Phase name (for logging)
            hook: Hook to run
            state: Current state

        Returns:
            State returned by the hook

        Raises:
            HookContractError: If the hook returned something other than a State
        """
        name = hook_name(hook)
        logger.debug("Executing %s hook '%s'", phase, name)

        result = hook(state)
        if inspect.isawaitable(result):
            result = await result

        if not isinstance(result, State):
            raise HookContractError(f"Hook '{name}' returned {type(result).__name__}, expected State")

        if result.exit:
            logger.debug("Hook '%s' requested exit during %s phase", name, phase)
        return result

    def execute_sync(self, event: Any, context: Any = None) -> Any:
        """Synchronous execution for hosts that call handlers synchronously.

        Must not be called from a running event loop.

        Args:
            event: Inbound event payload
            context: Invocation context

        Returns:
            Pipeline response
        """
        return asyncio.run(self.execute(event, context))

    def describe(self) -> str:
        """Describe the hook set on one line.

        Returns:
            String like ``before=[a, b] after=[] on_error=[c]``
        """
        names = self.hook_set.names()
        return " ".join(f"{phase}=[{', '.join(hooks)}]" for phase, hooks in names.items())
