"""Before/after/on_error hook pipeline for async handlers.

This module implements the hook pipeline with:
- A per-invocation State threaded through every hook
- Field-wise merging of partial hook sets
- Early exit via ``state.exit`` and one layer of error recovery

Formal Model:
    Hook h: State → State

    run(event, context) =
        s₀ = State(event, context)
        sₙ = before(s₀)                   stop if exit
        sₙ.response = handler(event, ctx)
        sₘ = after(sₙ)                    stop if exit
        on failure: s.error = e; on_error(s)   stop if exit
        return s.response
"""

from lambda_hooks.pipeline.context import State
from lambda_hooks.pipeline.decorator import use_hooks
from lambda_hooks.pipeline.executor import PipelineExecutor
from lambda_hooks.pipeline.hook import Hook, HookCreator, HookSet, combine_hooks

__all__ = [
    "State",
    "Hook",
    "HookCreator",
    "HookSet",
    "combine_hooks",
    "PipelineExecutor",
    "use_hooks",
]
