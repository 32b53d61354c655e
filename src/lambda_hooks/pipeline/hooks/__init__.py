"""Built-in hooks.

Plain hooks are used as is; hook creators are called (optionally with
config) to build the hook.
"""

from lambda_hooks.pipeline.hooks.handle_scheduled_event import handle_scheduled_event
from lambda_hooks.pipeline.hooks.handle_unexpected_error import handle_unexpected_error
from lambda_hooks.pipeline.hooks.log_event import log_event
from lambda_hooks.pipeline.hooks.parse_event import parse_event
from lambda_hooks.pipeline.hooks.validate_event_body import validate_event_body

__all__ = [
    "handle_scheduled_event",
    "handle_unexpected_error",
    "log_event",
    "parse_event",
    "validate_event_body",
]
