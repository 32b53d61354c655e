"""lambda-hooks: lightweight before/after/on_error hooks for async Lambda handlers."""

from lambda_hooks.config import LambdaHooksSettings, get_settings, load_hook_file, use_hook_file
from lambda_hooks.errors import ConfigError, HookContractError, LambdaHooksError
from lambda_hooks.pipeline import (
    Hook,
    HookCreator,
    HookSet,
    PipelineExecutor,
    State,
    combine_hooks,
    use_hooks,
)
from lambda_hooks.pipeline.hooks import (
    handle_scheduled_event,
    handle_unexpected_error,
    log_event,
    parse_event,
    validate_event_body,
)
from lambda_hooks.utils.response import bad_request, ok, server_error

__all__ = [
    "use_hooks",
    "use_hook_file",
    "combine_hooks",
    "PipelineExecutor",
    "State",
    "Hook",
    "HookCreator",
    "HookSet",
    "LambdaHooksSettings",
    "get_settings",
    "load_hook_file",
    "LambdaHooksError",
    "HookContractError",
    "ConfigError",
    "handle_scheduled_event",
    "handle_unexpected_error",
    "log_event",
    "parse_event",
    "validate_event_body",
    "ok",
    "bad_request",
    "server_error",
]
