"""Exceptions raised by lambda-hooks."""


class LambdaHooksError(Exception):
    """Base class for lambda-hooks errors."""


class HookContractError(LambdaHooksError, TypeError):
    """A hook did not return the invocation state."""


class ConfigError(LambdaHooksError):
    """Invalid hook configuration (missing hook config, bad hook file, bad import path)."""
