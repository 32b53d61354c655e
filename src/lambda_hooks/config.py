"""Configuration management for lambda-hooks.

Two kinds of configuration live here:

1. **Settings** (``LambdaHooksSettings``)
   - Read from ``LAMBDA_HOOKS_*`` environment variables
   - Control logging and the default hook file for the CLI

2. **Hook files** (``load_hook_file``)
   - YAML files declaring a hook set by import path
   - Optional ``config`` section exposed read-only as ``state.config``

Example hook file:
--------
lambda_hooks:
  config:
    service: orders
  before:
    - lambda_hooks.log_event
    - lambda_hooks.parse_event
    - hook: lambda_hooks.validate_event_body
      params:
        request_schema: myapp.schemas.Order
  on_error:
    - hook: lambda_hooks.handle_unexpected_error
      params: {}

String entries are hooks. Entries with ``params`` are hook creators and
are called with the params to build the hook.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from lambda_hooks.errors import ConfigError
from lambda_hooks.pipeline.decorator import use_hooks
from lambda_hooks.pipeline.executor import Handler
from lambda_hooks.pipeline.hook import Hook, HookSet

logger = logging.getLogger(__name__)


class LambdaHooksSettings(BaseSettings):
    """Process settings read from LAMBDA_HOOKS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LAMBDA_HOOKS_",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    """Enable debug logging"""

    log_level: str = "INFO"
    """Logging level used by the CLI"""

    log_event_indent: int = 4
    """JSON indent used by the log_event hook"""

    hooks_file: Path | None = None
    """Default hook file for the CLI"""

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG when debug is set."""
        return "DEBUG" if self.debug else self.log_level.upper()


def get_settings(**kwargs: Any) -> LambdaHooksSettings:
    """Build settings from the current environment.

    A new instance is returned on every call.
    """
    return LambdaHooksSettings(**kwargs)


class HookEntry(BaseModel):
    """A hook declared by import path, optionally built from params."""

    hook: str
    """Import path (module.attr or module:attr)"""

    params: dict[str, Any] | None = None
    """When set, the imported object is a hook creator called with these params"""


class HookFileModel(BaseModel):
    """Schema of the ``lambda_hooks`` section of a hook file."""

    model_config = ConfigDict(populate_by_name=True)

    config: dict[str, Any] = Field(default_factory=dict)
    before: list[str | HookEntry] = Field(default_factory=list)
    after: list[str | HookEntry] = Field(default_factory=list)
    on_error: list[str | HookEntry] = Field(default_factory=list, alias="onError")


@dataclass(frozen=True)
class HookFile:
    """Hook set and config loaded from a hook file."""

    path: Path
    hook_set: HookSet
    config: dict[str, Any] = field(default_factory=dict)


def import_object(path: str) -> Any:
    """Import an object from ``module.attr`` or ``module:attr``.

    Args:
        path: Import path

    Returns:
        Imported object

    Raises:
        ConfigError: If the path is malformed or cannot be imported
    """
    if ":" in path:
        module_path, _, attr = path.partition(":")
    else:
        module_path, _, attr = path.rpartition(".")

    if not module_path or not attr:
        raise ConfigError(f"Invalid import path '{path}', expected 'module.attr' or 'module:attr'")

    try:
        module = importlib.import_module(module_path)
        obj = module
        for part in attr.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f"Failed to import '{path}': {e}") from e

    return obj


def _resolve_hook(entry: str | HookEntry) -> Hook:
    """Import a hook, calling it as a hook creator when params are given."""
    if isinstance(entry, str):
        entry = HookEntry(hook=entry)

    obj = import_object(entry.hook)
    if not callable(obj):
        raise ConfigError(f"Hook '{entry.hook}' is not callable")

    if entry.params is None:
        logger.debug("Loaded hook: %s", entry.hook)
        return obj

    logger.debug("Creating hook: %s with params: %s", entry.hook, entry.params)
    return obj(entry.params)


def load_hook_file(yaml_path: Path) -> HookFile:
    """Load a hook set from a YAML hook file.

    Args:
        yaml_path: Path to the hook file

    Returns:
        HookFile with the hook set and config

    Raises:
        ConfigError: If the file is missing, malformed, or a hook cannot be imported
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise ConfigError(f"Hook file not found: {yaml_path}")

    try:
        with yaml_path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Hook file {yaml_path} must contain a mapping")

    section = data.get("lambda_hooks")
    if section is None:
        logger.warning("No 'lambda_hooks' section in %s, using empty hook set", yaml_path)
        section = {}

    try:
        model = HookFileModel.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid hook file {yaml_path}: {e}") from e

    hook_set = HookSet(
        before=tuple(_resolve_hook(e) for e in model.before),
        after=tuple(_resolve_hook(e) for e in model.after),
        on_error=tuple(_resolve_hook(e) for e in model.on_error),
    )
    logger.info("Loaded %d hook(s) from %s", len(hook_set), yaml_path)

    return HookFile(path=yaml_path, hook_set=hook_set, config=model.config)


def use_hook_file(yaml_path: Path, run_sync: bool = False) -> Callable[[Handler], Callable[..., Any]]:
    """Create a use_hooks decorator from a hook file.

    Args:
        yaml_path: Path to the hook file
        run_sync: Return synchronous handlers

    Returns:
        with_hooks(handler) function
    """
    hook_file = load_hook_file(yaml_path)
    return use_hooks(hook_file.hook_set, config=hook_file.config, run_sync=run_sync)
