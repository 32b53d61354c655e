"""Validate event body hook.

Validates ``event["body"]`` against a pydantic model and short-circuits
with a 400 response when validation fails.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from lambda_hooks.config import import_object
from lambda_hooks.errors import ConfigError

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State
    from lambda_hooks.pipeline.hook import Hook

logger = logging.getLogger(__name__)


def _resolve_schema(schema: Any) -> type[BaseModel]:
    if isinstance(schema, str):
        schema = import_object(schema)
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise ConfigError(f"request_schema must be a pydantic model, got {schema!r}")
    return schema


def validate_event_body(config: Mapping[str, Any] | None = None) -> Hook:
    """Create a hook validating the event body.

    Run after parse_event so the body is already decoded.

    Args:
        config: Must contain 'request_schema', a pydantic model class
                or its import path

    Returns:
        Hook that exits with a 400 response on invalid bodies.
        The hook raises ConfigError when config is missing.
    """

    async def validate_event_body_hook(state: State) -> State:
        if not config or "request_schema" not in config:
            raise ConfigError("missing required config for validation")

        schema = _resolve_schema(config["request_schema"])
        body = state.event.get("body")

        try:
            schema.model_validate(body, strict=True)
            logger.debug("Body passed validation: %s", body)
        except ValidationError as e:
            logger.info("Error validating body: %s", e)
            state.respond({"statusCode": 400, "body": json.dumps({"error": str(e)})})

        return state

    return validate_event_body_hook
