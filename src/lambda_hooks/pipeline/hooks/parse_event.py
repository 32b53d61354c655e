"""Parse event hook.

Normalizes API Gateway proxy events: JSON-decodes the body and headers
and fills in missing parameter dicts.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State

_PARAMETER_KEYS = (
    "pathParameters",
    "queryStringParameters",
    "multiValueQueryStringParameters",
)


async def parse_event(state: State) -> State:
    """Parse JSON body and headers of an API Gateway event.

    Invalid JSON raises json.JSONDecodeError, which routes the
    invocation to the on_error hooks.

    Args:
        state: Invocation state

    Returns:
        State with event["body"] and event["headers"] decoded
    """
    event = state.event

    if isinstance(event.get("body"), str):
        event["body"] = json.loads(event["body"])

    if isinstance(event.get("headers"), str):
        event["headers"] = json.loads(event["headers"])

    for key in _PARAMETER_KEYS:
        if not event.get(key):
            event[key] = {}

    return state
