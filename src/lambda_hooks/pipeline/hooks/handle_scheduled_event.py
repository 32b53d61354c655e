"""Scheduled event hook.

Short-circuits EventBridge scheduled events (e.g. warm-up pings).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State

SCHEDULED_EVENT = "Scheduled Event"


async def handle_scheduled_event(state: State) -> State:
    """Exit with a 200 response for scheduled events."""
    event = state.event

    if isinstance(event, dict) and event.get("detail-type") == SCHEDULED_EVENT:
        state.respond({"statusCode": 200})

    return state
