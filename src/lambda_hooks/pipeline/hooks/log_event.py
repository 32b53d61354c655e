"""Log event hook.

Logs the inbound event as indented JSON.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from lambda_hooks.config import get_settings

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State

logger = logging.getLogger(__name__)


async def log_event(state: State) -> State:
    """Log the received event.

    Uses ``state.config["logger"]`` (any callable taking a string) when set,
    otherwise logs at INFO on this module's logger.

    Args:
        state: Invocation state

    Returns:
        Unmodified state
    """
    log = state.config.get("logger") or logger.info
    indent = get_settings().log_event_indent

    log(f"received event: {json.dumps(state.event, indent=indent, default=str)}")

    return state
