"""Unexpected error hook.

Turns any captured error into a generic 500 response.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from lambda_hooks.utils.response import server_error

if TYPE_CHECKING:
    from lambda_hooks.pipeline.context import State
    from lambda_hooks.pipeline.hook import Hook

logger = logging.getLogger(__name__)


def handle_unexpected_error(config: Mapping[str, Any] | None = None) -> Hook:
    """Create an on_error hook returning a 500 response.

    Args:
        config: Unused, accepted so the hook can be declared with params

    Returns:
        Hook that exits with a server_error response carrying the error message
    """

    async def unexpected_error_hook(state: State) -> State:
        error = state.error
        message = str(error) if error is not None and str(error) else repr(error)

        logger.debug("Handling unexpected error: %r", error)
        state.respond(server_error(message))

        return state

    return unexpected_error_hook
