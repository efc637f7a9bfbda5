"""Authorization predicates for publishing commands."""

import logging
from typing import Callable, Iterable

from gold_bot.commands.models import InboundCommand

logger = logging.getLogger(__name__)

AuthorizationCheck = Callable[[InboundCommand], bool]


def allow_all(event: InboundCommand) -> bool:
    return True


def allow_users(user_ids: Iterable[int]) -> AuthorizationCheck:
    """Only let the given Telegram user IDs through. Empty means everyone."""
    allowed = frozenset(user_ids)
    if not allowed:
        return allow_all

    def check(event: InboundCommand) -> bool:
        return event.user_id in allowed

    logger.info("Publishing restricted to %d user(s)", len(allowed))
    return check
