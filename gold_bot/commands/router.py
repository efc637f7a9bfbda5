import logging
from typing import Iterable

from gold_bot.commands.auth import AuthorizationCheck, allow_all
from gold_bot.commands.errors import InvalidArguments
from gold_bot.commands.models import Command, InboundCommand
from gold_bot.delivery.base import Publisher

logger = logging.getLogger(__name__)


class CommandRouter:
    """Match-first-wins dispatch over a fixed, ordered command table."""

    def __init__(
        self,
        commands: Iterable[Command],
        publisher: Publisher,
        authorize: AuthorizationCheck = allow_all,
    ) -> None:
        self._commands = tuple(commands)
        self._publisher = publisher
        self._authorize = authorize

    def resolve(self, text: str) -> tuple[Command, str] | None:
        for command in self._commands:
            args = command.match(text)
            if args is not None:
                return command, args
        return None

    async def dispatch(self, event: InboundCommand) -> bool:
        """Run the first matching handler. Returns False when nothing matched.

        Unmatched text and unauthorized senders get no reply at all.
        """
        resolved = self.resolve(event.text)
        if resolved is None:
            logger.debug("Ignoring unmatched text from %s", event.requester_id)
            return False

        command, args = resolved
        if command.guarded and not self._authorize(event):
            logger.warning(
                "Dropped /%s from unauthorized user %s", command.name, event.user_id
            )
            return True

        logger.info("/%s from %s args=%r", command.name, event.requester_id, args)
        try:
            await command.handler(event, args)
        except InvalidArguments as exc:
            logger.info("/%s rejected: %s", command.name, exc.usage)
            await self._publisher.acknowledge(event.requester_id, exc.usage)
        return True
