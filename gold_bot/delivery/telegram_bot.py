import logging

import telegram
from telegram import Update
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from gold_bot.commands.models import InboundCommand
from gold_bot.commands.router import CommandRouter
from gold_bot.delivery.base import Publisher
from gold_bot.signals.models import OutboundMessage

logger = logging.getLogger(__name__)


class TelegramPublisher(Publisher):
    """Publisher backed by the Bot API ``sendMessage`` call."""

    def __init__(self, bot: telegram.Bot, channel_id: int | str) -> None:
        super().__init__(channel_id)
        self._bot = bot

    async def send(self, message: OutboundMessage) -> None:
        await self._bot.send_message(
            chat_id=message.chat_id,
            text=message.body,
            parse_mode="HTML" if message.rich_text else None,
        )
        logger.debug(
            "Telegram %s message sent to %s",
            message.destination.value,
            message.chat_id,
        )


def to_inbound(update: Update) -> InboundCommand | None:
    """Reduce a Telegram update to the fields the router needs."""
    message = update.effective_message
    if message is None or not message.text:
        return None
    user = update.effective_user
    return InboundCommand(
        requester_id=message.chat_id,
        user_id=user.id if user else None,
        text=message.text,
    )


class TelegramBotApp:
    """Feeds every text message to the command router."""

    def __init__(self, token: str, router: CommandRouter) -> None:
        self._token = token
        self._router = router
        self._app: Application | None = None

    def build_application(self) -> Application:
        """Build the telegram Application with the text handler."""
        self._app = Application.builder().token(self._token).build()
        # New messages only; edits and channel posts are skipped
        # block=False: one update's sends never hold up the next update
        self._app.add_handler(
            MessageHandler(
                filters.UpdateType.MESSAGE & filters.TEXT,
                self._on_text,
                block=False,
            )
        )
        self._app.add_error_handler(self._on_error)
        return self._app

    async def _on_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        event = to_inbound(update)
        if event is None:
            return
        await self._router.dispatch(event)

    @staticmethod
    async def _on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error(
            "Telegram handler failed: %s",
            context.error,
            exc_info=context.error,
        )
