import asyncio
import logging
import sys

import telegram
import uvicorn

from gold_bot.commands.auth import allow_users
from gold_bot.commands.handlers import build_commands, fixed_price
from gold_bot.commands.router import CommandRouter
from gold_bot.config import MissingConfigurationError, Settings, settings
from gold_bot.delivery.telegram_bot import TelegramBotApp, TelegramPublisher
from gold_bot.delivery.web.app import create_app
from gold_bot.state import LotSizeCell
from gold_bot.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_router(cfg: Settings) -> CommandRouter:
    publisher = TelegramPublisher(telegram.Bot(token=cfg.bot_token), cfg.channel_id)
    lot_cell = LotSizeCell(cfg.default_lot)
    commands = build_commands(lot_cell, publisher, fixed_price(cfg.fixed_price))
    return CommandRouter(commands, publisher, authorize=allow_users(cfg.admin_ids()))


async def main(cfg: Settings = settings) -> None:
    setup_logging(cfg.log_level)

    try:
        cfg.require_transport()
    except MissingConfigurationError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    logger.info("Starting Gold Bot (default lot %.2f)", cfg.default_lot)
    router = build_router(cfg)
    tg_app = TelegramBotApp(cfg.bot_token, router).build_application()

    # Liveness endpoint
    config = uvicorn.Config(
        create_app(),
        host=cfg.web_host,
        port=cfg.port,
        log_level="info",
    )
    server = uvicorn.Server(config)
    logger.info("Web server running on port %d", cfg.port)

    async def run_telegram():
        async with tg_app:
            await tg_app.updater.start_polling()
            await tg_app.start()
            logger.info("Bot is up ✅")
            # Keep running until cancelled
            try:
                while True:
                    await asyncio.sleep(3600)
            except asyncio.CancelledError:
                await tg_app.updater.stop()
                await tg_app.stop()

    await asyncio.gather(server.serve(), run_telegram())


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
