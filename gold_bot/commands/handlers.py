"""The bot's fixed command table."""

import logging
from typing import Callable

from gold_bot.commands.errors import InvalidArguments
from gold_bot.commands.models import Command, InboundCommand
from gold_bot.delivery.base import Publisher
from gold_bot.signals import formatter
from gold_bot.signals.models import Signal, SignalKind
from gold_bot.signals.parsing import parse_one, parse_two
from gold_bot.signals.sizing import calculate_lot_size
from gold_bot.state import LotSizeCell

logger = logging.getLogger(__name__)

PriceSource = Callable[[], float]

SENT = "✅ Sent"


def fixed_price(value: float) -> PriceSource:
    """Price source that always quotes ``value``."""
    return lambda: value


class SignalCommands:
    """Handlers for every command; state and transport are injected."""

    def __init__(
        self,
        lot_cell: LotSizeCell,
        publisher: Publisher,
        price_source: PriceSource,
    ) -> None:
        self._lot = lot_cell
        self._publisher = publisher
        self._price = price_source

    def commands(self) -> tuple[Command, ...]:
        return (
            Command("start", self._cmd_start, guarded=False),
            Command("help", self._cmd_help, guarded=False),
            Command("buy", self._market(SignalKind.MARKET_BUY)),
            Command("sell", self._market(SignalKind.MARKET_SELL)),
            Command("again_buy", self._market(SignalKind.AGAIN_BUY)),
            Command("again_sell", self._market(SignalKind.AGAIN_SELL)),
            Command(
                "limit_buy",
                self._limit(SignalKind.LIMIT_BUY, "/limit_buy"),
                takes_args=True,
            ),
            Command(
                "limit_sell",
                self._limit(SignalKind.LIMIT_SELL, "/limit_sell"),
                takes_args=True,
            ),
            Command("update_tp", self._cmd_update_tp, takes_args=True),
            Command("update_sl", self._cmd_update_sl, takes_args=True),
            Command("update_tpsl", self._cmd_update_tpsl, takes_args=True),
            Command("calc_lot", self._cmd_calc_lot, takes_args=True),
            Command("set_lot", self._cmd_set_lot, takes_args=True),
            Command("morning", self._static(formatter.MORNING_TEXT)),
            Command("psychology", self._static(formatter.PSYCHOLOGY_TEXT)),
            Command("daily", self._static(formatter.DAILY_TEXT)),
            Command("weekly", self._static(formatter.WEEKLY_TEXT)),
        )

    async def _send_signal(self, event: InboundCommand, signal: Signal) -> None:
        await self._publisher.publish_and_acknowledge(
            formatter.render_signal(signal), event.requester_id, SENT
        )
        logger.info(
            "%s signal published @ %.2f x %.2f",
            signal.kind.value,
            signal.price,
            signal.lot_size,
        )

    # -- static replies ---------------------------------------------------

    async def _cmd_start(self, event: InboundCommand, args: str) -> None:
        await self._publisher.acknowledge(
            event.requester_id, formatter.WELCOME_TEXT, rich_text=True
        )

    async def _cmd_help(self, event: InboundCommand, args: str) -> None:
        await self._publisher.acknowledge(
            event.requester_id, formatter.HELP_TEXT, rich_text=True
        )

    # -- signals ----------------------------------------------------------

    def _market(self, kind: SignalKind):
        async def handler(event: InboundCommand, args: str) -> None:
            signal = Signal(kind=kind, price=self._price(), lot_size=self._lot.value)
            await self._send_signal(event, signal)

        return handler

    def _limit(self, kind: SignalKind, usage_cmd: str):
        async def handler(event: InboundCommand, args: str) -> None:
            price = parse_one(args)
            if price is None:
                raise InvalidArguments(f"❌ Send: {usage_cmd} 3375.0")
            signal = Signal(kind=kind, price=price, lot_size=self._lot.value)
            await self._send_signal(event, signal)

        return handler

    # -- TP / SL updates --------------------------------------------------

    async def _cmd_update_tp(self, event: InboundCommand, args: str) -> None:
        await self._publisher.publish_and_acknowledge(
            formatter.compose_tp_update(parse_one(args)),
            event.requester_id,
            "✅ TP Updated",
        )

    async def _cmd_update_sl(self, event: InboundCommand, args: str) -> None:
        await self._publisher.publish_and_acknowledge(
            formatter.compose_sl_update(parse_one(args)),
            event.requester_id,
            "✅ SL Updated",
        )

    async def _cmd_update_tpsl(self, event: InboundCommand, args: str) -> None:
        tp, sl = parse_two(args)
        if tp is None and sl is None:
            raise InvalidArguments("❌ Send: /update_tpsl 3385 3350")
        await self._publisher.publish_and_acknowledge(
            formatter.compose_tpsl_update(tp, sl),
            event.requester_id,
            "✅ TP/SL Updated",
        )

    # -- lot sizing -------------------------------------------------------

    async def _cmd_calc_lot(self, event: InboundCommand, args: str) -> None:
        balance, risk = parse_two(args)
        if balance is None or risk is None:
            raise InvalidArguments("❌ Send: /calc_lot 1000 2")
        lot_size = calculate_lot_size(balance, risk)
        await self._publisher.publish_and_acknowledge(
            formatter.compose_lot_calculation(balance, risk, lot_size),
            event.requester_id,
            f"✅ Lot: {formatter.format_number(lot_size)}",
        )

    async def _cmd_set_lot(self, event: InboundCommand, args: str) -> None:
        lot = parse_one(args)
        if lot is None:
            raise InvalidArguments("❌ Send: /set_lot 0.10")
        stored = self._lot.set(lot)
        logger.info("Default lot set to %.2f (requested %s)", stored, lot)
        await self._publisher.acknowledge(
            event.requester_id, f"✅ Default lot set to {stored:.2f}"
        )

    # -- canned reports ---------------------------------------------------

    def _static(self, text: str):
        async def handler(event: InboundCommand, args: str) -> None:
            await self._publisher.publish_and_acknowledge(
                text, event.requester_id, SENT
            )

        return handler


def build_commands(
    lot_cell: LotSizeCell,
    publisher: Publisher,
    price_source: PriceSource,
) -> tuple[Command, ...]:
    return SignalCommands(lot_cell, publisher, price_source).commands()
