"""Shared fixtures: an in-memory publisher and a fully wired router."""

import pytest

from gold_bot.commands.handlers import build_commands, fixed_price
from gold_bot.commands.models import InboundCommand
from gold_bot.commands.router import CommandRouter
from gold_bot.delivery.base import Publisher
from gold_bot.signals.models import Destination, OutboundMessage
from gold_bot.state import LotSizeCell

CHANNEL_ID = "-1001234567890"
REQUESTER_ID = 4242


class RecordingPublisher(Publisher):
    """Keeps every outbound message instead of talking to Telegram."""

    def __init__(self, channel_id: str = CHANNEL_ID) -> None:
        super().__init__(channel_id)
        self.sent: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> None:
        self.sent.append(message)

    @property
    def broadcasts(self) -> list[OutboundMessage]:
        return [m for m in self.sent if m.destination is Destination.BROADCAST]

    @property
    def replies(self) -> list[OutboundMessage]:
        return [m for m in self.sent if m.destination is Destination.REQUESTER]


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def lot_cell() -> LotSizeCell:
    return LotSizeCell()


@pytest.fixture
def router(publisher: RecordingPublisher, lot_cell: LotSizeCell) -> CommandRouter:
    commands = build_commands(lot_cell, publisher, fixed_price(3375.97))
    return CommandRouter(commands, publisher)


@pytest.fixture
def make_event():
    def _make(text: str, user_id: int | None = 7) -> InboundCommand:
        return InboundCommand(requester_id=REQUESTER_ID, user_id=user_id, text=text)

    return _make
