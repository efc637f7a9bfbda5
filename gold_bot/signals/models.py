"""Pydantic models for signals and outbound messages."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SignalKind(str, Enum):
    MARKET_BUY = "Market Buy"
    MARKET_SELL = "Market Sell"
    AGAIN_BUY = "Again Buy"
    AGAIN_SELL = "Again Sell"
    LIMIT_BUY = "Limit Buy"
    LIMIT_SELL = "Limit Sell"


class Signal(BaseModel):
    """A trade instruction built per request, never stored."""

    model_config = ConfigDict(frozen=True)

    kind: SignalKind
    price: float
    lot_size: float


class Destination(str, Enum):
    BROADCAST = "broadcast"
    REQUESTER = "requester"


class OutboundMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: Destination
    chat_id: int | str
    body: str
    rich_text: bool = False  # sent with parse_mode=HTML when True
