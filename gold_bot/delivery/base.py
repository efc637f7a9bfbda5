from abc import ABC, abstractmethod

from gold_bot.signals.models import Destination, OutboundMessage


class Publisher(ABC):
    """Sends to the broadcast channel and back to whoever issued a command."""

    def __init__(self, channel_id: int | str) -> None:
        self.channel_id = channel_id

    @abstractmethod
    async def send(self, message: OutboundMessage) -> None:
        """Hand one message to the transport. Failures propagate."""
        ...

    async def publish(self, text: str, rich_text: bool = True) -> None:
        await self.send(
            OutboundMessage(
                destination=Destination.BROADCAST,
                chat_id=self.channel_id,
                body=text,
                rich_text=rich_text,
            )
        )

    async def acknowledge(
        self, requester_id: int | str, text: str, rich_text: bool = False
    ) -> None:
        await self.send(
            OutboundMessage(
                destination=Destination.REQUESTER,
                chat_id=requester_id,
                body=text,
                rich_text=rich_text,
            )
        )

    async def publish_and_acknowledge(
        self, text: str, requester_id: int | str, ack_text: str
    ) -> None:
        """Broadcast, then confirm to the requester only once the broadcast went through."""
        await self.publish(text)
        await self.acknowledge(requester_id, ack_text)
