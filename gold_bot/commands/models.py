"""Inbound events and the command definition they are matched against."""

import re
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from pydantic import BaseModel


class InboundCommand(BaseModel):
    """One text message delivered by the chat transport."""

    requester_id: int | str  # chat to reply to
    user_id: int | None = None  # sender, for authorization
    text: str


Handler = Callable[[InboundCommand, str], Awaitable[None]]


@dataclass(frozen=True)
class Command:
    name: str
    handler: Handler
    guarded: bool = True  # subject to the authorization check
    takes_args: bool = False
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # /name and an optional @BotName mention. Argument commands need
        # whitespace before their text; the rest accept anything after the word.
        if self.takes_args:
            tail = r"(?:\s+(?P<args>.*))?$"
        else:
            tail = r"(?P<args>.*)$"
        object.__setattr__(
            self,
            "pattern",
            re.compile(
                rf"^/{re.escape(self.name)}\b(?:@\w+)?{tail}",
                re.IGNORECASE | re.DOTALL,
            ),
        )

    def match(self, text: str) -> str | None:
        """Return the argument text ("" if none) or None when not matched."""
        m = self.pattern.match(text.strip())
        if m is None:
            return None
        return (m.group("args") or "").strip()
