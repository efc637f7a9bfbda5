class InvalidArguments(Exception):
    """A command got arguments it cannot use; ``usage`` goes back to the requester."""

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(usage)
