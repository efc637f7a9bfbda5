from gold_bot.signals.sizing import clamp_lot


class LotSizeCell:
    """Holds the default lot size for the lifetime of the process.

    Injected into command handlers instead of living as a module global.
    Reads and writes never await, so each /set_lot lands atomically on the
    event loop; a signal racing it may see either value.
    """

    def __init__(self, initial: float = 0.10) -> None:
        self._value = clamp_lot(initial)

    @property
    def value(self) -> float:
        return self._value

    def set(self, lot: float) -> float:
        self._value = clamp_lot(lot)
        return self._value
