# sim/event.py
from dataclasses import dataclass


@dataclass(eq=False)
class CancelToken:
    """Shared by every event of one scheduled activity; cancel once, all go inert."""

    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(order=True)
class BaseEvent:
    t: float  # milliseconds on the kernel clock

    @property
    def cancelled(self) -> bool:
        token = getattr(self, "token", None)
        return token is not None and token.cancelled
