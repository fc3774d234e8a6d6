"""Fire-and-forget transient notifications (toasts)."""
from dataclasses import dataclass, field
from typing import Literal

Kind = Literal["success", "error"]


@dataclass
class Notifier:
    """Collects toasts raised by a flow; the UI layer drains and displays them."""
    messages: list[tuple[Kind, str]] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def drain(self) -> list[tuple[Kind, str]]:
        out, self.messages = self.messages, []
        return out
