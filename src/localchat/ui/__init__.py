"""Host UI channel: display events and interaction adapters."""

from .events import (
    AppendMessage,
    ClearDisplay,
    ClearRequest,
    ConfirmFileWrite,
    DisplayEvent,
    InboundEvent,
    OpenFile,
    ProposeFile,
    ReportError,
    SubmitText,
)
from .interaction import (
    ConsoleDisplay,
    DisplayPort,
    ThreadedConsoleInteraction,
    UserInteractionPort,
)

__all__ = [
    "AppendMessage",
    "ClearDisplay",
    "ClearRequest",
    "ConfirmFileWrite",
    "ConsoleDisplay",
    "DisplayEvent",
    "DisplayPort",
    "InboundEvent",
    "OpenFile",
    "ProposeFile",
    "ReportError",
    "SubmitText",
    "ThreadedConsoleInteraction",
    "UserInteractionPort",
]
