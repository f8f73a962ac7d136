"""Host capability handlers.

The board product calls into a Power-Up by capability name. Each
supported name is a ``Capability`` member with exactly one handler:

    card-buttons  -> list[CardButton]   (the "Start Work" button)
    show-settings -> PopupRequest       (opens the settings popup)

Any other name raises ``UnsupportedCapabilityError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from startwork.card import CardSource
from startwork.exceptions import UnsupportedCapabilityError
from startwork.host import PopupHost, PopupRequest
from startwork.launch import LaunchTrigger
from startwork.settings import SETTINGS_POPUP

logger = logging.getLogger(__name__)

IDE_ICON: str = "https://images.codestream.com/ides/128/vsc.png"
START_WORK_TEXT: str = "Start Work"


class Capability(str, Enum):
    """Capability names the host dispatches to the Power-Up."""

    CARD_BUTTONS = "card-buttons"
    SHOW_SETTINGS = "show-settings"


@dataclass
class HostContext:
    """What the host hands a capability handler.

    Attributes:
        board_id: Board the Power-Up is running on.
        popups: Surface used to render popups.
        card: Source for the in-context card; None outside card capabilities.
    """

    board_id: str
    popups: PopupHost
    card: CardSource | None = None


@dataclass(frozen=True)
class CardButton:
    """A button rendered on the back of a card."""

    icon: str
    text: str
    callback: Callable[[], Awaitable[str]]


class PowerUp:
    """Fixed capability table wired to a launch trigger."""

    def __init__(self, trigger: LaunchTrigger) -> None:
        self.trigger = trigger
        self.handlers: dict[Capability, Callable[[HostContext], object]] = {
            Capability.CARD_BUTTONS: self.card_buttons,
            Capability.SHOW_SETTINGS: self.show_settings,
        }

    def card_buttons(self, context: HostContext) -> list[CardButton]:
        """Return the "Start Work" button for the card in ``context``."""
        if context.card is None:
            raise UnsupportedCapabilityError("card-buttons requires a card in context")
        card = context.card

        async def start_work() -> str:
            return await self.trigger.launch(context.board_id, card)

        return [CardButton(icon=IDE_ICON, text=START_WORK_TEXT, callback=start_work)]

    def show_settings(self, context: HostContext) -> PopupRequest:
        """Open the settings popup and return its description."""
        context.popups.popup(SETTINGS_POPUP)
        return SETTINGS_POPUP

    def dispatch(self, capability: Capability | str, context: HostContext) -> object:
        """Run the handler registered for ``capability``."""
        try:
            key = Capability(capability)
        except ValueError:
            raise UnsupportedCapabilityError(f"Unsupported capability '{capability}'") from None
        logger.debug("Dispatching %s for board %s", key.value, context.board_id)
        return self.handlers[key](context)
