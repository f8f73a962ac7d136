"""Host-page collaborators: browser navigation, user notices, popup surfaces.

These are the thin edges where the launcher touches the browser or the
board product's UI. Each has an abstract contract plus a concrete
adapter and a recording double for tests and dry runs.
"""

from __future__ import annotations

import logging
import webbrowser
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


class NoticeLevel(str, Enum):
    """Severity of a user-visible, non-blocking notice."""

    INFO = "info"
    ERROR = "error"


_NOTICE_STYLES: dict[NoticeLevel, str] = {
    NoticeLevel.INFO: "cyan",
    NoticeLevel.ERROR: "bold red",
}


@dataclass(frozen=True)
class PopupRequest:
    """Declarative description of a popup the host should render."""

    title: str
    url: str
    height: int


# -- Navigation ---------------------------------------------------------------


class Navigator(ABC):
    """Sends the current browsing context to a URI."""

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Navigate to ``url``."""


class BrowserNavigator(Navigator):
    """Hand the URI to the system browser, which dispatches custom schemes."""

    def navigate(self, url: str) -> None:
        logger.debug("Opening %s", url)
        if not webbrowser.open(url):
            logger.warning("No browser accepted %s", url)


@dataclass
class RecordingNavigator(Navigator):
    """Keep every URI instead of opening it."""

    visited: list[str] = field(default_factory=list)

    def navigate(self, url: str) -> None:
        self.visited.append(url)


# -- Notices ------------------------------------------------------------------


class Notifier(ABC):
    """Shows a non-blocking notice to the user."""

    @abstractmethod
    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Display ``message``."""


class ConsoleNotifier(Notifier):
    """Print notices to the terminal through rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.console.print(f"[{_NOTICE_STYLES[level]}]{escape(message)}[/]")


@dataclass
class RecordingNotifier(Notifier):
    """Collect ``(level, message)`` pairs."""

    notices: list[tuple[NoticeLevel, str]] = field(default_factory=list)

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.notices.append((level, message))


# -- Popup surfaces -----------------------------------------------------------


class PopupHost(ABC):
    """Renders popups on request and lets an open popup close itself."""

    @abstractmethod
    def popup(self, request: PopupRequest) -> None:
        """Render ``request``."""

    @abstractmethod
    def close_popup(self) -> None:
        """Dismiss the popup currently shown."""


@dataclass
class RecordingPopupHost(PopupHost):
    """Track opened popups and close requests."""

    opened: list[PopupRequest] = field(default_factory=list)
    closed: int = 0

    def popup(self, request: PopupRequest) -> None:
        self.opened.append(request)

    def close_popup(self) -> None:
        self.closed += 1
