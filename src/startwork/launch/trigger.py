"""Start-work launch orchestration.

Launch Steps:
    1. Load the board's IDE preference (soft: failures read as "none").
    2. Resolve it in the registry, falling back to the default IDE.
    3. Extract the card context from the live card.
    4. Build the ``startWork/open`` route from the card's query params.
    5. Build the deep link with the resolved IDE's protocol.
    6. Navigate to it.

A store or card-source failure aborts before step 6: the user gets a
notice and ``LaunchAbortedError`` is raised. Navigation only ever sees a
fully built link.
"""

from __future__ import annotations

import logging

from startwork.card import CardContext, CardSource, extract_card_context
from startwork.exceptions import (
    CardContextUnavailableError,
    LaunchAbortedError,
    MalformedRouteError,
    StoreUnavailableError,
)
from startwork.host import Navigator, NoticeLevel, Notifier
from startwork.ides import IDERecord, IDERegistry
from startwork.links import Route, build_link
from startwork.store import PreferenceStore

logger = logging.getLogger(__name__)

START_WORK_CONTROLLER: str = "startWork"
START_WORK_ACTION: str = "open"


def build_route(context: CardContext) -> Route:
    """Return the start-work route for ``context``."""
    return Route(
        controller=START_WORK_CONTROLLER,
        action=START_WORK_ACTION,
        query=context.query_params(),
    )


class LaunchTrigger:
    """Resolve the board's IDE and open a start-work link for a card.

    Usage::

        trigger = LaunchTrigger(prefs, default_registry(), BrowserNavigator(), notifier)
        url = await trigger.launch("B1", JsonCardSource(Path("card.json")))
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        registry: IDERegistry,
        navigator: Navigator,
        notifier: Notifier,
    ) -> None:
        self.preferences = preferences
        self.registry = registry
        self.navigator = navigator
        self.notifier = notifier

    async def resolve_ide(self, board_id: str) -> IDERecord:
        """Return the preferred IDE for ``board_id``, or the default."""
        moniker = await self.preferences.load(board_id)
        record = self.registry.lookup(moniker)
        if record is None:
            logger.debug(
                "No usable IDE preference for board %s (stored %r), using %s",
                board_id, moniker, self.registry.default.moniker,
            )
            return self.registry.default
        return record

    async def build(self, board_id: str, source: CardSource) -> str:
        """Resolve the IDE and card, and return the link without navigating.

        Raises:
            StoreUnavailableError: From a store that fails loudly.
            CardContextUnavailableError: If the card cannot be read.
            MalformedRouteError: If the protocol or controller is empty.
        """
        ide = await self.resolve_ide(board_id)
        context = await extract_card_context(source)
        route = build_route(context)
        if not ide.protocol or not route.controller:
            raise MalformedRouteError(
                f"Refusing to build link: protocol={ide.protocol!r} controller={route.controller!r}"
            )
        return build_link(ide.protocol, route)

    async def launch(self, board_id: str, source: CardSource) -> str:
        """Build the start-work link for the card and navigate to it.

        Returns:
            The URI that was navigated to.

        Raises:
            LaunchAbortedError: If the store or card source failed. The
                user has already been notified and nothing was opened.
        """
        try:
            url = await self.build(board_id, source)
        except (StoreUnavailableError, CardContextUnavailableError) as exc:
            logger.error("Start work aborted for board %s: %s", board_id, exc)
            self.notifier.notify(f"Could not start work: {exc}", NoticeLevel.ERROR)
            raise LaunchAbortedError(str(exc)) from exc
        logger.info("Launching %s", url)
        self.navigator.navigate(url)
        return url
