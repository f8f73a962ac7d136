"""Tests for host capability dispatch."""

from __future__ import annotations

import asyncio

import pytest

from startwork.capabilities import IDE_ICON, Capability, CardButton, HostContext, PowerUp
from startwork.card import StaticCardSource
from startwork.exceptions import UnsupportedCapabilityError
from startwork.launch import LaunchTrigger
from startwork.settings import SETTINGS_POPUP


@pytest.fixture
def power_up(prefs, registry, navigator, notifier) -> PowerUp:
    return PowerUp(LaunchTrigger(prefs, registry, navigator, notifier))


class TestHandlerTable:
    def test_every_capability_has_a_handler(self, power_up: PowerUp) -> None:
        assert set(power_up.handlers) == set(Capability)

    def test_capability_names(self) -> None:
        assert Capability.CARD_BUTTONS.value == "card-buttons"
        assert Capability.SHOW_SETTINGS.value == "show-settings"

    def test_unknown_capability(self, power_up: PowerUp, popups) -> None:
        with pytest.raises(UnsupportedCapabilityError, match="board-badges"):
            power_up.dispatch("board-badges", HostContext("B1", popups))


class TestCardButtons:
    def test_start_work_button(self, power_up: PowerUp, popups, fix_bug_card) -> None:
        context = HostContext("B1", popups, StaticCardSource(fix_bug_card))
        buttons = power_up.dispatch("card-buttons", context)
        assert len(buttons) == 1
        button = buttons[0]
        assert isinstance(button, CardButton)
        assert button.text == "Start Work"
        assert button.icon == IDE_ICON

    def test_callback_launches(
        self, power_up: PowerUp, popups, navigator, fix_bug_card, vscode_fix_bug_link
    ) -> None:
        context = HostContext("B1", popups, StaticCardSource(fix_bug_card))
        (button,) = power_up.dispatch(Capability.CARD_BUTTONS, context)
        assert asyncio.run(button.callback()) == vscode_fix_bug_link
        assert navigator.visited == [vscode_fix_bug_link]

    def test_requires_card(self, power_up: PowerUp, popups) -> None:
        with pytest.raises(UnsupportedCapabilityError):
            power_up.dispatch(Capability.CARD_BUTTONS, HostContext("B1", popups))


class TestShowSettings:
    def test_opens_settings_popup(self, power_up: PowerUp, popups) -> None:
        result = power_up.dispatch("show-settings", HostContext("B1", popups))
        assert result == SETTINGS_POPUP
        assert popups.opened == [SETTINGS_POPUP]
