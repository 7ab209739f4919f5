import pytest

from spotzoom.controllers.actions import ZOOM_IN, ZOOM_OUT, PAN_LEFT
from spotzoom.controllers.input_routing import (
    ScrollTarget, ROUTING_TABLE, route_scroll, scroll_amount, keyboard_zoom_held, dispatch_scroll,
)
from spotzoom.state import InteractionState
from conftest import make_input


@pytest.mark.parametrize("spotlight,fine,expected", [
    (False, False, ScrollTarget.ZOOM),
    (True, False, ScrollTarget.ZOOM),
    (True, True, ScrollTarget.SPOTLIGHT_RADIUS),
    (False, True, ScrollTarget.IGNORED),
])
def test_route_scroll(spotlight, fine, expected):
    assert route_scroll(spotlight, fine) is expected


def test_table_covers_every_modifier_combination():
    assert len(ROUTING_TABLE) == 4


def test_zoom_route_passes_amount_through():
    interaction = InteractionState()
    assert dispatch_scroll(interaction, 3.0, spotlight_held=True, fine_held=False) == 3.0
    assert interaction.spotlight_radius_velocity == 0.0


def test_radius_route_is_inverted():
    interaction = InteractionState()
    assert dispatch_scroll(interaction, 2.0, spotlight_held=True, fine_held=True) == 0.0
    assert interaction.spotlight_radius_velocity == -2.0


def test_fine_adjust_alone_is_ignored():
    interaction = InteractionState()
    assert dispatch_scroll(interaction, 2.0, spotlight_held=False, fine_held=True) == 0.0
    assert interaction.spotlight_radius_velocity == 0.0


def test_scroll_amount_includes_keyboard_zoom():
    assert scroll_amount(make_input(scroll_delta=1.0)) == 1.0
    assert scroll_amount(make_input(actions_held={ZOOM_IN})) == pytest.approx(0.1)
    assert scroll_amount(make_input(actions_held={ZOOM_OUT}, scroll_delta=-1.0)) == pytest.approx(-1.1)
    assert scroll_amount(make_input(actions_held={ZOOM_IN, ZOOM_OUT})) == pytest.approx(0.0)


def test_keyboard_zoom_held():
    assert keyboard_zoom_held(make_input(actions_held={ZOOM_OUT}))
    assert not keyboard_zoom_held(make_input(actions_held={PAN_LEFT}))
