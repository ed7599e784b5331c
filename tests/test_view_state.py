import pytest

from labeling.intent_classifier import IntentType
from visualization.view_state import ViewState, format_number


@pytest.mark.parametrize("num, expected", [
    (0, "0"),
    (999, "999"),
    (1000, "1.0K"),
    (1500, "1.5K"),
    (2_300_000, "2.3M"),
])
def test_format_number(num, expected):
    assert format_number(num) == expected


def test_view_state_select_and_reset():
    state = ViewState()
    assert state.showing_all

    state.select("Commercial")
    assert state.active_intent == IntentType.COMMERCIAL
    assert not state.showing_all

    state.select(IntentType.NAVIGATIONAL)
    assert state.active_intent == IntentType.NAVIGATIONAL

    state.reset()
    assert state.active_intent is None


def test_view_state_rejects_unknown_intent():
    with pytest.raises(ValueError):
        ViewState().select("Local")
