"""
Results view state and number formatting.
"""
from dataclasses import dataclass
from typing import Optional, Union

from labeling.intent_classifier import IntentType


@dataclass
class ViewState:
    """Which intent the results view is focused on; None shows all."""

    active_intent: Optional[IntentType] = None

    def select(self, intent: Union[IntentType, str]) -> None:
        """Focus the view on one intent."""
        if isinstance(intent, str):
            intent = IntentType(intent)
        self.active_intent = intent

    def reset(self) -> None:
        """Go back to the all-intents overview."""
        self.active_intent = None

    @property
    def showing_all(self) -> bool:
        return self.active_intent is None


def format_number(num: Union[int, float]) -> str:
    """
    Compact number formatting: 1500 -> "1.5K", 2300000 -> "2.3M".
    """
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(int(num))
