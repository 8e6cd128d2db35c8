"""
Hand-off to the browser automation that drives the login page.

The browser side collects the `src` attribute of every keypad <img> in page
order; this module decodes them, plans the clicks for the PIN, and returns
the CSS selectors to click in order.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .click_sequence import ClickSequence, generate
from .config_loader import ConfigLoader
from .exceptions import InvalidPinError, UnresolvedPinDigitError
from .keymap import KeymapResult, build_keymap, observed_from_sources
from .logging_utils import LogContext

_KEYPAD = ConfigLoader.get_section("keypad")

SLOT_SELECTOR = _KEYPAD.get("slot_selector", ".uia-pin-{slot}")
EXPECTED_KEYS = int(_KEYPAD.get("expected_keys", 10))


def slot_selector(slot: int) -> str:
    """CSS selector of the keypad key at `slot`, e.g. '.uia-pin-3'."""
    return SLOT_SELECTOR.format(slot=slot)


@dataclass(frozen=True)
class PinEntryPlan:
    keymap: KeymapResult
    clicks: ClickSequence

    @property
    def selectors(self) -> List[str]:
        return [slot_selector(slot) for slot in self.clicks.slots]

    @property
    def is_complete(self) -> bool:
        return self.clicks.is_complete


def plan_pin_entry(
    pin: str,
    sources: Sequence[Optional[str]],
    strict: bool = False,
    threshold: float = None,
) -> PinEntryPlan:
    """
    Decode the rendered keypad and plan the clicks that enter `pin`.

    Parameters:
        pin (str): The PIN to enter, ASCII digits only.
        sources: `src` attributes of the keypad images in page order (None for a missing attribute).
        strict (bool): Raise instead of returning a plan that would enter a truncated PIN.
        threshold (float, optional): Similarity threshold override.

    Returns:
        PinEntryPlan: Keymap diagnostics, click sequence and selectors.

    Raises:
        InvalidPinError: If `pin` is empty or not all digits.
        UnresolvedPinDigitError: In strict mode, if any PIN digit has no slot.
    """
    if not pin:
        raise InvalidPinError("PIN is required")

    with LogContext("plan_pin_entry", keys=len(sources), pin_length=len(pin)) as ctx:
        if len(sources) != EXPECTED_KEYS:
            ctx.log_event("unexpected_key_count", expected=EXPECTED_KEYS)

        keymap = build_keymap(observed_from_sources(sources), threshold)
        ctx.log_debug("Keymap built", matched=len(keymap.keymap))

        clicks = generate(pin, keymap.keymap)
        if strict and not clicks.is_complete:
            raise UnresolvedPinDigitError(
                f"{clicks.unresolved_count} PIN digit(s) could not be located on the keypad",
                clicks=clicks,
            )
        return PinEntryPlan(keymap, clicks)
