"""
Turn a PIN into the ordered list of keypad slots to click.
"""

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from .exceptions import InvalidPinError
from .logging_utils import get_global_logger

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class ClickSequence:
    """
    Slots to click, in PIN order.

    PIN digits missing from the keymap are skipped, so `slots` can be shorter
    than the PIN; their PIN positions are listed in `unresolved_positions`.
    """

    slots: Tuple[int, ...] = ()
    unresolved_positions: Tuple[int, ...] = ()

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved_positions)

    @property
    def is_complete(self) -> bool:
        return not self.unresolved_positions

    def __iter__(self):
        return iter(self.slots)

    def __len__(self):
        return len(self.slots)


def generate(pin: str, keymap: Mapping[int, int]) -> ClickSequence:
    """
    Map every PIN digit to the slot showing it.

    Parameters:
        pin (str): ASCII decimal digits. May be empty.
        keymap (Mapping[int, int]): digit -> slot.

    Returns:
        ClickSequence: Resolved slots in PIN order, with unresolved positions recorded.

    Raises:
        InvalidPinError: If `pin` contains anything other than 0-9.
    """
    slots: List[int] = []
    unresolved: List[int] = []
    for position, char in enumerate(pin):
        if char not in _DIGITS:
            raise InvalidPinError(f"PIN character at position {position} is not a digit")
        slot = keymap.get(int(char))
        if slot is None:
            unresolved.append(position)
            continue
        slots.append(slot)

    if unresolved:
        # Never log the PIN itself, only where it could not be resolved
        get_global_logger().warning(
            "PIN digits missing from keymap, click sequence truncated",
            operation="generate_clicks",
            pin_length=len(pin),
            unresolved_positions=tuple(unresolved),
        )
    return ClickSequence(tuple(slots), tuple(unresolved))
