"""
Keymap building: which on-screen slot currently shows which digit.

Each observed keypad image is matched against the reference digits in
increasing digit order and the first match wins. Observed images are matched
independently, so when two of them resemble the same digit the later slot
overwrites the earlier one. Overwrites are reported on the result, not
prevented.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config_loader import ConfigLoader
from .exceptions import ImageDecodeError
from .logging_utils import get_global_logger, log_performance
from .references import reference_fingerprints
from .vision import decode_base64_png, euclidean_metric, fingerprint, is_same_digit

_KEYPAD = ConfigLoader.get_section("keypad")

DATA_URI_PREFIX_LENGTH = int(_KEYPAD.get("data_uri_prefix_length", 22))

KeyMap = Dict[int, int]


@dataclass(frozen=True, eq=False)
class ObservedKeypadImage:
    """One rendered keypad key. `image` is None when its data failed to decode."""

    slot: int
    image: Optional[np.ndarray]
    error: Optional[str] = None

    @property
    def decoded(self) -> bool:
        return self.image is not None


@dataclass
class KeymapResult:
    """
    Outcome of decoding one keypad.

    Attributes:
        keymap: digit -> slot for every digit that matched.
        decode_failures: slot -> error text for images that could not be decoded.
        unmatched_slots: slots that decoded but matched no reference digit.
        overwritten: (digit, lost_slot, new_slot) for every last-write-wins overwrite.
    """

    keymap: KeyMap = field(default_factory=dict)
    decode_failures: Dict[int, str] = field(default_factory=dict)
    unmatched_slots: List[int] = field(default_factory=list)
    overwritten: List[Tuple[int, int, int]] = field(default_factory=list)

    @property
    def missing_digits(self) -> List[int]:
        return [d for d in range(10) if d not in self.keymap]

    @property
    def is_complete(self) -> bool:
        return not self.missing_digits


def observed_from_sources(
    sources: Sequence[Optional[str]], prefix_length: int = None
) -> List[ObservedKeypadImage]:
    """
    Build observed keypad images from the `src` attributes of the keypad <img> tags.

    Parameters:
        sources: Data URIs in markup order; None marks a tag without a src attribute.
        prefix_length: Characters to strip before base64 decoding
            (defaults to the length of ``data:image/png;base64,``).

    Returns:
        list[ObservedKeypadImage]: One entry per source, slot = position in `sources`.
    """
    if prefix_length is None:
        prefix_length = DATA_URI_PREFIX_LENGTH
    logger = get_global_logger()
    observed = []
    for slot, src in enumerate(sources):
        if src is None:
            observed.append(ObservedKeypadImage(slot, None, "missing src attribute"))
            continue
        try:
            image = decode_base64_png(src[prefix_length:])
        except ImageDecodeError as e:
            logger.warning(
                "Keypad image decode failed", operation="decode_slot", slot=slot, error=str(e)
            )
            observed.append(ObservedKeypadImage(slot, None, str(e)))
            continue
        observed.append(ObservedKeypadImage(slot, image))
    return observed


def match_digit(
    image: np.ndarray, threshold: float = None
) -> Tuple[Optional[int], Optional[Tuple[float, float, float]]]:
    """
    Find the first reference digit (in increasing order) that `image` matches.

    Returns:
        (digit, distances) for the match, or (None, None) when nothing matches.
    """
    observed_fp = fingerprint(image)
    for digit, ref_fp in reference_fingerprints():
        if is_same_digit(observed_fp, ref_fp, threshold):
            return digit, euclidean_metric(observed_fp, ref_fp)
    return None, None


@log_performance("build_keymap")
def build_keymap(
    observed: Sequence[ObservedKeypadImage], threshold: float = None
) -> KeymapResult:
    """
    Map each digit to the slot that currently displays it.

    Parameters:
        observed: Keypad images in slot order.
        threshold: Similarity threshold override.

    Returns:
        KeymapResult: The keymap plus decode failures, unmatched slots and overwrites.
    """
    logger = get_global_logger()
    result = KeymapResult()

    for item in observed:
        if not item.decoded:
            result.decode_failures[item.slot] = item.error or "undecoded image"
            continue

        digit, distances = match_digit(item.image, threshold)
        logger.log_match_result(item.slot, digit, distances)
        if digit is None:
            result.unmatched_slots.append(item.slot)
            continue

        previous = result.keymap.get(digit)
        if previous is not None and previous != item.slot:
            logger.warning(
                "Digit matched more than one slot, keeping the later one",
                operation="build_keymap",
                digit=digit,
                lost_slot=previous,
                new_slot=item.slot,
            )
            result.overwritten.append((digit, previous, item.slot))
        result.keymap[digit] = item.slot

    if result.unmatched_slots or result.decode_failures:
        logger.warning(
            "Keypad decoded incompletely",
            operation="build_keymap",
            missing_digits=result.missing_digits,
            unmatched_slots=result.unmatched_slots,
            decode_failures=len(result.decode_failures),
        )
    return result
