"""
Canonical reference digit images.

The ten images are decoded once per process from the base64 constants in
keypad_images.py and shared read-only by every decoding attempt.
"""

import threading
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .exceptions import ImageDecodeError, ReferenceIntegrityError
from .keypad_images import KEYPAD_IMAGES_B64
from .logging_utils import log_operation
from .vision import ImageFingerprint, decode_base64_png, fingerprint


class ReferenceDigitImage(NamedTuple):
    digit: int
    image: np.ndarray


_lock = threading.Lock()
_references: Optional[Tuple[ReferenceDigitImage, ...]] = None
_fingerprints: Optional[Tuple[Tuple[int, ImageFingerprint], ...]] = None


@log_operation("load_reference_images")
def _load_references(encoded=KEYPAD_IMAGES_B64) -> Tuple[ReferenceDigitImage, ...]:
    if len(encoded) != 10:
        raise ReferenceIntegrityError(
            f"Expected 10 reference digit images, found {len(encoded)}"
        )
    refs = []
    for digit, b64 in enumerate(encoded):
        try:
            image = decode_base64_png(b64)
        except ImageDecodeError as e:
            raise ReferenceIntegrityError(
                f"Embedded reference image for digit {digit} is corrupt: {e}"
            ) from e
        image.setflags(write=False)
        refs.append(ReferenceDigitImage(digit, image))
    return tuple(refs)


def references() -> Tuple[ReferenceDigitImage, ...]:
    """
    Return the ten reference digit images ordered by digit (0-9).

    Decoding happens on first call only.

    Raises:
        ReferenceIntegrityError: If the embedded image data cannot be decoded.
    """
    global _references
    if _references is None:
        with _lock:
            if _references is None:
                _references = _load_references()
    return _references


def reference_fingerprints() -> Tuple[Tuple[int, ImageFingerprint], ...]:
    """Fingerprints of the reference images as (digit, fingerprint), memoized."""
    global _fingerprints
    if _fingerprints is None:
        refs = references()
        with _lock:
            if _fingerprints is None:
                _fingerprints = tuple((ref.digit, fingerprint(ref.image)) for ref in refs)
    return _fingerprints


def reload_references() -> None:
    """Drop the cached images and fingerprints (for testing)."""
    global _references, _fingerprints
    with _lock:
        _references = None
        _fingerprints = None
