"""
Image decoding, fingerprinting and similarity matching for keypad digits.

Images are handled as numpy arrays in RGB(A) channel order, as decoded by
Pillow. A fingerprint is a tiny YCrCb icon of the glyph area; two fingerprints
are compared channel by channel and declared the same digit only when all
three distances are under the threshold.
"""

import base64
import binascii
import io
import struct
from dataclasses import dataclass
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from .config_loader import ConfigLoader
from .exceptions import ImageDecodeError

_MATCHING = ConfigLoader.get_section("matching")

SIMILARITY_THRESHOLD = float(_MATCHING.get("threshold", 20.0))
ICON_SIZE = int(_MATCHING.get("icon_size", 11))
BLUR_KERNEL = int(_MATCHING.get("blur_kernel", 3))
FOREGROUND_TOLERANCE = float(_MATCHING.get("foreground_tolerance", 64))

_WHITE = np.array([255.0, 255.0, 255.0], dtype=np.float32)


@dataclass(frozen=True, eq=False)
class ImageFingerprint:
    """
    Comparison-ready summary of a keypad image.

    Each channel is an ``ICON_SIZE x ICON_SIZE`` float32 icon in 8-bit
    intensity units (0-255): luma ``y`` and chroma ``cr`` / ``cb``.
    """

    y: np.ndarray
    cr: np.ndarray
    cb: np.ndarray

    def channels(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.y, self.cr, self.cb

    def __eq__(self, other):
        if not isinstance(other, ImageFingerprint):
            return NotImplemented
        return all(
            np.array_equal(a, b) for a, b in zip(self.channels(), other.channels())
        )

    __hash__ = None


def decode_png(data: bytes) -> np.ndarray:
    """
    Decode PNG bytes into an RGBA image array.

    Parameters:
        data (bytes): Raw PNG file content.

    Returns:
        np.ndarray: uint8 array of shape (height, width, 4).

    Raises:
        ImageDecodeError: If the bytes are not a readable PNG, or the header
            claims a size past Pillow's decompression bomb limit.
    """
    try:
        with Image.open(io.BytesIO(data), formats=["PNG"]) as img:
            return np.asarray(img.convert("RGBA"), dtype=np.uint8)
    except (
        OSError,
        SyntaxError,
        ValueError,
        EOFError,
        IndexError,
        struct.error,
        Image.DecompressionBombError,
    ) as e:
        raise ImageDecodeError(f"Could not decode PNG image: {e}") from e


def decode_base64_png(text: str) -> np.ndarray:
    """
    Decode a standard base64 string holding a PNG image.

    Raises:
        ImageDecodeError: If the text is not valid base64 or the payload is not a readable image.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image data: {e}") from e
    return decode_png(data)


def _split_alpha(image: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (rgb float32, alpha in 0..1) for grayscale, RGB or RGBA input."""
    if image is None or image.size == 0:
        raise ValueError("Cannot fingerprint an empty image.")
    if image.ndim == 2:
        rgb = np.repeat(image[:, :, None], 3, axis=2)
        alpha = np.ones(image.shape, dtype=np.float32)
    elif image.ndim == 3 and image.shape[2] == 4:
        rgb = image[:, :, :3]
        alpha = image[:, :, 3].astype(np.float32) / 255.0
    elif image.ndim == 3 and image.shape[2] == 3:
        rgb = image
        alpha = np.ones(image.shape[:2], dtype=np.float32)
    else:
        raise ValueError(f"Unsupported image shape: {image.shape}")
    return rgb.astype(np.float32), alpha


def _glyph_box(rgb: np.ndarray, opaque: np.ndarray, background: np.ndarray):
    """
    Bounding box (top, bottom, left, right) of pixels that stand out from the background.

    Falls back to the whole image when nothing stands out.
    """
    deviation = np.abs(rgb - background).max(axis=2)
    rows, cols = np.nonzero(opaque & (deviation > FOREGROUND_TOLERANCE))
    if rows.size == 0:
        return 0, rgb.shape[0], 0, rgb.shape[1]
    return rows.min(), rows.max() + 1, cols.min(), cols.max() + 1


def fingerprint(image: np.ndarray, icon_size: int = None) -> ImageFingerprint:
    """
    Reduce a keypad image to a small YCrCb icon of its glyph.

    The key background is taken as the median colour of the opaque pixels;
    transparent areas are flattened onto it, the image is cropped to the
    pixels that differ from it, lightly blurred, and area-resampled to a
    square icon. Identical input always yields an identical fingerprint.

    Parameters:
        image (np.ndarray): Grayscale, RGB or RGBA uint8 image.
        icon_size (int, optional): Icon edge length; defaults to ICON_SIZE.

    Returns:
        ImageFingerprint: The three channel icons.
    """
    icon_size = icon_size or ICON_SIZE
    rgb, alpha = _split_alpha(image)

    opaque = alpha >= 0.5
    if opaque.any():
        background = np.median(rgb[opaque], axis=0).astype(np.float32)
    else:
        background = _WHITE

    # Flatten transparency onto the key background
    a = alpha[:, :, None]
    flat = rgb * a + background * (1.0 - a)

    top, bottom, left, right = _glyph_box(flat, opaque, background)
    glyph = np.ascontiguousarray(flat[top:bottom, left:right])

    if BLUR_KERNEL > 1:
        glyph = cv2.GaussianBlur(glyph, (BLUR_KERNEL, BLUR_KERNEL), 0)
    icon = cv2.resize(glyph, (icon_size, icon_size), interpolation=cv2.INTER_AREA)

    # Float input to cvtColor must be in 0..1
    icon = (icon / 255.0).astype(np.float32)
    ycrcb = cv2.cvtColor(icon, cv2.COLOR_RGB2YCrCb) * 255.0
    return ImageFingerprint(
        y=ycrcb[:, :, 0].copy(), cr=ycrcb[:, :, 1].copy(), cb=ycrcb[:, :, 2].copy()
    )


def euclidean_metric(
    fp1: ImageFingerprint, fp2: ImageFingerprint
) -> Tuple[float, float, float]:
    """
    Per-channel distances between two fingerprints.

    Each component is the root-mean-square difference over the icon cells of
    one channel (Y, Cr, Cb), in 8-bit intensity units.

    Raises:
        ValueError: If the fingerprints were built with different icon sizes.
    """
    if fp1.y.shape != fp2.y.shape:
        raise ValueError(
            f"Fingerprint sizes do not match: {fp1.y.shape} vs {fp2.y.shape}"
        )
    return tuple(
        float(np.sqrt(np.mean(np.square(a - b))))
        for a, b in zip(fp1.channels(), fp2.channels())
    )


def is_same_digit(
    fp1: ImageFingerprint, fp2: ImageFingerprint, threshold: float = None
) -> bool:
    """
    Decide whether two fingerprints show the same digit.

    Returns:
        bool: True only if all three channel distances are below `threshold`
        (defaults to SIMILARITY_THRESHOLD).
    """
    if threshold is None:
        threshold = SIMILARITY_THRESHOLD
    return all(m < threshold for m in euclidean_metric(fp1, fp2))
