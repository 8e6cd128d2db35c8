import base64
import os
import struct
import tempfile
import zlib

import cv2
import numpy as np
import pytest

# Keep test runs from writing into the user's home log directory
os.environ.setdefault("PINPAD_LOG_DIR", tempfile.mkdtemp(prefix="pinpad_auto_logs_"))

from pinpad_auto.keypad_images import KEYPAD_IMAGES_B64  # noqa: E402
from pinpad_auto import references  # noqa: E402

DATA_URI_PREFIX = "data:image/png;base64,"


@pytest.fixture
def reference_pngs():
    """Raw PNG bytes of the ten reference digits, indexed by digit."""
    return [base64.b64decode(b64) for b64 in KEYPAD_IMAGES_B64]


@pytest.fixture
def reference_images():
    """Decoded reference digit images, indexed by digit."""
    return [ref.image for ref in references.references()]


@pytest.fixture
def noise_image():
    """Opaque random-noise key image the same size as a reference key."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(110, 180, 3), dtype=np.uint8)


@pytest.fixture
def noise_png(noise_image):
    ok, buf = cv2.imencode(".png", noise_image)
    assert ok
    return buf.tobytes()


@pytest.fixture
def oversized_png():
    """
    A 1x1 PNG whose IHDR claims 20000x20000, past Pillow's decompression bomb limit.
    """
    ok, buf = cv2.imencode(".png", np.zeros((1, 1, 3), dtype=np.uint8))
    assert ok
    data = bytearray(buf.tobytes())
    # signature(8) + length(4), then "IHDR" + 13 data bytes, then the CRC
    data[16:24] = struct.pack(">II", 20000, 20000)
    data[29:33] = struct.pack(">I", zlib.crc32(bytes(data[12:29])))
    return bytes(data)


@pytest.fixture
def to_data_uri():
    """Wrap PNG bytes the way the login page renders keypad <img> sources."""

    def _wrap(png_bytes: bytes) -> str:
        return DATA_URI_PREFIX + base64.b64encode(png_bytes).decode("ascii")

    return _wrap


@pytest.fixture(autouse=True)
def fresh_reference_cache():
    """
    Reset the reference image cache around tests that swap in corrupt data.
    """
    yield
    references.reload_references()
