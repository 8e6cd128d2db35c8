import base64

import cv2
import numpy as np
import pytest

from pinpad_auto import vision
from pinpad_auto.exceptions import ImageDecodeError
from pinpad_auto.vision import (
    ImageFingerprint,
    decode_base64_png,
    decode_png,
    euclidean_metric,
    fingerprint,
    is_same_digit,
)


class TestDecode:
    def test_decode_png_returns_rgba(self, reference_pngs):
        img = decode_png(reference_pngs[0])
        assert img.shape == (110, 180, 4)
        assert img.dtype == np.uint8

    def test_decode_png_converts_rgb_to_rgba(self, noise_png):
        img = decode_png(noise_png)
        assert img.shape == (110, 180, 4)
        assert np.all(img[:, :, 3] == 255)

    def test_decode_png_rejects_garbage(self):
        with pytest.raises(ImageDecodeError):
            decode_png(b"definitely not a png")

    def test_decode_png_rejects_truncated_file(self, reference_pngs):
        with pytest.raises(ImageDecodeError):
            decode_png(reference_pngs[3][: len(reference_pngs[3]) // 2])

    def test_decode_png_rejects_other_formats(self, noise_image):
        ok, buf = cv2.imencode(".jpg", noise_image)
        assert ok
        with pytest.raises(ImageDecodeError):
            decode_png(buf.tobytes())

    def test_decode_png_rejects_decompression_bomb(self, oversized_png):
        with pytest.raises(ImageDecodeError, match="exceeds limit"):
            decode_png(oversized_png)

    def test_decode_base64_rejects_invalid_alphabet(self):
        with pytest.raises(ImageDecodeError):
            decode_base64_png("iVBORw0K$$$not-base64***")

    def test_decode_base64_roundtrip_matches_bytes(self, reference_pngs):
        text = base64.b64encode(reference_pngs[7]).decode("ascii")
        assert np.array_equal(decode_base64_png(text), decode_png(reference_pngs[7]))

    def test_decode_error_is_value_error(self):
        # Callers that only know about ValueError still catch decode problems
        with pytest.raises(ValueError):
            decode_base64_png("@@@@")


class TestFingerprint:
    def test_shape_and_units(self, reference_images):
        fp = fingerprint(reference_images[5])
        for channel in fp.channels():
            assert channel.shape == (vision.ICON_SIZE, vision.ICON_SIZE)
            assert channel.dtype == np.float32
            assert channel.min() >= -1.0
            assert channel.max() <= 256.0

    def test_custom_icon_size(self, reference_images):
        fp = fingerprint(reference_images[5], icon_size=16)
        assert fp.y.shape == (16, 16)

    def test_deterministic(self, reference_pngs):
        fp1 = fingerprint(decode_png(reference_pngs[4]))
        fp2 = fingerprint(decode_png(reference_pngs[4]))
        assert fp1 == fp2

    def test_fingerprint_is_not_hashable(self, reference_images):
        with pytest.raises(TypeError):
            hash(fingerprint(reference_images[0]))

    def test_grayscale_and_rgb_inputs(self, reference_images):
        rgb = np.ascontiguousarray(reference_images[2][:, :, :3])
        gray = cv2.cvtColor(rgb, cv2.COLOR_RGB2GRAY)
        assert fingerprint(rgb).y.shape == (vision.ICON_SIZE, vision.ICON_SIZE)
        assert fingerprint(gray).y.shape == (vision.ICON_SIZE, vision.ICON_SIZE)

    def test_blank_image_uses_whole_frame(self):
        blank = np.full((20, 30, 3), 200, dtype=np.uint8)
        fp = fingerprint(blank)
        assert np.allclose(fp.y, fp.y[0, 0])

    def test_fully_transparent_image(self):
        clear = np.zeros((20, 30, 4), dtype=np.uint8)
        fp = fingerprint(clear)
        assert np.allclose(fp.y, 255.0, atol=1.0)

    def test_empty_image_rejected(self):
        with pytest.raises(ValueError):
            fingerprint(np.zeros((0, 0, 3), dtype=np.uint8))

    def test_unsupported_channel_count_rejected(self):
        with pytest.raises(ValueError):
            fingerprint(np.zeros((10, 10, 2), dtype=np.uint8))


class TestSimilarity:
    @pytest.mark.parametrize("digit", range(10))
    def test_reference_matches_itself(self, reference_images, digit):
        fp = fingerprint(reference_images[digit])
        assert euclidean_metric(fp, fp) == (0.0, 0.0, 0.0)
        assert is_same_digit(fp, fp)

    @pytest.mark.parametrize("a,b", [(6, 8), (3, 5), (1, 7), (0, 8), (5, 6)])
    def test_lookalike_digits_do_not_match(self, reference_images, a, b):
        fp_a = fingerprint(reference_images[a])
        fp_b = fingerprint(reference_images[b])
        assert not is_same_digit(fp_a, fp_b)

    def test_rendering_noise_still_matches(self, reference_images):
        rng = np.random.default_rng(7)
        ref = reference_images[9]
        noisy = ref.astype(np.int16)
        noisy[:, :, :3] += rng.integers(-2, 3, size=ref[:, :, :3].shape, dtype=np.int16)
        noisy = np.clip(noisy, 0, 255).astype(np.uint8)
        assert is_same_digit(fingerprint(ref), fingerprint(noisy))

    def test_png_recompression_still_matches(self, reference_images):
        bgra = cv2.cvtColor(reference_images[2], cv2.COLOR_RGBA2BGRA)
        ok, buf = cv2.imencode(".png", bgra, [cv2.IMWRITE_PNG_COMPRESSION, 9])
        assert ok
        recompressed = decode_png(buf.tobytes())
        assert is_same_digit(fingerprint(reference_images[2]), fingerprint(recompressed))

    def test_noise_does_not_match_any_reference(self, reference_images, noise_image):
        noise_fp = fingerprint(noise_image)
        for ref in reference_images:
            assert not is_same_digit(noise_fp, fingerprint(ref))

    def test_all_components_must_be_under_threshold(self):
        zeros = np.zeros((3, 3), dtype=np.float32)
        base = ImageFingerprint(zeros, zeros, zeros)
        off_in_cb = ImageFingerprint(zeros, zeros, zeros + 25.0)
        assert euclidean_metric(base, off_in_cb) == (0.0, 0.0, 25.0)
        assert not is_same_digit(base, off_in_cb, threshold=20.0)
        assert is_same_digit(base, off_in_cb, threshold=30.0)

    def test_threshold_is_strict(self):
        zeros = np.zeros((3, 3), dtype=np.float32)
        base = ImageFingerprint(zeros, zeros, zeros)
        at_threshold = ImageFingerprint(zeros + 20.0, zeros, zeros)
        assert not is_same_digit(base, at_threshold, threshold=20.0)

    def test_default_threshold(self):
        assert vision.SIMILARITY_THRESHOLD == 20.0

    def test_size_mismatch_raises(self, reference_images):
        fp_small = fingerprint(reference_images[0], icon_size=8)
        fp_large = fingerprint(reference_images[0], icon_size=16)
        with pytest.raises(ValueError):
            euclidean_metric(fp_small, fp_large)
