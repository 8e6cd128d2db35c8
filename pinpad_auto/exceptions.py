"""Custom exceptions for keypad decoding and PIN click planning."""


class PinpadError(Exception):
    """Base exception for keypad decoding failures."""
    pass


class ImageDecodeError(PinpadError, ValueError):
    """Raised when keypad image data is not valid base64 or not a readable PNG."""
    pass


class ReferenceIntegrityError(PinpadError):
    """Raised when the embedded reference digit images cannot be decoded."""
    pass


class InvalidPinError(PinpadError, ValueError):
    """Raised when a PIN is empty or contains characters other than ASCII digits."""
    pass


class UnresolvedPinDigitError(PinpadError):
    """Raised in strict mode when some PIN digits have no slot in the keymap."""

    def __init__(self, message, clicks=None):
        super().__init__(message)
        self.clicks = clicks
