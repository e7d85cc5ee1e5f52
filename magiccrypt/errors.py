"""
Error taxonomy
==============
Every failure raised by magiccrypt derives from MagicCryptError. The
concrete classes also subclass the builtin a caller would expect
(ValueError / UnicodeError) so plain `except ValueError` keeps working.

    InvalidConfiguration  — unsupported strength tier at construction
    DecryptionError       — bad base64, wrong key/IV, corrupt data, bad padding
    EncodingError         — input that cannot be represented as UTF-8
"""


class MagicCryptError(Exception):
    """Base class for all magiccrypt errors."""


class InvalidConfiguration(MagicCryptError, ValueError):
    """Raised when a session is requested with an unsupported tier."""


class DecryptionError(MagicCryptError, ValueError):
    """Raised when a ciphertext cannot be decoded, decrypted or unpadded."""


class EncodingError(MagicCryptError, UnicodeError):
    """Raised when text input is not valid UTF-8."""
