"""VIN text utilities: normalization, validation and OCR extraction."""

import re
from enum import Enum
from typing import Optional

VIN_LENGTH = 17
FORBIDDEN_LETTERS = frozenset("IOQ")  # Too easily confused with 1 and 0

_NOT_ALNUM = re.compile(r"[^A-Z0-9]")


class VinError(Enum):
    """Reasons a VIN cannot be decoded. Value is the message shown to users."""

    LENGTH = "VIN must be exactly 17 characters."
    FORBIDDEN_CHARACTER = "VIN cannot contain I, O, or Q."


def _has_forbidden(text: str) -> bool:
    return any(ch in FORBIDDEN_LETTERS for ch in text)


def normalize_vin(text: str) -> str:
    """Trim, uppercase and drop everything outside A-Z and 0-9."""
    return _NOT_ALNUM.sub("", text.strip().upper())


def validate_vin(vin: str) -> Optional[VinError]:
    """
    Check a normalized VIN.

    An empty string is not an error: nothing has been typed yet.
    """
    if not vin:
        return None
    if len(vin) != VIN_LENGTH:
        return VinError.LENGTH
    if _has_forbidden(vin):
        return VinError.FORBIDDEN_CHARACTER
    return None


def is_decodable(vin: str) -> bool:
    """True when the VIN is complete and well-formed."""
    return len(vin) == VIN_LENGTH and validate_vin(vin) is None


def extract_vin(text: str) -> Optional[str]:
    """
    Find a VIN in free-form OCR text.

    Whole tokens are tried first. If none qualifies, the tokens are joined
    and every 17-character window is scanned left to right, which recovers
    VINs broken across lines or by stray symbols.
    """
    tokens = _NOT_ALNUM.sub(" ", text.upper()).split()

    for token in tokens:
        if len(token) == VIN_LENGTH and not _has_forbidden(token):
            return token

    joined = "".join(tokens)
    for start in range(len(joined) - VIN_LENGTH + 1):
        window = joined[start : start + VIN_LENGTH]
        if not _has_forbidden(window):
            return window

    return None
