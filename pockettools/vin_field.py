"""VinField dataclass for decoded vehicle attributes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VinField:
    """One labelled attribute of a decoded vehicle, e.g. Make: HONDA."""

    label: str
    value: str
