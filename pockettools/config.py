"""Runtime settings read from the environment."""

import os
from pathlib import Path

VPIC_URL = os.environ.get(
    "POCKET_VPIC_URL",
    "https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValuesExtended/{vin}?format=json",
)

# Seconds for connect and read
HTTP_TIMEOUT = float(os.environ.get("POCKET_HTTP_TIMEOUT", "15"))


def default_recents_file() -> Path:
    """Location of the recents store, overridable with POCKET_RECENTS_FILE."""
    override = os.environ.get("POCKET_RECENTS_FILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".pockettools" / "recents.yaml"
