"""YAML loading and saving of the recents key-value store."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

_logger = logging.getLogger(__name__)

RECENTS_KEY = "vin_recents_v1"


def _read_store(filename: Union[str, Path]) -> Dict[str, Any]:
    """Load the whole store. Missing or unreadable files count as empty."""
    path = Path(filename)
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as fp:
            data = yaml.load(fp, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        _logger.warning("Ignoring unreadable recents store %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def load_recents(filename: Union[str, Path]) -> List[str]:
    """
    Load the recent VIN list.

    Anything that is not a list yields an empty list, and non-string
    entries are dropped.
    """
    value = _read_store(filename).get(RECENTS_KEY)
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def save_recents(filename: Union[str, Path], recents: List[str]) -> None:
    """
    Write the recent VIN list back to the store.

    Other keys already present in the file are preserved.
    """
    path = Path(filename)
    data = _read_store(path)
    data[RECENTS_KEY] = list(recents)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )
    _logger.debug("Saved %d recents to %s", len(recents), path)
