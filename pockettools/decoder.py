"""Vehicle decoding through the NHTSA vPIC service."""

import logging
from typing import Any, Dict, List, Optional

import requests

from . import config
from .vin_field import VinField

_logger = logging.getLogger(__name__)

NO_FIELDS_MESSAGE = "Decoded, but no common fields present."

_session = requests.Session()


class DecodeError(Exception):
    """The lookup failed; the message is suitable for showing to users."""


def _as_clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def project_fields(row: Dict[str, Any]) -> List[VinField]:
    """
    Pick the commonly useful attributes out of a vPIC result row.

    Blank attributes are dropped. When nothing is left a single
    placeholder field is returned so callers always have something to show.
    """
    displacement = _as_clean_str(row.get("DisplacementL"))
    cylinders = _as_clean_str(row.get("EngineCylinders"))
    engine = " • ".join(
        p
        for p in (
            _as_clean_str(row.get("EngineModel")),
            f"{displacement}L" if displacement else "",
            f"{cylinders} cyl" if cylinders else "",
        )
        if p
    )
    plant = ", ".join(
        p
        for p in (
            _as_clean_str(row.get("PlantCity")),
            _as_clean_str(row.get("PlantState")),
            _as_clean_str(row.get("PlantCountry")),
        )
        if p
    )

    picked = [
        VinField("Make", _as_clean_str(row.get("Make"))),
        VinField("Model", _as_clean_str(row.get("Model"))),
        VinField("Year", _as_clean_str(row.get("ModelYear"))),
        VinField("Trim", _as_clean_str(row.get("Trim"))),
        VinField("Body Class", _as_clean_str(row.get("BodyClass"))),
        VinField("Vehicle Type", _as_clean_str(row.get("VehicleType"))),
        VinField("Engine", engine),
        VinField("Fuel", _as_clean_str(row.get("FuelTypePrimary"))),
        VinField("Plant", plant),
    ]
    fields = [f for f in picked if f.value]
    return fields or [VinField("Result", NO_FIELDS_MESSAGE)]


def decode_vin(
    vin: str, session: Optional[requests.Session] = None
) -> List[VinField]:
    """
    Look up a validated VIN and return its labelled attributes.

    Raises DecodeError on transport failures, non-2xx responses,
    bad JSON or an empty result set. No retries are attempted.
    """
    url = config.VPIC_URL.format(vin=vin)
    http = session if session is not None else _session
    _logger.debug("Decoding vin=%s via %s", vin, url)

    try:
        response = http.get(url, timeout=(config.HTTP_TIMEOUT, config.HTTP_TIMEOUT))
    except requests.exceptions.RequestException as e:
        _logger.debug("vPIC request failed for vin=%s", vin, exc_info=True)
        raise DecodeError(str(e) or "Lookup failed.") from e

    if not response.ok:
        raise DecodeError(f"HTTP {response.status_code}")

    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError("Invalid response from decode service.") from e

    results = payload.get("Results") if isinstance(payload, dict) else None
    row = results[0] if results else None
    if not isinstance(row, dict):
        raise DecodeError("No results returned.")

    fields = project_fields(row)
    _logger.debug("Decoded vin=%s into %d fields", vin, len(fields))
    return fields
