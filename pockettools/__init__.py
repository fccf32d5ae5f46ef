"""
Pocket calculator and VIN lookup tools.

This package provides:
- Operator, Phase, CalcState: Calculator state and its building blocks
- Actions and transition: The calculator state machine
- normalize_vin, validate_vin, extract_vin: VIN text handling
- decode_vin: Vehicle lookup through NHTSA vPIC
- push_recent, load_recents, save_recents: Recently decoded VINs
"""

from .operation import Operator
from .phase import Phase
from .calc_state import CalcState, INITIAL_STATE
from .actions import (
    Clear,
    EnterDigit,
    EnterDecimalPoint,
    ToggleSign,
    Percent,
    ApplyOperator,
    Equals,
    action_for_key,
)
from .calculations import apply_operator, format_number, to_number
from .engine import transition, run_keys
from .vin import VinError, normalize_vin, validate_vin, is_decodable, extract_vin
from .vin_field import VinField
from .decoder import DecodeError, decode_vin, project_fields
from .recents import MAX_RECENTS, push_recent
from .loader import RECENTS_KEY, load_recents, save_recents

__all__ = [
    "Operator",
    "Phase",
    "CalcState",
    "INITIAL_STATE",
    "Clear",
    "EnterDigit",
    "EnterDecimalPoint",
    "ToggleSign",
    "Percent",
    "ApplyOperator",
    "Equals",
    "action_for_key",
    "apply_operator",
    "format_number",
    "to_number",
    "transition",
    "run_keys",
    "VinError",
    "normalize_vin",
    "validate_vin",
    "is_decodable",
    "extract_vin",
    "VinField",
    "DecodeError",
    "decode_vin",
    "project_fields",
    "MAX_RECENTS",
    "push_recent",
    "RECENTS_KEY",
    "load_recents",
    "save_recents",
]
