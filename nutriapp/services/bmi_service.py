"""
BMI Service

Body-mass index derivation shared by anthropometry records and the patient
snapshot. The database trigger on ``anthropometries`` applies the same
formula and rounding.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional


def calculate_bmi(weight_kg, height_m) -> Optional[float]:
    """
    Return ``weight / height^2`` rounded to 2 decimals (half up).

    Returns None when either input is missing or not positive.
    """
    if weight_kg is None or height_m is None:
        return None
    weight, height = float(weight_kg), float(height_m)
    if weight <= 0 or height <= 0:
        return None
    raw = Decimal(repr(weight / (height * height)))
    return float(raw.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _merged(values: Dict[str, Any], current: Optional[Dict[str, Any]], key: str):
    if key in values:
        return values[key]
    return (current or {}).get(key)


def with_anthropometry_bmi(values: Dict[str, Any], current: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Stamp ``bmi`` on an anthropometry write (weight in kg, height in m)."""
    if current is not None and "weight" not in values and "height" not in values:
        return values
    values = dict(values)
    values["bmi"] = calculate_bmi(_merged(values, current, "weight"), _merged(values, current, "height"))
    return values


def with_patient_bmi(values: Dict[str, Any], current: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Stamp the patient snapshot ``bmi`` from ``weight_kg`` and ``height_cm``."""
    if current is not None and "weight_kg" not in values and "height_cm" not in values:
        return values
    height_cm = _merged(values, current, "height_cm")
    values = dict(values)
    values["bmi"] = calculate_bmi(
        _merged(values, current, "weight_kg"),
        float(height_cm) / 100 if height_cm else None,
    )
    return values
