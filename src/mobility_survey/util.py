import math
import re

# plain decimal notation, optionally with exponent (no digit separators)
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"[+-]?Infinity")


def to_bool(value: str | None) -> bool:
    """
    True only for the literal "true" (ignoring case and surrounding whitespace)
    """
    return (value or "").strip().lower() == "true"


def _parse_decimal(text: str) -> float:
    if _DECIMAL.fullmatch(text) or _INFINITY.fullmatch(text):
        return float(text)
    return math.nan


def to_number(value: str | None) -> float:
    """
    Direct numeric coercion: 0 for empty input, NaN for anything that is not a number.
    """
    text = (value or "").strip()
    if not text:
        return 0.0
    return _parse_decimal(text)


def to_float_or_none(value: str | None) -> float | None:
    """
    Finite number or None (for empty, whitespace-only, non-numeric and infinite values)
    """
    text = (value or "").strip()
    if not text:
        return None
    number = _parse_decimal(text)
    return number if math.isfinite(number) else None


def to_str_or_none(value: str | None) -> str | None:
    text = (value or "").strip()
    return text if text else None


# clumsy number formatting to avoid
# the even clumsier usage of locale-based formatting
def float_str(number: float, precision: int = 2) -> str:
    """
    German floating point number without trailing zeros
    """
    return f"{number:.{precision}f}".rstrip("0").rstrip(".").replace(".", ",")


def int_str(number: float) -> str:
    """
    German integer with thousands separator
    """
    return f"{number:,.0f}".replace(",", ".")
