# product_inventory/domain/coercion.py
import math
import re
from typing import Any

from product_inventory.domain.errors import InvalidProduct

#cyfry na początku stringa, reszta ignorowana ("12abc" -> 12)
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

#zapis dziesiętny jak w Number(): bez "_", tylko cyfry ASCII
_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$", re.ASCII)
_PREFIXED = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$", re.ASCII)
_BASES = {"x": 16, "o": 8, "b": 2}


def parse_id(raw: str) -> int | None:
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def _parse_number_text(text: str) -> float:
    prefixed = _PREFIXED.match(text)
    if prefixed:
        try:
            return float(int(text[2:], _BASES[text[1].lower()]))
        except OverflowError:
            raise InvalidProduct("Price must be a valid number")
    if not _DECIMAL.match(text):
        raise InvalidProduct("Price must be a valid number")
    return float(text)


def to_number(value: Any) -> int | float:
    """
    Konwersja ceny na liczbę.
    bool -> 1/0, None i "" -> 0, string parsowany jak w Number()
    (dziesiętnie albo 0x/0o/0b). Wartości całkowite zwracane jako int (1500.0 -> 1500).
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0
        number = _parse_number_text(text)
    elif isinstance(value, int):
        return value
    elif isinstance(value, float):
        number = value
    else:
        raise InvalidProduct("Price must be a valid number")

    if not math.isfinite(number):
        raise InvalidProduct("Price must be a valid number")

    if number.is_integer():
        return int(number)
    return number


def to_bool(value: Any) -> bool:
    #pusta lista i pusty dict też są prawdziwe
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)
