from __future__ import annotations
import re

from .schemas import Scalar

# decimal literal: optional sign, ASCII digits with optional fraction, optional exponent
_NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+(?P<frac>\.[0-9]*)?|(?P<lead>\.[0-9]+))(?P<exp>[eE][+-]?[0-9]+)?$")


def coerce(raw_text: str) -> Scalar:
    """Turn text typed into a field into the value that gets stored.

    ``""`` becomes ``None``, a complete number literal becomes ``int`` or
    ``float``, anything else is kept as the original string. Never raises.
    """
    if raw_text == "":
        return None

    candidate = raw_text.strip()
    m = _NUMBER_RE.match(candidate)
    if not m:
        return raw_text

    try:
        if m.group("frac") is None and m.group("lead") is None and m.group("exp") is None:
            return int(candidate)
        value = float(candidate)
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit
        return raw_text

    if value != value or value in (float("inf"), float("-inf")):
        # overflowing exponents are not representable in JSON
        return raw_text
    return value
