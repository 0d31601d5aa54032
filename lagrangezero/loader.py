"""Turns an input document into points and recovers the constant term.

The document is a JSON object of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than ``keys`` is the decimal x coordinate of a point whose
y coordinate is ``value`` written in ``base``. Entries without both
``base`` and ``value`` are ignored.
"""
import json
import logging
import re
from collections.abc import Mapping

from gmpy2 import mpz

from .base_decoder import check_base, decode
from .exceptions import InvalidInput, InvalidThreshold, UnsupportedBase
from .interpolation import interpolate_at_zero
from .points import Point, PointCollection, check_threshold

KEYS_ENTRY = "keys"

_DECIMAL = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def _parse_int(value):
    """Integer from an int, an integral float or a decimal string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _DECIMAL.match(value):
        # mpz parses decimal strings of any length
        return int(mpz(value.strip().lstrip("+")))
    return None


def parse_threshold(data):
    keys = data.get(KEYS_ENTRY)
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise InvalidThreshold("Invalid input: missing keys.k")

    k = _parse_int(keys["k"])
    if k is None:
        raise InvalidThreshold(f"Threshold k must be an integer, got {keys['k']!r}")
    return check_threshold(k)


def parse_points(data):
    """Decode every usable entry of ``data`` into a Point.

    Points keep the order of the document; selection sorts them later.
    """
    points = []
    for key, entry in data.items():
        if key == KEYS_ENTRY:
            continue
        if not isinstance(entry, Mapping) or not {"base", "value"} <= entry.keys():
            logging.debug("Skipping entry %r without base and value", key)
            continue

        x = _parse_int(key)
        if x is None:
            raise InvalidInput(f"Point key {key!r} is not a decimal integer")

        base = _parse_int(entry["base"])
        if base is None:
            raise UnsupportedBase(f"Unsupported base {entry['base']!r} for x={key}")
        try:
            check_base(base)
        except UnsupportedBase as e:
            raise UnsupportedBase(f"{e} for x={key}") from e

        value = entry["value"]
        if not isinstance(value, str):
            raise InvalidInput(f"Value for x={key} must be a string, got {value!r}")

        points.append(Point(x, decode(value, base)))

    return points


def load_points(data):
    if not isinstance(data, Mapping):
        raise InvalidInput(f"Input must be a JSON object, got {type(data).__name__}")
    k = parse_threshold(data)
    return PointCollection(parse_points(data), k)


def load_file(path):
    """Read a JSON input file into a PointCollection."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInput(f"Invalid JSON in {path}: {e}") from e
    return load_points(data)


def recover_secret(data):
    """Constant term of the polynomial described by ``data``.

    ``data`` is either the parsed input document or a PointCollection.
    """
    if not isinstance(data, PointCollection):
        data = load_points(data)
    return interpolate_at_zero(data.select())


def solve(data):
    """Formatted constant term: an integer, or a reduced fraction."""
    return str(recover_secret(data))
