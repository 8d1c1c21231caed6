"""Geo-info record returned by the seeip geoip endpoints."""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any

from .exceptions import DecodeError


@dataclass(frozen=True)
class GeoInfo:
    ip: str = ""
    country: str = ""
    country_code: str = ""
    country_code3: str = ""
    region: str = ""
    region_code: str = ""
    city: str = ""
    postal_code: str = ""
    continent_code: str = ""
    organization: str = ""
    timezone: str = ""
    dma_code: int = 0
    area_code: int = 0
    offset: int = 0
    asn: int = 0
    longitude: float = 0.0
    latitude: float = 0.0

    @classmethod
    def from_dict(cls, payload: Any) -> "GeoInfo":
        """Build a record from a decoded JSON body.

        Absent, null and unknown keys are ignored so older and newer API
        versions decode alike. Numeric fields accept either JSON numbers or
        numeric strings; anything that cannot be coerced raises DecodeError.
        """
        if not isinstance(payload, dict):
            raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
        values: dict[str, Any] = {}
        for item in fields(cls):
            raw = payload.get(item.name)
            if raw is None:
                continue
            values[item.name] = _COERCERS[item.type](item.name, raw)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _to_str(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise DecodeError(f"field {name!r}: expected text, got {type(value).__name__}")


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise DecodeError(f"field {name!r}: expected an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise DecodeError(f"field {name!r}: expected an integer, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        # asn is sometimes reported as "AS15169"
        if name == "asn" and text[:2].upper() == "AS":
            text = text[2:]
        try:
            return int(text)
        except ValueError:
            raise DecodeError(f"field {name!r}: not an integer: {value!r}") from None
    raise DecodeError(f"field {name!r}: expected an integer, got {type(value).__name__}")


def _to_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise DecodeError(f"field {name!r}: expected a number, got bool")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            raise DecodeError(f"field {name!r}: not a number: {value!r}") from None
    elif isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise DecodeError(f"field {name!r}: number out of range") from None
    else:
        raise DecodeError(f"field {name!r}: expected a number, got {type(value).__name__}")
    # nan, inf, and literals like 1e400 that parse to inf
    if not math.isfinite(number):
        raise DecodeError(f"field {name!r}: not a finite number: {value!r}")
    return number


_COERCERS = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
}
