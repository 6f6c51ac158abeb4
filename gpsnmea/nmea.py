"""Decoding of NMEA 0183 GGA and RMC sentences into structured records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DEFAULT_GMT_OFFSET = 530
"""Local time offset from UTC written as HHMM (``+530`` is UTC+05:30)."""

_VALID_FIX_QUALITIES = frozenset("126")
_ATOI = re.compile(r"\s*([+-]?\d+)")


class NmeaError(ValueError):
    """Base class for sentence decoding failures."""


class NoFixError(NmeaError):
    """The receiver reports that it has no valid position fix."""


class MalformedSentenceError(NmeaError):
    """The sentence is missing fields or holds a field in an unexpected form."""


@dataclass
class Time:
    hour: int = 0
    min: int = 0
    sec: int = 0


@dataclass
class Location:
    latitude: float = 0.0
    ns: str = ""
    longitude: float = 0.0
    ew: str = ""


@dataclass
class Altitude:
    altitude: float = 0.0
    unit: str = ""


@dataclass
class Date:
    day: int = 0
    mon: int = 0
    yr: int = 0


@dataclass
class GGAData:
    location: Location = field(default_factory=Location)
    time: Time = field(default_factory=Time)
    is_fix_valid: bool = False
    altitude: Altitude = field(default_factory=Altitude)
    num_of_sat: int = 0


@dataclass
class RMCData:
    date: Date = field(default_factory=Date)
    speed: float = 0.0
    course: float = 0.0
    is_valid: bool = False


@dataclass
class GPSData:
    gga: GGAData = field(default_factory=GGAData)
    rmc: RMCData = field(default_factory=RMCData)


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _int16(value: int) -> int:
    return (value + 0x8000) % 0x10000 - 0x8000


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _split_decimal(text: str) -> tuple[int, int, int]:
    """Integer part, fractional digits as a number, and their count."""
    if "." not in text:
        raise MalformedSentenceError(f"expected a decimal point in {text!r}")
    whole_end = text.index(".") + 1
    fraction = text[whole_end:]
    return _int16(_atoi(text)), _atoi(fraction), len(fraction)


def _coordinate(text: str) -> float:
    num, dec, declen = _split_decimal(text)
    return num / 100.0 + dec / 10 ** (declen + 2)


def _fixed(text: str) -> float:
    num, dec, declen = _split_decimal(text)
    return num + dec / 10**declen


def _fields(sentence: str, minimum: int) -> list[str]:
    body = sentence.split("*", 1)[0]
    parts = body.split(",")
    if len(parts) < minimum:
        raise MalformedSentenceError(
            f"expected at least {minimum} fields, got {len(parts)}"
        )
    return parts


class NmeaDecoder:
    """Decodes GGA and RMC sentences, shifting times by a fixed local offset.

    Hour roll-overs seen while decoding GGA times accumulate in
    ``day_change`` and are applied to the day of every later RMC date.
    """

    def __init__(self, gmt_offset: int = DEFAULT_GMT_OFFSET) -> None:
        self.gmt_offset = gmt_offset
        self.day_change = 0

    def _local_time(self, raw: str) -> Time:
        stamp = _atoi(raw)
        hour = stamp // 10000 + _trunc_div(self.gmt_offset, 100)
        minute = (stamp // 100) % 100 + _trunc_mod(self.gmt_offset, 100)
        if minute > 59:
            minute -= 60
            hour += 1
        if hour < 0:
            hour += 24
            self.day_change -= 1
        if hour >= 24:
            hour -= 24
            self.day_change += 1
        return Time(hour=hour, min=minute, sec=stamp % 100)

    def decode_gga(self, sentence: str) -> GGAData:
        """Decode a GGA sentence; raise NoFixError when the fix is absent."""
        parts = _fields(sentence, 7)
        if parts[6][:1] not in _VALID_FIX_QUALITIES:
            raise NoFixError(f"fix quality {parts[6]!r} carries no position")
        parts = _fields(sentence, 11)

        time = self._local_time(parts[1])

        if len(parts[2]) < 6:
            raise MalformedSentenceError(f"latitude {parts[2]!r} is too short")
        location = Location(
            latitude=_coordinate(parts[2]),
            ns=parts[3][:1],
            longitude=_coordinate(parts[4]),
            ew=parts[5][:1],
        )
        altitude = Altitude(altitude=_fixed(parts[9]), unit=parts[10][:1])
        return GGAData(
            location=location,
            time=time,
            is_fix_valid=True,
            altitude=altitude,
            num_of_sat=_atoi(parts[7]),
        )

    def decode_rmc(self, sentence: str) -> RMCData:
        """Decode an RMC sentence; raise NoFixError when the data is void."""
        parts = _fields(sentence, 3)
        if parts[2][:1] != "A":
            raise NoFixError(f"status {parts[2]!r} marks the data as invalid")
        parts = _fields(sentence, 10)

        speed = _fixed(parts[7]) if parts[7] else 0.0
        course = _fixed(parts[8]) if parts[8] else 0.0

        stamp = _atoi(parts[9])
        date = Date(
            day=stamp // 10000 + self.day_change,
            mon=(stamp // 100) % 100,
            yr=stamp % 100,
        )
        return RMCData(date=date, speed=speed, course=course, is_valid=True)