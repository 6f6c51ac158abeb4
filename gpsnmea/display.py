"""GPS status display: pulls sentences from a receive buffer and renders two LCD lines."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Optional, Sequence, TextIO

from gpsnmea.nmea import (
    DEFAULT_GMT_OFFSET,
    GPSData,
    NmeaDecoder,
    NmeaError,
    NoFixError,
)
from gpsnmea.ringbuffer import RingBuffer

VCC_TIMEOUT_MS = 5000
"""Time without any GGA or RMC sentence after which a supply problem is assumed."""

WAIT_TIMEOUT_MS = 500
"""Time one unsuccessful wait for a sentence costs."""

NO_FIX_LINES = ("   NO FIX YET   ", "   Please wait  ")
VCC_ISSUE_LINES = ("    VCC Issue   ", "Check Connection")


class FlagState(IntEnum):
    """What the last received sentence of one kind told us."""

    NONE = 0
    INVALID = 1
    VALID = 2


def format_fix_lines(data: GPSData) -> tuple[str, str]:
    """Render time, date and position as the two display lines."""
    tim = data.gga.time
    date = data.rmc.date
    loc = data.gga.location
    first = (
        f"{tim.hour:02d}:{tim.min:02d}:{tim.sec:02d}, "
        f"{date.day:02d}{date.mon:02d}{date.yr:02d}"
    )
    second = f"{loc.latitude:.2f}{loc.ns}, {loc.longitude:.2f}{loc.ew}  "
    return first, second


class GPSDisplay:
    """State of the display loop: decoded data, sentence flags and supply timeout."""

    def __init__(
        self,
        decoder: Optional[NmeaDecoder] = None,
        vcc_timeout_ms: int = VCC_TIMEOUT_MS,
        wait_timeout_ms: int = WAIT_TIMEOUT_MS,
    ) -> None:
        self.decoder = decoder if decoder is not None else NmeaDecoder()
        self.data = GPSData()
        self.flag_gga = FlagState.NONE
        self.flag_rmc = FlagState.NONE
        self._vcc_reset = vcc_timeout_ms
        self._wait_cost = wait_timeout_ms
        self.vcc_timeout = vcc_timeout_ms
        self._lines: tuple[str, str] = ("", "")

    def _receive(
        self, buffer: RingBuffer, tag: str, decode: Callable[[str], FlagState]
    ) -> Optional[FlagState]:
        if not buffer.wait_for(tag):
            self.vcc_timeout -= self._wait_cost
            return None
        self.vcc_timeout = self._vcc_reset
        text = buffer.copy_upto("*").decode("ascii", errors="replace")
        return decode(text)

    def _decode_gga(self, text: str) -> FlagState:
        try:
            self.data.gga = self.decoder.decode_gga(text)
        except NoFixError:
            self.data.gga.is_fix_valid = False
            return FlagState.INVALID
        except NmeaError:
            return FlagState.INVALID
        return FlagState.VALID

    def _decode_rmc(self, text: str) -> FlagState:
        try:
            self.data.rmc = self.decoder.decode_rmc(text)
        except NoFixError:
            self.data.rmc.is_valid = False
            return FlagState.INVALID
        except NmeaError:
            return FlagState.INVALID
        return FlagState.VALID

    def process(self, buffer: RingBuffer) -> tuple[str, str]:
        """Run one pass of the display loop over ``buffer``; return the display lines."""
        gga = self._receive(buffer, "GGA", self._decode_gga)
        if gga is not None:
            self.flag_gga = gga
        rmc = self._receive(buffer, "RMC", self._decode_rmc)
        if rmc is not None:
            self.flag_rmc = rmc

        flags = (self.flag_gga, self.flag_rmc)
        if FlagState.VALID in flags:
            self._lines = format_fix_lines(self.data)
        elif FlagState.INVALID in flags:
            self._lines = NO_FIX_LINES

        if self.vcc_timeout <= 0:
            self.vcc_timeout = self._vcc_reset
            self.flag_gga = self.flag_rmc = FlagState.NONE
            self._lines = VCC_ISSUE_LINES
        return self._lines

    def lines(self) -> tuple[str, str]:
        """The two lines currently shown."""
        return self._lines


def _drain(display: GPSDisplay, buffer: RingBuffer, out: TextIO, last: list) -> None:
    while buffer.available():
        shown = display.process(buffer)
        if shown != last[0]:
            last[0] = shown
            out.write(f"{shown[0]}\n{shown[1]}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Feed an NMEA stream through the display loop and print each new screen."""
    parser = argparse.ArgumentParser(
        prog="gpsnmea", description="Show time, date and position from NMEA data."
    )
    parser.add_argument("file", nargs="?", help="NMEA input file (default: stdin)")
    parser.add_argument(
        "--gmt-offset",
        type=int,
        default=DEFAULT_GMT_OFFSET,
        help="local offset from UTC written as HHMM (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    display = GPSDisplay(NmeaDecoder(gmt_offset=args.gmt_offset))
    buffer = RingBuffer()
    last: list = [display.lines()]

    def run(stream: TextIO) -> None:
        for line in stream:
            raw = line.encode("ascii", errors="replace")[: buffer.capacity]
            if buffer.available() + len(raw) > buffer.capacity:
                _drain(display, buffer, sys.stdout, last)
            buffer.feed(raw)
        _drain(display, buffer, sys.stdout, last)

    if args.file:
        with open(args.file, encoding="ascii", errors="replace") as handle:
            run(handle)
    else:
        run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())