# gpsnmea

Decode the time, date and position that a GPS receiver reports in NMEA
`GGA` and `RMC` sentences, and render them as the two 16-character lines
of a small character display.

## Modules

- `gpsnmea.nmea` decodes sentences. `NmeaDecoder.decode_gga` returns a
  `GGAData` with `time` (`Time`), `location` (`Location`), `num_of_sat`,
  `altitude` (`Altitude`) and `is_fix_valid`. `NmeaDecoder.decode_rmc`
  returns an `RMCData` with `speed`, `course`, `date` (`Date`) and
  `is_valid`. `GPSData` holds one of each. A `GGA` sentence whose fix
  quality is not 1, 2 or 6, or an `RMC` sentence whose status is not `A`,
  raises `NoFixError`; a sentence with missing fields or a number without
  a decimal point raises `MalformedSentenceError`. Both derive from
  `NmeaError`, which is a `ValueError`.
- `gpsnmea.ringbuffer` provides `RingBuffer`, a fixed-size byte queue
  (512 slots by default, one kept free) that drops bytes once it is full.
  `store` and `feed` add bytes; `read`, `peek`, `available` and `flush`
  work as their names say. `wait_for` consumes bytes up to and including
  a pattern, `copy_upto` returns them, and `get_after` takes a given
  number of bytes. None of them block: when the data runs out they return
  `False` or what was consumed so far. `look_for` tells whether one string
  occurs in another, and `get_data_from_buffer` returns what lies between
  a start and an end marker.
- `gpsnmea.display` ties the two together. `GPSDisplay.process` takes one
  pass over a `RingBuffer`: it looks for a `GGA` and then an `RMC`
  sentence, decodes them, keeps a `FlagState` (`NONE`, `INVALID`, `VALID`)
  for each and returns the two display lines, which `GPSDisplay.lines`
  also gives. The lines show the fix, or `NO FIX YET` / `Please wait`, or
  `VCC Issue` / `Check Connection` when no sentence has been found for
  5000 ms, each unsuccessful wait counting 500 ms. `format_fix_lines`
  renders a `GPSData` directly.

## Time, date and coordinates

The decoder adds a fixed local offset, written as `HHMM`, to the UTC time
of each `GGA` sentence (`530`, that is +05:30, by default). When the hour
rolls past midnight the decoder counts a day change, and adds the count
to the day of every `RMC` date it decodes afterwards.

Latitude and longitude are the receiver's `ddmm.mmmm` values with the
decimal point moved two places left, so `4807.038` becomes `48.07038`;
the minutes are not converted into fractions of a degree. Altitude,
speed and course are the plain decimal values of their fields.

## Installing

```
pip install .
```

Nothing beyond the Python standard library is needed; Python 3.10 or
later.

## Using it from Python

```python
from gpsnmea.nmea import NmeaDecoder, NoFixError

decoder = NmeaDecoder()
try:
    gga = decoder.decode_gga(
        "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"
    )
except NoFixError:
    print("no fix yet")
else:
    print(gga.time, gga.location, gga.num_of_sat, gga.altitude)
```

## Command line

```
gpsnmea-display [FILE] [--gmt-offset HHMM]
```

reads NMEA data from `FILE`, or from standard input when no file is
given, passes it through `GPSDisplay` and prints the two display lines
each time they change.

## What it does not do

The package does not open a serial port or drive a display. The command
reads text from a file or standard input and writes the display lines
to standard output; talking to a receiver or to a screen is left to the
caller. Sentence checksums are not verified.

## Running the tests

```
pip install .[test]
pytest
```