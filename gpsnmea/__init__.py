"""Decode NMEA GGA and RMC sentences, buffer receiver data and render two display lines."""

__version__ = "0.1.0"
__all__ = ["nmea", "ringbuffer", "display"]