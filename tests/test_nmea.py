import pytest

from gpsnmea.nmea import (
    GPSData,
    MalformedSentenceError,
    NmeaDecoder,
    NmeaError,
    NoFixError,
)

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


def test_gga_fields_without_offset():
    data = NmeaDecoder(gmt_offset=0).decode_gga(GGA)
    assert data.is_fix_valid is True
    assert (data.time.hour, data.time.min, data.time.sec) == (12, 35, 19)
    assert data.location.latitude == pytest.approx(4807.038 / 100)
    assert data.location.longitude == pytest.approx(1131.000 / 100)
    assert data.location.ns == "N"
    assert data.location.ew == "E"
    assert data.num_of_sat == 8
    assert data.altitude.altitude == pytest.approx(545.4)
    assert data.altitude.unit == "M"


def test_gga_without_leading_talker_id():
    body = GGA[len("$GPGGA"):]
    data = NmeaDecoder(gmt_offset=0).decode_gga(body)
    assert data.num_of_sat == 8
    assert data.location.ns == "N"


def test_gga_default_offset_shifts_hour_and_minute():
    decoder = NmeaDecoder()
    data = decoder.decode_gga("$GPGGA,100000,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,")
    assert (data.time.hour, data.time.min, data.time.sec) == (15, 30, 0)
    assert decoder.day_change == 0


def test_gga_minute_overflow_carries_into_hour():
    base = NmeaDecoder(gmt_offset=0).decode_gga(GGA).time
    shifted = NmeaDecoder(gmt_offset=30).decode_gga(GGA).time
    assert shifted.hour == base.hour + 1
    assert shifted.min == base.min + 30 - 60
    assert shifted.sec == base.sec


def test_gga_hour_wrap_increments_day_change_and_rmc_day():
    decoder = NmeaDecoder(gmt_offset=500)
    gga = decoder.decode_gga("$GPGGA,200000,4807.038,N,01131.000,E,1,08,0.9,545.4,M,,,,")
    assert gga.time.hour == 1
    assert decoder.day_change == 1
    rmc = decoder.decode_rmc(RMC)
    plain = NmeaDecoder().decode_rmc(RMC)
    assert rmc.date.day == plain.date.day + 1


def test_day_change_accumulates_across_sentences():
    decoder = NmeaDecoder(gmt_offset=500)
    sentence = "$GPGGA,200000,4807.038,N,01131.000,E,1,08,0.9,545.4,M,,,,"
    decoder.decode_gga(sentence)
    decoder.decode_gga(sentence)
    assert decoder.day_change == 2


def test_negative_offset_wraps_backwards():
    decoder = NmeaDecoder(gmt_offset=-500)
    data = decoder.decode_gga("$GPGGA,020000,4807.038,N,01131.000,E,1,08,0.9,545.4,M,,,,")
    assert data.time.hour == 21
    assert decoder.day_change == -1


@pytest.mark.parametrize("quality", ["1", "2", "6"])
def test_gga_accepted_fix_qualities(quality):
    sentence = GGA.replace(",E,1,", f",E,{quality},")
    assert NmeaDecoder().decode_gga(sentence).is_fix_valid is True


@pytest.mark.parametrize("quality", ["0", "3", ""])
def test_gga_no_fix_raises(quality):
    sentence = GGA.replace(",E,1,", f",E,{quality},")
    with pytest.raises(NoFixError):
        NmeaDecoder().decode_gga(sentence)


def test_gga_short_latitude_is_malformed():
    sentence = GGA.replace("4807.038", "48.1")
    with pytest.raises(MalformedSentenceError):
        NmeaDecoder().decode_gga(sentence)


def test_gga_latitude_without_decimal_point_is_malformed():
    sentence = GGA.replace("4807.038", "4807038")
    with pytest.raises(MalformedSentenceError):
        NmeaDecoder().decode_gga(sentence)


def test_gga_truncated_sentence_is_malformed():
    with pytest.raises(MalformedSentenceError):
        NmeaDecoder().decode_gga("$GPGGA,123519,4807.038")


def test_gga_truncated_after_fix_is_malformed():
    with pytest.raises(MalformedSentenceError):
        NmeaDecoder().decode_gga("$GPGGA,123519,4807.038,N,01131.000,E,1,08")


def test_errors_share_base_class():
    with pytest.raises(NmeaError):
        NmeaDecoder().decode_rmc(RMC.replace(",A,", ",V,"))
    with pytest.raises(ValueError):
        NmeaDecoder().decode_gga("$GPGGA")


def test_negative_altitude_keeps_source_arithmetic():
    sentence = GGA.replace("545.4", "-5.3")
    data = NmeaDecoder().decode_gga(sentence)
    assert data.altitude.altitude == pytest.approx(-4.7)


def test_rmc_fields():
    data = NmeaDecoder().decode_rmc(RMC)
    assert data.is_valid is True
    assert data.speed == pytest.approx(22.4)
    assert data.course == pytest.approx(84.4)
    assert (data.date.day, data.date.mon, data.date.yr) == (23, 3, 94)


def test_rmc_void_raises():
    with pytest.raises(NoFixError):
        NmeaDecoder().decode_rmc(RMC.replace(",A,", ",V,"))


def test_rmc_empty_speed_and_course_are_zero():
    sentence = "$GPRMC,123519,A,4807.038,N,01131.000,E,,,230394,,"
    data = NmeaDecoder().decode_rmc(sentence)
    assert data.speed == 0.0
    assert data.course == 0.0
    assert data.date.mon == 3


def test_rmc_truncated_is_malformed():
    with pytest.raises(MalformedSentenceError):
        NmeaDecoder().decode_rmc("$GPRMC,123519,A,4807.038,N")


def test_gps_data_holds_decoded_records():
    decoder = NmeaDecoder(gmt_offset=0)
    gps = GPSData(gga=decoder.decode_gga(GGA), rmc=decoder.decode_rmc(RMC))
    assert gps.gga.time.hour == 12
    assert gps.rmc.date.yr == 94
    assert GPSData().gga.is_fix_valid is False