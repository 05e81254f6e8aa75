"""Unit tests for the bank timestamp codec"""

import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo
from modulbank.domain.exceptions import MalformedTimestamp
from modulbank.utils.date_utils import TimestampCodec


MSK = ZoneInfo("Europe/Moscow")


def test_decode_binds_to_codec_zone(timestamps: TimestampCodec):
    """Test wire time is read as bank local time"""
    value = timestamps.decode("2024-03-01T10:00:00")

    assert value == datetime(2024, 3, 1, 10, 0, 0, tzinfo=MSK)
    assert value.utcoffset() == timedelta(hours=3)
    assert value == datetime(2024, 3, 1, 7, 0, 0, tzinfo=timezone.utc)


def test_round_trip_in_codec_zone(timestamps: TimestampCodec):
    """Test encode then decode is lossless for values already in the zone"""
    original = datetime(2023, 12, 31, 23, 59, 59, tzinfo=MSK)

    encoded = timestamps.encode(original)

    assert encoded == "2023-12-31T23:59:59"
    assert timestamps.decode(encoded) == original


def test_encode_shifts_other_zones(timestamps: TimestampCodec):
    """Test values in another zone are converted before formatting"""
    utc_value = datetime(2024, 1, 1, 22, 30, 0, tzinfo=timezone.utc)

    assert timestamps.encode(utc_value) == "2024-01-02T01:30:00"


def test_encode_naive_value_taken_as_local(timestamps: TimestampCodec):
    """Test naive datetimes are not shifted"""
    assert timestamps.encode(datetime(2024, 5, 9, 8, 0, 0)) == "2024-05-09T08:00:00"


def test_decode_accepts_fractional_seconds(timestamps: TimestampCodec):
    """Test fractional seconds suffix is tolerated"""
    value = timestamps.decode("2024-03-01T10:00:00.25")

    assert value.microsecond == 250000
    assert timestamps.encode(value) == "2024-03-01T10:00:00"


@pytest.mark.parametrize(
    "raw",
    [
        "2024-13-40T99:99:99",
        "2024-02-30T10:00:00",
        "2024-03-01",
        "2024-03-01 10:00:00",
        "2024-3-1T1:2:3",
        "2024-03-01T10:00:00+03:00",
        "",
        "garbage",
        "2024-03-01T10:00:00\n",
        "\u0662\u0660\u0662\u0664-03-01T10:00:00",
        "2024-03-01T10:00:0\u0665",
    ],
)
def test_decode_rejects_malformed(timestamps: TimestampCodec, raw: str):
    """Test malformed wire timestamps never default silently"""
    with pytest.raises(MalformedTimestamp) as exc_info:
        timestamps.decode(raw)

    assert exc_info.value.value == raw


def test_codec_with_other_zone():
    """Test the zone is a codec parameter, not global state"""
    codec = TimestampCodec.for_zone("Asia/Vladivostok")
    value = codec.decode("2024-03-01T10:00:00")

    assert value.utcoffset() == timedelta(hours=10)
    assert TimestampCodec(MSK).encode(value) == "2024-03-01T03:00:00"
