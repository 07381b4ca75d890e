"""Tests for positional field decoding and the CitizenId value object."""

from datetime import date
from unittest.mock import patch

import pytest

from cin_codec.core.decoder import (
    FEMALE,
    MALE,
    CitizenId,
    DecodedIdentity,
    decode,
    get_age,
    get_birth,
    get_birth_date,
    get_birth_day,
    get_birth_month,
    get_birth_year,
    get_checksum_char,
    get_city_code,
    get_district_code,
    get_gender,
    get_province_code,
    get_sequence_code,
)
from cin_codec.core.errors import ChecksumError, DecodeError, FormatError


class TestRegionCodes:
    """Tests for region code accessors."""

    def test_codes(self):
        id_card = "440101199001011233"
        assert get_province_code(id_card) == "44"
        assert get_city_code(id_card) == "4401"
        assert get_district_code(id_card) == "440101"

    def test_codes_from_15(self):
        assert get_district_code("440101900101123") == "440101"

    def test_rejects_permit(self):
        with pytest.raises(DecodeError):
            get_province_code("H1234567800")


class TestBirthDate:
    """Tests for birth date decoding."""

    def test_birth_date(self):
        assert get_birth_date("110101199003077715") == date(1990, 3, 7)
        assert get_birth("110101199003077715") == "19900307"

    def test_birth_parts(self):
        assert get_birth_year("110101200003151239") == 2000
        assert get_birth_month("110101200003151239") == 3
        assert get_birth_day("110101200003151239") == 15

    def test_birth_date_from_15(self):
        """Test that the 2-digit year is widened before parsing."""
        assert get_birth_date("110101900307123") == date(1990, 3, 7)

    def test_impossible_day(self, impossible_birth_id_card):
        with pytest.raises(DecodeError):
            get_birth_date(impossible_birth_id_card)

    def test_impossible_month(self):
        with pytest.raises(DecodeError):
            get_birth_date("110101199013011230")

    def test_leap_day(self):
        assert get_birth_date("110101200002291230") == date(2000, 2, 29)
        with pytest.raises(DecodeError):
            get_birth_date("110101199002291230")

    def test_impossible_15_digit(self):
        """Test that a 15-digit body with a bad date raises DecodeError, not FormatError."""
        with pytest.raises(DecodeError):
            get_birth_date("110101901332123")

    @pytest.mark.parametrize("value", ["", "11010119900307", "11010119900307A715", None])
    def test_malformed(self, value):
        with pytest.raises(DecodeError):
            get_birth_date(value)


class TestSequenceAndGender:
    """Tests for sequence code and gender."""

    def test_sequence_code(self):
        assert get_sequence_code("110101199003071233") == "123"

    def test_gender_odd_is_male(self):
        assert get_gender("110101199003071233") == 1
        assert get_gender("110101199003071233") == MALE

    def test_gender_even_is_female(self):
        assert get_gender("110101199003071241") == 0
        assert get_gender("110101199003071241") == FEMALE

    def test_gender_from_15(self):
        assert get_gender("110101900307123") == MALE
        assert get_gender("110101900307124") == FEMALE

    def test_checksum_char(self):
        assert get_checksum_char("11010119900307109x") == "x"
        assert get_checksum_char("110101900307123") == "3"


class TestAge:
    """Tests for age computation."""

    def test_birthday_not_reached(self):
        assert get_age("110101200003151239", date(2024, 3, 14)) == 23

    def test_birthday_reached(self):
        assert get_age("110101200003151239", date(2024, 3, 15)) == 24
        assert get_age("110101200003151239", date(2024, 12, 31)) == 24

    def test_leap_day_birth(self):
        assert get_age("110101200002291230", date(2001, 2, 28)) == 0
        assert get_age("110101200002291230", date(2001, 3, 1)) == 1

    def test_day_of_birth(self):
        assert get_age("110101200003151239", date(2000, 3, 15)) == 0

    def test_reference_before_birth(self):
        with pytest.raises(DecodeError):
            get_age("110101200003151239", date(1999, 1, 1))

    def test_defaults_to_today(self):
        with patch("cin_codec.utils.dates.date") as mock_date:
            mock_date.side_effect = lambda *args, **kwargs: date(*args, **kwargs)
            mock_date.today.return_value = date(2030, 3, 15)
            assert get_age("110101200003151239") == 30


class TestDecode:
    """Tests for decode."""

    def test_decode(self):
        decoded = decode("110101199003071233")
        assert decoded == DecodedIdentity(
            province_code="11",
            city_code="1101",
            district_code="110101",
            birth_date=date(1990, 3, 7),
            sequence_code="123",
            gender=1,
            checksum_char="3",
        )

    def test_decode_15_matches_18(self):
        assert decode("110101900307123") == decode("110101199003071233")

    def test_decoded_is_immutable(self):
        decoded = decode("110101199003071233")
        with pytest.raises(AttributeError):
            decoded.gender = 0  # type: ignore

    def test_decode_does_not_check_checksum(self):
        assert decode("110101199003071230").checksum_char == "0"

    def test_decode_impossible_date(self, impossible_birth_id_card):
        with pytest.raises(DecodeError):
            decode(impossible_birth_id_card)


class TestCitizenId:
    """Tests for the CitizenId value object."""

    def test_of_18(self):
        cin = CitizenId.of("110101199003077715")
        assert cin.code == "110101199003077715"
        assert str(cin) == "110101199003077715"

    def test_of_15(self):
        cin = CitizenId.of("110101900307123")
        assert cin.code == "110101199003071233"
        assert cin.to_15() == "110101900307123"

    def test_uppercases_x(self):
        assert CitizenId.of("11010119900307109x").code == "11010119900307109X"

    def test_bad_checksum(self):
        with pytest.raises(ChecksumError):
            CitizenId.of("110101199003077710")

    @pytest.mark.parametrize("value", ["H1234567800", "1101011990030777", ""])
    def test_bad_length(self, value):
        with pytest.raises(FormatError):
            CitizenId.of(value)

    def test_accessors(self):
        cin = CitizenId.of("110101200003151239")
        assert cin.province_code == "11"
        assert cin.city_code == "1101"
        assert cin.district_code == "110101"
        assert cin.birth == "20000315"
        assert cin.birth_date == date(2000, 3, 15)
        assert (cin.birth_year, cin.birth_month, cin.birth_day) == (2000, 3, 15)
        assert cin.sequence_code == "123"
        assert cin.gender == MALE
        assert cin.age(date(2024, 3, 14)) == 23
        assert cin.decode().birth_date == date(2000, 3, 15)

    def test_impossible_birth_date_decoded_lazily(self, impossible_birth_id_card):
        """Test that construction checks only the checksum."""
        cin = CitizenId.of(impossible_birth_id_card)
        assert cin.gender == MALE
        with pytest.raises(DecodeError):
            cin.birth_date
