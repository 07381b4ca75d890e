"""Pytest fixtures and configuration."""

import pytest

from cin_codec.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from CIN_CODEC_* env vars and cached settings."""
    for name in (
        "CIN_CODEC_CONFIG",
        "CIN_CODEC_DEFAULT_CENTURY",
        "CIN_CODEC_LOG_CODEC_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def valid_id_cards():
    """Valid 18-digit CINs (checksums verified by hand)."""
    return [
        "110101199003077715",  # Beijing, 1990-03-07
        "11010119900307109X",  # Beijing, with X checksum
        "110101199003071233",  # widened from 110101900307123
        "440101199001011233",  # Guangzhou, 1990-01-01
        "110101200003151239",  # Beijing, 2000-03-15
    ]


@pytest.fixture
def invalid_id_cards():
    """Invalid CINs."""
    return [
        "110101199003077710",  # Invalid checksum
        "12345678901234567Y",  # Invalid control character
        "11010119900307",      # Too short
        "1101011990030777155",  # Too long
    ]


@pytest.fixture
def impossible_birth_id_card():
    """Checksum-valid CIN whose birth date is 1990-01-32."""
    return "110101199001321235"
