import pytest

from binservice.errors import MalformedCorrelationKey
from binservice.services.correlation import derive_key, split_key


def test_derive_key_joins_address_and_neighborhood() -> None:
    assert derive_key("Av. Corrientes 1234", "CHACARITA") == "Av. Corrientes 1234|CHACARITA"


def test_split_key_recovers_parts() -> None:
    key = derive_key("Lavalleja 800", "VILLA CRESPO")

    assert split_key(key) == ("Lavalleja 800", "VILLA CRESPO")


def test_empty_parts_are_allowed() -> None:
    assert derive_key("", "BOEDO") == "|BOEDO"
    assert split_key("|BOEDO") == ("", "BOEDO")


def test_separator_in_address_is_not_escaped() -> None:
    key = derive_key("Local 3|B", "BOEDO")

    assert key == "Local 3|B|BOEDO"
    assert split_key(key) == ("Local 3|B", "BOEDO")


def test_separator_in_neighborhood_breaks_round_trip() -> None:
    key = derive_key("Boedo 100", "SAN|CRISTOBAL")

    assert split_key(key) != ("Boedo 100", "SAN|CRISTOBAL")


def test_split_key_without_separator_raises() -> None:
    with pytest.raises(MalformedCorrelationKey):
        split_key("no separator here")
