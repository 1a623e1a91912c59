"""
Display ID parsing and formatting tests.
"""

import pytest

from dronefleet.utils.display_ids import DeliveryDisplayId, PackageDisplayId


def test_package_id_formats_zero_padded():
    assert PackageDisplayId.format(3) == "PKG-003"
    assert PackageDisplayId.format(42) == "PKG-042"
    assert PackageDisplayId.format(1234) == "PKG-1234"


@pytest.mark.parametrize("raw", ["PKG-003", "pkg-3", "3", 3, " PKG-003 "])
def test_package_id_parses_display_and_bare_forms(raw):
    assert PackageDisplayId.parse(raw).value == 3


@pytest.mark.parametrize("raw", ["PKG-", "PKG-abc", "PKG-3x", "DEL-2024-003", "-3", "0", "PKG-000", "", True, "PKG-99999999999999999999", "2147483648"])
def test_package_id_rejects_malformed(raw):
    with pytest.raises(ValueError):
        PackageDisplayId.parse(raw)


def test_delivery_id_parses_display_form():
    parsed = DeliveryDisplayId.parse("DEL-2024-017")
    
    assert parsed.value == 17
    assert int(parsed) == 17
    assert str(parsed) == "DEL-2024-017"


def test_delivery_id_rejects_placeholder():
    with pytest.raises(ValueError):
        DeliveryDisplayId.parse("DEL-2024-XXX")


def test_package_id_accepts_largest_key():
    assert PackageDisplayId.parse("PKG-2147483647").value == 2147483647


def test_delivery_id_rejects_out_of_range_number():
    with pytest.raises(ValueError, match="Invalid delivery id"):
        DeliveryDisplayId.parse("DEL-2024-99999999999999999999")
