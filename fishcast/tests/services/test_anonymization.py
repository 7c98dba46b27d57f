# fishcast/tests/services/test_anonymization.py
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from fishcast.app.services.anonymization import anonymize_catch, mask_name


@pytest.mark.parametrize("name,masked", [
    ("Alice", "A****"),
    ("Bo", "B*"),
    ("X", "X"),
    ("", ""),
    ("Mary Jane", "M********"),
])
def test_mask_name_keeps_length_and_first_letter(name, masked):
    assert mask_name(name) == masked
    assert len(mask_name(name)) == len(name)


def test_anonymize_catch_rounds_location_and_drops_private_fields():
    catch = SimpleNamespace(
        id=7, user_id=3, species="Blue Marlin", weight=182.4, length=310.0, gear_type="trolling",
        latitude=-34.41873, longitude=173.05261, depth=80.0, water_temp=22.8,
        time_caught=datetime(2026, 10, 17, 19, 30, tzinfo=timezone.utc), notes="lure bite", photo_url="s3://x",
    )

    public = anonymize_catch(catch, "Alice")

    assert public["latitude"] == -34.42
    assert public["longitude"] == 173.05
    assert public["angler_name"] == "A****"
    assert "user_id" not in public
    assert "photo_url" not in public
    assert "depth" not in public
