import pytest

from rail_fields.properties.humanize import humanize


@pytest.mark.parametrize(
    "name, expected",
    [
        ("firstName", "First name"),
        ("is_active", "Is active"),
        ("ID", "Id"),
        ("name", "Name"),
        ("createdAt", "Created at"),
        ("URLField", "Url field"),
        ("__private__value", "Private value"),
        ("  padded  name ", "Padded name"),
        ("", ""),
    ],
)
def test_humanize(name, expected):
    assert humanize(name) == expected


@pytest.mark.parametrize("name", ["firstName", "is_active", "ID", "shippingAddress_line2"])
def test_humanize_is_stable_once_humanized(name):
    once = humanize(name)
    assert humanize(once) == once
    assert humanize(once.lower()) == once
