import pytest

from producthunt.application.services.product_service import encode_image, parse_tags
from producthunt.core.exceptions import ValidationException


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ('["ai", "tools"]', ["ai", "tools"]),
        ("ai, tools", ["ai", "tools"]),
        ('["ai", "ai", " "]', ["ai"]),
    ],
)
def test_parse_tags(raw, expected):
    assert parse_tags(raw) == expected


@pytest.mark.parametrize("raw", ['["ai"', '[{"a": 1}', '[null, 1]', '["ai", 2]'])
def test_parse_tags_rejects_malformed_json_lists(raw):
    with pytest.raises(ValidationException):
        parse_tags(raw)


def test_encode_image_is_ascii_base64():
    assert encode_image(b"\x00\xff") == "AP8="
