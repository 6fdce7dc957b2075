"""
Tests for the WhatsApp export formatter.
"""

from unittest.mock import patch

import pytest

from apps.posts.formatting import PLATFORM_NOTICE, format_quantity, format_whatsapp_post


class TestFormatQuantity:
    """Tests for format_quantity."""

    @pytest.mark.parametrize(
        ("quantity_min", "quantity_max", "expected"),
        [
            (10, 20, "10 - 20"),
            (10, None, "10"),
            (None, 20, "20"),
            (None, None, "Unknown"),
            (0, 0, "Unknown"),
            (0, 5, "5"),
            ("", "", "Unknown"),
        ],
    )
    def test_ranges(self, quantity_min, quantity_max, expected) -> None:
        assert format_quantity(quantity_min, quantity_max) == expected


class TestFormatWhatsappPost:
    """Tests for format_whatsapp_post."""

    def test_full_message(self) -> None:
        message = format_whatsapp_post(
            commodity="maize",
            quantity_min=10,
            quantity_max=20,
            location="Kano",
            free_text="Dry and bagged.",
        )

        assert message == (
            "TradeFlow • maize\n"
            "Qty: 10 - 20\n"
            "Location: Kano\n"
            "Details: Dry and bagged.\n"
            "(Platform: TradeFlow — no payment on platform. Contact offline to proceed.)"
        )

    def test_placeholders_for_empty_fields(self) -> None:
        message = format_whatsapp_post()

        assert message.splitlines() == [
            "TradeFlow • Commodity",
            "Qty: Unknown",
            "Location: TBC",
            "Details: ",
            PLATFORM_NOTICE,
        ]

    def test_empty_strings_use_placeholders(self) -> None:
        message = format_whatsapp_post(commodity="", location="", free_text="")

        assert "TradeFlow • Commodity" in message
        assert "Location: TBC" in message

    def test_is_deterministic(self) -> None:
        fields = {"commodity": "rice", "quantity_max": 3, "location": "Jos", "free_text": "Paddy"}

        assert format_whatsapp_post(**fields) == format_whatsapp_post(**fields)

    def test_does_not_touch_network_or_database(self) -> None:
        with patch("socket.socket", side_effect=AssertionError("network used")):
            message = format_whatsapp_post(commodity="rice", free_text="Paddy rice")

        assert message.startswith("TradeFlow • rice")
