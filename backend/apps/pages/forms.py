"""
Forms for the landing page.
"""

from collections.abc import Mapping
from typing import Any

from django import forms

from apps.posts.formatting import format_whatsapp_post
from apps.posts.schemas import FREE_TEXT_MIN_LENGTH


def _optional_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class PulseForm(forms.Form):
    """Text-first post form ("Pulse")."""

    commodity = forms.CharField(max_length=255, required=False)
    quantity_min = forms.IntegerField(
        required=False,
        widget=forms.NumberInput(attrs={"placeholder": "min"}),
    )
    quantity_max = forms.IntegerField(
        required=False,
        widget=forms.NumberInput(attrs={"placeholder": "max"}),
    )
    location = forms.CharField(max_length=255, required=False)
    free_text = forms.CharField(
        label="Details (WhatsApp-friendly)",
        min_length=FREE_TEXT_MIN_LENGTH,
        strip=False,
        widget=forms.Textarea(attrs={"rows": 4}),
    )

    def post_fields(self) -> dict[str, Any]:
        """Cleaned values as create_post keyword arguments (blanks become None)."""
        data = self.cleaned_data
        return {
            "commodity": data["commodity"] or None,
            "quantity_min": data["quantity_min"],
            "quantity_max": data["quantity_max"],
            "location": data["location"] or None,
            "free_text": data["free_text"],
        }

    @staticmethod
    def whatsapp_text(data: Mapping[str, Any]) -> str:
        """
        Format raw submitted values for WhatsApp, without validating them.

        Export works on whatever the user has typed so far, so a
        half-filled form still produces a message.
        """
        return format_whatsapp_post(
            commodity=(data.get("commodity") or "").strip(),
            quantity_min=_optional_int(data.get("quantity_min")),
            quantity_max=_optional_int(data.get("quantity_max")),
            location=(data.get("location") or "").strip(),
            free_text=data.get("free_text") or "",
        )
