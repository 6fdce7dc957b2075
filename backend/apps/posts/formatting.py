"""
WhatsApp export for the Pulse form.

Turns the form's current field values into a plain-text block people can
paste into a chat. Pure: no database, no network.
"""

PLATFORM_NOTICE = "(Platform: TradeFlow — no payment on platform. Contact offline to proceed.)"


def format_quantity(quantity_min: int | str | None, quantity_max: int | str | None) -> str:
    """
    Render a quantity range.

    "10 - 20" when both ends are set, a single number when only one is,
    "Unknown" when neither is. Zero counts as unset.
    """
    if not quantity_min and not quantity_max:
        return "Unknown"
    separator = " - " if quantity_min and quantity_max else ""
    return f"{quantity_min or ''}{separator}{quantity_max or ''}".strip()


def format_whatsapp_post(
    commodity: str | None = None,
    quantity_min: int | str | None = None,
    quantity_max: int | str | None = None,
    location: str | None = None,
    free_text: str | None = None,
) -> str:
    """Format post fields as a WhatsApp-friendly message."""
    lines = [
        f"TradeFlow • {commodity or 'Commodity'}",
        f"Qty: {format_quantity(quantity_min, quantity_max)}",
        f"Location: {location or 'TBC'}",
        f"Details: {free_text or ''}",
        PLATFORM_NOTICE,
    ]
    return "\n".join(lines)
