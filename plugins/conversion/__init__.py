"""Unit conversion form plugin."""

manifest = {
    "title": "Unit Conversion",
    "summary": "Convert a value between length, temperature, time and volume units.",
    "blueprint": "conversion",
    "category": "General Utilities",
}


__all__ = ["manifest"]
