"""Localization package."""

from tax_copilot.i18n.strings import UI_TEXT, format_inr, get_text, toggle_language

__all__ = ["UI_TEXT", "format_inr", "get_text", "toggle_language"]
