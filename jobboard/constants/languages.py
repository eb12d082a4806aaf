"""Supported job languages (ISO 639-1 codes)."""

from typing import Dict, Optional

LANGUAGES: Dict[str, str] = {
    "ar": "Arabic",
    "bg": "Bulgarian",
    "bn": "Bengali",
    "cs": "Czech",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "es": "Spanish",
    "et": "Estonian",
    "fa": "Persian",
    "fi": "Finnish",
    "fr": "French",
    "he": "Hebrew",
    "hi": "Hindi",
    "hr": "Croatian",
    "hu": "Hungarian",
    "id": "Indonesian",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "ms": "Malay",
    "nl": "Dutch",
    "no": "Norwegian",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sk": "Slovak",
    "sl": "Slovenian",
    "sr": "Serbian",
    "sv": "Swedish",
    "sw": "Swahili",
    "th": "Thai",
    "tl": "Tagalog",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "vi": "Vietnamese",
    "zh": "Chinese",
}

LANGUAGE_CODES = frozenset(LANGUAGES)

_NAME_INDEX = {name.lower(): code for code, name in LANGUAGES.items()}


def get_language_code_by_name(name: str) -> Optional[str]:
    """Look up a language code by English name (case-insensitive)."""
    if not isinstance(name, str):
        return None
    return _NAME_INDEX.get(name.strip().lower())


def get_display_name_from_code(code: str) -> str:
    """Return the English display name for a code, or the code itself."""
    return LANGUAGES.get(code, code)
