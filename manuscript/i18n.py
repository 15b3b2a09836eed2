"""
Internationalization (i18n) for export labels.

Simple dict-based localization for document rendering labels
(Part, Chapter, TOC, cover lines). Supports fr and en with English fallback.

Usage:
    from manuscript.i18n import get_string, format_part_title
    label = get_string("chapter", "fr")  # "Chapitre"
    title = format_part_title(2, "Bases", "fr")  # "Partie 2: Bases"
"""

from datetime import datetime
from typing import Optional

# String tables keyed by (string_id, language_code)
STRINGS = {
    "part": {
        "en": "Part",
        "fr": "Partie",
    },
    "chapter": {
        "en": "Chapter",
        "fr": "Chapitre",
    },
    "table_of_contents": {
        "en": "Table of Contents",
        "fr": "Table des matières",
    },
    "contents": {
        "en": "Contents",
        "fr": "Sommaire",
    },
    "author": {
        "en": "Author",
        "fr": "Auteur",
    },
    "email": {
        "en": "Email",
        "fr": "Email",
    },
    "date": {
        "en": "Date",
        "fr": "Date",
    },
}

# strftime patterns matching each locale's short date
DATE_FORMATS = {
    "en": "%m/%d/%Y",
    "fr": "%d/%m/%Y",
}


def get_string(string_id: str, lang: str = "en") -> str:
    """
    Get a localized string by ID and language code.

    Falls back to English if the language is not found,
    then to the string_id itself if no translation exists.
    """
    table = STRINGS.get(string_id)
    if not table:
        return string_id
    return table.get(lang, table.get("en", string_id))


def _format_numbered_title(string_id: str, number: Optional[int], title: str, lang: str) -> str:
    if number is None:
        return title

    return f"{get_string(string_id, lang)} {number}: {title or ''}"


def format_part_title(number: Optional[int], title: str = "", lang: str = "en") -> str:
    """
    Format a part heading.

    Examples:
        format_part_title(1, "Bases", "fr") -> "Partie 1: Bases"
        format_part_title(None, "Bases", "fr") -> "Bases"
    """
    return _format_numbered_title("part", number, title, lang)


def format_chapter_title(number: Optional[int], title: str = "", lang: str = "en") -> str:
    """
    Format a chapter heading.

    Examples:
        format_chapter_title(3, "Intro", "en") -> "Chapter 3: Intro"
        format_chapter_title(3, "Intro", "fr") -> "Chapitre 3: Intro"
    """
    return _format_numbered_title("chapter", number, title, lang)


def format_labeled(string_id: str, value: str, lang: str = "en") -> str:
    """Cover line such as "Auteur: Jane Doe"."""
    return f"{get_string(string_id, lang)}: {value}"


def format_date(value: datetime, lang: str = "en") -> str:
    """Short locale date, e.g. 05/03/2024 for fr."""
    return value.strftime(DATE_FORMATS.get(lang, DATE_FORMATS["en"]))
