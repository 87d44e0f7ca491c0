"""
Locale to language tag resolution.
"""

from typing import Optional


def resolve_language(
    locale: Optional[str],
    default_lang: str,
    locale_enabled: bool = False,
) -> str:
    """
    Map a chat platform locale (e.g. "fr_FR") to a language tag.

    While `locale_enabled` is off every locale resolves to
    `default_lang`; only English content is served.

    Args:
        locale (Optional[str]): User locale as sent by the platform.
        default_lang (str): Language used when no prefix applies.
        locale_enabled (bool): Use the locale's two-letter prefix.

    Returns:
        str: Language tag.
    """
    if not locale_enabled:
        return default_lang

    prefix = (locale or "").strip()[:2].lower()
    return prefix or default_lang
