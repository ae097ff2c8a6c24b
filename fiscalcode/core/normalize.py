"""Text Normalization — trim, uppercase and optional accent folding.

Invariants:
    - Empty or None input is returned unchanged
    - Diacritic folding covers the Latin-1 accented vowels used in Italian names only
    - Place codes and candidate codes are normalized WITHOUT diacritic folding
"""

_ACCENTED = "ÀÈÉÌÒÙàèéìòù"
_UNACCENTED = "AEEIOUAEEIOU"
_DIACRITICS_TABLE = str.maketrans(_ACCENTED, _UNACCENTED)


def normalize(text: str | None, strip_diacritics: bool = False) -> str | None:
    """Trim and uppercase text, folding accented vowels when strip_diacritics is set."""
    if not text:
        return text
    text = text.strip().upper()
    if strip_diacritics:
        text = text.translate(_DIACRITICS_TABLE)
    return text
