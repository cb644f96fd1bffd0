"""Language Value Object.

Target languages offered by the LOD dictionary, with the short label
used when a translation line is rendered on an overlay.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """Immutable value object representing a translation target language."""

    code: str
    name: str
    label: str


# ── Language instances ────────────────────────────────────────

ENGLISH = Language(code="en", name="English", label="EN")
FRENCH = Language(code="fr", name="French", label="FR")
GERMAN = Language(code="de", name="German", label="DE")
PORTUGUESE = Language(code="pt", name="Portuguese", label="PT")


# ── Registry ──────────────────────────────────────────────────

LANGUAGES: dict[str, Language] = {
    lang.code: lang
    for lang in (
        ENGLISH, FRENCH, GERMAN, PORTUGUESE,
    )
}


def get_language(code: str) -> Language | None:
    """Look up a Language by its ISO 639-1 code (e.g., "en").

    Returns None for unknown codes.
    """
    return LANGUAGES.get(code)


def label_for(code: str) -> str:
    """Return the overlay label for a language code.

    Unknown codes are upper-cased so any configured language still renders.
    """
    language = get_language(code)
    return language.label if language else code.upper()
