"""Overlay text formatting.

An overlay shows the lemma as its title and a body of metadata lines:

    2024-05-01
    EN: house, home
    FR: maison
"""

from dataclasses import dataclass

from domain.model.language import label_for
from domain.model.word_of_the_day import WordOfTheDayUpdate


@dataclass(frozen=True)
class OverlayText:
    title: str
    body: str


def format_translation_line(code: str, values: list[str]) -> str:
    return f"{label_for(code)}: {', '.join(values)}"


def format_overlay(update: WordOfTheDayUpdate) -> OverlayText:
    """Render an update as overlay title and body.

    Languages without translations are omitted; line order follows the
    order of update.translations.
    """
    lines: list[str] = []
    if update.date:
        lines.append(update.date)
    for code, values in update.translations.items():
        if values:
            lines.append(format_translation_line(code, values))
    return OverlayText(title=update.lemma, body="\n".join(lines))
