"""Translation value types.

JSONValue models the opaque entry document as a discriminated union;
consumers narrow it with isinstance checks before reading a node.
"""

from typing import Union

JSONValue = Union[dict[str, "JSONValue"], list["JSONValue"], str, int, float, bool, None]

# Language code -> translations, in wanted-language order.
TranslationResult = dict[str, list[str]]

DEFAULT_MAX_TRANSLATIONS = 3


def has_translations(result: TranslationResult) -> bool:
    """Return True if at least one language has a translation."""
    return any(values for values in result.values())
