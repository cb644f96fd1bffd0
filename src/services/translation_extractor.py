"""Translation extraction from LOD entry documents.

Entry documents have no fixed schema. Translations show up in two shapes,
at any depth and in any combination:

    Shape A:  {"targetLanguages": {"en": ["house", {"content": "home"}], "fr": "maison"}}
    Shape B:  {"en": {"parts": [{"content": "house"}]}}

extract_translations() walks the whole tree depth-first, collects every
match for the wanted languages, then trims, deduplicates and caps each list.
It never raises: missing or malformed data yields an empty list.
"""

from collections.abc import Iterable

from domain.model.translation import DEFAULT_MAX_TRANSLATIONS, JSONValue, TranslationResult

TARGET_LANGUAGES_KEY = "targetLanguages"
PARTS_KEY = "parts"
CONTENT_KEY = "content"


def extract_translations(
    doc: JSONValue,
    wanted: Iterable[str],
    cap: int = DEFAULT_MAX_TRANSLATIONS,
) -> TranslationResult:
    """Collect up to `cap` distinct translations per wanted language.

    Args:
        doc: Parsed entry document (any JSON value).
        wanted: Ordered language codes. Duplicates are ignored.
        cap: Maximum translations kept per language.

    Returns:
        Mapping with exactly the wanted codes as keys, in wanted order.
        Each list keeps first-seen order.
    """
    languages = list(dict.fromkeys(wanted))
    found: dict[str, list[str]] = {lang: [] for lang in languages}

    for node in _walk(doc):
        _collect_target_languages(node, languages, found)
        _collect_language_parts(node, languages, found)

    return {lang: _dedupe(found[lang], cap) for lang in languages}


# ── Traversal ────────────────────────────────────────────────


def _walk(doc: JSONValue) -> Iterable[dict]:
    """Yield every object in the tree in depth-first pre-order.

    Arrays are descended into but never yielded; scalars end the descent.
    An explicit stack keeps deeply nested documents off the call stack.
    """
    stack: list[JSONValue] = [doc]
    while stack:
        node = stack.pop()
        if isinstance(node, list):
            stack.extend(reversed(node))
        elif isinstance(node, dict):
            yield node
            stack.extend(reversed(list(node.values())))


# ── Shape matchers ───────────────────────────────────────────


def _collect_target_languages(
    node: dict, languages: list[str], found: dict[str, list[str]],
) -> None:
    """Shape A: node["targetLanguages"][lang] -> list of str/{content} or a str."""
    targets = node.get(TARGET_LANGUAGES_KEY)
    if not isinstance(targets, dict):
        return

    for lang in languages:
        values = targets.get(lang)
        if isinstance(values, list):
            for value in values:
                if isinstance(value, str):
                    found[lang].append(value.strip())
                else:
                    content = _content_of(value)
                    if content is not None:
                        found[lang].append(content)
        elif isinstance(values, str):
            found[lang].append(values.strip())


def _collect_language_parts(
    node: dict, languages: list[str], found: dict[str, list[str]],
) -> None:
    """Shape B: node[lang]["parts"] -> list of {content}."""
    for lang in languages:
        block = node.get(lang)
        if not isinstance(block, dict):
            continue
        parts = block.get(PARTS_KEY)
        if not isinstance(parts, list):
            continue
        for part in parts:
            content = _content_of(part)
            if content is not None:
                found[lang].append(content)


def _content_of(value: JSONValue) -> str | None:
    """Return the trimmed string `content` of an object, else None."""
    if isinstance(value, dict):
        content = value.get(CONTENT_KEY)
        if isinstance(content, str):
            return content.strip()
    return None


# ── Post-processing ──────────────────────────────────────────


def _dedupe(values: list[str], cap: int) -> list[str]:
    """Drop empty strings and repeats (first wins), then keep the first `cap`."""
    limit = max(cap, 0)
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if len(result) >= limit:
            break
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
