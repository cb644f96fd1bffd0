"""Tests for translation extraction from LOD entry documents.

Tests cover both translation shapes, their combination at any depth,
deduplication, truncation, ordering and tolerance of malformed nodes.
"""

import copy
import unittest

from services.translation_extractor import extract_translations

WANTED = ["en", "fr", "de"]


def _entry_document() -> dict:
    """Entry shaped like a real LOD response (trimmed)."""
    return {
        "entry": {
            "lod_id": "HAUS1",
            "lemma": {"word": "Haus", "pos": "SUBST", "gender": "n"},
            "microStructures": [
                {
                    "grammaticalUnits": [
                        {
                            "meanings": [
                                {
                                    "targetLanguages": {
                                        "de": {"parts": [{"type": "text", "content": "Haus"}]},
                                        "fr": {"parts": [{"type": "text", "content": "maison"}]},
                                        "en": {"parts": [{"type": "text", "content": "house"}]},
                                        "pt": {"parts": [{"type": "text", "content": "casa"}]},
                                    },
                                    "examples": [{"content": "Dat ass mäin Haus."}],
                                },
                                {
                                    "targetLanguages": {
                                        "de": {"parts": [{"content": "Gebäude"}]},
                                        "fr": {"parts": [{"content": "bâtiment"}]},
                                        "en": {"parts": [{"content": "building"}]},
                                    },
                                },
                            ],
                        },
                    ],
                },
            ],
        },
    }


class TestResultShape(unittest.TestCase):
    """Key set, ordering and bounds of the result."""

    def test_keys_equal_wanted_set(self):
        """Test result keys are exactly the wanted languages."""
        result = extract_translations({"targetLanguages": {"en": ["hello"]}}, WANTED)
        self.assertEqual(set(result), set(WANTED))

    def test_keys_follow_wanted_order(self):
        """Test keys keep the wanted order."""
        result = extract_translations({}, ["de", "en", "fr"])
        self.assertEqual(list(result), ["de", "en", "fr"])

    def test_duplicate_wanted_codes_collapsed(self):
        """Test repeated wanted codes appear once."""
        result = extract_translations({"targetLanguages": {"en": ["a"]}}, ["en", "fr", "en"])
        self.assertEqual(result, {"en": ["a"], "fr": []})

    def test_empty_wanted_returns_empty_mapping(self):
        """Test no wanted languages yields an empty mapping."""
        self.assertEqual(extract_translations({"targetLanguages": {"en": ["a"]}}, []), {})

    def test_languages_without_matches_are_empty(self):
        """Test a language with no coverage maps to an empty list."""
        result = extract_translations({"targetLanguages": {"en": ["hello"]}}, WANTED)
        self.assertEqual(result["de"], [])
        self.assertEqual(result["fr"], [])

    def test_accepts_tuple_and_generator(self):
        """Test wanted may be any iterable."""
        doc = {"targetLanguages": {"en": ["a"], "fr": ["b"]}}
        self.assertEqual(extract_translations(doc, ("en", "fr")), {"en": ["a"], "fr": ["b"]})
        self.assertEqual(
            extract_translations(doc, (code for code in ["fr"])),
            {"fr": ["b"]},
        )


class TestShapeA(unittest.TestCase):
    """targetLanguages shape."""

    def test_single_match_strings_and_content(self):
        """Test string and {content} elements with a language left uncovered."""
        doc = {"targetLanguages": {"en": ["hello"], "fr": [{"content": "bonjour"}]}}
        result = extract_translations(doc, WANTED)
        self.assertEqual(result, {"en": ["hello"], "fr": ["bonjour"], "de": []})

    def test_plain_string_value(self):
        """Test a plain string instead of an array is appended directly."""
        doc = {"targetLanguages": {"de": "  Hallo  "}}
        self.assertEqual(extract_translations(doc, ["de"]), {"de": ["Hallo"]})

    def test_null_and_other_values_contribute_nothing(self):
        """Test null, numbers, booleans and objects without parts are ignored."""
        doc = {"targetLanguages": {"en": None, "fr": 42, "de": True}}
        self.assertEqual(extract_translations(doc, WANTED), {"en": [], "fr": [], "de": []})

    def test_unrecognized_elements_skipped(self):
        """Test only strings and {content: str} elements count."""
        doc = {
            "targetLanguages": {
                "en": [
                    "one",
                    7,
                    None,
                    ["nested"],
                    {"content": 5},
                    {"text": "no content key"},
                    {"content": "two"},
                ],
            },
        }
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["one", "two"]})

    def test_target_languages_not_an_object(self):
        """Test a non-object targetLanguages is ignored."""
        for value in (["en"], "en", 3, None):
            with self.subTest(value=value):
                result = extract_translations({"targetLanguages": value}, ["en"])
                self.assertEqual(result, {"en": []})

    def test_unwanted_languages_ignored(self):
        """Test languages outside the wanted set are not collected."""
        doc = {"targetLanguages": {"pt": ["casa"], "en": ["house"]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["house"]})


class TestShapeB(unittest.TestCase):
    """Per-language block shape."""

    def test_duplicate_collapsed(self):
        """Test repeated parts collapse to one entry."""
        doc = {"en": {"parts": [{"content": "hi"}, {"content": "hi"}]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["hi"]})

    def test_parts_must_be_array(self):
        """Test non-array parts contribute nothing."""
        for parts in ({"content": "hi"}, "hi", None):
            with self.subTest(parts=parts):
                self.assertEqual(extract_translations({"en": {"parts": parts}}, ["en"]), {"en": []})

    def test_string_parts_ignored(self):
        """Test plain strings in parts are not a recognized shape."""
        doc = {"en": {"parts": ["hi", {"content": "hello"}]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["hello"]})

    def test_block_must_be_object(self):
        """Test a language key holding a list or string is not Shape B."""
        doc = {"en": [{"parts": [{"content": "hi"}]}], "fr": "salut"}
        result = extract_translations(doc, ["en", "fr"])
        self.assertEqual(result, {"en": [], "fr": []})

    def test_nested_inside_target_languages(self):
        """Test Shape B blocks under targetLanguages are found by the walk."""
        result = extract_translations(_entry_document(), WANTED)
        self.assertEqual(result, {
            "en": ["house", "building"],
            "fr": ["maison", "bâtiment"],
            "de": ["Haus", "Gebäude"],
        })


class TestCombinedShapes(unittest.TestCase):
    """Both shapes in one document."""

    def test_different_depths_contribute_to_same_language(self):
        """Test Shape A at the root and Shape B deeper both count."""
        doc = {
            "targetLanguages": {"en": ["a"]},
            "nested": {"en": {"parts": [{"content": "b"}]}},
        }
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["a", "b"]})

    def test_shape_a_before_shape_b_on_same_node(self):
        """Test Shape A is collected before Shape B when both match one node."""
        doc = {
            "en": {"parts": [{"content": "from-b"}]},
            "targetLanguages": {"en": ["from-a"]},
        }
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["from-a", "from-b"]})

    def test_depth_first_order(self):
        """Test results follow depth-first pre-order of the document."""
        doc = {
            "first": {
                "deep": {"targetLanguages": {"en": ["1"]}},
            },
            "second": [
                {"targetLanguages": {"en": ["2"]}},
                {"en": {"parts": [{"content": "3"}]}},
            ],
            "targetLanguages": {"en": ["0"]},
        }
        self.assertEqual(extract_translations(doc, ["en"], cap=10), {"en": ["0", "1", "2", "3"]})

    def test_array_root(self):
        """Test a top-level array is walked element by element."""
        doc = [
            {"targetLanguages": {"fr": ["un"]}},
            None,
            {"fr": {"parts": [{"content": "deux"}]}},
        ]
        self.assertEqual(extract_translations(doc, ["fr"]), {"fr": ["un", "deux"]})


class TestFilteringAndTruncation(unittest.TestCase):
    """Trim, dedupe and cap."""

    def test_overflow_keeps_first_three(self):
        """Test five distinct strings are truncated to the first three."""
        doc = {"targetLanguages": {"en": ["a", "b", "c", "d", "e"]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["a", "b", "c"]})

    def test_cap_applies_after_dedup(self):
        """Test duplicates and blanks do not use up the cap."""
        doc = {"targetLanguages": {"en": ["a", "a", " ", "", "b", "a ", "c", "d"]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["a", "b", "c"]})

    def test_custom_cap(self):
        """Test a custom cap is honoured."""
        doc = {"targetLanguages": {"en": ["a", "b", "c", "d", "e"]}}
        self.assertEqual(extract_translations(doc, ["en"], cap=4), {"en": ["a", "b", "c", "d"]})
        self.assertEqual(extract_translations(doc, ["en"], cap=1), {"en": ["a"]})

    def test_non_positive_cap_yields_empty(self):
        """Test a cap of zero or below keeps nothing."""
        doc = {"targetLanguages": {"en": ["a"]}}
        self.assertEqual(extract_translations(doc, ["en"], cap=0), {"en": []})
        self.assertEqual(extract_translations(doc, ["en"], cap=-2), {"en": []})

    def test_trim_keeps_internal_whitespace(self):
        """Test only leading/trailing whitespace is removed."""
        doc = {"targetLanguages": {"en": ["\t to  look after \n"]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["to  look after"]})

    def test_trimmed_duplicates_collapse(self):
        """Test strings equal after trimming are duplicates."""
        doc = {
            "targetLanguages": {"de": [" Haus", "Haus "]},
            "de": {"parts": [{"content": "Haus"}]},
        }
        self.assertEqual(extract_translations(doc, ["de"]), {"de": ["Haus"]})

    def test_dedup_is_case_sensitive(self):
        """Test dedup uses exact string equality."""
        doc = {"targetLanguages": {"en": ["House", "house"]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["House", "house"]})

    def test_whitespace_only_dropped(self):
        """Test whitespace-only strings never appear."""
        doc = {"targetLanguages": {"en": ["   ", {"content": "\n\t"}]}}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": []})


class TestTotality(unittest.TestCase):
    """The extractor never raises and never mutates its input."""

    def test_scalar_documents(self):
        """Test scalar roots yield empty results."""
        for doc in (None, True, False, 0, 3.5, "targetLanguages", ""):
            with self.subTest(doc=doc):
                self.assertEqual(extract_translations(doc, ["en"]), {"en": []})

    def test_scalar_leaves_anywhere(self):
        """Test numbers, booleans and nulls inside the tree are harmless."""
        doc = {
            "a": 1, "b": None, "c": False, "d": [1, 2.5, None, True],
            "targetLanguages": {"en": ["ok"]},
        }
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["ok"]})

    def test_deeply_nested_document(self):
        """Test nesting beyond the recursion limit does not raise."""
        doc: dict = {"targetLanguages": {"en": ["deep"]}}
        for _ in range(5000):
            doc = {"child": [doc]}
        self.assertEqual(extract_translations(doc, ["en"]), {"en": ["deep"]})

    def test_idempotent_and_input_untouched(self):
        """Test repeated calls give identical results and leave doc unchanged."""
        doc = _entry_document()
        before = copy.deepcopy(doc)
        first = extract_translations(doc, WANTED)
        second = extract_translations(doc, WANTED)
        self.assertEqual(first, second)
        self.assertEqual(doc, before)

    def test_bounds_hold_for_noisy_document(self):
        """Test every list is capped, unique and free of blanks."""
        doc = {
            "targetLanguages": {lang: [f" {i} " for i in range(10)] + ["", " "] for lang in WANTED},
            "items": [
                {lang: {"parts": [{"content": str(i % 4)} for i in range(20)]} for lang in WANTED},
            ],
        }
        result = extract_translations(doc, WANTED)
        for lang, values in result.items():
            with self.subTest(lang=lang):
                self.assertLessEqual(len(values), 3)
                self.assertEqual(len(values), len(set(values)))
                self.assertTrue(all(value.strip() for value in values))


if __name__ == "__main__":
    unittest.main()
