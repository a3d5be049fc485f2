from __future__ import annotations

import io
import unittest

from scripts.python.helpers.jproperties.errors import PropertiesFormatError
from scripts.python.helpers.jproperties.store import JavaProperties


class TestPropertyLookup(unittest.TestCase):
    def test_missing_key_returns_none_or_fallback(self) -> None:
        props = JavaProperties()
        self.assertIsNone(props.get_property("x"))
        self.assertEqual(props.get_property("x", "fallback"), "fallback")

    def test_defaults_are_consulted_live(self) -> None:
        defaults = {"host": "alpha"}
        props = JavaProperties(defaults)
        self.assertEqual(props.get_property("host"), "alpha")
        defaults["host"] = "beta"
        self.assertEqual(props.get_property("host"), "beta")
        self.assertIs(props.defaults, defaults)

    def test_set_property_shadows_defaults_and_returns_table_value(self) -> None:
        defaults = {"k": "default"}
        props = JavaProperties(defaults)
        self.assertIsNone(props.set_property("k", "v1"))
        self.assertEqual(props.set_property("k", "v2"), "v1")
        self.assertEqual(props.get_property("k"), "v2")
        self.assertEqual(defaults, {"k": "default"})

    def test_empty_string_value_is_not_absent(self) -> None:
        props = JavaProperties({"k": "default"})
        props.set_property("k", "")
        self.assertEqual(props.get_property("k", "fallback"), "")

    def test_non_string_values_are_stringified(self) -> None:
        props = JavaProperties({"port": 8080})
        self.assertEqual(props.get_property("port"), "8080")
        props["retries"] = 3  # type: ignore[assignment]
        self.assertEqual(props["retries"], "3")

    def test_setting_none_unsets_the_key_and_exposes_defaults(self) -> None:
        props = JavaProperties({"k": "default"})
        props.set_property("k", "own")
        self.assertEqual(props.set_property("k", None), "own")
        self.assertEqual(props.get_property("k"), "default")
        self.assertNotIn("k", props)
        self.assertIsNone(props.set_property("k", None))
        self.assertEqual(sorted(props.property_names()), ["k"])

    def test_nested_defaults_chain(self) -> None:
        base = JavaProperties()
        base.set_property("a", "1")
        middle = JavaProperties(base)
        middle.set_property("b", "2")
        top = JavaProperties(middle)
        self.assertEqual(top.get_property("a"), "1")
        self.assertEqual(top.get_property("b"), "2")
        self.assertEqual(sorted(top.property_names()), ["a", "b"])


class TestPropertyNames(unittest.TestCase):
    def test_union_without_duplicates(self) -> None:
        defaults = {"a": "1", "b": "2"}
        props = JavaProperties(defaults)
        props.set_property("b", "x")
        props.set_property("c", "3")
        names = list(props.property_names())
        self.assertEqual(sorted(names), ["a", "b", "c"])
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(defaults, {"a": "1", "b": "2"})

    def test_names_are_a_snapshot(self) -> None:
        props = JavaProperties({"a": "1"})
        names = props.property_names()
        props.set_property("late", "x")
        self.assertEqual(sorted(names), ["a"])

    def test_names_match_non_null_lookups(self) -> None:
        props = JavaProperties({"a": "1", "unset": None})
        props.set_property("b", "2")
        names = set(props.property_names())
        self.assertEqual(names, {"a", "b"})
        self.assertIsNone(props.get_property("unset"))
        for name in names:
            self.assertIsNotNone(props.get_property(name))


class TestLoadStore(unittest.TestCase):
    def test_round_trip_through_buffer(self) -> None:
        props = JavaProperties()
        props.set_property("a:b", "hello=world")
        buffer = io.BytesIO()
        props.store(buffer, "round trip")
        self.assertFalse(buffer.closed)
        self.assertIn(b"a\\:b=hello=world", buffer.getvalue())

        buffer.seek(0)
        fresh = JavaProperties()
        fresh.load(buffer)
        self.assertFalse(buffer.closed)
        self.assertEqual(fresh.get_property("a:b"), "hello=world")

    def test_round_trip_keeps_awkward_strings(self) -> None:
        props = JavaProperties()
        props.set_property(" spaced key ", " leading value")
        props.set_property("path", "C:\\temp\\")
        props.set_property("unicode \u2603", "caf\u00e9\n\U0001F600")
        buffer = io.BytesIO()
        props.store(buffer)
        buffer.seek(0)
        fresh = JavaProperties()
        fresh.load(buffer)
        self.assertEqual(dict(fresh), dict(props))

    def test_store_writes_only_the_primary_table(self) -> None:
        props = JavaProperties({"inherited": "x"})
        props.set_property("own", "y")
        buffer = io.BytesIO()
        props.store(buffer, timestamp=False)
        self.assertNotIn(b"inherited", buffer.getvalue())
        buffer.seek(0)
        fresh = JavaProperties()
        fresh.load(buffer)
        self.assertEqual(dict(fresh), {"own": "y"})

    def test_later_duplicates_overwrite_earlier_ones(self) -> None:
        props = JavaProperties()
        props.load(io.BytesIO(b"k=1\nk=2\n"))
        self.assertEqual(props.get_property("k"), "2")
        self.assertEqual(len(props), 1)

    def test_load_merges_into_existing_entries(self) -> None:
        props = JavaProperties()
        props.set_property("kept", "1")
        props.set_property("replaced", "old")
        props.load(io.BytesIO(b"replaced=new\n"))
        self.assertEqual(dict(props), {"kept": "1", "replaced": "new"})

    def test_malformed_content_fails_with_format_error(self) -> None:
        props = JavaProperties()
        with self.assertRaises(PropertiesFormatError):
            props.load(io.BytesIO(b"a=1\nb=\\u00zz\n"))


class TestMappingProtocol(unittest.TestCase):
    def test_mapping_covers_primary_table_only(self) -> None:
        props = JavaProperties({"inherited": "x"})
        props["own"] = "y"
        self.assertEqual(len(props), 1)
        self.assertIn("own", props)
        self.assertNotIn("inherited", props)
        self.assertEqual(list(props), ["own"])
        del props["own"]
        self.assertEqual(len(props), 0)
        self.assertEqual(props.get_property("inherited"), "x")

    def test_repr_names_the_class(self) -> None:
        self.assertTrue(repr(JavaProperties()).startswith("JavaProperties("))

    def test_list_properties_truncates_long_values(self) -> None:
        props = JavaProperties({"d": "short"})
        props.set_property("long", "x" * 50)
        out = io.StringIO()
        props.list_properties(out)
        self.assertEqual(
            out.getvalue().splitlines(),
            ["-- listing properties --", "d=short", "long=" + "x" * 37 + "..."],
        )


if __name__ == "__main__":
    unittest.main()
