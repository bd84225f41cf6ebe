"""Tests for raw value conversion to the type of a default."""
from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from pathlib import Path
from unittest import TestCase

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from variants.coercion import coerce, register_coercer, unregister_coercer
from variants.color import Color


class Layout(enum.Enum):
    GRID = "grid"
    LIST = "list"


@dataclass(frozen=True)
class Banner:
    title: str = "Sale"
    visible: bool = False
    priority: int = 1


class Percent(float):
    pass


class CoercionTests(TestCase):
    def test_bool_accepts_bools_and_boolean_strings(self) -> None:
        self.assertIs(coerce(True, False), True)
        self.assertIs(coerce("yes", False), True)
        self.assertIs(coerce(" OFF ", True), False)
        with self.assertRaises(ValueError):
            coerce("maybe", False)
        with self.assertRaises(TypeError):
            coerce(1, False)

    def test_int_rules(self) -> None:
        self.assertEqual(coerce(4, 0), 4)
        self.assertEqual(coerce("42", 0), 42)
        self.assertEqual(coerce(3.0, 0), 3)
        with self.assertRaises(ValueError):
            coerce(3.5, 0)
        with self.assertRaises(TypeError):
            coerce(True, 0)

    def test_float_rules(self) -> None:
        self.assertEqual(coerce(2, 0.0), 2.0)
        self.assertEqual(coerce("0.75", 0.0), 0.75)
        with self.assertRaises(TypeError):
            coerce(False, 0.0)

    def test_str_requires_str(self) -> None:
        self.assertEqual(coerce("B", "A"), "B")
        with self.assertRaises(TypeError):
            coerce(5, "A")

    def test_color_from_hex(self) -> None:
        self.assertEqual(coerce("#ff0000", Color.from_hex("#0000FF")), Color(255, 0, 0))
        with self.assertRaises(ValueError):
            coerce("#12", Color.from_hex("#0000FF"))

    def test_enum_by_value_or_name(self) -> None:
        self.assertIs(coerce("list", Layout.GRID), Layout.LIST)
        self.assertIs(coerce("LIST", Layout.GRID), Layout.LIST)
        self.assertIs(coerce(Layout.LIST, Layout.GRID), Layout.LIST)
        with self.assertRaises(ValueError):
            coerce("carousel", Layout.GRID)

    def test_dataclass_merges_mapping_over_default(self) -> None:
        result = coerce({"visible": "true", "priority": "3"}, Banner())
        self.assertEqual(result, Banner(title="Sale", visible=True, priority=3))
        with self.assertRaises(ValueError):
            coerce({"colour": "red"}, Banner())
        with self.assertRaises(TypeError):
            coerce("banner", Banner())

    def test_mapping_and_sequence(self) -> None:
        self.assertEqual(coerce({"a": 1}, {}), {"a": 1})
        self.assertEqual(coerce([1, 2], ()), (1, 2))
        with self.assertRaises(TypeError):
            coerce("a,b", [])

    def test_custom_coercer(self) -> None:
        register_coercer(Percent, lambda raw, default: Percent(str(raw).rstrip("%")))
        self.addCleanup(unregister_coercer, Percent)
        self.assertEqual(coerce("15%", Percent(0)), 15.0)


class ColorTests(TestCase):
    def test_hex_round_trip_and_alpha(self) -> None:
        color = Color.from_hex("00ff0080")
        self.assertEqual(color, Color(0, 255, 0, 128))
        self.assertEqual(color.hex, "#00FF0080")
        self.assertEqual(str(Color.from_hex("#0000ff")), "#0000FF")

    def test_channel_range_is_validated(self) -> None:
        with self.assertRaises(ValueError):
            Color(256, 0, 0)
        with self.assertRaises(TypeError):
            Color.from_hex(0xFF0000)  # type: ignore[arg-type]
