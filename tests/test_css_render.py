"""Tests for CSS serialization of shadow layers."""

import unittest

from longshadow.css.render import (
    declaration,
    format_color,
    format_layer,
    format_number,
    long_shadow_css,
    rule,
    to_shadow_list,
)
from longshadow.shadow.color import Color
from longshadow.shadow.errors import ShadowError, UnknownDirectionError
from longshadow.shadow.generator import ShadowLayer, generate


class TestFormatting(unittest.TestCase):
    def test_format_number(self) -> None:
        self.assertEqual(format_number(25.0), "25")
        self.assertEqual(format_number(1.23456), "1.235")
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-1e-17), "0")
        self.assertEqual(format_number(6.123e-16), "0")
        self.assertEqual(format_number(-3.25), "-3.25")
        self.assertEqual(format_number(2.71828, precision=0), "3")

    def test_format_number_rejects_bad_precision(self) -> None:
        for bad in (-1, 1.5, True):
            with self.subTest(bad=bad):
                with self.assertRaises(ShadowError):
                    format_number(1.0, precision=bad)  # type: ignore[arg-type]

    def test_format_color(self) -> None:
        self.assertEqual(format_color(Color(r=255, g=0, b=16)), "#ff0010")
        self.assertEqual(format_color(Color(r=0, g=0, b=0, a=127.5)), "rgba(0, 0, 0, 0.5)")
        self.assertEqual(format_color(Color(r=10.4, g=10.6, b=0, a=0)), "rgba(10, 11, 0, 0)")

    def test_format_layer(self) -> None:
        layer = ShadowLayer(x=0.0, y=12.5, color=Color(r=0, g=0, b=0), unit="px")
        self.assertEqual(format_layer(layer), "0 12.5px 0 #000000")
        layer = ShadowLayer(x=-1.0, y=2.0, color=Color(r=0, g=0, b=0, a=51), unit="em")
        self.assertEqual(format_layer(layer), "-1em 2em 0 rgba(0, 0, 0, 0.2)")


class TestShadowList(unittest.TestCase):
    def test_straight_down(self) -> None:
        layers = generate(0, 100, "#f00", layer_count=4)
        self.assertEqual(
            to_shadow_list(layers),
            "0 25px 0 #ff0000, 0 50px 0 #ff0000, 0 75px 0 #ff0000, 0 100px 0 #ff0000",
        )

    def test_fade_to_transparent(self) -> None:
        layers = generate(180, 100, "#000", "transparent", 4)
        self.assertEqual(
            to_shadow_list(layers, precision=2),
            "0 -25px 0 rgba(0, 0, 0, 0.75), 0 -50px 0 rgba(0, 0, 0, 0.5), "
            "0 -75px 0 rgba(0, 0, 0, 0.25), 0 -100px 0 rgba(0, 0, 0, 0)",
        )

    def test_empty_list(self) -> None:
        self.assertEqual(to_shadow_list([]), "none")


class TestDeclarations(unittest.TestCase):
    def test_declaration(self) -> None:
        layers = generate("to right", 2, "#000", layer_count=2)
        self.assertEqual(declaration(layers), "text-shadow: 1px 0 0 #000000, 2px 0 0 #000000;")
        self.assertTrue(declaration(layers, "box-shadow").startswith("box-shadow: "))

    def test_rejects_other_properties(self) -> None:
        with self.assertRaises(ShadowError):
            declaration([], "filter")

    def test_rule(self) -> None:
        layers = generate("to bottom", 1, "#000", layer_count=1)
        self.assertEqual(rule(".title", layers), ".title {\n  text-shadow: 0 1px 0 #000000;\n}\n")

    def test_long_shadow_css(self) -> None:
        css = long_shadow_css("to bottom right", "10px", "#333", fade="#fff", layer_count=10, prop="box-shadow")
        self.assertTrue(css.startswith("box-shadow: "))
        self.assertEqual(css.count(","), 9)
        self.assertTrue(css.endswith("7.071px 7.071px 0 #ffffff;"))

    def test_long_shadow_css_errors(self) -> None:
        with self.assertRaises(UnknownDirectionError):
            long_shadow_css("upward", 10, "#000")
        with self.assertRaises(ShadowError):
            long_shadow_css(0, 10, "#000", prop="outline")
        with self.assertRaises(ShadowError):
            long_shadow_css(0, 10, "#000", layer_count=2, precision=-1)


if __name__ == "__main__":
    unittest.main()
