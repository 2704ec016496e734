"""Tests for direction keywords and angle parsing."""

import math
import unittest

from longshadow.shadow.directions import KEYWORD_ANGLES, Keyword, parse_angle, resolve_direction
from longshadow.shadow.errors import UnknownDirectionError


class TestKeywordTable(unittest.TestCase):
    def test_has_all_twelve_keywords(self) -> None:
        self.assertEqual(len(KEYWORD_ANGLES), 12)
        self.assertEqual(set(KEYWORD_ANGLES), set(Keyword))

    def test_angles_are_compass_points(self) -> None:
        allowed = {0.0, 45.0, 90.0, 135.0, 180.0, 225.0, 270.0, 315.0}
        for keyword, degrees in KEYWORD_ANGLES.items():
            self.assertIn(degrees, allowed, keyword)

    def test_table_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            KEYWORD_ANGLES[Keyword.TO_TOP] = 1.0  # type: ignore[index]

    def test_synonyms_share_angles(self) -> None:
        self.assertEqual(resolve_direction("to top right"), resolve_direction("to right top"))
        self.assertEqual(resolve_direction("to bottom left"), resolve_direction("to left bottom"))
        self.assertEqual(resolve_direction("to top left"), 225.0)


class TestResolveDirection(unittest.TestCase):
    def test_keywords(self) -> None:
        self.assertEqual(resolve_direction("to bottom"), 0.0)
        self.assertEqual(resolve_direction("to right"), 90.0)
        self.assertEqual(resolve_direction("to top"), 180.0)
        self.assertEqual(resolve_direction(Keyword.TO_LEFT), 270.0)

    def test_keyword_case_and_whitespace(self) -> None:
        self.assertEqual(resolve_direction("  To   Bottom  Right "), 45.0)

    def test_numbers_pass_through(self) -> None:
        self.assertEqual(resolve_direction(30), 30.0)
        self.assertEqual(resolve_direction(-12.5), -12.5)
        self.assertEqual(resolve_direction(720), 720.0)

    def test_angle_strings(self) -> None:
        self.assertEqual(resolve_direction("45deg"), 45.0)
        self.assertEqual(resolve_direction("45"), 45.0)
        self.assertAlmostEqual(parse_angle("0.25turn"), 90.0)
        self.assertAlmostEqual(parse_angle("100grad"), 90.0)
        self.assertAlmostEqual(parse_angle(f"{math.pi}rad"), 180.0)

    def test_unknown_keyword_raises(self) -> None:
        with self.assertRaises(UnknownDirectionError):
            resolve_direction("to middle")
        with self.assertRaises(UnknownDirectionError):
            resolve_direction("to top bottom")

    def test_unknown_types_raise(self) -> None:
        for bad in (None, True, [45], float("nan"), float("inf"), "45px"):
            with self.subTest(bad=bad):
                with self.assertRaises(UnknownDirectionError):
                    resolve_direction(bad)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            resolve_direction("sideways")


if __name__ == "__main__":
    unittest.main()
