from __future__ import annotations

import unittest

from asciibox import (
    ConfigurationError,
    Display,
    Element,
    FlexAlign,
    Screen,
    StateLockedError,
)


def draw(element: Element) -> str:
    return Screen(element).render()


class BoxSizeTests(unittest.TestCase):
    def test_explicit_size(self) -> None:
        element = Element(7, 15)
        self.assertEqual(element.height, 7)
        self.assertEqual(element.width, 15)

    def test_single_size_is_square(self) -> None:
        element = Element(6)
        self.assertEqual((element.height, element.width), (6, 6))

    def test_defaults(self) -> None:
        element = Element(10, 5)
        self.assertEqual(element.min_width, 0)
        self.assertEqual(element.min_height, 0)
        self.assertIsNone(element.max_width)
        self.assertIsNone(element.max_height)
        self.assertIs(element.display, Display.BLOCK)
        self.assertIs(element.justify_content, FlexAlign.FLEX_START)
        self.assertIs(element.align_items, FlexAlign.FLEX_START)
        self.assertFalse(element.fill)

    def test_total_size_adds_padding_margin_and_border(self) -> None:
        element = Element(3, 5).set_padding(1, 2, 3, 4).set_margin(2, 1).set_border(True, False)
        self.assertEqual(element.height, 3 + 4 + 4 + 2)
        self.assertEqual(element.width, 5 + 6 + 2 + 0)

    def test_total_size_is_clamped(self) -> None:
        cases = [
            # content, padding, margin, border, min, max
            (3, 1, 0, True, 0, None),
            (3, 1, 0, True, 10, None),
            (3, 1, 2, False, 0, 6),
            (20, 0, 0, True, 5, 8),
            (4, 2, 1, True, 0, 100),
        ]
        for content, padding, margin, border, lower, upper in cases:
            with self.subTest(content=content, lower=lower, upper=upper):
                element = (
                    Element(content, content)
                    .set_padding(padding)
                    .set_margin(margin)
                    .set_border(border)
                    .set_min_height(lower)
                    .set_max_height(upper)
                    .set_min_width(lower)
                    .set_max_width(upper)
                )
                total = content + 2 * padding + 2 * margin + (2 if border else 0)
                expected = max(lower, total)
                if upper is not None:
                    expected = min(expected, upper)
                self.assertEqual(element.height, expected)
                self.assertEqual(element.width, expected)

    def test_inverted_bounds_keep_clamp_order(self) -> None:
        element = Element(5, 5).set_min_height(9).set_max_height(4)
        self.assertEqual(element.height, 4)

    def test_min_and_max_setters(self) -> None:
        element = Element(10, 5)
        element.set_min_width(3).set_min_height(4).set_max_width(15).set_max_height(12)
        self.assertEqual(element.min_width, 3)
        self.assertEqual(element.min_height, 4)
        self.assertEqual(element.max_width, 15)
        self.assertEqual(element.max_height, 12)
        element.set_max_width(None)
        self.assertIsNone(element.max_width)

    def test_set_height_and_width_mark_explicit(self) -> None:
        element = Element()
        self.assertFalse(element.height_explicit)
        element.set_height(4).set_width(9)
        self.assertTrue(element.height_explicit)
        self.assertTrue(element.width_explicit)
        self.assertEqual((element.height, element.width), (4, 9))


class ShorthandTests(unittest.TestCase):
    def test_border_shorthand(self) -> None:
        element = Element(5, 10)
        self.assertEqual(element.border.vertical + element.border.horizontal, 0)

        element.set_border(True, False)
        self.assertEqual(
            (element.border.top, element.border.right, element.border.bottom, element.border.left),
            (True, False, True, False),
        )

        element.set_border(False, True)
        self.assertEqual(
            (element.border.top, element.border.right, element.border.bottom, element.border.left),
            (False, True, False, True),
        )

        element.set_border(False, True, False, False)
        self.assertTrue(element.border.right)
        self.assertFalse(element.border.left)

        element.set_border()
        self.assertEqual((element.border.vertical, element.border.horizontal), (2, 2))

    def test_padding_shorthand(self) -> None:
        element = Element(5, 10)
        element.set_padding(5, 2)
        self.assertEqual(
            (element.padding.top, element.padding.right, element.padding.bottom, element.padding.left),
            (5, 2, 5, 2),
        )
        element.set_padding(1, 2, 3, 4)
        self.assertEqual(
            (element.padding.top, element.padding.right, element.padding.bottom, element.padding.left),
            (1, 2, 3, 4),
        )
        element.set_padding(3)
        self.assertEqual((element.padding.vertical, element.padding.horizontal), (6, 6))

    def test_margin_shorthand(self) -> None:
        element = Element(5, 10)
        element.set_margin(5, 2)
        self.assertEqual((element.margin.top, element.margin.left), (5, 2))
        element.set_margin(1, 2, 3, 4)
        self.assertEqual(
            (element.margin.top, element.margin.right, element.margin.bottom, element.margin.left),
            (1, 2, 3, 4),
        )

    def test_enum_setters_accept_strings(self) -> None:
        element = Element(5, 10)
        element.set_display("flex").set_justify_content("space-apart").set_align_items("CENTER")
        self.assertIs(element.display, Display.FLEX)
        self.assertIs(element.justify_content, FlexAlign.SPACE_APART)
        self.assertIs(element.align_items, FlexAlign.CENTER)


class ConfigurationTests(unittest.TestCase):
    def test_rejects_invalid_values(self) -> None:
        element = Element(5, 10)
        with self.assertRaises(ConfigurationError):
            element.set_padding(-1)
        with self.assertRaises(ConfigurationError):
            element.set_margin(1, 2, 3)
        with self.assertRaises(ConfigurationError):
            element.set_padding()
        with self.assertRaises(ConfigurationError):
            element.set_height("3")
        with self.assertRaises(ConfigurationError):
            element.set_display("grid")
        with self.assertRaises(ConfigurationError):
            element.set_border(1, 0)
        with self.assertRaises(ConfigurationError):
            element.insert_child("child")
        with self.assertRaises(ConfigurationError):
            Element(2.5, 3)

    def test_failed_call_leaves_state_unchanged(self) -> None:
        element = Element(5, 10).set_padding(2)
        with self.assertRaises(ConfigurationError):
            element.set_padding(1, -1)
        self.assertEqual(element.padding.top, 2)


class LockingTests(unittest.TestCase):
    def test_setters_succeed_before_children(self) -> None:
        element = Element(5, 10)
        element.set_padding(1).set_margin(1).set_display(Display.INLINE)
        self.assertIs(element.display, Display.INLINE)

    def test_setters_fail_after_child(self) -> None:
        element = Element(5, 10).set_padding(1)
        element.insert_child(Element(1, 1))
        with self.assertRaises(StateLockedError):
            element.set_padding(2)
        with self.assertRaises(StateLockedError):
            element.set_margin(2)
        with self.assertRaises(StateLockedError):
            element.set_display(Display.FLEX)
        self.assertEqual(element.padding.top, 1)
        self.assertIs(element.display, Display.BLOCK)

    def test_other_setters_stay_legal_after_child(self) -> None:
        element = Element(5, 10).insert_child(Element(1, 1))
        element.set_border().set_fill(True).set_height(7).set_width(3)
        element.set_justify_content(FlexAlign.CENTER).set_align_items(FlexAlign.FLEX_END)
        element.set_min_height(1).set_max_width(30)
        self.assertEqual(element.height, 9)

    def test_children_are_kept_in_order(self) -> None:
        parent = Element(10, 5)
        first = Element(2, 2)
        second = Element(3, 1)
        parent.insert_child(first).insert_children([second])
        self.assertEqual(parent.children, [first, second])


class BorderRenderTests(unittest.TestCase):
    def test_small_bordered_box(self) -> None:
        expected = "\n".join(
            [
                "#######",
                "#     #",
                "#     #",
                "#     #",
                "#######",
            ]
        )
        self.assertEqual(draw(Element(3, 5).set_border()), expected)

    def test_min_width(self) -> None:
        element = Element(3, 5).set_border().set_min_width(15)
        expected = "\n".join(
            [
                "###############",
                "#             #",
                "#             #",
                "#             #",
                "###############",
            ]
        )
        self.assertEqual(draw(element), expected)

    def test_max_height(self) -> None:
        element = Element(25, 25).set_border().set_max_height(8)
        lines = draw(element).split("\n")
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], "#" * 27)
        self.assertEqual(lines[-1], "#" * 27)
        self.assertEqual(lines[3], "#" + " " * 25 + "#")

    def test_max_width(self) -> None:
        element = Element(6, 25).set_border().set_max_width(10)
        lines = draw(element).split("\n")
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], "#" * 10)
        self.assertEqual(lines[1], "#        #")

    def test_single_sides(self) -> None:
        blank = " " * 25
        cases = {
            (True, False, False, False): ["#" * 25] + [blank] * 6,
            (False, True, False, False): [blank + "#"] * 6,
            (False, False, True, False): [blank] * 6 + ["#" * 25],
            (False, False, False, True): ["#" + blank] * 6,
            (True, True, True, False): ["#" * 26] + [blank + "#"] * 6 + ["#" * 26],
        }
        for sides, expected in cases.items():
            with self.subTest(sides=sides):
                element = Element(6, 25).set_border(*sides)
                self.assertEqual(draw(element), "\n".join(expected))

    def test_fill(self) -> None:
        element = Element(6, 25).set_border().set_fill(True)
        self.assertEqual(draw(element), "\n".join(["#" * 27] * 8))

    def test_border_is_inset_by_margin(self) -> None:
        element = Element(1, 3).set_margin(1, 2).set_border()
        expected = "\n".join(
            [
                "         ",
                "  #####  ",
                "  #   #  ",
                "  #####  ",
                "         ",
            ]
        )
        self.assertEqual(draw(element), expected)

    def test_render_returns_character_grid(self) -> None:
        grid = Element(1, 2).set_border(False, True).render()
        self.assertEqual(grid, [["#", " ", " ", "#"]])

    def test_empty_element_renders_nothing(self) -> None:
        self.assertEqual(Element().render(), [])


if __name__ == "__main__":
    unittest.main()
