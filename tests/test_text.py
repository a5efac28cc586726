# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
import unittest

from easysgr.ansi import Attribute
from easysgr.color import Color
from easysgr.common import ArgTypeError
from easysgr.intention import Intention
from easysgr.settings import SettingsManager
from easysgr.style import NOOP_STYLE, Style
from easysgr.text import RESET, ResetMarker, StyledText, merge


class StyledTextBuilderTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_created_unchanged(self):
        text = StyledText("Hi")
        self.assertEqual(text.style, NOOP_STYLE)
        self.assertEqual((text.prefix, text.suffix), ("", ""))

    def test_chaining_is_value_based(self):
        base = StyledText("Hi")
        bold = base.bold()

        self.assertEqual(base.style, NOOP_STYLE)
        self.assertEqual(bold.style, Style.of('bold'))

    def test_chain_override(self):
        text = StyledText("x").italic().color(Color.RED).color(Color.BLUE)
        self.assertEqual(text.style.reduce().params, [3, 34])

    def test_emphasis_shortcuts(self):
        text = (StyledText("x").bold().dim().italic().underline()
                .blink().inverse().hidden().strikethrough())
        self.assertEqual(text.style.reduce().params, [1, 2, 3, 4, 5, 7, 8, 9])

    def test_clear_and_default_colors(self):
        text = StyledText("x").clear(Attribute.UNDERLINE).default_color().default_background()
        self.assertEqual(text.style.reduce().params, [24, 39, 49])

    def test_background(self):
        self.assertEqual(StyledText("x").background('green').style.bg, Intention.apply(42))

    def test_set(self):
        text = StyledText("x").set(Attribute.BOLD, Intention.apply(1))
        self.assertEqual(text.style, Style.of('bold'))

    def test_with_style_merges(self):
        text = StyledText("x").bold().with_style(Style.of(fg='red')).with_style('underline')
        self.assertEqual(text.style, Style.of('bold', 'underline', fg='red'))

    def test_strings(self):
        text = StyledText("x").with_prefix("<").with_suffix(">").with_text("y")
        self.assertEqual((text.prefix, text.text, text.suffix), ("<", "y", ">"))

    def test_non_str_payload_is_converted(self):
        self.assertEqual(StyledText(42).text, "42")

    def test_invalid_style_fails(self):
        with self.assertRaises(ArgTypeError):
            StyledText("x", style='bold')

    def test_str_renders(self):
        self.assertEqual(str(StyledText("Hi").bold()), '\x1b[1mHi')

    def test_repr(self):
        self.assertEqual(repr(StyledText("Hi").bold().color('red')), '<StyledText[bold,fg=31](2, "Hi")>')


class StyledTextMergeTestCase(unittest.TestCase):
    def test_identity(self):
        text = StyledText("Hi", prefix="[", suffix="]").bold()
        self.assertEqual(text.merge(StyledText()), text)
        self.assertEqual(StyledText().merge(text), text)

    def test_override_wins(self):
        base = StyledText("a", prefix="[").bold().color('red')
        override = StyledText("b").clear('bold')

        result = merge(base, override)

        self.assertEqual(result.text, "b")
        self.assertEqual(result.prefix, "[")
        self.assertEqual(result.style, Style().clear('bold').with_fg('red'))

    def test_invalid_type_fails(self):
        with self.assertRaises(ArgTypeError):
            StyledText("x").merge(Style())


class ResetMarkerTestCase(unittest.TestCase):
    def test_singleton(self):
        self.assertIs(ResetMarker(), RESET)
        self.assertEqual(repr(RESET), 'RESET')
