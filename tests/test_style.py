# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
import unittest

from easysgr.ansi import Attribute, SequenceSGR
from easysgr.color import Color, ColorRGB, ColorSlot, color_codes
from easysgr.common import ArgTypeError
from easysgr.intention import Intention, NOOP_INTENTION
from easysgr.style import NOOP_STYLE, SLOTS, Style, Styles, make_style, merge_styles


class StyleSetTestCase(unittest.TestCase):
    def test_set_returns_new_instance(self):
        base = Style()
        result = base.set(Attribute.BOLD, Intention.apply(1))

        self.assertEqual(base, NOOP_STYLE)
        self.assertEqual(result.bold, Intention.apply(1))

    def test_set_by_name(self):
        style = Style().set('fg', Intention.clear(39)).set('italic', Intention.apply(3))
        self.assertEqual(style.get(ColorSlot.FOREGROUND), Intention.clear(39))
        self.assertEqual(style.get(Attribute.ITALIC), Intention.apply(3))

    def test_set_unchanged(self):
        style = Style.of('bold').unchanged(Attribute.BOLD)
        self.assertEqual(style, NOOP_STYLE)

    def test_set_invalid_slot_fails(self):
        with self.assertRaises(LookupError):
            Style().set('overline', Intention.apply(53))
        with self.assertRaises(ArgTypeError):
            Style().set(5, Intention.apply(53))

    def test_set_invalid_intention_fails(self):
        with self.assertRaises(ArgTypeError):
            Style().set(Attribute.BOLD, True)

    def test_colors(self):
        style = Style().with_fg(Color.RED).with_bg(ColorRGB(1, 2, 3))
        self.assertEqual(style.fg, Intention.apply(31))
        self.assertEqual(style.bg, Intention.apply(48, 2, 1, 2, 3))

    def test_clear_colors(self):
        style = Style().clear_fg().clear_bg()
        self.assertEqual(style.fg, Intention.clear(39))
        self.assertEqual(style.bg, Intention.clear(49))

    def test_bool(self):
        self.assertFalse(NOOP_STYLE)
        self.assertTrue(Style().clear(Attribute.HIDDEN))


class StyleReduceTestCase(unittest.TestCase):
    def test_every_attribute_apply(self):
        for attribute in Attribute:
            with self.subTest(attribute=attribute):
                self.assertEqual(Style().apply(attribute).reduce().params, [attribute.apply_code])

    def test_every_attribute_clear(self):
        for attribute in Attribute:
            with self.subTest(attribute=attribute):
                self.assertEqual(Style().clear(attribute).reduce().params, [attribute.clear_code])

    def test_every_color_apply(self):
        for color in Color:
            with self.subTest(color=color):
                self.assertEqual(Style().with_fg(color).reduce().params, list(color_codes(color)))
                self.assertEqual(Style().with_bg(color).reduce().params, list(color_codes(color, True)))

    def test_fixed_order(self):
        expected = SequenceSGR(1, 31, 44)
        self.assertEqual(Style().apply('bold').with_fg('red').with_bg('blue').reduce(), expected)
        self.assertEqual(Style().with_bg('blue').with_fg('red').apply('bold').reduce(), expected)
        self.assertEqual(Style().with_fg('red').with_bg('blue').apply('bold').reduce(), expected)

    def test_emphasis_order_follows_catalog(self):
        style = Style().apply('strikethrough').clear('italic').apply('bold')
        self.assertEqual(style.reduce().params, [1, 23, 9])

    def test_empty_reduction(self):
        self.assertEqual(NOOP_STYLE.reduce().params, [])
        self.assertEqual(NOOP_STYLE.reduce().assemble(), '')

    def test_shared_clear_code_is_emitted_once(self):
        style = Style().clear('bold').clear('dim').clear_fg()
        self.assertEqual(style.reduce().params, [22, 39])

    def test_extended_colors(self):
        style = Style().with_fg(208).with_bg('#ff3300')
        self.assertEqual(style.reduce().params, [38, 5, 208, 48, 2, 255, 51, 0])


class StyleMergeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.samples = [
            NOOP_STYLE,
            Style.of('bold', fg='red'),
            Style().clear('italic').with_bg(17),
            Style.of('underline', 'blink').clear_fg().clear_bg(),
        ]

    def test_identity(self):
        for style in self.samples:
            with self.subTest(style=style):
                self.assertEqual(style.merge(NOOP_STYLE), style)
                self.assertEqual(NOOP_STYLE.merge(style), style)

    def test_override_wins(self):
        merged = Style().apply(Attribute.BOLD).merge(Style().clear(Attribute.BOLD))
        self.assertEqual(merged.bold, Intention.clear(22))

    def test_unchanged_keeps_base(self):
        merged = Style.of('bold', fg='red').merge(Style.of(fg='blue'))
        self.assertEqual(merged, Style.of('bold', fg='blue'))

    def test_not_commutative(self):
        a, b = Style.of(fg='red'), Style.of(fg='blue')
        self.assertNotEqual(a.merge(b), b.merge(a))

    def test_associative(self):
        a, b, c = self.samples[1], self.samples[2], self.samples[3]
        self.assertEqual(a.merge(b).merge(c), a.merge(b.merge(c)))

    def test_merge_styles(self):
        result = merge_styles(Style.of('italic', fg='red'), Style.of(fg='green'), Style.of(fg='blue'))
        self.assertEqual(result.reduce().params, [3, 34])

    def test_merge_invalid_type_fails(self):
        with self.assertRaises(ArgTypeError):
            NOOP_STYLE.merge('bold')


class StyleClosingTestCase(unittest.TestCase):
    def test_closing_reverses_applied(self):
        style = Style.of('bold', 'underline', fg='red', bg=Color.WHITE)
        self.assertEqual(style.closing().reduce().params, [22, 24, 39, 49])

    def test_closing_ignores_cleared(self):
        style = Style.of('bold').clear('italic').clear_fg()
        self.assertEqual(style.closing(), Style().clear('bold'))

    def test_closing_of_noop(self):
        self.assertEqual(NOOP_STYLE.closing(), NOOP_STYLE)


class MakeStyleTestCase(unittest.TestCase):
    def test_none(self):
        self.assertIs(make_style(None), NOOP_STYLE)

    def test_style_is_returned_as_is(self):
        style = Style.of('dim')
        self.assertIs(make_style(style), style)

    def test_attribute(self):
        self.assertEqual(make_style(Attribute.BLINK), Style.of('blink'))
        self.assertEqual(make_style('hidden'), Style.of('hidden'))

    def test_color(self):
        self.assertEqual(make_style('cyan'), Style.of(fg=Color.CYAN))
        self.assertEqual(make_style(100), Style.of(fg=100))

    def test_invalid_type_fails(self):
        with self.assertRaises(ArgTypeError):
            make_style(0.5)


class StyleReprTestCase(unittest.TestCase):
    def test_repr(self):
        self.assertEqual(repr(Style.of('bold', fg='red')), '<Style[bold,fg=31]>')
        self.assertEqual(repr(Style().clear('italic').with_bg(208)), '<Style[-italic,bg=48;5;208]>')
        self.assertEqual(repr(NOOP_STYLE), '<Style[NOP]>')

    def test_slots_order(self):
        self.assertEqual([str(s) for s in SLOTS][-2:], ['fg', 'bg'])
        self.assertIs(NOOP_STYLE.fg, NOOP_INTENTION)


class PresetStylesTestCase(unittest.TestCase):
    def test_presets_are_built_on_import(self):
        self.assertEqual(Styles.WARNING.reduce().params, [33])
        self.assertEqual(Styles.ERROR_LABEL.reduce().params, [1, 31])
        self.assertEqual(Styles.ACCENT.reduce().params, [97])

    def test_slot_names(self):
        self.assertEqual(Style().set('fg', Intention.apply(32)).get(ColorSlot.FOREGROUND), Intention.apply(32))
        self.assertEqual(Style.of('italic').get('ITALIC'), Intention.apply(3))
