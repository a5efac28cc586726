# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
import unittest

from easysgr.common import LogicError
from easysgr.intention import Intent, Intention, NOOP_INTENTION


class IntentionTestCase(unittest.TestCase):
    def test_default_is_unchanged(self):
        self.assertEqual(Intention(), NOOP_INTENTION)
        self.assertTrue(NOOP_INTENTION.is_unchanged)
        self.assertFalse(NOOP_INTENTION)

    def test_apply(self):
        intention = Intention.apply(1)
        self.assertIs(intention.intent, Intent.APPLY)
        self.assertEqual(intention.codes, (1,))
        self.assertTrue(intention)

    def test_clear(self):
        intention = Intention.clear(22)
        self.assertTrue(intention.is_clear)
        self.assertFalse(intention.is_apply)

    def test_unchanged_with_codes_fails(self):
        with self.assertRaises(LogicError):
            Intention(Intent.UNCHANGED, (1,))

    def test_apply_without_codes_fails(self):
        with self.assertRaises(LogicError):
            Intention.apply()

    def test_override_wins(self):
        self.assertEqual(Intention.apply(1).merge(Intention.clear(22)), Intention.clear(22))

    def test_unchanged_override_keeps_base(self):
        self.assertEqual(Intention.apply(1).merge(NOOP_INTENTION), Intention.apply(1))
        self.assertEqual(NOOP_INTENTION.merge(Intention.clear(22)), Intention.clear(22))

    def test_repr(self):
        self.assertEqual(repr(Intention.apply(38, 5, 1)), '<Apply[38;5;1]>')
        self.assertEqual(repr(NOOP_INTENTION), '<Unchanged>')
