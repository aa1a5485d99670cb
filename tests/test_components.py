"""
Tests for single machine parts
===============================
Rotor contacts and stepping, plugboard, keyboard.

Usage:
    python -m pytest tests/test_components.py -v
"""
import sys
import os
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import wiring
from errors import InvalidConfiguration
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Rotor, setting_offset


# ─────────────────────────────────────────────
#  Rotor
# ─────────────────────────────────────────────

class TestRotorStep(unittest.TestCase):

    def test_step_from_notch_turns_over(self):
        rotor = Rotor(wiring.I, ground="Q")
        self.assertTrue(rotor.step())
        self.assertEqual(rotor.window, "R")

    def test_step_elsewhere_does_not_turn_over(self):
        rotor = Rotor(wiring.I, ground="A")
        self.assertFalse(rotor.step())
        self.assertEqual(rotor.window, "B")

    def test_step_wraps(self):
        rotor = Rotor(wiring.V, ground="Z")
        self.assertTrue(rotor.step())
        self.assertEqual(rotor.window, "A")

    def test_two_notches(self):
        rotor = Rotor(wiring.VI, ground="M")
        self.assertTrue(rotor.step())
        rotor.set_ground("Z")
        self.assertTrue(rotor.step())
        self.assertFalse(rotor.step())

    def test_greek_wheel_has_no_notch(self):
        rotor = Rotor(wiring.BETA)
        for _ in range(26):
            self.assertFalse(rotor.step())
        self.assertEqual(rotor.window, "A")


class TestRotorContacts(unittest.TestCase):

    def test_offset_is_ring_minus_ground(self):
        rotor = Rotor(wiring.I, ring="C", ground="A")
        self.assertEqual(rotor.offset, 2)
        self.assertEqual(rotor.entry_contact(0), 24)
        self.assertEqual(rotor.exit_contact(24), 0)

    def test_contacts_cancel(self):
        rotor = Rotor(wiring.III, ring="F", ground="T")
        for sig in range(26):
            self.assertEqual(rotor.exit_contact(rotor.entry_contact(sig)), sig)

    def test_backward_undoes_forward(self):
        rotor = Rotor(wiring.VII, ring="K", ground="D")
        for sig in range(26):
            self.assertEqual(rotor.backward(rotor.forward(sig)), sig)

    def test_forward_at_rest(self):
        # ring A, ground A: plain table lookup
        rotor = Rotor(wiring.I)
        self.assertEqual(rotor.forward(0), 4)     # A -> E
        self.assertEqual(rotor.backward(4), 0)

    def test_forward_one_step_in(self):
        rotor = Rotor(wiring.I, ground="B")
        self.assertEqual(rotor.forward(0), 9)     # A -> B -> K -> J


class TestSettingOffset(unittest.TestCase):

    def test_letters_and_numbers(self):
        self.assertEqual(setting_offset("A"), 0)
        self.assertEqual(setting_offset("z"), 25)
        self.assertEqual(setting_offset(1), 0)
        self.assertEqual(setting_offset(26), 25)

    def test_rejects_out_of_range(self):
        for bad in (0, 27, "", "AB", "1", True, None, 2.0):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidConfiguration):
                    setting_offset(bad)


# ─────────────────────────────────────────────
#  Plugboard
# ─────────────────────────────────────────────

class TestPlugboard(unittest.TestCase):

    def test_swap(self):
        pb = Plugboard(["AB", "CD"])
        self.assertEqual(pb.swap("A"), "B")
        self.assertEqual(pb.swap("B"), "A")
        self.assertEqual(pb.swap("D"), "C")
        self.assertEqual(pb.swap("E"), "E")

    def test_swap_is_involution(self):
        pb = Plugboard(["QW", "ER", "TZ", "UI", "OP"])
        for ch in pb.alphabet:
            self.assertEqual(pb.swap(pb.swap(ch)), ch)

    def test_pair_forms(self):
        pb = Plugboard([("a", "m"), ["F", "k"], "xy"])
        self.assertEqual(pb.pairs, ["AM", "FK", "XY"])
        self.assertEqual(pb.forward(0), 12)
        self.assertEqual(pb.backward(12), 0)

    def test_empty(self):
        pb = Plugboard()
        self.assertEqual(pb.pairs, [])
        self.assertEqual(pb.forward(7), 7)

    def test_letter_used_twice(self):
        with self.assertRaises(InvalidConfiguration):
            Plugboard(["AB", "BC"])

    def test_self_pair(self):
        with self.assertRaises(InvalidConfiguration):
            Plugboard(["AA"])

    def test_malformed_pairs(self):
        for bad in ("ABC", "A", ["A", "B", "C"], ["A1"], 5, "A?"):
            with self.subTest(pair=bad):
                with self.assertRaises(InvalidConfiguration):
                    Plugboard([bad])


# ─────────────────────────────────────────────
#  Keyboard
# ─────────────────────────────────────────────

class TestKeyboard(unittest.TestCase):

    def test_round_trip(self):
        kb = Keyboard()
        self.assertEqual(kb.forward("C"), 2)
        self.assertEqual(kb.backward(25), "Z")

    def test_invalid(self):
        kb = Keyboard()
        with self.assertRaises(ValueError):
            kb.forward("a")
        with self.assertRaises(ValueError):
            kb.backward(26)


if __name__ == "__main__":
    unittest.main()
