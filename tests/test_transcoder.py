"""
Tests for the Transcoder
=========================
Case handling, pass-through characters, decode-by-rewind, streaming.

Usage:
    python -m pytest tests/test_transcoder.py -v
"""
import sys
import os
import io
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from enigma import Machine
from settings import MachineSettings, WheelSettings
from transcoder import Transcoder


def settings(plugs=None):
    return MachineSettings(
        model="M3",
        reflector="B",
        wheels=[WheelSettings("III"), WheelSettings("II"), WheelSettings("I")],
        plugboard=plugs or [],
    )


class TestEncode(unittest.TestCase):

    def test_golden_letter(self):
        self.assertEqual(Transcoder.from_settings(settings()).encode("A"), "F")
        self.assertEqual(Transcoder.from_settings(settings()).encode("f"), "a")

    def test_case_and_punctuation_survive(self):
        text = "Hi, World!"
        out = Transcoder.from_settings(settings()).encode(text)
        self.assertEqual(len(out), len(text))
        for a, b in zip(text, out):
            if a.isalpha():
                self.assertTrue(b.isalpha())
                self.assertEqual(a.isupper(), b.isupper())
            else:
                self.assertEqual(a, b)

    def test_passthrough_does_not_step(self):
        t = Transcoder.from_settings(settings())
        t.encode("123 -- ?! \n\té")
        self.assertEqual(t.machine.positions, "AAA")

    def test_round_trip(self):
        text = "Attack at dawn. Bring 3 boats & the *usual* gear!"
        s = settings(["AQ", "XZ", "MP"])
        cipher = Transcoder.from_settings(s).encode(text)
        self.assertNotEqual(cipher, text)
        self.assertEqual(Transcoder.from_settings(s).encode(cipher), text)

    def test_rewind(self):
        t = Transcoder.from_settings(settings())
        cipher = t.encode("Secret Message")
        t.rewind()
        self.assertEqual(t.machine.positions, "AAA")
        self.assertEqual(t.encode(cipher), "Secret Message")

    def test_rewind_needs_settings(self):
        t = Transcoder(Machine.from_settings(settings()))
        with self.assertRaises(RuntimeError):
            t.rewind()

    def test_state_carries_between_calls(self):
        whole = Transcoder.from_settings(settings()).encode("HELLOWORLD")
        t = Transcoder.from_settings(settings())
        self.assertEqual(t.encode("HELLO") + t.encode("WORLD"), whole)


class TestStream(unittest.TestCase):

    def test_small_chunks_match_one_shot(self):
        text = "The quick brown fox\njumps over the lazy dog.\n" * 20
        expected = Transcoder.from_settings(settings()).encode(text)

        out = io.StringIO()
        count = Transcoder.from_settings(settings()).transcode_stream(
            io.StringIO(text), out, chunk_size=7
        )
        self.assertEqual(out.getvalue(), expected)
        self.assertEqual(count, len(text))

    def test_empty_stream(self):
        out = io.StringIO()
        self.assertEqual(Transcoder.from_settings(settings()).transcode_stream(io.StringIO(""), out), 0)
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
