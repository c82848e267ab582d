import os
import random
import unittest
from unittest import mock

from keytrainer.app.presets import ALPHABET_PRESETS, resolve_alphabet
from keytrainer.util.randomness import make_random_source, seed_if_needed


class ResolveAlphabetTests(unittest.TestCase):
    def test_default_is_lowercase(self) -> None:
        self.assertEqual(resolve_alphabet(None), "abcdefghijklmnopqrstuvwxyz")
        self.assertEqual(resolve_alphabet(""), ALPHABET_PRESETS["lowercase"])

    def test_preset_names(self) -> None:
        self.assertEqual(resolve_alphabet("home_row"), "asdfghjkl")
        self.assertEqual(resolve_alphabet(" Digits "), "0123456789")

    def test_literal_characters_deduplicated(self) -> None:
        self.assertEqual(resolve_alphabet("abca b"), "abc")


class RandomSourceTests(unittest.TestCase):
    def test_seeded_sources_repeat(self) -> None:
        a = make_random_source(5)
        b = make_random_source(5)
        self.assertEqual([a() for _ in range(5)], [b() for _ in range(5)])

    def test_unseeded_uses_process_generator(self) -> None:
        self.assertIs(make_random_source(), random.random)

    def test_seed_env_var(self) -> None:
        with mock.patch.dict(os.environ, {"SEED": "11"}):
            seed_if_needed()
            first = random.random()
            seed_if_needed()
            self.assertEqual(random.random(), first)

    def test_invalid_seed_env_ignored(self) -> None:
        with mock.patch.dict(os.environ, {"SEED": "abc"}):
            seed_if_needed()


if __name__ == "__main__":
    unittest.main()
