"""Tests for the language token registry and TokensCatalog."""

import unittest

from domain.model.language import (
    DEFAULT_LANGUAGE,
    LANGUAGE_TOKENS,
    LanguageToken,
    TokensCatalog,
    token_value,
)


class TestLanguageToken(unittest.TestCase):
    """Test LanguageToken string-enum behavior."""

    def test_language_token_is_string_enum(self):
        self.assertEqual(LanguageToken.ENGLISH, 'english')
        self.assertEqual(LanguageToken.USER_DEFINED, 'user-defined')

    def test_language_token_from_string_value(self):
        self.assertEqual(LanguageToken('english'), LanguageToken.ENGLISH)

    def test_default_language_is_english(self):
        self.assertEqual(DEFAULT_LANGUAGE, LanguageToken.ENGLISH)

    def test_token_value_returns_plain_string(self):
        self.assertEqual(token_value(LanguageToken.ENGLISH), 'english')
        self.assertIs(type(token_value(LanguageToken.ENGLISH)), str)
        self.assertEqual(token_value('klingon'), 'klingon')

    def test_registry_is_immutable(self):
        self.assertIsInstance(LANGUAGE_TOKENS, frozenset)
        with self.assertRaises(AttributeError):
            LANGUAGE_TOKENS.add('klingon')


class TestTokensCatalog(unittest.TestCase):
    """Test the static catalog operations."""

    def test_get_all_language_token_keys(self):
        keys = TokensCatalog.get_all_language_token_keys()
        self.assertIn(list(LanguageToken)[0].name, keys)
        self.assertEqual(keys, ['ENGLISH', 'USER_DEFINED'])

    def test_get_all_language_tokens_contains_english(self):
        tokens = TokensCatalog.get_all_language_tokens()
        self.assertIn(LanguageToken.ENGLISH, tokens)
        self.assertIn('english', tokens)

    def test_get_all_language_tokens_contains_every_registry_value(self):
        self.assertEqual(set(TokensCatalog.get_all_language_tokens()), LANGUAGE_TOKENS)

    def test_language_available_true_for_known_token(self):
        self.assertTrue(TokensCatalog.language_available(LanguageToken.ENGLISH))
        self.assertTrue(TokensCatalog.language_available('english'))
        self.assertTrue(TokensCatalog.language_available('user-defined'))

    def test_language_available_false_for_unknown_token(self):
        self.assertFalse(TokensCatalog.language_available('asdf'))
        self.assertFalse(TokensCatalog.language_available('English'))
        self.assertFalse(TokensCatalog.language_available(''))

    def test_language_available_false_for_non_string(self):
        self.assertFalse(TokensCatalog.language_available(None))
        self.assertFalse(TokensCatalog.language_available(42))


if __name__ == '__main__':
    unittest.main()
