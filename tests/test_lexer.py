"""Unit tests for the lexer passes and token stream."""

import unittest

from prattcalc_pkg.lexer import (
    Lexer,
    merge_decimal_points,
    merge_numeric_atoms,
    reclassify_operators,
    scan,
    tokenize,
)
from prattcalc_pkg.tokens import TokenType
from prattcalc_pkg.types import InvalidTokenError, UnexpectedTokenError


def texts(tokens):
    return [token.expr() for token in tokens]


class TestPasses(unittest.TestCase):
    """Test each tokenizer pass on its own."""

    def test_scan_classifies_characters(self):
        tokens = scan("1 + x")
        self.assertEqual(
            [t.type_of() for t in tokens],
            [TokenType.NUMERIC, TokenType.OPERATOR, TokenType.SYMBOLIC],
        )

    def test_scan_never_looks_ahead(self):
        self.assertEqual(texts(scan("12")), ["1", "2"])
        self.assertEqual(texts(scan("sin")), ["s", "i", "n"])

    def test_merge_numeric_atoms(self):
        self.assertEqual(texts(merge_numeric_atoms(scan("123+45"))), ["123", "+", "45"])

    def test_merge_decimal_points(self):
        tokens = merge_decimal_points(merge_numeric_atoms(scan("12.34")))
        self.assertEqual(texts(tokens), ["12.34"])

    def test_reclassify_operators(self):
        tokens = tokenize("sin(x)")
        self.assertEqual(tokens[0].type_of(), TokenType.OPERATOR)
        self.assertEqual(tokens[0].expr(), "sin")
        self.assertEqual(tokens[2].type_of(), TokenType.SYMBOLIC)

    def test_reclassify_leaves_plain_names(self):
        tokens = reclassify_operators(tokenize("abc"))
        self.assertEqual(tokens[0].type_of(), TokenType.SYMBOLIC)


class TestTokenize(unittest.TestCase):
    """Test the full tokenizer."""

    def test_simple_expression(self):
        self.assertEqual(texts(tokenize("2+3")), ["2", "+", "3", "<Eof>"])

    def test_spaces_ignored(self):
        self.assertEqual(len(tokenize("2 + 3")), 4)
        self.assertEqual(len(tokenize("  2\t+\n3 ")), 4)

    def test_multi_digit_numbers(self):
        self.assertEqual(texts(tokenize("123")), ["123", "<Eof>"])

    def test_decimal_numbers(self):
        tokens = tokenize("12.34")
        self.assertEqual(texts(tokens), ["12.34", "<Eof>"])
        self.assertEqual(tokens[0].value(), 12.34)

    def test_multi_letter_names(self):
        tokens = tokenize("abc+d")
        self.assertEqual(texts(tokens), ["abc", "+", "d", "<Eof>"])

    def test_name_with_trailing_digits(self):
        tokens = tokenize("x0+x12")
        self.assertEqual(texts(tokens), ["x0", "+", "x12", "<Eof>"])
        self.assertEqual(tokens[0].type_of(), TokenType.SYMBOLIC)

    def test_operator_name_keeps_its_argument(self):
        tokens = tokenize("sin2")
        self.assertEqual(texts(tokens), ["sin", "2", "<Eof>"])
        self.assertEqual(tokens[0].type_of(), TokenType.OPERATOR)

    def test_sqrt_spelled_out(self):
        tokens = tokenize("sqrt(16)")
        self.assertEqual(texts(tokens), ["sqrt", "(", "16", ")", "<Eof>"])

    def test_two_decimal_points_is_invalid(self):
        with self.assertRaises(InvalidTokenError):
            tokenize("1.2.3")

    def test_empty_input(self):
        self.assertEqual(texts(tokenize("")), ["<Eof>"])


class TestLexerStream(unittest.TestCase):
    """Test the pull stream with pushback."""

    def test_peek_and_next(self):
        lexer = Lexer("2+3")
        self.assertEqual(lexer.peek().expr(), "2")
        self.assertEqual(lexer.next().expr(), "2")
        self.assertEqual(lexer.next().expr(), "+")

    def test_rollback(self):
        lexer = Lexer("2+3")
        token = lexer.next()
        lexer.roll_back(token)
        self.assertEqual(lexer.peek().expr(), "2")

    def test_rollback_of_other_token(self):
        lexer = Lexer("2+3")
        first = lexer.next()
        lexer.next()
        lexer.roll_back(first)
        self.assertEqual(lexer.next().expr(), "2")
        self.assertEqual(lexer.next().expr(), "3")

    def test_to_list_and_len(self):
        lexer = Lexer("2+3")
        self.assertEqual(len(lexer), 4)
        self.assertEqual(texts(lexer.to_list()), ["2", "+", "3", "<Eof>"])
        self.assertEqual(texts(lexer), ["2", "+", "3", "<Eof>"])
        self.assertEqual(lexer.expr(), "2\n+\n3\n<Eof>")

    def test_at_end(self):
        lexer = Lexer("7")
        self.assertFalse(lexer.at_end())
        lexer.next()
        self.assertTrue(lexer.at_end())

    def test_reading_past_end(self):
        lexer = Lexer("")
        lexer.next()
        with self.assertRaises(UnexpectedTokenError):
            lexer.next()
        with self.assertRaises(UnexpectedTokenError):
            lexer.peek()


if __name__ == "__main__":
    unittest.main()
