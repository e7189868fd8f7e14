"""
Tests for the lexical rule table.

The table's order is part of the grammar, so these tests pin it down.

Author: xwest
"""

import re
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinyc.lexer import Lexer, Rule, Handler, RULE_TABLE, TokenType, build_rule_table
from tinyc.lexer.rules import FIXED_ORDER, _fixed, _validate


class TestRuleTable(unittest.TestCase):
    """Structure and ordering of the built-in table."""

    def setUp(self):
        self.names = [rule.name for rule in RULE_TABLE]

    def test_build_is_deterministic(self):
        first = build_rule_table()
        second = build_rule_table()
        self.assertEqual(
            [(r.name, r.pattern.pattern, r.handler, r.token_type) for r in first],
            [(r.name, r.pattern.pattern, r.handler, r.token_type) for r in second]
        )

    def test_table_is_immutable(self):
        self.assertIsInstance(RULE_TABLE, tuple)
        with self.assertRaises(AttributeError):
            RULE_TABLE[0].name = "other"

    def test_trivia_first(self):
        self.assertEqual(self.names[:3], ["whitespace", "block_comment", "unterminated_comment"])

    def test_two_char_operators_precede_prefixes(self):
        """Test every two-character operator comes before its first character."""
        for text in ("==", "!=", "<=", ">=", "&&", "||"):
            with self.subTest(text=text):
                longer = FIXED_ORDER.index(text)
                if text[0] in FIXED_ORDER:
                    self.assertLess(longer, FIXED_ORDER.index(text[0]))

    def test_block_comment_precedes_divide(self):
        self.assertLess(self.names.index("block_comment"), self.names.index("op_divide"))

    def test_literal_rules_precede_their_rejects(self):
        for name in ("string", "character"):
            with self.subTest(name=name):
                self.assertLess(self.names.index(name), self.names.index("unterminated_" + name))

    def test_every_fixed_spelling_has_a_rule(self):
        fixed_types = {rule.token_type for rule in RULE_TABLE if rule.handler is Handler.EMIT_FIXED}
        expected = set(TokenType) - {
            TokenType.END_OF_INPUT, TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING,
            TokenType.KEYWORD_IF, TokenType.KEYWORD_ELSE, TokenType.KEYWORD_WHILE,
            TokenType.KEYWORD_PRINT, TokenType.KEYWORD_PUTC,
        }
        self.assertEqual(fixed_types, expected)

    def test_matches_are_anchored(self):
        """Test a rule only matches at the given position, never further ahead."""
        integer = RULE_TABLE[self.names.index("integer")]
        self.assertIsNone(integer.match("ab12", 0))
        self.assertEqual(integer.match("ab12", 2), 4)

    def test_no_rule_accepts_empty_input(self):
        for rule in RULE_TABLE:
            with self.subTest(rule=rule.name):
                self.assertIsNone(rule.match("", 0))


class TestRuleValidation(unittest.TestCase):
    """Construction-time checks catch broken tables."""

    def test_shadowed_operator_rejected(self):
        """Test '<' listed before '<=' is refused."""
        with self.assertRaises(ValueError) as ctx:
            _validate((_fixed("<"), _fixed("<=")))
        self.assertIn("shadowed", str(ctx.exception))

    def test_correct_order_accepted(self):
        _validate((_fixed("<="), _fixed("<")))

    def test_empty_match_rejected(self):
        rule = Rule("spaces", re.compile(r" *"), Handler.SKIP)
        with self.assertRaises(ValueError):
            _validate((rule,))

    def test_reject_needs_error_factory(self):
        rule = Rule("bad", re.compile(r"\$"), Handler.REJECT)
        with self.assertRaises(ValueError):
            _validate((rule,))

    def test_zero_length_match_at_runtime(self):
        """Test a rule that matches without consuming is a hard error."""
        rule = Rule("lookahead", re.compile(r"(?=a)"), Handler.SKIP)
        with self.assertRaises(RuntimeError):
            Lexer("a", rules=(rule,)).tokenize()

    def test_custom_table_order_changes_result(self):
        """Test first-match, not longest-match, decides."""
        rules = (_fixed("<"), _fixed("="))
        tokens = Lexer("<=", rules=rules).tokenize()
        self.assertEqual(
            [token.type for token in tokens],
            [TokenType.OP_LESS, TokenType.OP_ASSIGN, TokenType.END_OF_INPUT]
        )


if __name__ == "__main__":
    unittest.main()
