import unittest

from application.services.query_parser import Lexer, TokenKind, parse_query
from domain.entities import Clause, Operator
from domain.errors import InvalidQueryError


class TestLexer(unittest.TestCase):
    def test_tokens_of_single_clause(self):
        tokens = Lexer("a.b:>1").tokens()
        self.assertEqual(
            [(token.kind, token.text) for token in tokens],
            [
                (TokenKind.KEY, "a"),
                (TokenKind.KEY, "b"),
                (TokenKind.OPERATOR, ">"),
                (TokenKind.VALUE, "1"),
                (TokenKind.EOF, ""),
            ],
        )

    def test_unterminated_quote(self):
        with self.assertRaises(InvalidQueryError) as ctx:
            Lexer('a:"open').tokens()
        self.assertEqual(ctx.exception.position, 2)

    def test_colon_at_end_of_input(self):
        with self.assertRaises(InvalidQueryError):
            Lexer("a:").tokens()


class TestParseQuery(unittest.TestCase):
    def test_empty_query(self):
        query = parse_query("")
        self.assertTrue(query.is_empty)
        self.assertEqual(len(query), 0)

    def test_equality_clause(self):
        query = parse_query("a.b:1")
        self.assertEqual(query.clauses, (Clause(path=("a", "b"), operator=Operator.EQ, value="1"),))

    def test_relational_clauses(self):
        query = parse_query("age:>30 score:<2.5")
        self.assertEqual(
            query.clauses,
            (
                Clause(path=("age",), operator=Operator.GT, value="30"),
                Clause(path=("score",), operator=Operator.LT, value="2.5"),
            ),
        )

    def test_multiple_spaces_and_surrounding_spaces(self):
        query = parse_query("  x:1    y:hi  ")
        self.assertEqual([clause.dotted_path for clause in query], ["x", "y"])
        self.assertEqual([clause.value for clause in query], ["1", "hi"])

    def test_quoted_key_and_value_keep_spaces(self):
        query = parse_query('" a ":" hello "')
        self.assertEqual(query.clauses, (Clause(path=(" a ",), operator=Operator.EQ, value=" hello "),))

    def test_quoted_segment_in_path(self):
        query = parse_query('user."first name":>"10"')
        self.assertEqual(query.clauses[0].path, ("user", "first name"))
        self.assertEqual(query.clauses[0].operator, Operator.GT)
        self.assertEqual(query.clauses[0].value, "10")

    def test_quoted_value_may_contain_special_characters(self):
        query = parse_query('url:"http://example.com/a b"')
        self.assertEqual(query.clauses[0].value, "http://example.com/a b")

    def test_invalid_queries(self):
        for text in ["a", "a:", ":1", "a:>", "a:<", "a b:1", "a:b:c", "a::1", 'a:""', "   ", "x:1 y"]:
            with self.subTest(text=text):
                with self.assertRaises(InvalidQueryError):
                    parse_query(text)

    def test_invalid_query_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_query("a")


if __name__ == "__main__":
    unittest.main()
