import unittest

from application.services.query_matcher import match, match_clause
from application.services.query_parser import parse_query
from domain.entities import Clause, Operator


def _clause(path: str, operator: Operator, value: str) -> Clause:
    return Clause(path=tuple(path.split(".")), operator=operator, value=value)


class TestMatchClause(unittest.TestCase):
    def test_equality_formats_scalars(self):
        document = {"n": 1, "f": 2.0, "g": 1.5, "b": True, "s": "hi"}
        self.assertTrue(match_clause(_clause("n", Operator.EQ, "1"), document))
        self.assertTrue(match_clause(_clause("f", Operator.EQ, "2"), document))
        self.assertTrue(match_clause(_clause("g", Operator.EQ, "1.5"), document))
        self.assertTrue(match_clause(_clause("b", Operator.EQ, "true"), document))
        self.assertTrue(match_clause(_clause("s", Operator.EQ, "hi"), document))
        self.assertFalse(match_clause(_clause("s", Operator.EQ, "HI"), document))

    def test_missing_or_non_object_intermediate(self):
        document = {"a": {"b": 1}, "c": 5}
        self.assertFalse(match_clause(_clause("a.x", Operator.EQ, "1"), document))
        self.assertFalse(match_clause(_clause("c.d", Operator.EQ, "5"), document))
        self.assertFalse(match_clause(_clause("z", Operator.GT, "0"), document))

    def test_objects_arrays_and_null_never_match(self):
        document = {"a": {"b": 1}, "arr": [1, 2, 3], "nothing": None}
        self.assertFalse(match_clause(_clause("a", Operator.EQ, "1"), document))
        self.assertFalse(match_clause(_clause("arr", Operator.EQ, "1"), document))
        self.assertFalse(match_clause(_clause("arr", Operator.GT, "0"), document))
        self.assertFalse(match_clause(_clause("nothing", Operator.EQ, "null"), document))

    def test_relational_is_strict(self):
        document = {"v": 2}
        self.assertTrue(match_clause(_clause("v", Operator.GT, "1"), document))
        self.assertFalse(match_clause(_clause("v", Operator.GT, "2"), document))
        self.assertTrue(match_clause(_clause("v", Operator.LT, "2.5"), document))
        self.assertFalse(match_clause(_clause("v", Operator.LT, "2"), document))

    def test_relational_coerces_numeric_strings(self):
        document = {"price": "10.5", "name": "ten"}
        self.assertTrue(match_clause(_clause("price", Operator.GT, "10"), document))
        self.assertFalse(match_clause(_clause("name", Operator.GT, "1"), document))

    def test_relational_rejects_booleans_and_bad_literals(self):
        document = {"flag": True, "v": 3}
        self.assertFalse(match_clause(_clause("flag", Operator.GT, "0"), document))
        self.assertFalse(match_clause(_clause("v", Operator.GT, "abc"), document))
        self.assertFalse(match_clause(_clause("v", Operator.LT, "nan"), document))

    def test_relational_rejects_padded_and_non_ascii_numbers(self):
        document = {"padded": " 5 ", "arabic": "٥", "plain": "5"}
        self.assertFalse(match_clause(_clause("padded", Operator.GT, "1"), document))
        self.assertFalse(match_clause(_clause("arabic", Operator.GT, "1"), document))
        self.assertTrue(match_clause(_clause("plain", Operator.GT, "1"), document))
        self.assertFalse(match_clause(_clause("plain", Operator.GT, " 1"), document))

    def test_relational_on_integers_beyond_float_range(self):
        document = {"big": 10**400, "small": -(10**400)}
        self.assertTrue(match_clause(_clause("big", Operator.GT, "1"), document))
        self.assertFalse(match_clause(_clause("big", Operator.LT, "1"), document))
        self.assertTrue(match_clause(_clause("small", Operator.LT, "-1e300"), document))


class TestMatch(unittest.TestCase):
    def test_all_clauses_must_hold(self):
        query = parse_query("x:1 y:hi")
        self.assertTrue(match(query.clauses, {"x": 1, "y": "hi"}))
        self.assertFalse(match(query.clauses, {"x": 1, "y": "bye"}))

    def test_no_clauses_is_vacuously_true(self):
        self.assertTrue(match((), {"x": 1}))


if __name__ == "__main__":
    unittest.main()
