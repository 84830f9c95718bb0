"""
Testy solver/engine.py: podstawianie, fakty jednostkowe, upraszczanie, ValueMap.
"""

import pytest

from logic import (
    Expression,
    Operator,
    Proposition,
    Subexpression,
    TruthValue,
    UnknownPropositionError,
    parse_formula,
)
from solver import ValueMap, extract_unit_fact, simplify, substitute


def _simplified(formula: str, values: dict[str, bool | None] | None = None) -> str:
    expr = parse_formula(formula)
    value_map = ValueMap.from_expressions([expr])
    for prop, value in (values or {}).items():
        value_map.set(prop, value)
    substitute(expr, value_map)
    simplify(expr)
    return str(expr)


class TestValueMap:

    def test_seeded_from_nested_premises(self):
        values = ValueMap.from_expressions([
            parse_formula("(m ∧ b) → j"),
            parse_formula("f"),
        ])
        assert list(values) == ["m", "b", "j", "f"]
        assert all(values.get(p) is None for p in values)

    def test_unknown_proposition_is_fatal(self):
        values = ValueMap({"a": None})
        with pytest.raises(UnknownPropositionError) as exc:
            values.get("z")
        assert exc.value.proposition == "z"
        with pytest.raises(LookupError):
            values.set("z", True)

    def test_set_reports_change(self):
        values = ValueMap({"a": None})
        assert values.set("a", True) is True
        assert values.set("a", True) is False
        assert values.known() == {"a": True}
        assert values.unknown() == []


class TestSubstitute:

    def test_value_preserving(self):
        expr = parse_formula("a ∧ b ∨ (c → d)")
        values = ValueMap({"a": True, "b": None, "c": False, "d": None})

        assert substitute(expr, values) is True

        assert len(expr.nodes) == 5
        assert expr.nodes[0] == TruthValue(True)
        assert expr.nodes[1] is Operator.AND
        assert expr.nodes[2] == Proposition("b")
        assert expr.nodes[3] is Operator.OR
        sub = expr.nodes[4]
        assert isinstance(sub, Subexpression)
        assert len(sub.expression.nodes) == 3
        assert sub.expression.nodes[0] == TruthValue(False)
        assert sub.expression.nodes[1] is Operator.IMPLIES
        assert sub.expression.nodes[2] == Proposition("d")

    def test_nothing_known_is_a_no_op(self):
        expr = parse_formula("p → q")
        before = parse_formula("p → q")
        assert substitute(expr, ValueMap({"p": None, "q": None})) is False
        assert expr == before

    def test_unseeded_proposition_raises(self):
        with pytest.raises(UnknownPropositionError):
            substitute(parse_formula("p ∧ x"), ValueMap({"p": True}))


class TestExtractUnitFact:

    def test_bare_proposition(self):
        assert extract_unit_fact(Expression([Proposition("f")])) == ("f", True)

    def test_negated_proposition(self):
        assert extract_unit_fact(Expression([Operator.NOT, Proposition("t")])) == ("t", False)

    @pytest.mark.parametrize("expr", [
        Expression([TruthValue(True)]),
        Expression([TruthValue(False)]),
        Expression([Operator.NOT, TruthValue(True)]),
        Expression([Proposition("a"), Operator.AND, Proposition("b")]),
        Expression([Operator.NOT, Operator.NOT, Proposition("a")]),
        Expression([Subexpression(Expression([Proposition("a")]))]),
    ])
    def test_other_shapes(self, expr):
        assert extract_unit_fact(expr) is None


class TestSimplify:

    @pytest.mark.parametrize("formula,values,expected", [
        ("a ∧ b", {"a": True, "b": True}, "true"),
        ("a ∧ b", {"a": True, "b": False}, "false"),
        ("a ∨ b", {"a": False, "b": False}, "false"),
        ("a → b", {"a": False, "b": False}, "true"),
        ("a → b", {"a": True, "b": False}, "false"),
        ("¬a", {"a": False}, "true"),
        ("(a ∧ b) → (c ∨ d)", {"a": True, "b": True, "c": False, "d": True}, "true"),
    ])
    def test_fully_resolved_collapses(self, formula, values, expected):
        assert _simplified(formula, values) == expected

    @pytest.mark.parametrize("formula,values,expected", [
        ("(f ∨ s) → m", {"f": True}, "m"),
        ("f → ¬t", {"f": True}, "¬t"),
        ("b → t", {"t": False}, "¬b"),
        ("(m ∧ ¬b) → j", {"m": True}, "¬b → j"),
        ("¬b → j", {"b": False}, "j"),
        ("(m ∧ b) → j", {"m": True}, "b → j"),
        ("a ∧ b", {"a": False}, "false"),
        ("a ∨ b", {"b": True}, "true"),
        ("a ∨ b", {"a": False}, "b"),
        ("a → b", {"b": True}, "true"),
        ("(a ∧ b) → c", {"c": False}, "¬(a ∧ b)"),
    ])
    def test_partial_identities(self, formula, values, expected):
        assert _simplified(formula, values) == expected

    def test_double_negation_and_redundant_parens(self):
        assert _simplified("¬¬p") == "p"
        assert _simplified("((a ∧ b))") == "a ∧ b"
        assert _simplified("(p)") == "p"
        assert _simplified("¬(¬q)") == "q"

    def test_unresolved_formula_unchanged(self):
        expr = parse_formula("(m ∧ b) → j")
        assert simplify(expr) is False
        assert str(expr) == "(m ∧ b) → j"

    def test_left_to_right_folding(self):
        # a ∧ b ∨ c  ==  (a ∧ b) ∨ c
        assert _simplified("a ∧ b ∨ c", {"a": False}) == "c"
        assert _simplified("a ∧ b ∨ c", {"c": True}) == "true"

    def test_idempotent(self):
        expr = parse_formula("(x ∧ y) → z")
        substitute(expr, ValueMap({"x": None, "y": None, "z": False}))
        assert simplify(expr) is True
        assert simplify(expr) is False

    def test_malformed_left_untouched(self):
        expr = Expression([Operator.AND, Proposition("a")])
        assert simplify(expr) is False
        assert expr.nodes == [Operator.AND, Proposition("a")]
