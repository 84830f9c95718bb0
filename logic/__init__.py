"""
logic — formuły rachunku zdań: węzły, parser, błędy.

Użycie:
  from logic import parse_formula, Expression, Proposition, Operator, ...

Moduły:
  expressions — Expression, Proposition, TruthValue, Operator, Subexpression
  parser      — parse_formula
  errors      — ErrorCode, FormulaSyntaxError, UnknownPropositionError
"""

from .errors import ErrorCode, FormulaSyntaxError, UnknownPropositionError
from .expressions import (
    Expression,
    ExpressionNode,
    Operator,
    Proposition,
    Subexpression,
    TruthValue,
    is_operand,
)
from .parser import parse_formula

__all__ = [
    "ErrorCode",
    "FormulaSyntaxError",
    "UnknownPropositionError",
    "Expression",
    "ExpressionNode",
    "Operator",
    "Proposition",
    "Subexpression",
    "TruthValue",
    "is_operand",
    "parse_formula",
]
