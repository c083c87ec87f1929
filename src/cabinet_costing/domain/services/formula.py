"""Arithmetic formula evaluation for parametric model dimensions.

Formulas are strings such as ``"width - 2 * body_thickness"``. Evaluation
happens in two steps:

1. Every variable name that appears as a whole word is replaced by its
   numeric value. Names are processed longest-first, so ``door_count`` is
   never split into ``door`` followed by ``_count``.
2. The substituted text is parsed into a small tagged AST (numbers, negation
   and the four binary operators) and walked to a value.

Nothing else is accepted: no identifiers survive substitution, no function
calls, no attribute access. Parsing recursion is bounded by
``MAX_NESTING`` and AST evaluation uses an explicit stack, so evaluation time
stays linear in the length of the formula.

Example:
    >>> evaluate("width * height", {"width": 800, "height": 2000})
    1600000.0
    >>> evaluate("width +* 2", {"width": 800})
    0.0
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Union

if TYPE_CHECKING:
    from .diagnostics import DiagnosticLog

__all__ = [
    "BinaryOp",
    "FormulaError",
    "MAX_NESTING",
    "Negate",
    "Number",
    "VARIABLE_NAME",
    "evaluate",
    "evaluate_formula",
    "parse_formula",
    "resolve",
    "substitute_variables",
]

logger = logging.getLogger(__name__)

MAX_NESTING = 64

VARIABLE_NAME = re.compile(r"[A-Za-z_]\w*")

_TOKEN_RE = re.compile(
    r"""
    \s*(?:
        (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | (?P<op>[-+*/()])
      | (?P<name>[A-Za-z_]\w*)
      | (?P<other>\S)
    )
    """,
    re.VERBOSE,
)


class FormulaError(ValueError):
    """Raised when a formula cannot be reduced to a finite number."""


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Negate:
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"


Node = Union[Number, Negate, BinaryOp]


def _format_value(value: float) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return repr(value)


def substitute_variables(expr: str, variables: Mapping[str, float]) -> str:
    """Replace whole-word variable names with their values, longest first.

    Keys that are not identifiers are never substituted.
    """
    text = expr
    names = [n for n in variables if isinstance(n, str) and VARIABLE_NAME.fullmatch(n)]
    for name in sorted(names, key=len, reverse=True):
        pattern = re.compile(rf"\b{re.escape(name)}\b")
        # Replacement through a function so backslashes in values are literal
        value = _format_value(variables[name])
        text = pattern.sub(lambda _match: value, text)
    return text


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    text = text.rstrip()
    position = 0
    length = len(text)
    while position < length:
        match = _TOKEN_RE.match(text, position)
        if match is None:
            raise FormulaError(f"Cannot tokenize formula at position {position}")
        kind = match.lastgroup or "other"
        token = match.group(kind)
        if kind == "name":
            raise FormulaError(f"Unknown variable '{token}'")
        if kind == "other":
            raise FormulaError(f"Unexpected character '{token}'")
        tokens.append((kind, token))
        position = match.end()
    return tokens


class _Parser:
    """Recursive descent parser producing a tagged AST.

    Grammar::

        expr   := term (("+" | "-") term)*
        term   := unary (("*" | "/") unary)*
        unary  := ("+" | "-") unary | atom
        atom   := NUMBER | "(" expr ")"
    """

    def __init__(self, tokens: list[tuple[str, str]]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._depth = 0

    def parse(self) -> Node:
        if not self._tokens:
            raise FormulaError("Empty formula")
        node = self._expr()
        if self._pos < len(self._tokens):
            raise FormulaError(f"Unexpected token '{self._tokens[self._pos][1]}'")
        return node

    def _peek(self) -> str | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos][1]
        return None

    def _advance(self) -> tuple[str, str]:
        if self._pos >= len(self._tokens):
            raise FormulaError("Unexpected end of formula")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > MAX_NESTING:
            raise FormulaError(f"Formula nested deeper than {MAX_NESTING} levels")

    def _expr(self) -> Node:
        node = self._term()
        while self._peek() in ("+", "-"):
            op = self._advance()[1]
            node = BinaryOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self._peek() in ("*", "/"):
            op = self._advance()[1]
            node = BinaryOp(op, node, self._unary())
        return node

    def _unary(self) -> Node:
        if self._peek() in ("+", "-"):
            op = self._advance()[1]
            self._enter()
            operand = self._unary()
            self._depth -= 1
            return Negate(operand) if op == "-" else operand
        return self._atom()

    def _atom(self) -> Node:
        kind, token = self._advance()
        if kind == "number":
            return Number(float(token))
        if token == "(":
            self._enter()
            node = self._expr()
            self._depth -= 1
            if self._advance()[1] != ")":
                raise FormulaError("Expected ')'")
            return node
        raise FormulaError(f"Unexpected token '{token}'")


def parse_formula(text: str) -> Node:
    """Parse a substituted arithmetic expression into an AST."""
    return _Parser(_tokenize(text)).parse()


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise FormulaError("Division by zero")
    return left / right


def _evaluate_node(root: Node) -> float:
    # Post-order walk with an explicit stack; long operator chains build
    # deep left-leaning trees.
    stack: list[tuple[Node, bool]] = [(root, False)]
    values: list[float] = []
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Number):
            values.append(node.value)
        elif expanded:
            if isinstance(node, Negate):
                values.append(-values.pop())
            else:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node.op, left, right))
        else:
            stack.append((node, True))
            if isinstance(node, BinaryOp):
                stack.append((node.right, False))
                stack.append((node.left, False))
            else:
                stack.append((node.operand, False))
    return values.pop()


def evaluate_formula(expr: float | str, variables: Mapping[str, float]) -> float:
    """Evaluate a formula strictly.

    Args:
        expr: A finite number, returned unchanged, or a formula string.
        variables: Variable table used for substitution.

    Returns:
        The evaluated value.

    Raises:
        FormulaError: If the formula is malformed, references an unknown
            name, divides by zero or does not produce a finite number.
    """
    if isinstance(expr, (int, float)) and not isinstance(expr, bool):
        try:
            finite = math.isfinite(float(expr))
        except OverflowError:
            finite = False
        if not finite:
            raise FormulaError("Numeric value is not a finite number")
        return expr
    if not isinstance(expr, str):
        raise FormulaError(f"Unsupported formula type {type(expr).__name__}")

    value = _evaluate_node(parse_formula(substitute_variables(expr, variables)))
    if not math.isfinite(value):
        raise FormulaError("Formula did not produce a finite number")
    return value


def _describe(expr: object) -> str:
    # Huge integers cannot be repr'd under the int string conversion limit
    if isinstance(expr, str):
        return repr(expr if len(expr) <= 80 else f"{expr[:77]}...")
    return "numeric value"


def resolve(
    expr: float | str,
    variables: Mapping[str, float],
    diagnostics: "DiagnosticLog | None" = None,
    location: str = "",
) -> float:
    """Evaluate a formula, falling back to 0 on any failure.

    Failures are logged and, when a diagnostics log is given, recorded
    against ``location``.
    """
    try:
        return evaluate_formula(expr, variables)
    except FormulaError as e:
        label = _describe(expr)
        logger.debug("Formula %s at %s evaluated to 0: %s", label, location, e)
        if diagnostics is not None:
            diagnostics.add(location, f"formula {label} failed: {e}")
        return 0.0


def evaluate(expr: float | str, variables: Mapping[str, float]) -> float:
    """Evaluate a formula, returning 0 instead of raising."""
    return resolve(expr, variables)
