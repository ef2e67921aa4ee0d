"""Condition expressions over (date, event) pairs and their parser."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from beltworks.dates import Date, parse_date
from beltworks.tokens import Token, TokenType, tokenize


class Comparison(Enum):
    LESS = auto()
    LESS_OR_EQUAL = auto()
    GREATER = auto()
    GREATER_OR_EQUAL = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()


class LogicalOperation(Enum):
    OR = auto()
    AND = auto()


_COMPARATORS = {
    Comparison.LESS: operator.lt,
    Comparison.LESS_OR_EQUAL: operator.le,
    Comparison.GREATER: operator.gt,
    Comparison.GREATER_OR_EQUAL: operator.ge,
    Comparison.EQUAL: operator.eq,
    Comparison.NOT_EQUAL: operator.ne,
}

_SYMBOLS = {
    "<": Comparison.LESS,
    "<=": Comparison.LESS_OR_EQUAL,
    ">": Comparison.GREATER,
    ">=": Comparison.GREATER_OR_EQUAL,
    "==": Comparison.EQUAL,
    "!=": Comparison.NOT_EQUAL,
}

_PRECEDENCE = {LogicalOperation.OR: 1, LogicalOperation.AND: 2}


def compare(left, right, cmp: Comparison) -> bool:
    """Apply the comparison *cmp* to *left* and *right*."""
    return _COMPARATORS[cmp](left, right)


class Node:
    """Base of condition nodes."""

    def evaluate(self, date: Date, event: str) -> bool:
        return False


class EmptyNode(Node):
    """The empty condition, true for every entry."""

    def evaluate(self, date: Date, event: str) -> bool:
        return True


@dataclass(frozen=True)
class DateComparisonNode(Node):
    cmp: Comparison
    date: Date

    def evaluate(self, date: Date, event: str) -> bool:
        return compare(date, self.date, self.cmp)


@dataclass(frozen=True)
class EventComparisonNode(Node):
    cmp: Comparison
    event: str

    def evaluate(self, date: Date, event: str) -> bool:
        return compare(event, self.event, self.cmp)


@dataclass(frozen=True)
class LogicalOperationNode(Node):
    op: LogicalOperation
    left: Node
    right: Node

    def evaluate(self, date: Date, event: str) -> bool:
        if self.op is LogicalOperation.AND:
            return self.left.evaluate(date, event) and self.right.evaluate(date, event)
        return self.left.evaluate(date, event) or self.right.evaluate(date, event)


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Optional[Token]:
        return None if self.at_end else self._tokens[self._pos]

    def _expect(self, kind: Optional[TokenType], message: str) -> Token:
        token = self._peek()
        if token is None or (kind is not None and token.type is not kind):
            raise ValueError(message)
        self._pos += 1
        return token

    def comparison(self) -> Node:
        column = self._expect(TokenType.COLUMN, "Expected column name: date or event")
        op = self._expect(TokenType.COMPARE_OP, "Expected comparison operation")
        value = self._expect(None, "Expected right value of comparison")
        try:
            cmp = _SYMBOLS[op.value]
        except KeyError:
            raise ValueError(f"Unknown comparison token: {op.value}") from None
        if column.value == "date":
            return DateComparisonNode(cmp, parse_date(value.value))
        return EventComparisonNode(cmp, value.value)

    def expression(self, precedence: int) -> Optional[Node]:
        token = self._peek()
        if token is None:
            return None

        if token.type is TokenType.PAREN_LEFT:
            self._pos += 1
            left = self.expression(0)
            self._expect(TokenType.PAREN_RIGHT, "Missing right paren")
        else:
            left = self.comparison()

        while (token := self._peek()) is not None and token.type is not TokenType.PAREN_RIGHT:
            if token.type is not TokenType.LOGICAL_OP:
                raise ValueError("Expected logic operation")
            op = LogicalOperation.AND if token.value == "AND" else LogicalOperation.OR
            current = _PRECEDENCE[op]
            if current <= precedence:
                break
            self._pos += 1
            left = LogicalOperationNode(op, left, self.expression(current))

        return left


def parse_condition(text: str) -> Node:
    """Parse a condition such as ``date > 2017-01-01 AND event == "x"``."""
    parser = _Parser(tokenize(text))
    top = parser.expression(0)
    if top is None:
        top = EmptyNode()
    if not parser.at_end:
        raise ValueError("Unexpected tokens after condition")
    return top