"""Parser that turns a filter expression into nested expression groups."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterator, Union

from .errors import (
    EmptyFilterExpressionError,
    ExpectedJoinOperatorError,
    ExpectedLeftOperandError,
    ExpectedRightOperandError,
    ExpectedSignOperatorError,
    IncompleteFilterExpressionError,
)
from .scanner import Scanner
from .tokens import JoinOp, SignOp, Token, TokenKind

_MAX_FUNCTION_DEPTH = 3

_OPERAND_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.TEXT, TokenKind.NUMBER})
_SKIPPED_KINDS = frozenset({TokenKind.WHITESPACE, TokenKind.COMMENT})


@dataclass(frozen=True)
class Expr:
    """A single comparison: left operand, operator and right operand."""

    left: Token = field(default_factory=Token)
    op: SignOp = SignOp.NONE
    right: Token = field(default_factory=Token)

    def is_zero(self) -> bool:
        """Tell whether no part of the expression has been set."""
        return self.op is SignOp.NONE and self.left == Token() and self.right == Token()

    def __str__(self) -> str:
        return f"{{{self.left} {self.op} {self.right}}}"


@dataclass(frozen=True)
class ExprGroup:
    """An expression or a nested group, with the operator joining it to the previous one."""

    join: JoinOp
    item: Union[Expr, ExprGroups]

    def __str__(self) -> str:
        return f"{{{self.join} {self.item}}}"


@dataclass
class ExprGroups:
    """An ordered sequence of joined expression groups."""

    groups: list[ExprGroup] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + " ".join(str(group) for group in self.groups) + "]"

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[ExprGroup]:
        return iter(self.groups)


class _Step(Enum):
    BEFORE_SIGN = auto()
    SIGN = auto()
    AFTER_SIGN = auto()
    JOIN = auto()


def parse(text: str) -> ExprGroups:
    """Parse a filter expression, raising a FexprError when it is malformed."""
    result = ExprGroups()
    scanner = Scanner(text, _MAX_FUNCTION_DEPTH)
    step = _Step.BEFORE_SIGN
    join = JoinOp.AND
    expr = Expr()

    while True:
        token = scanner.scan()
        if token.kind is TokenKind.EOF:
            break
        if token.kind in _SKIPPED_KINDS:
            continue

        if token.kind is TokenKind.GROUP:
            nested = parse(token.literal)
            if len(nested):
                result.groups.append(ExprGroup(join, nested))
            step = _Step.JOIN
            continue

        if step is _Step.BEFORE_SIGN:
            if token.kind not in _OPERAND_KINDS:
                raise ExpectedLeftOperandError(token.literal, token.kind.value)
            expr = Expr(left=token)
            step = _Step.SIGN
        elif step is _Step.SIGN:
            if token.kind is not TokenKind.SIGN:
                raise ExpectedSignOperatorError(token.literal, token.kind.value)
            try:
                op = SignOp(token.literal)
            except ValueError:
                raise ExpectedSignOperatorError(token.literal, token.kind.value) from None
            if op is SignOp.NONE:
                raise ExpectedSignOperatorError(token.literal, token.kind.value)
            expr = replace(expr, op=op)
            step = _Step.AFTER_SIGN
        elif step is _Step.AFTER_SIGN:
            if token.kind not in _OPERAND_KINDS:
                raise ExpectedRightOperandError(token.literal, token.kind.value)
            expr = replace(expr, right=token)
            result.groups.append(ExprGroup(join, expr))
            step = _Step.JOIN
        else:
            if token.kind is not TokenKind.JOIN:
                raise ExpectedJoinOperatorError(token.literal, token.kind.value)
            try:
                join = JoinOp(token.literal)
            except ValueError:
                raise ExpectedJoinOperatorError(token.literal, token.kind.value) from None
            step = _Step.BEFORE_SIGN

    if step is not _Step.JOIN:
        if not len(result) and expr.is_zero():
            raise EmptyFilterExpressionError()
        raise IncompleteFilterExpressionError()

    return result