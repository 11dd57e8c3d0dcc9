"""Token and operator types produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class JoinOp(Enum):
    """Operator joining two expressions."""

    AND = "&&"
    OR = "||"

    def __str__(self) -> str:
        return self.value


class SignOp(Enum):
    """Comparison operator of a single expression."""

    NONE = ""
    EQ = "="
    NEQ = "!="
    LIKE = "~"
    NLIKE = "!~"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    ANY_EQ = "?="
    ANY_NEQ = "?!="
    ANY_LIKE = "?~"
    ANY_NLIKE = "?!~"
    ANY_LT = "?<"
    ANY_LTE = "?<="
    ANY_GT = "?>"
    ANY_GTE = "?>="

    def __str__(self) -> str:
        return self.value


class TokenKind(Enum):
    """Kind of a scanned token."""

    NONE = ""
    EOF = "eof"
    WHITESPACE = "whitespace"
    JOIN = "join"
    SIGN = "sign"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    TEXT = "text"
    GROUP = "group"
    COMMENT = "comment"
    FUNCTION = "function"


@dataclass(frozen=True)
class Token:
    """A scanned token; for functions the literal is the function name."""

    kind: TokenKind = TokenKind.NONE
    literal: str = ""
    args: tuple[Token, ...] = field(default=())

    def __str__(self) -> str:
        return f"{{{self.kind.value} {self.literal}}}"


_IDENTIFIER_COMBINE = frozenset(".:")
_IDENTIFIER_SPECIAL_START = frozenset("@_#")


def is_sign_operator(literal: str) -> bool:
    """Tell whether the literal is a known comparison operator."""
    try:
        return SignOp(literal) is not SignOp.NONE
    except ValueError:
        return False


def is_join_operator(literal: str) -> bool:
    """Tell whether the literal is a known join operator."""
    try:
        JoinOp(literal)
    except ValueError:
        return False
    return True


def is_valid_identifier(literal: str) -> bool:
    """Tell whether the literal is a well-formed identifier."""
    if not literal:
        return False
    if literal[-1] in _IDENTIFIER_COMBINE:
        return False
    return not (len(literal) == 1 and literal in _IDENTIFIER_SPECIAL_START)