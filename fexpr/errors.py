"""Exceptions raised while scanning and parsing filter expressions."""

from __future__ import annotations


class FexprError(Exception):
    """Base class of every error raised by the package."""


class _ValueError(FexprError):
    """An error that carries a single offending value."""

    _template = "{}"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(self._template.format(value))


class _OperandError(FexprError):
    """An error about an unexpected token in the expression structure."""

    _template = "{} ({})"

    def __init__(self, literal: str, kind: str) -> None:
        self.literal = literal
        self.kind = kind
        super().__init__(self._template.format(literal, kind))


class _FixedMessageError(FexprError):
    """An error whose message never changes."""

    _message = ""

    def __init__(self) -> None:
        super().__init__(self._message)


class UnexpectedTokenError(_ValueError):
    """A character that cannot start any token."""

    _template = "Unexpected character {}"


class InvalidNumberError(_ValueError):
    """A malformed number literal."""

    _template = "Invalid number {}"


class InvalidQuotedTextError(_ValueError):
    """A quoted text without its closing quote."""

    _template = "Invalid quoted text {}"


class InvalidCommentError(_ValueError):
    """A comment that does not start with two slashes."""

    _template = "Invalid comment {}"


class InvalidIdentifierError(_ValueError):
    """A malformed identifier."""

    _template = "Invalid identifier {}"


class InvalidSignOperatorError(_ValueError):
    """An unknown comparison operator."""

    _template = "Invalid sign operator {}"


class InvalidJoinOperatorError(_ValueError):
    """An unknown join operator."""

    _template = "Invalid join operator {}"


class UnterminatedGroupError(_FixedMessageError):
    """A parenthesised group without its closing parenthesis."""

    _message = "Unterminated group"


class MaxFunctionDepthExceededError(FexprError):
    """Function calls nested deeper than the scanner allows."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Max function depth exceeded {max_depth}")


class InvalidFunctionArgumentsError(_FixedMessageError):
    """A function call whose argument list is malformed."""

    _message = "Invalid function arguments"


class InvalidFunctionNameError(_ValueError):
    """A function call whose name is not a valid identifier."""

    _template = "Invalid function name {}"


class ExpectedCommaError(_ValueError):
    """Two function arguments without a comma between them."""

    _template = "Expected comma in function arguments {}"


class UnexpectedCommaError(_ValueError):
    """A comma where a function argument was expected."""

    _template = "Unexpected comma in function arguments {}"


class ExpectedLeftOperandError(_OperandError):
    """A token other than an operand where a left operand belongs."""

    _template = "Expected left operand (identifier, text or number), got {} ({})"


class ExpectedSignOperatorError(_OperandError):
    """A token other than a comparison operator after a left operand."""

    _template = "Expected a sign operator, got {} ({})"


class ExpectedRightOperandError(_OperandError):
    """A token other than an operand where a right operand belongs."""

    _template = "Expected right operand (identifier, text or number), got {} ({})"


class ExpectedJoinOperatorError(_OperandError):
    """A token other than && or || between two expressions."""

    _template = "Expected && or ||, got {} ({})"


class EmptyFilterExpressionError(_FixedMessageError):
    """A filter that holds no expression at all."""

    _message = "Empty filter expression"


class IncompleteFilterExpressionError(_FixedMessageError):
    """A filter that ends in the middle of an expression."""

    _message = "Invalid or incomplete filter expression"