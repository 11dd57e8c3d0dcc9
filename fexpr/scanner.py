"""Scanner that splits a filter expression into tokens."""

from __future__ import annotations

from .errors import (
    ExpectedCommaError,
    InvalidCommentError,
    InvalidFunctionArgumentsError,
    InvalidFunctionNameError,
    InvalidIdentifierError,
    InvalidJoinOperatorError,
    InvalidNumberError,
    InvalidQuotedTextError,
    InvalidSignOperatorError,
    MaxFunctionDepthExceededError,
    UnexpectedCommaError,
    UnexpectedTokenError,
    UnterminatedGroupError,
)
from .tokens import (
    Token,
    TokenKind,
    is_join_operator,
    is_sign_operator,
    is_valid_identifier,
)

_EOF = "\0"

_WHITESPACE = frozenset(" \t\n")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_TEXT_START = frozenset("'\"")
_SIGN_START = frozenset("=?!><~")
_JOIN_START = frozenset("&|")
_GROUP_START = "("
_COMMENT_START = "/"
_IDENTIFIER_SPECIAL_START = frozenset("@_#")
_IDENTIFIER_COMBINE = frozenset(".:")
_IDENTIFIER_START = _LETTERS | _IDENTIFIER_SPECIAL_START
_IDENTIFIER_PART = _LETTERS | _DIGITS | _IDENTIFIER_COMBINE | {"_"}
_NUMBER_START = _DIGITS | {"-"}


class Scanner:
    """Reads tokens one at a time from a filter expression."""

    def __init__(self, data: str | bytes, max_function_depth: int) -> None:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        self._data = data
        self._pos = 0
        self.max_function_depth = max_function_depth

    def _read(self) -> str:
        if self._pos >= len(self._data):
            return _EOF
        character = self._data[self._pos]
        self._pos += 1
        return character

    def _unread(self) -> None:
        if self._pos > 0:
            self._pos -= 1

    def scan(self) -> Token:
        """Return the next token, raising a FexprError on malformed input."""
        character = self._read()
        if character == _EOF:
            return Token(TokenKind.EOF, character)

        if character in _WHITESPACE:
            self._unread()
            return self._scan_whitespace()
        if character == _GROUP_START:
            self._unread()
            return self._scan_group()
        if character in _IDENTIFIER_START:
            self._unread()
            return self._scan_identifier(self.max_function_depth)
        if character in _NUMBER_START:
            self._unread()
            return self._scan_number()
        if character in _TEXT_START:
            self._unread()
            return self._scan_text(preserve_quotes=False)
        if character in _SIGN_START:
            self._unread()
            return self._scan_sign()
        if character in _JOIN_START:
            self._unread()
            return self._scan_join()
        if character == _COMMENT_START:
            self._unread()
            return self._scan_comment()

        raise UnexpectedTokenError(character)

    def _collect(self, allowed: frozenset[str]) -> str:
        """Consume characters while they belong to ``allowed``."""
        buffer: list[str] = []
        while True:
            character = self._read()
            if character == _EOF:
                break
            if character not in allowed:
                self._unread()
                break
            buffer.append(character)
        return "".join(buffer)

    def _scan_whitespace(self) -> Token:
        return Token(TokenKind.WHITESPACE, self._collect(_WHITESPACE))

    def _scan_number(self) -> Token:
        buffer: list[str] = []
        had_dot = False
        while True:
            character = self._read()
            if character == _EOF:
                break
            leading_minus = character == "-" and not buffer
            first_dot = character == "." and not had_dot
            if character not in _DIGITS and not leading_minus and not first_dot:
                self._unread()
                break
            buffer.append(character)
            if character == ".":
                had_dot = True

        literal = "".join(buffer)
        if literal == "-" or literal.startswith(".") or literal.endswith("."):
            raise InvalidNumberError(literal)
        return Token(TokenKind.NUMBER, literal)

    def _scan_text(self, preserve_quotes: bool) -> Token:
        quote = self._read()
        buffer = [quote]
        previous = _EOF
        closed = False
        while True:
            character = self._read()
            if character == _EOF:
                break
            buffer.append(character)
            if character == quote and previous != "\\":
                closed = True
                break
            previous = character

        literal = "".join(buffer)
        if not closed:
            raise InvalidQuotedTextError(literal)
        if not preserve_quotes:
            literal = literal[1:-1].replace("\\" + quote, quote)
        return Token(TokenKind.TEXT, literal)

    def _scan_comment(self) -> Token:
        if self._read() != _COMMENT_START or self._read() != _COMMENT_START:
            raise InvalidCommentError("invalid comment")
        buffer: list[str] = []
        while True:
            character = self._read()
            if character in (_EOF, "\n"):
                break
            buffer.append(character)
        return Token(TokenKind.COMMENT, "".join(buffer))

    def _scan_identifier(self, depth: int) -> Token:
        buffer = [self._read()]
        while True:
            character = self._read()
            if character == _EOF:
                break
            if character == "(":
                name = "".join(buffer)
                if depth <= 0:
                    raise MaxFunctionDepthExceededError(self.max_function_depth)
                if not is_valid_identifier(name):
                    raise InvalidFunctionNameError(name)
                self._unread()
                return self._scan_function_args(name, depth)
            if character not in _IDENTIFIER_PART:
                self._unread()
                break
            buffer.append(character)

        literal = "".join(buffer)
        if not is_valid_identifier(literal):
            raise InvalidIdentifierError(literal)
        return Token(TokenKind.IDENTIFIER, literal)

    def _scan_sign(self) -> Token:
        literal = self._collect(_SIGN_START)
        if not is_sign_operator(literal):
            raise InvalidSignOperatorError(literal)
        return Token(TokenKind.SIGN, literal)

    def _scan_join(self) -> Token:
        literal = self._collect(_JOIN_START)
        if not is_join_operator(literal):
            raise InvalidJoinOperatorError(literal)
        return Token(TokenKind.JOIN, literal)

    def _scan_group(self) -> Token:
        first = self._read()
        open_groups = 1
        buffer: list[str] = []
        while True:
            character = self._read()
            if character == _EOF:
                break
            if character == _GROUP_START:
                open_groups += 1
                buffer.append(character)
            elif character in _TEXT_START:
                self._unread()
                # keep the quotes so the group can be scanned again verbatim
                buffer.append(self._scan_text(preserve_quotes=True).literal)
            elif character == ")":
                open_groups -= 1
                if open_groups <= 0:
                    break
                buffer.append(character)
            else:
                buffer.append(character)

        if first != _GROUP_START or open_groups > 0:
            raise UnterminatedGroupError()
        return Token(TokenKind.GROUP, "".join(buffer))

    def _scan_function_args(self, name: str, depth: int) -> Token:
        if self._read() != "(":
            raise InvalidFunctionArgumentsError()

        args: list[Token] = []
        expect_comma = False
        closed = False
        while True:
            character = self._read()
            if character == _EOF:
                break
            if character == ")":
                closed = True
                break
            if character in _WHITESPACE:
                self._scan_whitespace()
                continue
            if character == _COMMENT_START:
                self._unread()
                self._scan_comment()
                continue

            is_comma = character == ","
            if expect_comma and not is_comma:
                raise ExpectedCommaError(name)
            if not expect_comma and is_comma:
                raise UnexpectedCommaError(name)
            expect_comma = False
            if is_comma:
                continue

            self._unread()
            if character in _IDENTIFIER_START:
                args.append(self._scan_identifier(depth - 1))
            elif character in _NUMBER_START:
                args.append(self._scan_number())
            elif character in _TEXT_START:
                args.append(self._scan_text(preserve_quotes=False))
            else:
                self._read()
                raise InvalidFunctionArgumentsError()
            expect_comma = True

        if not closed:
            raise InvalidFunctionArgumentsError()
        return Token(TokenKind.FUNCTION, name, tuple(args))