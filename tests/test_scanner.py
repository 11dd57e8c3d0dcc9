import pytest

from fexpr.errors import (
    ExpectedCommaError,
    FexprError,
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
from fexpr.scanner import Scanner
from fexpr.tokens import Token, TokenKind

ERR = None


def ident(value):
    return Token(TokenKind.IDENTIFIER, value)


def num(value):
    return Token(TokenKind.NUMBER, value)


def text(value):
    return Token(TokenKind.TEXT, value)


def ws(value):
    return Token(TokenKind.WHITESPACE, value)


def join(value):
    return Token(TokenKind.JOIN, value)


def comment(value):
    return Token(TokenKind.COMMENT, value)


def group(value):
    return Token(TokenKind.GROUP, value)


def func(name, *args):
    return Token(TokenKind.FUNCTION, name, tuple(args))


CASES = [
    ("   ", [ws("   ")]),
    ("test 123", [ident("test"), ws(" "), num("123")]),
    # identifiers
    ("test", [ident("test")]),
    ("@", [ERR]),
    ("test:", [ERR]),
    ("test.", [ERR]),
    ("@test.123:c", [ident("@test.123:c")]),
    ("_test_a.123", [ident("_test_a.123")]),
    ("#test.123:456", [ident("#test.123:456")]),
    (".test.123", [ERR, ident("test.123")]),
    (":test.123", [ERR, ident("test.123")]),
    ("test#@", [ident("test"), ERR, ERR]),
    ("test'", [ident("test"), ERR]),
    ('test"d', [ident("test"), ERR]),
    # numbers
    ("123", [num("123")]),
    ("-123", [num("-123")]),
    ("-123.456", [num("-123.456")]),
    ("123.456", [num("123.456")]),
    ("12.34.56", [num("12.34"), ERR, num("56")]),
    (".123", [ERR, num("123")]),
    ("- 123", [ERR, ws(" "), num("123")]),
    ("12-3", [num("12"), num("-3")]),
    ("123.abc", [ERR, ident("abc")]),
    # text
    ('""', [text("")]),
    ("''", [text("")]),
    ("'test'", [text("test")]),
    ("'te\\'st'", [text("te'st")]),
    ("'te\"st'", [text('te"st')]),
    ('"tes@#,;!@#%^\'\\"t"', [text("tes@#,;!@#%^'\"t")]),
    ("'tes@#,;!@#%^\\'\"t'", [text("tes@#,;!@#%^'\"t")]),
    ('"test', [ERR]),
    ("'АБЦ", [ERR]),
    # joins
    ("&&||", [ERR]),
    ("&& ||", [join("&&"), ws(" "), join("||")]),
    ("'||test&&'&&123", [text("||test&&"), join("&&"), num("123")]),
    # signs
    ("=!=", [ERR]),
    # comments
    ("/ test", [ERR, ident("test")]),
    ("/ / test", [ERR, ERR, ident("test")]),
    ("//", [comment("")]),
    ("//test", [comment("test")]),
    ("// test", [comment(" test")]),
    ("//   test1 //test2  ", [comment("   test1 //test2  ")]),
    ("///test", [comment("/test")]),
    # function calls
    ("test()", [func("test")]),
    ("test(a, b", [ERR]),
    ("@test:abc()", [func("@test:abc")]),
    ("test(  a  )", [func("test", ident("a"))]),
    ("test(a, b)", [func("test", ident("a"), ident("b"))]),
    ("test(a, b,  )", [func("test", ident("a"), ident("b"))]),
    ("test(a,,)", [ERR, ERR]),
    ("test(a,,,b)", [ERR, ERR]),
    (
        "test(   @test.a.b:test  , 123, \"ab)c\", 'd,ce')",
        [
            func(
                "test",
                ident("@test.a.b:test"),
                num("123"),
                text("ab)c"),
                text("d,ce"),
            )
        ],
    ),
    ("test(a //test)", [ERR]),
    ("test(a //test\n)", [func("test", ident("a"))]),
    ("test(a, //test\n, b)", [ERR]),
    ("test(a, //test\n b)", [func("test", ident("a"), ident("b"))]),
    (
        "test(a, test(test(b), c), d)",
        [
            func(
                "test",
                ident("a"),
                func("test", func("test", ident("b")), ident("c")),
                ident("d"),
            )
        ],
    ),
    # function depth
    ("a(b(c(1)))", [func("a", func("b", func("c", num("1"))))]),
    ("a(b(c(d(1))))", [ERR]),
    # groups
    ("a)", [ident("a"), ERR]),
    ("(a b c", [ERR]),
    ("(a b c)", [group("a b c")]),
    ("((a b c))", [group("(a b c)")]),
    ("((a )b c))", [group("(a )b c")]),
    ('("ab)("c)', [group('"ab)("c')]),
    ('("ab)(c)', [ERR]),
    (
        "( func(1, 2, 3, func(4)) a b c )",
        [group(" func(1, 2, 3, func(4)) a b c ")],
    ),
]


@pytest.mark.parametrize("source, expects", CASES)
def test_scanner(source, expects):
    scanner = Scanner(source, 3)
    for expected in expects:
        if expected is ERR:
            with pytest.raises(FexprError):
                scanner.scan()
        else:
            assert scanner.scan() == expected


def test_all_sign_operators():
    signs = ["=", "!=", "~", "!~", ">", ">=", "<", "<=",
             "?=", "?!=", "?~", "?!~", "?>", "?>=", "?<", "?<="]
    scanner = Scanner(" ".join(signs), 3)
    scanned = []
    while (token := scanner.scan()).kind is not TokenKind.EOF:
        scanned.append(token)
    assert [t.literal for t in scanned if t.kind is TokenKind.SIGN] == signs
    assert all(
        t == ws(" ") for t in scanned if t.kind is not TokenKind.SIGN
    )
    assert len(scanned) == 2 * len(signs) - 1


def test_eof_token_is_repeated():
    scanner = Scanner("a", 3)
    assert scanner.scan() == ident("a")
    assert scanner.scan() == Token(TokenKind.EOF, "\0")
    assert scanner.scan() == Token(TokenKind.EOF, "\0")


def test_empty_input_gives_eof():
    assert Scanner("", 3).scan().kind is TokenKind.EOF


def test_bytes_input_is_accepted():
    scanner = Scanner(b"abc >= 1", 3)
    assert scanner.scan() == ident("abc")
    assert scanner.scan() == ws(" ")
    assert scanner.scan() == Token(TokenKind.SIGN, ">=")


@pytest.mark.parametrize(
    "source, error",
    [
        ("@", InvalidIdentifierError),
        ("%", UnexpectedTokenError),
        ("-", InvalidNumberError),
        ("1.", InvalidNumberError),
        ("'abc", InvalidQuotedTextError),
        ("/ x", InvalidCommentError),
        ("=!=", InvalidSignOperatorError),
        ("&&||", InvalidJoinOperatorError),
        ("(a b c", UnterminatedGroupError),
        ("test(a b)", ExpectedCommaError),
        ("test(,a)", UnexpectedCommaError),
        ("test(a, b", InvalidFunctionArgumentsError),
        ("test(%)", InvalidFunctionArgumentsError),
        ("test.(a)", InvalidFunctionNameError),
    ],
)
def test_specific_errors(source, error):
    with pytest.raises(error):
        Scanner(source, 3).scan()


def test_max_function_depth_error_reports_limit():
    with pytest.raises(MaxFunctionDepthExceededError) as info:
        Scanner("a(b(c(d(1))))", 3).scan()
    assert info.value.max_depth == 3
    assert str(info.value) == "Max function depth exceeded 3"


def test_lower_function_depth_limit():
    with pytest.raises(MaxFunctionDepthExceededError):
        Scanner("a(b(1))", 1).scan()
    assert Scanner("a(1)", 1).scan() == func("a", num("1"))


def test_function_name_error_message():
    with pytest.raises(InvalidFunctionNameError) as info:
        Scanner("test.(a)", 3).scan()
    assert info.value.value == "test."


def test_comma_error_names_function():
    with pytest.raises(ExpectedCommaError) as info:
        Scanner("fn(a b)", 3).scan()
    assert str(info.value) == "Expected comma in function arguments fn"