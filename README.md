# fexpr

`fexpr` reads simple filter expressions and turns them into a tree of groups.
It suits "where"-style filters that users type in or that arrive in query
strings:

```
title ~ 'hello' && (views > 100 || @request.auth.id != "")
```

## Installation

```
pip install fexpr
```

The package has no runtime dependencies. To run the test suite, install the
`test` extra and run `pytest`:

```
pip install "fexpr[test]"
pytest
```

## Syntax

An expression is a series of comparisons. `&&` or `||` joins them.

- **Operands** are one of three kinds:
  - identifiers such as `name`, `_id`, `@request.auth.id` or `#tag:value`.
    An identifier may not end in `.` or `:`, and may not be a lone `@`, `_`
    or `#`.
  - numbers such as `12`, `-3` or `1.5`.
  - quoted text such as `'abc'` or `"abc"`. A backslash before the quote
    that encloses the text escapes it; other backslashes are kept as they are.
- **Sign operators** are `=`, `!=`, `~`, `!~`, `<`, `<=`, `>`, `>=`. Each one
  also has an "any" form with a leading `?`, for example `?=` or `?!~`.
- **Groups**: parentheses nest comparisons, for example `(a = 1 || a = 2) && b = 3`.
  An empty group `()` adds nothing to the result.
- **Comments**: `//` starts a comment, which runs to the end of the line.
- **Function calls** such as `lower(name)` are read by the scanner as
  `function` tokens whose arguments are identifiers, numbers, text or further
  calls. How deep calls may nest is set by the scanner's `max_function_depth`
  argument; `parse` uses a depth of 3. The parser does not accept a function
  call as an operand.

## Parsing

```python
from fexpr.parser import parse

groups = parse("a = 1 || (b != 'x' && c > 2)")
print(groups)
# [{&& {{identifier a} = {number 1}}} {|| [{&& {{identifier b} != {text x}}} {&& {{identifier c} > {number 2}}}]}]

for group in groups:
    print(group.join, group.item)
```

`parse` returns an `ExprGroups`, which you can iterate over and take the
`len()` of; its `groups` attribute is the underlying list. Each `ExprGroup`
holds a `join` operator (`JoinOp`) and an `item`. The item is either an
`Expr`, made of a `left` token, an `op` (`SignOp`) and a `right` token, or a
nested `ExprGroups`. The first group in a sequence always carries `&&`.

## Scanning

To work with raw tokens, use the scanner. It accepts a `str` or UTF-8 `bytes`:

```python
from fexpr.scanner import Scanner
from fexpr.tokens import TokenKind

scanner = Scanner("test(a, 'b') >= 12", 3)
while (token := scanner.scan()).kind is not TokenKind.EOF:
    print(token)
```

Each `Token` has a `kind` (`TokenKind`), a `literal` and, for function calls,
a tuple of `args`. For a function token the literal is the function name.
`fexpr.tokens` also provides `is_sign_operator`, `is_join_operator` and
`is_valid_identifier` for checking single literals.

## Errors

Every failure raises a subclass of `fexpr.errors.FexprError`. Some examples
are `EmptyFilterExpressionError`, `IncompleteFilterExpressionError`,
`ExpectedSignOperatorError`, `UnterminatedGroupError` and
`MaxFunctionDepthExceededError`. You can catch `FexprError` to handle all of
them:

```python
from fexpr.errors import FexprError
from fexpr.parser import parse

try:
    parse("a >")
except FexprError as exc:
    print(f"invalid filter: {exc}")
# invalid filter: Invalid or incomplete filter expression
```

## What it does not do

`fexpr` only scans and parses. It does not evaluate expressions against data,
translate them into SQL or any other query language, or check whether
identifiers name real fields. It has no command-line tool.