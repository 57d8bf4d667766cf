# goterp

The front end of a toy interpreter. It has a lexer for a small C-like
language, a parser that picks out `let` statements, and an interactive prompt
that prints the tokens of each line you type.

## Installing

```
pip install .
```

## The prompt

```
goterp
```

The command greets you by your user name and shows a `>> ` prompt. Each line
you enter is split into tokens. Each token is printed on its own line with its
fields, for example:

```
>> let x = 5;
{Type:LET Literal:let Filename: Line:0 Column:0}
{Type:IDENT Literal:x Filename: Line:0 Column:0}
...
```

End the session with end-of-file (Ctrl-D, or Ctrl-Z then Enter on Windows).

## The language's tokens

- Keywords: `fn`, `let`, `return`, `true`, `false`, `if`, `else`
- Identifiers: runs of ASCII letters and `_`
- Integers: runs of decimal digits
- Operators: `=`, `!`, `==`, `!=`, `>`, `>=`, `<`, `<=`, `+`, `-`, `*`, `/`
- Delimiters: `,`, `;`, `(`, `)`, `{`, `}`, `[`, `]`

Spaces, tabs, carriage returns and newlines separate tokens. Any other
character becomes an `ILLEGAL` token.

## Using it from Python

```python
from goterp.lexer import Lexer
from goterp.parser import Parser
from goterp.tokens import TokenType, lookup_ident

for tok in Lexer("let five = 5;"):
    print(tok.type, tok.literal)

program = Parser(Lexer("let x = 5; let y = 10;")).parse_program()
print([stmt.name.value for stmt in program.statements])  # ['x', 'y']

lookup_ident("fn")   # TokenType.FUNCTION
lookup_ident("foo")  # TokenType.IDENT
```

- `goterp.tokens`: `TokenType`, the frozen `Token` dataclass (`type`,
  `literal`, `filename`, `line`, `column`) and `lookup_ident`.
- `goterp.lexer.Lexer`: iterating over a lexer yields tokens up to the end of
  the input, without the `EOF` token. `Lexer.next_token()` returns one token
  at a time and keeps returning an `EOF` token once the input is used up.
- `goterp.parser.Parser`: `parse_program()` returns a `goterp.syntax.Program`
  whose `statements` are `LetStatement` nodes.
- `goterp.syntax`: the tree nodes `Node`, `Statement`, `Expression`,
  `Program`, `LetStatement` and `Identifier`, each with `token_literal()`.
- `goterp.repl`: `start(in_stream, out_stream)` runs the prompt on any pair of
  text streams; `format_token(tok)` gives the printed form of a token.

## What it does not do

- It does not evaluate anything: there is no interpreter behind the prompt,
  which only prints tokens.
- The parser knows only `let` statements. It records the bound name but skips
  the value up to the next `;`, so `LetStatement.value` stays `None`. Other
  statements are passed over and do not appear in the program.
- Token positions are rough: the line is always `0`, identifiers and integers
  carry column `0`, and the `EOF` token has line and column `-1`.

## Running the tests

```
pip install ".[test]"
pytest
```