from goterp.lexer import Lexer
from goterp.tokens import TokenType as T


def test_basic_operators_and_delimiters():
    source = "=+(){}[],;!=/==!*->>=<<="
    expected = [
        (T.ASSIGN, "=", 0, 0),
        (T.PLUS, "+", 0, 1),
        (T.LPAREN, "(", 0, 2),
        (T.RPAREN, ")", 0, 3),
        (T.LBRACE, "{", 0, 4),
        (T.RBRACE, "}", 0, 5),
        (T.LBRACKET, "[", 0, 6),
        (T.RBRACKET, "]", 0, 7),
        (T.COMMA, ",", 0, 8),
        (T.SEMICOLON, ";", 0, 9),
        (T.NOT_EQUALS, "!=", 0, 10),
        (T.DIVIDE, "/", 0, 12),
        (T.EQUALS, "==", 0, 13),
        (T.NOT, "!", 0, 15),
        (T.MULTIPLY, "*", 0, 16),
        (T.MINUS, "-", 0, 17),
        (T.GREATER_THAN, ">", 0, 18),
        (T.GREATER_THAN_EQUALS, ">=", 0, 19),
        (T.LESS_THAN, "<", 0, 21),
        (T.LESS_THAN_EQUALS, "<=", 0, 22),
    ]
    lexer = Lexer(source)
    for want in expected:
        tok = lexer.next_token()
        assert (tok.type, tok.literal, tok.line, tok.column) == want


SIMPLE_PROGRAM = """
	let five = 5;
	let ten  = 10;

	let add = fn(x, y) {
		return x + y;
	};

	let result = add(five, ten);

	if (5 < 10) {
		return true;
	} else {
		return false;
	}
	"""

SIMPLE_EXPECTED = [
    (T.LET, "let"), (T.IDENT, "five"), (T.ASSIGN, "="), (T.INT, "5"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "ten"), (T.ASSIGN, "="), (T.INT, "10"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "add"), (T.ASSIGN, "="), (T.FUNCTION, "fn"), (T.LPAREN, "("),
    (T.IDENT, "x"), (T.COMMA, ","), (T.IDENT, "y"), (T.RPAREN, ")"), (T.LBRACE, "{"),
    (T.RETURN, "return"), (T.IDENT, "x"), (T.PLUS, "+"), (T.IDENT, "y"), (T.SEMICOLON, ";"),
    (T.RBRACE, "}"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "result"), (T.ASSIGN, "="), (T.IDENT, "add"), (T.LPAREN, "("),
    (T.IDENT, "five"), (T.COMMA, ","), (T.IDENT, "ten"), (T.RPAREN, ")"), (T.SEMICOLON, ";"),
    (T.IF, "if"), (T.LPAREN, "("), (T.INT, "5"), (T.LESS_THAN, "<"), (T.INT, "10"),
    (T.RPAREN, ")"), (T.LBRACE, "{"), (T.RETURN, "return"), (T.TRUE, "true"),
    (T.SEMICOLON, ";"), (T.RBRACE, "}"), (T.ELSE, "else"), (T.LBRACE, "{"),
    (T.RETURN, "return"), (T.FALSE, "false"), (T.SEMICOLON, ";"), (T.RBRACE, "}"),
    (T.EOF, ""),
]


def test_simple_code_example():
    lexer = Lexer(SIMPLE_PROGRAM)
    for want in SIMPLE_EXPECTED:
        tok = lexer.next_token()
        assert (tok.type, tok.literal) == want


def test_iteration_stops_before_eof():
    tokens = [(t.type, t.literal) for t in Lexer(SIMPLE_PROGRAM)]
    assert tokens == SIMPLE_EXPECTED[:-1]


def test_eof_has_negative_position_and_repeats():
    lexer = Lexer("")
    first = lexer.next_token()
    second = lexer.next_token()
    assert (first.type, first.line, first.column) == (T.EOF, -1, -1)
    assert second.type is T.EOF


def test_unknown_character_is_illegal():
    tok = Lexer("@").next_token()
    assert (tok.type, tok.literal) == (T.ILLEGAL, "@")


def test_identifier_reads_whole_word():
    tokens = list(Lexer("foo_bar1"))
    assert [(t.type, t.literal) for t in tokens] == [(T.IDENT, "foo_bar"), (T.INT, "1")]