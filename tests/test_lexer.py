from minijs.lexer import Lexer
from minijs.token import TokenType


#collects (type, literal) pairs for compact assertions
def kinds(source: str):
    return [(token.type, token.literal) for token in Lexer(source).lex()]


#covers keywords, literals, punctuation, and the trailing EOF
def test_let_and_function_tokens() -> None:
    assert kinds('let add = fn(a, b) { return a + b; }; add("x");') == [
        (TokenType.LET, "let"),
        (TokenType.IDENT, "add"),
        (TokenType.ASSIGN, "="),
        (TokenType.FUNCTION, "fn"),
        (TokenType.LPAREN, "("),
        (TokenType.IDENT, "a"),
        (TokenType.COMMA, ","),
        (TokenType.IDENT, "b"),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.RETURN, "return"),
        (TokenType.IDENT, "a"),
        (TokenType.PLUS, "+"),
        (TokenType.IDENT, "b"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.IDENT, "add"),
        (TokenType.LPAREN, "("),
        (TokenType.STRING, "x"),
        (TokenType.RPAREN, ")"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.EOF, ""),
    ]


#two-character operators win over their one-character prefixes
def test_two_character_operators() -> None:
    assert [kind for kind, _ in kinds("== != >= <= = ! > <")] == [
        TokenType.EQ,
        TokenType.NOT_EQ,
        TokenType.GTE,
        TokenType.LTE,
        TokenType.ASSIGN,
        TokenType.BANG,
        TokenType.GT,
        TokenType.LT,
        TokenType.EOF,
    ]


#`function` is accepted as a synonym for `fn`
def test_keyword_aliases() -> None:
    assert kinds("function true false null if else")[:-1] == [
        (TokenType.FUNCTION, "function"),
        (TokenType.TRUE, "true"),
        (TokenType.FALSE, "false"),
        (TokenType.NULL, "null"),
        (TokenType.IF, "if"),
        (TokenType.ELSE, "else"),
    ]


#identifiers are letters and underscores only, so digits split them
def test_identifier_excludes_digits() -> None:
    assert kinds("x1 _under")[:-1] == [
        (TokenType.IDENT, "x"),
        (TokenType.NUMBER, "1"),
        (TokenType.IDENT, "_under"),
    ]


#decimal points are not part of number lexemes
def test_number_is_integer_only() -> None:
    assert kinds("3.14")[:-1] == [
        (TokenType.NUMBER, "3"),
        (TokenType.DOT, "."),
        (TokenType.NUMBER, "14"),
    ]


#strings keep their contents verbatim, including spaces and backslashes
def test_string_literal_without_escapes() -> None:
    assert kinds('"hello world\\n"')[:-1] == [(TokenType.STRING, "hello world\\n")]


#an unterminated string consumes the rest of the input
def test_unterminated_string() -> None:
    assert kinds('"abc')[:-1] == [(TokenType.STRING, "abc")]


#unknown characters become ILLEGAL tokens instead of raising
def test_illegal_characters() -> None:
    assert kinds("@ 1 #")[:-1] == [
        (TokenType.ILLEGAL, "@"),
        (TokenType.NUMBER, "1"),
        (TokenType.ILLEGAL, "#"),
    ]


#EOF keeps coming back once the input is exhausted
def test_eof_is_idempotent() -> None:
    lexer = Lexer("x")
    assert lexer.next_token().type is TokenType.IDENT
    for _ in range(5):
        token = lexer.next_token()
        assert token.type is TokenType.EOF
        assert token.literal == ""


#empty and whitespace-only input yields just EOF
def test_whitespace_only() -> None:
    assert kinds(" \t\r\n ") == [(TokenType.EOF, "")]


#tokens record 1-based line and column positions
def test_token_locations() -> None:
    tokens = Lexer("let x\n  = 5;").lex()
    assert (tokens[0].location.line, tokens[0].location.column) == (1, 1)
    assert (tokens[1].location.line, tokens[1].location.column) == (1, 5)
    assert (tokens[2].location.line, tokens[2].location.column) == (2, 3)
