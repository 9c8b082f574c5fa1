from lsprotocol.types import CompletionItemKind, DiagnosticSeverity, Position, SymbolKind

from tatu_lsp.indexer import build_index
from tatu_lsp.server import completion_items, describe, document_symbols, extract_word_at, to_diagnostics

SOURCE = """; helpers
(var limit 10)
(def square (n) (* n n))
(var twice (lambda (x) (* 2 x)))
(print (square limit))
"""


def test_index_collects_top_level_definitions():
    idx = build_index(SOURCE)
    assert idx.diagnostics == []
    assert idx.forms == 4
    assert {name: (s.kind, s.line, s.col) for name, s in idx.symbols.items()} == {
        "limit": ("var", 1, 5),
        "square": ("function", 2, 5),
        "twice": ("function", 3, 5),
    }


def test_nested_definitions_are_not_indexed():
    idx = build_index("(begin (var inner 1) inner)")
    assert idx.symbols == {}


def test_unclosed_list_keeps_earlier_forms():
    idx = build_index("(var a 1)\n(var b (+ a 1)")
    assert list(idx.symbols) == ["a"]
    [diag] = idx.diagnostics
    assert diag.message == "unclosed parenthesis"
    assert (diag.line, diag.col) == (1, 0)


def test_unexpected_character():
    idx = build_index("(var a 1) [")
    assert list(idx.symbols) == ["a"]
    [diag] = idx.diagnostics
    assert diag.message == "unexpected character `[`"
    assert (diag.line, diag.col, diag.end_line, diag.end_col) == (0, 10, 0, 11)


def test_unterminated_string_is_cut_at_the_quote():
    idx = build_index('(var a 1)\n(print "abc')
    assert list(idx.symbols) == ["a"]
    messages = [d.message for d in idx.diagnostics]
    assert messages == ["unterminated string", "unclosed parenthesis"]


def test_shape_errors_are_reported():
    idx = build_index("(var x)")
    [diag] = idx.diagnostics
    assert diag.message.startswith("invalid `var` format")


def test_to_diagnostics():
    [diag] = to_diagnostics(build_index("(var a 1)\n  (+ 1"))
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.source == "tatu-ls"
    assert (diag.range.start.line, diag.range.start.character) == (1, 2)
    assert diag.message == "unclosed parenthesis"


def test_describe():
    idx = build_index(SOURCE)
    assert describe("if", idx) == "(if cond then [else])"
    assert describe("def", idx) == "(def name (params ...) body)"
    assert describe("vec:len", idx) == "(vec:len v)"
    assert describe("print", idx).startswith("(print a ...)")
    assert describe("square", idx) == "square: function (defined at 3:6)"
    assert describe("missing", idx) is None


def test_completion_items():
    items = completion_items(build_index(SOURCE))
    kinds = {item.label: item.kind for item in items}
    assert kinds["lambda"] == CompletionItemKind.Keyword
    assert kinds["str:upper"] == CompletionItemKind.Function
    assert kinds["square"] == CompletionItemKind.Function
    assert kinds["limit"] == CompletionItemKind.Variable


def test_completion_without_document():
    labels = {item.label for item in completion_items(None)}
    assert {"switch", "map:get", "print"} <= labels


def test_document_symbols():
    symbols = {s.name: s for s in document_symbols(build_index(SOURCE))}
    assert symbols["limit"].kind == SymbolKind.Variable
    assert symbols["square"].kind == SymbolKind.Function
    rng = symbols["square"].range
    assert (rng.start.line, rng.start.character, rng.end.character) == (2, 5, 11)


def test_extract_word_at():
    text = '(vec:len items)\n(print "x")'
    assert extract_word_at(text, Position(line=0, character=3)) == "vec:len"
    assert extract_word_at(text, Position(line=0, character=10)) == "items"
    assert extract_word_at(text, Position(line=1, character=2)) == "print"
    assert extract_word_at(text, Position(line=0, character=0)) is None
    assert extract_word_at(text, Position(line=5, character=0)) is None
