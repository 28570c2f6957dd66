"""Tests for mermaid_complete.completion.ranker — tiers, ordering, and the new-word candidate."""

from mermaid_complete import complete
from mermaid_complete.completion.ranker import rank
from mermaid_complete.config import CompletionConfig
from mermaid_complete.syntax.types import CursorContext, Rank, Symbol
from mermaid_complete.types import CandidateKind
from mermaid_complete.vocabulary.catalogs import KEYWORDS, OPERATORS, SHAPES

VOCABULARY_SIZE = len(OPERATORS) + len(SHAPES) + len(KEYWORDS)


def _ctx(word: str = "", word_is_new: bool = True, text: str = "") -> CursorContext:
    return CursorContext(full_text=text, word_under_cursor=word, word_is_new=word_is_new)


def _of_kind(candidates, kind):
    return [c for c in candidates if c.kind == kind]


def test_empty_document_yields_only_vocabulary():
    result = rank([], _ctx())
    assert len(result) == VOCABULARY_SIZE
    assert {c.rank.tier for c in result} == {1, 2, 3}


def test_new_word_on_empty_document():
    result = complete("", word="Foo")
    assert result[0].kind == CandidateKind.NewSymbol
    assert result[0].insert_text == "Foo"
    assert result[0].rank == Rank(-1, "Foo")
    assert _of_kind(result, CandidateKind.Symbol) == []
    assert {c.kind for c in result[1:]} == {CandidateKind.Operator, CandidateKind.Shape, CandidateKind.Keyword}


def test_symbols_sorted_by_id():
    symbols = [Symbol("b", "b"), Symbol("a", "Alpha"), Symbol("C", "C")]
    result = rank(symbols, _ctx())
    assert [c.label for c in result[:3]] == ["C", "a", "b"]
    alpha = result[1]
    assert alpha.kind == CandidateKind.Symbol
    assert alpha.detail == "Alpha"
    assert alpha.documentation == "Reference to node: Alpha"
    assert alpha.rank == Rank(0, "a")


def test_symbol_without_label_uses_placeholder():
    result = rank([Symbol("A", "")], _ctx())
    assert result[0].detail == "Node"
    assert result[0].documentation == "Mermaid Node"


def test_new_word_sorts_before_symbols():
    result = rank([Symbol("A", "A")], _ctx("Zed"))
    assert [c.label for c in result[:2]] == ["Zed", "A"]
    assert result[0].detail == "New Node"
    assert result[0].documentation == "Create a new node"


def test_known_word_is_not_new():
    result = rank([Symbol("A", "A")], _ctx("A"))
    assert _of_kind(result, CandidateKind.NewSymbol) == []


def test_non_identifier_word_is_skipped():
    assert _of_kind(rank([], _ctx("foo-bar")), CandidateKind.NewSymbol) == []
    assert _of_kind(rank([], _ctx("")), CandidateKind.NewSymbol) == []


def test_word_is_new_flag_disables_new_word():
    assert _of_kind(rank([], _ctx("Foo", word_is_new=False)), CandidateKind.NewSymbol) == []


def test_vocabulary_keeps_catalog_order():
    result = rank([], _ctx())
    assert [c.label for c in _of_kind(result, CandidateKind.Operator)] == [e.label for e in OPERATORS]
    assert [c.label for c in _of_kind(result, CandidateKind.Shape)] == [e.label for e in SHAPES]
    assert [c.label for c in _of_kind(result, CandidateKind.Keyword)] == [e.label for e in KEYWORDS]


def test_duplicate_circle_rows_both_offered():
    shapes = _of_kind(rank([], _ctx()), CandidateKind.Shape)
    assert [c.label for c in shapes].count("(())") == 2


def test_only_shapes_are_snippets():
    result = rank([Symbol("A", "A")], _ctx("New"))
    for candidate in result:
        assert candidate.is_snippet == (candidate.kind == CandidateKind.Shape)
    assert _of_kind(result, CandidateKind.Shape)[0].insert_text == "[${1:Label}]"


def test_result_is_sorted_by_rank():
    result = rank([Symbol("z", "z"), Symbol("m", "m")], _ctx("k"))
    keys = [c.sort_key for c in result]
    assert keys == sorted(keys)
    assert [c.rank.tier for c in result[:3]] == [-1, 0, 0]


def test_ranking_is_stable():
    symbols = [Symbol("B", "Beta"), Symbol("A", "Alpha")]
    assert rank(symbols, _ctx("X")) == rank(symbols, _ctx("X"))


def test_include_vocabulary_off():
    result = rank([Symbol("A", "A")], _ctx("B"), CompletionConfig(include_vocabulary=False))
    assert [(c.kind, c.label) for c in result] == [(CandidateKind.NewSymbol, "B"), (CandidateKind.Symbol, "A")]


def test_complete_end_to_end():
    result = complete("A[Start] --> B\n", word="B")
    assert [(c.label, c.detail) for c in result[:2]] == [("A", "Start"), ("B", "B")]
    assert _of_kind(result, CandidateKind.NewSymbol) == []
