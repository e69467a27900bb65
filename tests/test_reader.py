import pytest

from malt.reader.parser import Reader, read_all, read_str, tokenize
from malt.types.errors import (
    MaltEndOfInput,
    MaltMalformedCollection,
    MaltNoInput,
    MaltSyntaxError,
    MaltTypeError,
    MaltUnexpectedCloser,
)
from malt.types.forms import HashMap, Keyword, List, Vector
from malt.types.nil import Nil
from malt.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("0", 0),
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("-abc", Symbol("-abc")),
        ("1.5", Symbol("1.5")),
        ("True", Symbol("True")),
        (":kw", Keyword("kw")),
        ('"hello"', "hello"),
        ('""', ""),
    ],
)
def test_read_atom(source, expected):
    assert read_str(source) == expected


def test_booleans_are_not_ints():
    assert read_str("true") is True
    assert read_str("false") is False


def test_keyword_is_distinct_from_string():
    kw = read_str(":a")
    assert isinstance(kw, Keyword)
    assert kw != "a"
    assert read_str('"a"') != Keyword("a")


@pytest.mark.parametrize(
    "source, expected",
    [
        (r'"a\nb"', "a\nb"),
        (r'"say \"hi\""', 'say "hi"'),
        (r'"back\\slash"', "back\\slash"),
        (r'"\\n"', "\\n"),
        (r'"\\\""', '\\"'),
        (r'"tab\t"', "tab\\t"),
        ('"ʞ"', "ʞ"),
        (r'"\\ʞ"', "\\ʞ"),
        (r'"\\\\n"', "\\\\n"),
    ],
)
def test_string_escapes(source, expected):
    assert read_str(source) == expected


def test_read_list():
    result = read_str("(+ 1 (* 2 3))")
    assert isinstance(result, List)
    assert result == [Symbol("+"), 1, [Symbol("*"), 2, 3]]
    assert isinstance(result[2], List)


def test_read_vector():
    result = read_str("[1 a :b]")
    assert isinstance(result, Vector)
    assert result == [1, Symbol("a"), Keyword("b")]


@pytest.mark.parametrize("source, kind", [("()", List), ("[]", Vector), ("{}", HashMap)])
def test_empty_collections(source, kind):
    result = read_str(source)
    assert isinstance(result, kind)
    assert len(result) == 0


def test_read_hashmap():
    result = read_str('{:a 1 "b" (2 3)}')
    assert isinstance(result, HashMap)
    assert result[Keyword("a")] == 1
    assert result["b"] == [2, 3]
    assert "a" not in result


def test_hashmap_string_and_keyword_keys_do_not_collide():
    result = read_str('{"a" 1 :a 2}')
    assert len(result) == 2
    assert result["a"] == 1
    assert result[Keyword("a")] == 2


@pytest.mark.parametrize(
    "source, head",
    [
        ("'x", "quote"),
        ("`x", "quasiquote"),
        ("~x", "unquote"),
        ("~@x", "splice-unquote"),
        ("@x", "deref"),
    ],
)
def test_reader_macros(source, head):
    result = read_str(source)
    assert isinstance(result, List)
    assert result == [Symbol(head), Symbol("x")]


def test_reader_macro_wraps_whole_following_form():
    assert read_str("'(1 [2])") == [Symbol("quote"), [1, [2]]]
    assert read_str("`~@a") == [Symbol("quasiquote"), [Symbol("splice-unquote"), Symbol("a")]]


def test_read_str_reads_only_first_form():
    assert read_str("1 2 3") == 1


def test_leading_comment_is_skipped():
    assert read_str("; comment\n42") == 42


def test_commas_are_whitespace():
    assert read_str("(1, 2,, 3)") == [1, 2, 3]


def test_comment_inside_multiline_list():
    assert read_str("(1 ; one\n 2 ; two\n)") == [1, 2]


@pytest.mark.parametrize("source", ["(1 2", "[1 2", "{:a 1", "(", "'", '"abc', r'"abc\"', "(1 (2 3)"])
def test_end_of_input(source):
    with pytest.raises(MaltEndOfInput):
        read_str(source)


@pytest.mark.parametrize("source", ["", "   ", "; only a comment", ",,,"])
def test_no_input(source):
    with pytest.raises(MaltNoInput):
        read_str(source)


@pytest.mark.parametrize("source, token", [(")", ")"), ("]", "]"), ("}", "}"), ("(1 ]", "]"), ("'}", "}")])
def test_unexpected_closer(source, token):
    with pytest.raises(MaltUnexpectedCloser) as exc:
        read_str(source)
    assert exc.value.token == token
    assert not isinstance(exc.value, MaltEndOfInput)


@pytest.mark.parametrize("source", ["{1}", "{:a 1 :b}", "{:a}"])
def test_odd_hashmap(source):
    with pytest.raises(MaltMalformedCollection):
        read_str(source)


def test_hashmap_rejects_non_string_keys():
    with pytest.raises(MaltTypeError):
        read_str("{1 2}")


def test_errors_share_syntax_base():
    for source in ("(", ")", "{1}"):
        with pytest.raises(MaltSyntaxError):
            read_str(source)


def test_reader_cursor():
    reader = Reader(tokenize("(a) b"))
    assert reader.peek() == "("
    assert reader.peek() == "("
    assert reader.next() == "("
    assert reader.position == 1
    reader.position = 3
    assert reader.next() == "b"
    assert reader.at_end()
    with pytest.raises(MaltEndOfInput):
        reader.peek()


def test_read_all():
    forms = list(read_all("(def! a 1) ; set a\n a\n; trailing\n"))
    assert forms == [[Symbol("def!"), Symbol("a"), 1], Symbol("a")]


def test_read_all_empty():
    assert list(read_all("; nothing here")) == []
