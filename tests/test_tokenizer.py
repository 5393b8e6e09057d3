import pytest

from fcp_regex.fcpcore.tokenizer import (
    is_arrow,
    is_key_value,
    is_selector,
    parse_key_value,
    parse_key_value_with_meta,
    tokenize,
)


def test_tokenize_simple_tokens():
    assert tokenize("add svc AuthService") == ["add", "svc", "AuthService"]


def test_tokenize_quoted_strings():
    assert tokenize('add svc "Auth Service" theme:blue') == [
        "add",
        "svc",
        "Auth Service",
        "theme:blue",
    ]


def test_tokenize_escaped_quotes():
    assert tokenize(r'label A "say \"hello\""') == ["label", "A", 'say "hello"']


def test_tokenize_empty_input():
    assert tokenize("") == []


def test_tokenize_whitespace_only():
    assert tokenize("   ") == []


def test_tokenize_multiple_spaces():
    assert tokenize("add   svc   A") == ["add", "svc", "A"]


def test_tokenize_newline_in_unquoted():
    assert tokenize(r"add svc Container\nRegistry") == ["add", "svc", "Container\nRegistry"]


def test_tokenize_newline_in_quoted():
    assert tokenize(r'add svc "Container\nRegistry"') == ["add", "svc", "Container\nRegistry"]


def test_tokenize_embedded_quoted_value():
    assert tokenize(r'label:"Line1\nLine2"') == ['label:"Line1\nLine2"']


def test_tokenize_multiple_newlines():
    assert tokenize(r"add svc A\nB\nC") == ["add", "svc", "A\nB\nC"]


def test_tokenize_single_token():
    assert tokenize("add") == ["add"]


def test_tokenize_empty_quoted_string():
    assert tokenize('""') == [""]


def test_tokenize_unclosed_quote():
    assert tokenize('"hello world') == ["hello world"]


def test_tokenize_escaped_backslash():
    assert tokenize(r'"path\\dir"') == ["path\\dir"]


def test_tokenize_colons_in_value():
    assert tokenize("url:http://example.com") == ["url:http://example.com"]


@pytest.mark.parametrize(
    "token, expected",
    [
        ("theme:blue", True),
        ("url:http://x", True),
        ("@type:db", False),
        ("->", False),
        ("hello", False),
        ("key:", False),
        (":value", False),
        ("bad key:value", False),
        ("a-b_c:1", True),
    ],
)
def test_is_key_value(token, expected):
    assert is_key_value(token) is expected


def test_parse_key_value():
    assert parse_key_value("theme:blue") == ("theme", "blue")
    assert parse_key_value("url:http://x:8080") == ("url", "http://x:8080")


def test_parse_key_value_strips_quotes():
    assert parse_key_value('label:"Line1\nLine2"') == ("label", "Line1\nLine2")


def test_parse_key_value_with_meta():
    assert parse_key_value_with_meta('engine_version:"15"') == ("engine_version", "15", True)
    assert parse_key_value_with_meta("port:80") == ("port", "80", False)


def test_parse_key_value_without_colon_raises():
    with pytest.raises(ValueError):
        parse_key_value("nocolon")


def test_is_arrow():
    assert is_arrow("->")
    assert is_arrow("<->")
    assert is_arrow("--")
    assert not is_arrow("=>")
    assert not is_arrow("add")


def test_is_selector():
    assert is_selector("@type:db")
    assert is_selector("@all")
    assert not is_selector("type:db")
    assert not is_selector("add")