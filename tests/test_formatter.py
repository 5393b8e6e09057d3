import pytest

from fcp_regex.fcpcore.formatter import format_result, levenshtein, suggest


def test_format_result_success_with_prefix():
    assert format_result(True, "svc AuthService", "+") == "+ svc AuthService"


def test_format_result_success_without_prefix():
    assert format_result(True, "done", None) == "done"


def test_format_result_success_empty_prefix():
    assert format_result(True, "done", "") == "done"


def test_format_result_error():
    assert format_result(False, "something broke", None) == "ERROR: something broke"


def test_format_result_error_ignores_prefix():
    assert format_result(False, "bad input", "+") == "ERROR: bad input"


@pytest.mark.parametrize(
    "prefix, message, expected",
    [
        ("+", "AuthService", "+ AuthService"),
        ("~", "edge A->B", "~ edge A->B"),
        ("*", "styled A", "* styled A"),
        ("-", "A", "- A"),
        ("!", "group Backend", "! group Backend"),
        ("@", "layout", "@ layout"),
    ],
)
def test_format_result_prefix_conventions(prefix, message, expected):
    assert format_result(True, message, prefix) == expected


CANDIDATES = ["add", "remove", "connect", "style", "label", "badge"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("add", "add"),
        ("ad", "add"),
        ("styel", "style"),
        ("labek", "label"),
        ("zzzzzzz", None),
        ("bade", "badge"),
    ],
)
def test_suggest(text, expected):
    assert suggest(text, CANDIDATES) == expected


def test_suggest_case_insensitive():
    assert suggest("STYLE", CANDIDATES) == "style"


def test_suggest_empty_candidates():
    assert suggest("test", []) is None


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("abc", "", 3),
        ("", "abc", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("same", "same", 0),
    ],
)
def test_levenshtein(a, b, expected):
    assert levenshtein(a, b) == expected


def test_levenshtein_symmetric():
    assert levenshtein("define", "compile") == levenshtein("compile", "define")