import pytest

from myshell.core.lexer import tokenize
from myshell.errors import UnterminatedQuoteError


def test_plain_words_split_like_str_split() -> None:
    for line in ("ls -la /tmp", "  echo   a  b ", "one", "", "a\tb"):
        assert tokenize(line) == line.split()


def test_single_quotes_keep_content_verbatim() -> None:
    assert tokenize("cat 'a b' 'c\\d'") == ["cat", "a b", "c\\d"]


def test_single_quotes_preserve_inner_spaces() -> None:
    line = "cat '/tmp/baz/f   69' '/tmp/baz/f   23'"
    assert tokenize(line) == ["cat", "/tmp/baz/f   69", "/tmp/baz/f   23"]


def test_double_quotes_only_interpret_quote_and_backslash() -> None:
    assert tokenize('echo "a\\"b" "c\\\\d"') == ["echo", 'a"b', "c\\d"]


def test_double_quotes_keep_other_backslashes() -> None:
    assert tokenize('cat "file\\\\name" "file\\ name"') == ["cat", "file\\name", "file\\ name"]


def test_double_quotes_keep_single_quotes() -> None:
    assert tokenize('echo "test"  "shell\'s"  "world"') == ["echo", "test", "shell's", "world"]


def test_escaped_spaces_join_words() -> None:
    assert tokenize("a\\ \\ b") == ["a  b"]
    assert tokenize("world\\ \\ \\ script") == ["world   script"]


def test_escaped_quotes_outside_quotes_are_literal() -> None:
    assert tokenize("echo \\'\\\"test script\\\"\\'") == ["echo", "'\"test", "script\"'"]


def test_adjacent_quoted_parts_form_one_word() -> None:
    assert tokenize("echo 'a'\"b\"c") == ["echo", "abc"]


def test_empty_quoted_string_is_kept() -> None:
    assert tokenize("echo '' \"\"") == ["echo", "", ""]


def test_trailing_backslash_is_dropped() -> None:
    assert tokenize("echo a\\") == ["echo", "a"]


def test_unterminated_quote_closes_silently() -> None:
    assert tokenize("echo 'a b") == ["echo", "a b"]
    assert tokenize('echo "a b') == ["echo", "a b"]


@pytest.mark.parametrize("line", ["echo 'a b", 'echo "a b'])
def test_unterminated_quote_raises_in_strict_mode(line: str) -> None:
    with pytest.raises(UnterminatedQuoteError):
        tokenize(line, strict=True)


def test_strict_mode_accepts_balanced_quotes() -> None:
    assert tokenize("echo 'a' \"b\"", strict=True) == ["echo", "a", "b"]
