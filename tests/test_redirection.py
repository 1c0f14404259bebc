import pytest

from myshell.core.commands import parse_line
from myshell.core.redirection import extract
from myshell.core.types import NO_REDIRECTION, Redirection, RedirectTarget, WriteMode


@pytest.mark.parametrize(
    ("line", "target", "mode"),
    [
        ("echo hi 1>> out.txt", RedirectTarget.STDOUT, WriteMode.APPEND),
        ("echo hi 2>> out.txt", RedirectTarget.STDERR, WriteMode.APPEND),
        ("echo hi >> out.txt", RedirectTarget.STDOUT, WriteMode.APPEND),
        ("echo hi 1> out.txt", RedirectTarget.STDOUT, WriteMode.TRUNCATE),
        ("echo hi 2> out.txt", RedirectTarget.STDERR, WriteMode.TRUNCATE),
        ("echo hi > out.txt", RedirectTarget.STDOUT, WriteMode.TRUNCATE),
    ],
)
def test_operator_selects_target_and_mode(line: str, target: RedirectTarget, mode: WriteMode) -> None:
    command_text, redirection = extract(line)
    assert redirection == Redirection(target=target, mode=mode, path="out.txt")
    assert command_text.strip() == "echo hi"


def test_append_prefix_wins_over_plain_operator() -> None:
    command_text, redirection = extract("echo hi 1>> out.txt")
    assert command_text == "echo hi "
    assert redirection == Redirection(RedirectTarget.STDOUT, WriteMode.APPEND, "out.txt")


def test_no_operator_returns_default_directive() -> None:
    command_text, redirection = extract("echo hi")
    assert command_text == "echo hi"
    assert redirection == NO_REDIRECTION


def test_operator_without_spaces() -> None:
    command_text, redirection = extract("echo hi>out.txt")
    assert command_text == "echo hi"
    assert redirection.path == "out.txt"


def test_raw_mode_detects_operator_inside_quotes() -> None:
    command_text, redirection = extract("echo 'a > b'")
    assert command_text == "echo 'a "
    assert redirection.target is RedirectTarget.STDOUT
    assert redirection.path == "b'"


def test_quote_aware_mode_ignores_quoted_operator() -> None:
    command_text, redirection = extract("echo 'a > b'", quote_aware=True)
    assert command_text == "echo 'a > b'"
    assert redirection == NO_REDIRECTION


def test_quote_aware_mode_ignores_escaped_operator() -> None:
    command_text, redirection = extract("echo a \\> b", quote_aware=True)
    assert redirection == NO_REDIRECTION
    assert command_text == "echo a \\> b"


def test_quote_aware_mode_finds_unquoted_operator_after_quoted_one() -> None:
    command_text, redirection = extract("echo \"x > y\" > 'my file.txt'", quote_aware=True)
    assert command_text == 'echo "x > y" '
    assert redirection == Redirection(RedirectTarget.STDOUT, WriteMode.TRUNCATE, "my file.txt")


def test_quote_aware_mode_takes_first_word_as_target() -> None:
    command_text, redirection = extract("echo hi > out.txt extra", quote_aware=True)
    assert command_text == "echo hi "
    assert redirection.path == "out.txt"


def test_quote_aware_mode_with_missing_target() -> None:
    _, redirection = extract("echo hi >", quote_aware=True)
    assert redirection.target is RedirectTarget.STDOUT
    assert redirection.path == ""


def test_parse_line_tokenizes_command_portion_only() -> None:
    parsed = parse_line("echo 'hello world' 2>> errors.log")
    assert parsed.tokens == ["echo", "hello world"]
    assert parsed.redirection == Redirection(RedirectTarget.STDERR, WriteMode.APPEND, "errors.log")
