import pytest

from scenario.tokenizer import MalformedLineError, tokenize


def test_double_quoted_argument_stays_together():
    assert tokenize('cd "my dir"') == ["cd", "my dir"]


def test_single_quoted_argument_stays_together():
    assert tokenize("run echo 'hello world'") == ["run", "echo", "hello world"]


@pytest.mark.parametrize("line", ["", "   ", "\t  \t"])
def test_blank_line_has_no_tokens(line):
    assert tokenize(line) == []


def test_runs_of_whitespace_collapse():
    assert tokenize("  mkdir\t  a   b  ") == ["mkdir", "a", "b"]


def test_other_quote_is_literal_inside_span():
    assert tokenize("""run echo "it's fine" 'say "hi"'""") == [
        "run", "echo", "it's fine", 'say "hi"',
    ]


def test_adjacent_pieces_join_into_one_token():
    assert tokenize('rm a"b c"d') == ["rm", "ab cd"]


def test_empty_quotes_give_empty_token():
    assert tokenize('run printf ""') == ["run", "printf", ""]


def test_command_name_case_is_kept():
    assert tokenize("CD x") == ["CD", "x"]


@pytest.mark.parametrize("line", ['cd "my dir', "run echo 'oops", 'a "b" "c'])
def test_unterminated_quote_is_malformed(line):
    with pytest.raises(MalformedLineError, match="Unterminated"):
        tokenize(line)
