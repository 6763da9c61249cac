import pytest

from dsakit.text import (
    concat_hex36,
    defang_ip_addr,
    to_base,
    tokens,
    truncate_sentence,
    uncommon_from_sentences,
)


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("num", [1, 7, 35, 36, 255, 4096, 123456789])
def test_to_base_round_trip(num, base):
    assert int(to_base(num, base), base) == num


def test_to_base_decimal_matches_str():
    assert to_base(987654, 10) == str(987654)


def test_to_base_hex_matches_format():
    assert to_base(48879, 16) == format(48879, "X")


def test_to_base_uses_upper_case():
    text = to_base(10**12, 36)
    assert text == text.upper()


def test_to_base_zero_is_empty():
    assert to_base(0, 16) == ""


@pytest.mark.parametrize("base", [0, 1, 37])
def test_to_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        to_base(10, base)


def test_concat_hex36_worked_example():
    assert concat_hex36(13) == "A91P1"


@pytest.mark.parametrize("n", [1, 2, 13, 36, 1000])
def test_concat_hex36_parts(n):
    result = concat_hex36(n)
    hex_part = format(n * n, "X")
    assert result.startswith(hex_part)
    assert int(result[len(hex_part):], 36) == n**3


def test_tokens_drops_empty_pieces():
    assert tokens("a..b.", ".") == ["a", "b"]


def test_tokens_empty_string():
    assert tokens("", " ") == []


def test_defang_round_trip():
    address = "255.100.50.0"
    result = defang_ip_addr(address)
    assert "." not in result.replace("[.]", "")
    assert result.replace("[.]", ".") == address
    assert result.count("[.]") == address.count(".")


def test_truncate_sentence_first_words():
    assert truncate_sentence("Hello how are you Contestant", 4) == "Hello how are you"


def test_truncate_sentence_collapses_spaces():
    assert truncate_sentence("a  b c", 2) == "a b"


def test_truncate_sentence_whole():
    sentence = "chopper is not a tanuki"
    assert truncate_sentence(sentence, 5) == sentence


def test_truncate_sentence_zero_words():
    assert truncate_sentence("one two", 0) == ""


def test_truncate_sentence_too_many_words():
    with pytest.raises(ValueError):
        truncate_sentence("only three words", 4)


def test_uncommon_from_sentences_differences():
    result = uncommon_from_sentences("this apple is sweet", "this apple is sour")
    assert sorted(result) == ["sour", "sweet"]


def test_uncommon_from_sentences_repeated_word():
    assert uncommon_from_sentences("apple apple", "banana") == ["banana"]


def test_uncommon_from_sentences_all_shared():
    assert uncommon_from_sentences("x y", "y x") == []