import pytest
from slipscan.extraction.char_corrector import ConfusableCharCorrector

DIGITS_HASH = "0123456789#"


@pytest.fixture
def corrector():
    return ConfusableCharCorrector()


def test_account_number_confusables_fixed(corrector):
    """I -> 1 и O -> 0 исправляются за одну замену."""
    result = corrector.correct("5IO#12#", DIGITS_HASH)
    assert result.ok
    assert result.text == "510#12#"
    assert result.was_fixed
    assert result.replacements == 2


@pytest.mark.parametrize("char,expected", [
    ("s", "5"),   # s -> S -> 5 (две замены)
    ("S", "5"),
    ("o", "0"),   # o -> O -> 0
    ("Q", "0"),   # Q -> O -> 0
    ("O", "0"),
    ("l", "1"),   # l -> I -> 1
    ("I", "1"),
    ("B", "8"),
])
def test_chains_reach_digits(corrector, char, expected):
    assert corrector.correct_char(char, DIGITS_HASH) == expected


def test_unknown_char_rejects_whole_text(corrector):
    """Символ без замены делает невалидной всю строку."""
    result = corrector.correct("12x4", DIGITS_HASH)
    assert not result.ok
    assert result.text is None


def test_whitespace_outside_allowed_set_rejected(corrector):
    # Таб не входит в "0123456789 " и не имеет замены
    result = corrector.correct("1250\t50", "0123456789 ")
    assert not result.ok


def test_two_hop_limit(corrector):
    """Цепочка длиннее лимита не доходит до допустимого набора."""
    strict = ConfusableCharCorrector(max_substitutions=1)
    assert not strict.correct("s", DIGITS_HASH).ok
    assert corrector.correct("s", DIGITS_HASH).text == "5"


def test_allowed_text_unchanged(corrector):
    """Уже валидный текст проходит без замен."""
    for text, allowed in [
        ("1234567#89#", DIGITS_HASH),
        ("4711223344 #", "0123456789# "),
        ("1250 00", "0123456789 "),
    ]:
        result = corrector.correct(text, allowed)
        assert result.text == text
        assert result.replacements == 0
        assert not result.was_fixed


def test_allowed_char_never_substituted(corrector):
    # 'S' есть в таблице, но если он допустим - не трогаем
    assert corrector.correct_char("S", "S5") == "S"


def test_empty_text(corrector):
    result = corrector.correct("", DIGITS_HASH)
    assert result.ok
    assert result.text == ""
