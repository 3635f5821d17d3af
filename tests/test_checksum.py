import pytest

from algokit.checksum import checksum, ones_complement_sum

WORDS = [
    [1, 0, 1, 0, 1, 0, 1, 0],
    [1, 1, 0, 0, 1, 1, 0, 0],
    [1, 1, 1, 1, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 1, 0, 1],
]


def test_single_word_sum_is_the_word():
    assert ones_complement_sum([WORDS[0]]) == WORDS[0]


def test_all_zero_word():
    assert ones_complement_sum([[0] * 8]) == [0] * 8
    assert checksum([[0] * 8]) == [1] * 8


def test_end_around_carry():
    assert ones_complement_sum([[1] * 8, [0] * 7 + [1]]) == [0] * 7 + [1]


def test_checksum_is_complement_of_sum():
    total = ones_complement_sum(WORDS)
    assert [a + b for a, b in zip(total, checksum(WORDS))] == [1] * 8


@pytest.mark.parametrize("count", [1, 2, 3, 4])
def test_data_with_checksum_verifies_to_zero(count):
    words = WORDS[:count]
    assert checksum(words + [checksum(words)]) == [0] * 8


def test_sum_does_not_depend_on_order():
    assert ones_complement_sum(WORDS) == ones_complement_sum(list(reversed(WORDS)))


def test_other_widths():
    words = [[1, 0, 1], [0, 1, 1]]
    assert checksum(words + [checksum(words)]) == [0, 0, 0]


def test_invalid_input_raises():
    with pytest.raises(ValueError):
        ones_complement_sum([])
    with pytest.raises(ValueError):
        ones_complement_sum([[1, 0], [1]])
    with pytest.raises(ValueError):
        checksum([[1, 2, 0]])