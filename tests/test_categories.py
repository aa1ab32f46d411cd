import pytest
from hypothesis import given

from fivedice.game.categories import (
    ALL,
    CATEGORY_COUNT,
    LOWER,
    UPPER,
    Category,
    CategoryValues,
    evaluate,
    evaluate_hand,
)
from fivedice.game.dice import Face
from fivedice.game.tally import FaceTally

from conftest import hands


def test_thirteen_fixed_categories():
    assert CATEGORY_COUNT == 13
    assert len(ALL) == 13
    assert len(UPPER) == 6
    assert len(LOWER) == 7


def test_upper_categories_map_to_faces():
    for face in Face:
        category = Category.upper(face)
        assert category.is_upper
        assert category.face == face
    assert Category.upper(3) != Category.upper(4)
    assert Category.CHANCE.face is None
    assert not Category.FULL_HOUSE.is_upper


def test_labels():
    assert str(Category.THREES) == "⚂ s"
    assert str(Category.THREE_OF_A_KIND) == "3 of a kind"
    assert Category.FIVE_OF_A_KIND.label == "5 of a kind"
    assert Category.SMALL_STRAIGHT.label == "small straight"


def test_end_to_end_full_house_hand():
    values = evaluate_hand([5, 5, 5, 2, 2])
    assert values[Category.THREE_OF_A_KIND] == 19
    assert values[Category.FULL_HOUSE] == 25
    assert values[Category.FIVES] == 15
    assert values[Category.TWOS] == 4
    assert values[Category.CHANCE] == 19
    assert values[Category.SMALL_STRAIGHT] == 0
    assert values[Category.LARGE_STRAIGHT] == 0
    assert values[Category.FIVE_OF_A_KIND] == 0
    assert values[Category.FOUR_OF_A_KIND] == 0
    assert values[Category.ONES] == 0


def test_five_of_a_kind_also_scores_as_three_and_four_of_a_kind():
    values = evaluate_hand([4, 4, 4, 4, 4])
    assert values[Category.FIVE_OF_A_KIND] == 50
    assert values[Category.THREE_OF_A_KIND] == 20
    assert values[Category.FOUR_OF_A_KIND] == 20
    assert values[Category.FULL_HOUSE] == 0
    assert values[Category.FOURS] == 20


def test_straights():
    large = evaluate_hand([2, 3, 4, 5, 6])
    assert large[Category.LARGE_STRAIGHT] == 40
    assert large[Category.SMALL_STRAIGHT] == 30

    small = evaluate_hand([1, 2, 3, 4, 6])
    assert small[Category.LARGE_STRAIGHT] == 0
    assert small[Category.SMALL_STRAIGHT] == 30


def test_chance_of_all_ones():
    assert evaluate_hand([1, 1, 1, 1, 1])[Category.CHANCE] == 5


@given(hands)
def test_chance_is_always_the_sum(roll):
    tally = FaceTally.build(roll)
    assert evaluate(tally)[Category.CHANCE] == tally.sum()


@given(hands)
def test_upper_values_are_count_times_face(roll):
    tally = FaceTally.build(roll)
    values = evaluate(tally)
    for face in Face:
        assert values[Category.upper(face)] == tally[face] * face


def test_items_cover_every_category_in_order():
    values = evaluate_hand([1, 2, 3, 4, 5])
    pairs = list(values.items())
    assert [c for c, _ in pairs] == list(ALL)
    assert dict(pairs) == values.as_dict()
    assert list(values) == list(ALL)
    assert len(values) == 13


def test_values_need_thirteen_slots():
    with pytest.raises(ValueError):
        CategoryValues([0] * 12)


@pytest.mark.parametrize("key", [0, -1, 14])
def test_values_reject_unknown_category_keys(key):
    values = evaluate_hand([5, 5, 5, 2, 2])
    with pytest.raises(ValueError):
        values[key]


def test_values_accept_plain_category_numbers():
    values = evaluate_hand([5, 5, 5, 2, 2])
    assert values[9] == values[Category.FULL_HOUSE] == 25
