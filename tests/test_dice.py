import pytest

from fivedice.game.dice import FACES, Dice, Face, face_source, make_hand, random_face


def test_faces_are_ordered_one_to_six():
    assert [int(f) for f in FACES] == [1, 2, 3, 4, 5, 6]
    assert Face.ONE < Face.SIX
    assert sorted([Face.FOUR, Face.ONE, Face.THREE]) == [Face.ONE, Face.THREE, Face.FOUR]


def test_face_glyphs():
    assert [str(f) for f in FACES] == ["⚀", "⚁", "⚂", "⚃", "⚄", "⚅"]


def test_make_hand_coerces_ints():
    assert make_hand([1, 6, 3, 3, 2]) == (Face.ONE, Face.SIX, Face.THREE, Face.THREE, Face.TWO)


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], [0, 1, 2, 3, 4], [1, 2, 3, 4, 7]])
def test_make_hand_rejects_malformed(values):
    with pytest.raises(ValueError):
        make_hand(values)


def test_random_face_in_range():
    assert all(random_face() in FACES for _ in range(200))


def test_seeded_sources_repeat():
    a, b = face_source(7), face_source(7)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_dice_roll_keeps_selected(scripted):
    dice = Dice(scripted(1, 2, 3, 4, 5, 6, 6))
    assert dice.hand() == make_hand([1, 2, 3, 4, 5])

    dice.roll({0, 2, 4})
    assert dice.hand() == make_hand([1, 6, 3, 6, 5])

    dice.sort()
    assert dice.hand() == make_hand([1, 3, 5, 6, 6])


def test_dice_roll_without_keep_rerolls_all(scripted):
    dice = Dice(scripted(1, 1, 1, 1, 1, 2, 2, 2, 2, 2))
    dice.roll()
    assert dice.hand() == make_hand([2, 2, 2, 2, 2])
