import pytest

from delvegen.rng import RandomNumberGenerator


def test_same_seed_same_sequence():
    a = RandomNumberGenerator(42)
    b = RandomNumberGenerator(42)
    assert [a.roll_dice(2, 6) for _ in range(50)] == [b.roll_dice(2, 6) for _ in range(50)]


def test_roll_dice_bounds():
    rng = RandomNumberGenerator(1)
    rolls = [rng.roll_dice(3, 6) for _ in range(500)]
    assert min(rolls) >= 3
    assert max(rolls) <= 18


def test_single_die_covers_all_faces():
    rng = RandomNumberGenerator(7)
    faces = {rng.roll_dice(1, 4) for _ in range(400)}
    assert faces == {1, 2, 3, 4}


def test_zero_dice_sum_to_zero():
    assert RandomNumberGenerator(3).roll_dice(0, 6) == 0


def test_roll_dice_rejects_empty_die():
    with pytest.raises(ValueError):
        RandomNumberGenerator(3).roll_dice(1, 0)


def test_range_is_half_open():
    rng = RandomNumberGenerator(5)
    values = {rng.range(0, 2) for _ in range(200)}
    assert values == {0, 1}


def test_range_rejects_empty():
    with pytest.raises(ValueError):
        RandomNumberGenerator(5).range(4, 4)