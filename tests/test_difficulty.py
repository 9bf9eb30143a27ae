import pytest

from catch_rush.difficulty import (
    TOTAL_ROUNDS,
    badge_index,
    clamp_round,
    pass_taps_for_round,
    reaction_ms_for_round,
)


@pytest.mark.parametrize("round_num", range(1, TOTAL_ROUNDS + 1))
def test_pass_taps_grow_by_five(round_num):
    assert pass_taps_for_round(round_num) == 10 + 5 * (round_num - 1)


def test_pass_taps_endpoints_and_clamping():
    assert pass_taps_for_round(1) == 10
    assert pass_taps_for_round(10) == 55
    assert pass_taps_for_round(0) == 10
    assert pass_taps_for_round(-3) == 10
    assert pass_taps_for_round(42) == 55


def test_reaction_window_endpoints():
    assert reaction_ms_for_round(1) == 900
    assert reaction_ms_for_round(10) == 420
    assert reaction_ms_for_round(0) == 900
    assert reaction_ms_for_round(11) == 420


def test_reaction_window_rounds_to_nearest_ms():
    # 900 - 480 / 9 = 846.67
    assert reaction_ms_for_round(2) == 847
    assert reaction_ms_for_round(4) == 740
    assert reaction_ms_for_round(7) == 580


def test_reaction_window_never_increases():
    values = [reaction_ms_for_round(r) for r in range(1, TOTAL_ROUNDS + 1)]
    assert values == sorted(values, reverse=True)


def test_clamp_round_and_badges():
    assert clamp_round(-1) == 1
    assert clamp_round(99) == TOTAL_ROUNDS
    assert [badge_index(r) for r in range(1, 11)] == [0, 1, 2, 3, 4, 0, 1, 2, 3, 4]
