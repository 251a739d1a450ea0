import pytest

from puzzlebox.arrays import (
    array_operations,
    balanced_lighting,
    fence_colouring,
    larger_smaller_count,
    minimize_sum,
    outside_pair,
    run,
    tallest_brick,
)


def test_array_operations_single_value_is_returned():
    assert array_operations([42]) == 42


def test_array_operations_long_array_takes_maximum():
    assert array_operations([3, 9, 2, 7]) == 9


def test_array_operations_three_values_never_below_elements():
    values = [4, 1, 6]
    result = array_operations(values)
    assert result >= max(values)
    assert result > values[0] and result > values[2]


def test_array_operations_empty_raises():
    with pytest.raises(ValueError):
        array_operations([])


def test_balanced_lighting_can_balance():
    assert balanced_lighting([1, 2, 0, 0]) is True


def test_balanced_lighting_too_many_of_one_colour():
    assert balanced_lighting([1, 1, 1, 2]) is False


def test_balanced_lighting_odd_length_fails():
    assert balanced_lighting([0, 0, 0]) is False


def test_balanced_lighting_empty_is_balanced():
    assert balanced_lighting([]) is True


def test_tallest_brick_points_at_first_maximum():
    heights = [3, 7, 2, 7, 5]
    position = tallest_brick(heights)
    assert heights[position - 1] == max(heights)
    assert all(height < max(heights) for height in heights[: position - 1])


def test_tallest_brick_single():
    assert tallest_brick([10]) == 1


def test_tallest_brick_empty_raises():
    with pytest.raises(ValueError):
        tallest_brick([])


def test_fence_colouring_all_ones_needs_nothing():
    assert fence_colouring([1, 1, 1]) == 0
    assert fence_colouring([]) == 0


def test_fence_colouring_never_exceeds_non_one_count():
    colours = [2, 3, 1, 4, 2, 5]
    non_ones = [c for c in colours if c != 1]
    assert 0 < fence_colouring(colours) <= len(non_ones)


def test_fence_colouring_uniform_fence_needs_one():
    assert fence_colouring([2, 2, 2]) == 1


def test_outside_pair_uses_maximum_when_positive():
    assert outside_pair([3, -5, 8]) == (8, 8)


def test_outside_pair_uses_minimum_when_only_negative():
    assert outside_pair([-4, -1, 0]) == (-4, -4)


def test_outside_pair_all_zero_has_none():
    assert outside_pair([0, 0]) is None


def test_larger_smaller_equal_values_gives_zero():
    assert larger_smaller_count([2, 2, 2]) == 0


def test_larger_smaller_is_shift_invariant():
    values = [4, 11, 7, 5]
    shifted = [value + 100 for value in values]
    assert larger_smaller_count(values) == larger_smaller_count(shifted)


def test_larger_smaller_ignores_interior_values():
    assert larger_smaller_count([1, 9]) == larger_smaller_count([1, 3, 5, 9])


def test_larger_smaller_empty_raises():
    with pytest.raises(ValueError):
        larger_smaller_count([])


def test_minimize_sum_all_at_top_wraps_to_zero():
    assert minimize_sum([4, 4, 4], 5) == 0


def test_minimize_sum_all_zero_stays_zero():
    assert minimize_sum([0, 0, 0], 7) == 0


def test_minimize_sum_not_above_unshifted_sum():
    values = [1, 6, 3, 2]
    result = minimize_sum(values, 7)
    assert 0 <= result <= sum(values)


def test_minimize_sum_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        minimize_sum([5], 5)


def test_minimize_sum_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        minimize_sum([], 0)


def test_run_outside_pair_formats_output():
    assert run("outside_pair", "2\n3\n3 -5 8\n2\n0 0\n") == "8 8\n-1\n"


def test_run_balanced_lighting_prints_yes_no():
    assert run("balanced_lighting", "2\n4\n1 2 0 0\n3\n0 0 0\n") == "Yes\nNo\n"


def test_run_minimize_sum_reads_count_and_modulus():
    assert run("minimize_sum", "1\n3 5\n4 4 4\n") == "0\n"


def test_run_tallest_brick():
    assert run("tallest_brick", "1\n1\n10\n") == "1\n"


def test_run_unknown_name_raises():
    with pytest.raises(ValueError):
        run("no_such_puzzle", "1\n1\n1\n")


def test_run_truncated_input_raises():
    with pytest.raises(ValueError):
        run("array_operations", "1\n4\n1 2\n")