import itertools
import random

import pytest

from pushswap.moves import Move, Stacks
from pushswap.parsing import ParseError
from pushswap.solver import (
    execute_cheapest,
    final_order,
    first_push,
    main,
    order_three,
    solve,
)
from pushswap.stack import assign_indices, make_elements


def _stacks(values):
    elements = make_elements(values)
    assign_indices(elements)
    return Stacks(elements)


def _replay(values, moves):
    stacks = Stacks(make_elements(values))
    for move in moves:
        stacks.apply(move)
    return [element.value for element in stacks.a], stacks.b


@pytest.mark.parametrize("values", [list(p) for p in itertools.permutations([7, -2, 40])])
def test_order_three_sorts_every_permutation(values):
    stacks = _stacks(values)
    order_three(stacks)
    assert [e.value for e in stacks.a] == sorted(values)
    assert len(stacks.history) <= 2


def test_order_three_requires_three_elements():
    with pytest.raises(ValueError):
        order_three(_stacks([2, 1]))


def test_order_three_descending_output():
    stacks = _stacks([3, 2, 1])
    order_three(stacks)
    assert stacks.history == [Move.RA, Move.SA]


@pytest.mark.parametrize("count", [4, 5, 6, 9, 12])
def test_first_push_leaves_three_in_a(count):
    values = random.Random(count).sample(range(-50, 50), count)
    stacks = _stacks(values)
    first_push(stacks)
    assert len(stacks.a) == 3
    assert len(stacks.b) == count - 3
    assert sorted(e.value for e in stacks.a + stacks.b) == sorted(values)
    assert set(stacks.history) <= {Move.PB, Move.RA}


def test_first_push_moves_small_half_first():
    values = [6, 5, 4, 3, 2, 1, 8, 7]
    stacks = _stacks(values)
    first_push(stacks)
    pushed_ranks = [e.index for e in stacks.b]
    assert all(rank <= 4 for rank in pushed_ranks[-4:])


def test_final_order_rotates_forward_when_close():
    stacks = _stacks([4, 5, 1, 2, 3])
    final_order(stacks)
    assert [e.value for e in stacks.a] == [1, 2, 3, 4, 5]
    assert set(stacks.history) == {Move.RA}


def test_final_order_rotates_backward_when_far():
    stacks = _stacks([2, 3, 4, 5, 1])
    final_order(stacks)
    assert [e.value for e in stacks.a] == [1, 2, 3, 4, 5]
    assert set(stacks.history) == {Move.RRA}


def test_final_order_without_rank_one_raises():
    with pytest.raises(ValueError):
        final_order(Stacks(make_elements([1, 2])))


def test_execute_cheapest_moves_one_element_to_a():
    stacks = _stacks([5, 1, 4, 2, 3, 9, 7])
    first_push(stacks)
    order_three(stacks)
    before_a, before_b = len(stacks.a), len(stacks.b)
    execute_cheapest(stacks)
    assert len(stacks.a) == before_a + 1
    assert len(stacks.b) == before_b - 1
    assert stacks.history[-1] is Move.PA


def test_execute_cheapest_on_empty_b_raises():
    with pytest.raises(ValueError):
        execute_cheapest(_stacks([1, 2, 3]))


@pytest.mark.parametrize("seed", range(12))
def test_solve_sorts_random_inputs(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), rng.randint(2, 60))
    moves = solve(values)
    a, b = _replay(values, moves)
    assert a == sorted(values)
    assert b == []


@pytest.mark.parametrize("values", [list(p) for p in itertools.permutations([1, 2, 3, 4, 5])])
def test_solve_sorts_every_permutation_of_five(values):
    a, b = _replay(values, solve(values))
    assert a == [1, 2, 3, 4, 5]
    assert b == []


def test_solve_ordered_needs_no_moves():
    assert solve([1, 2, 3, 10]) == []
    assert solve([42]) == []


def test_solve_two_elements():
    assert solve([2, 1]) == [Move.SA]


def test_solve_rejects_duplicates():
    with pytest.raises(ParseError):
        solve([3, 1, 3])


def test_main_without_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_main_empty_first_argument(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().err == "Error\n"


@pytest.mark.parametrize(
    "args", [["1 a"], ["1", "1"], ["2147483648"], ["-"], ["3", "x2"]]
)
def test_main_reports_bad_input(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_ordered_input_prints_nothing(capsys):
    assert main(["1", "2 3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_main_prints_moves(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_output_sorts_input(capsys):
    values = [9, -4, 17, 0, 3, 12, -8, 5]
    assert main([" ".join(str(v) for v in values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    a, b = _replay(values, lines)
    assert a == sorted(values)
    assert b == []