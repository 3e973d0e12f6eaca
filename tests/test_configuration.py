import pytest

from weighing.configuration import KIND_A, KIND_B, Configuration, classify
from weighing.errors import UnreachableConfiguration
from weighing.possibilities import PossibilitySet


def test_initial_set_is_type_a_with_every_coin_double():
    cfg = classify(PossibilitySet.initial(4), 4)
    assert cfg.kind == KIND_A
    assert cfg.double == (1, 2, 3, 4)
    assert cfg.equal == () and cfg.more == () and cfg.less == ()
    assert cfg.all_equal is True
    assert cfg.num_possibilities == 9


def test_unbalanced_branch_is_type_b():
    cfg = classify(PossibilitySet([1, 2, -5, -6]), 6)
    assert cfg.kind == KIND_B
    assert cfg.more == (1, 2)
    assert cfg.less == (5, 6)
    assert cfg.equal == (3, 4)
    assert cfg.double == ()
    assert cfg.all_equal is False
    assert cfg.num_possibilities == 4


def test_balanced_branch_after_type_a_weighing_is_type_a():
    cfg = classify(PossibilitySet([0, 3, 4, -3, -4]), 4)
    assert cfg.kind == KIND_A
    assert cfg.double == (3, 4)
    assert cfg.equal == (1, 2)


def test_groups_are_ascending_regardless_of_hypothesis_order():
    cfg = classify(PossibilitySet([-7, 3, -2, 9]), 10)
    assert cfg.more == (3, 9)
    assert cfg.less == (2, 7)
    assert cfg.equal == (1, 4, 5, 6, 8, 10)


@pytest.mark.parametrize(
    "hyps, n",
    [
        ([0, 1], 2),       # all_equal with a MORE coin
        ([1, -1, 2], 2),   # DOUBLE coin without the no-fake hypothesis
        ([0, -3, 1, -1], 3),
    ],
)
def test_unreachable_configurations_raise(hyps, n):
    with pytest.raises(UnreachableConfiguration):
        classify(PossibilitySet(hyps), n)


def test_swapped_returns_new_configuration():
    cfg = Configuration(equal=(4,), more=(1, 2), less=(3,), double=(), all_equal=False)
    sw = cfg.swapped()
    assert sw.more == (3,) and sw.less == (1, 2)
    assert cfg.more == (1, 2)  # receiver unchanged
    assert sw.swapped() == cfg


def test_terminal_sets_classify():
    assert classify(PossibilitySet([0]), 3).kind == KIND_A
    assert classify(PossibilitySet([-2]), 3).kind == KIND_B
    assert classify(PossibilitySet([]), 3).kind == KIND_B
