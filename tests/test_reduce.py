import pytest
from xducer import EmptyReductionError, UnsupportedArityError, reduce, reduced, step_from, sum_of, array_of
from xducer.step import Step
from .conftest import RecordingStep, add, one2ten

def test_reduce_seeds_with_first():
    assert reduce(sum_of, [1, 2, 3, 4]) == 10
    assert reduce(add, [1, 2, 3, 4]) == 10
    assert reduce(lambda acc, x: acc - x, [10, 1, 2]) == 7

def test_reduce_with_seed():
    assert reduce(sum_of, 0, [1, 2, 3, 4]) == 10
    assert reduce(add, 0, [1, 2, 3, 4]) == 10
    assert reduce(lambda acc, x: acc - x, 10, [1, 2]) == 7

def test_reduce_single_element():
    r = RecordingStep()
    assert reduce(r, [5]) == 5
    assert r.calls == []

def test_reduce_seeded_step_calls(recorder):
    assert reduce(recorder, 0, [1, 2]) == 3
    assert recorder.calls == [('step', 0, 1), ('step', 1, 2)]

def test_reduce_empty_calls_init(recorder):
    assert reduce(sum_of, []) == 0
    assert reduce(array_of, []) == []
    assert reduce(recorder, []) == 0
    assert recorder.ops() == ['init']

def test_reduce_empty_with_seed_skips_init(recorder):
    assert reduce(recorder, 7, []) == 7
    assert recorder.calls == []

def test_reduce_empty_without_init():
    with pytest.raises(EmptyReductionError):
        reduce(add, [])
    with pytest.raises(EmptyReductionError) as e:
        reduce(step_from(add), [])
    assert isinstance(e.value.__cause__, UnsupportedArityError)

def test_reduce_unsupported_step():
    class InitOnly(Step):
        def init(self):
            return 0
    with pytest.raises(UnsupportedArityError):
        reduce(InitOnly(), [1, 2])
    with pytest.raises(UnsupportedArityError):
        reduce(InitOnly(), 0, [1])

def test_reduce_iterators_and_generators():
    assert reduce(add, iter(one2ten)) == 55
    assert reduce(add, 0, (x for x in one2ten)) == 55
    assert reduce(add, 0, range(0)) == 0

def test_reduce_arity():
    with pytest.raises(TypeError):
        reduce(add)
    with pytest.raises(TypeError):
        reduce(add, 0, [1], [2])
    with pytest.raises(TypeError):
        reduce(None, 0, [1])

def test_reduce_early_termination():
    consumed = []
    def first_over(limit):
        def rf(acc, x):
            consumed.append(x)
            return reduced(x) if x > limit else acc
        return rf
    assert reduce(first_over(3), None, one2ten) == 4
    assert consumed == [1, 2, 3, 4]
