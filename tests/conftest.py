import pytest
from xducer.step import Step


class Counted(object):
    """Wraps fn, counting the calls which pass through it."""
    def __init__(self, fn):
        self.fn = fn
        self.calls = 0
        self.__name__ = "counted_" + getattr(fn, '__name__', 'fn')

    def __call__(self, *args):
        self.calls += 1
        return self.fn(*args)


class RecordingStep(Step):
    """
    Summing step which records every operation invoked on it, in order.
    """
    def __init__(self, seed=0):
        self.seed = seed
        self.calls = []

    def init(self):
        self.calls.append(('init',))
        return self.seed

    def step(self, result, input):
        self.calls.append(('step', result, input))
        return result + input

    def complete(self, result):
        self.calls.append(('complete', result))
        return result

    def ops(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recorder():
    return RecordingStep()



add = lambda acc, x: acc + x
inc = lambda x: x + 1
double = lambda x: x * 2
square = lambda x: x * x
isEven = lambda x: x % 2 == 0
isOdd = lambda x: x % 2 == 1
one2ten = list(range(1, 10 + 1))
