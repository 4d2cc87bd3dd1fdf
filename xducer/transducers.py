from typing import TypeVar, Callable, Generic
from xducer.step import Step, Acc, In

A = TypeVar("A")
B = TypeVar("B")

XForm = Callable[[Step[Acc, B]], Step[Acc, A]]


class Transducer(Step[Acc, In]):
    """
    A step which wraps the inner step rf.
    init and complete pass straight through to rf, as does step unless a
    subclass intercepts it.
    """

    def __init__(self, rf: Step):
        self.rf = rf

    def init(self) -> Acc:
        return self.rf.init()

    def step(self, result: Acc, input: In) -> Acc:
        return self.rf.step(result, input)

    def complete(self, result: Acc):
        return self.rf.complete(result)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.rf)


class Mapping(Transducer[Acc, A], Generic[Acc, A, B]):

    def __init__(self, f: Callable[[A], B], rf: Step[Acc, B]):
        super().__init__(rf)
        self.f = f

    def step(self, result: Acc, input: A) -> Acc:
        return self.rf.step(result, self.f(input))


def mapping(f: Callable[[A], B]) -> XForm:
    """Transducer which forwards f(x) for every x. One out for one in."""
    def mapped(rf: Step[Acc, B]):
        return Mapping(f, rf)
    mapped.__name__ = "mapping_" + getattr(f, '__name__', 'fn')
    return mapped


class Filtering(Transducer[Acc, In]):

    def __init__(self, pred: Callable[[In], bool], rf: Step[Acc, In]):
        super().__init__(rf)
        self.pred = pred

    def step(self, result: Acc, input: In) -> Acc:
        if self.pred(input):
            return self.rf.step(result, input)
        return result


def filtering(pred: Callable[[In], bool]) -> XForm:
    """
    Transducer which forwards only the inputs satisfying pred.
    Rejected inputs never reach the inner step; the accumulator comes back
    untouched.
    """
    def filtered(rf: Step[Acc, In]):
        return Filtering(pred, rf)
    filtered.__name__ = "filtering_" + getattr(pred, '__name__', 'pred')
    return filtered


def identity(rf):
    """The no-op transducer. Returns rf unchanged."""
    return rf
