"""
The reduction step protocol.

A reduction step folds one element into an accumulator. Every step exposes
three named operations:

    init() -> acc             produce a starting accumulator.
    step(acc, input) -> acc   fold input into acc.
    complete(acc) -> result   finish the reduction, called once at the end.

Plain two argument callables become steps through step_from.
"""
from typing import TypeVar, Callable, Generic, Optional
from xducer.errors import UnsupportedArityError

Acc = TypeVar("Acc")
In = TypeVar("In")
Reducer = Callable[[Acc, In], Acc]


class Step(Generic[Acc, In]):
    """Base step. Operations a subclass doesn't override fail fast."""

    def init(self) -> Acc:
        raise UnsupportedArityError(self, "init")

    def step(self, result: Acc, input: In) -> Acc:
        raise UnsupportedArityError(self, "step")

    def complete(self, result: Acc):
        raise UnsupportedArityError(self, "complete")


class FunctionStep(Step[Acc, In]):
    def __init__(self,
                 rf: Reducer[Acc, In],
                 init: Optional[Callable[[], Acc]] = None,
                 complete: Optional[Callable[[Acc], object]] = None):
        self.rf = rf
        self._init = init
        self._complete = complete

    def init(self) -> Acc:
        if self._init is None:
            return super().init()
        return self._init()

    def step(self, result: Acc, input: In) -> Acc:
        return self.rf(result, input)

    def complete(self, result: Acc):
        if self._complete is None:
            return result
        return self._complete(result)

    def __repr__(self):
        return "FunctionStep(%s)" % getattr(self.rf, '__name__', self.rf)


def step_from(rf, init=None, complete=None):
    """
    Adapt rf (acc -> input -> acc) into a Step.
    Without init, the step raises UnsupportedArityError when asked for one.
    Without complete, completion returns the accumulator unchanged.
    Steps which implement complete are returned as is. Steps lacking it are
    wrapped the same way, keeping their own init if they have one.
    """
    if isinstance(rf, Step):
        if init is not None or complete is not None:
            raise ValueError("%r is already a Step, can't attach init/complete" % rf)
        if type(rf).complete is not Step.complete:
            return rf
        if type(rf).init is not Step.init:
            init = rf.init
        return FunctionStep(rf.step, init)
    if not callable(rf):
        raise TypeError("Can't build a step from %r" % (rf,))
    return FunctionStep(rf, init, complete)


class Reduced(object):
    """Wraps an accumulator to signal that the reduction should stop now."""
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Reduced) and self.value == other.value

    def __hash__(self):
        return hash((Reduced, self.value))

    def __repr__(self):
        return "Reduced(%r)" % (self.value,)


reduced = Reduced

def is_reduced(x):
    return isinstance(x, Reduced)

def unreduced(x):
    if isinstance(x, Reduced):
        return x.value
    return x

def ensure_reduced(x):
    if isinstance(x, Reduced):
        return x
    return Reduced(x)


def _append(acc, val):
    acc.append(val)
    return acc


sum_of = FunctionStep(lambda acc, val: acc + val, init=lambda: 0)
"""Step which computes a sum. init is 0."""

array_of = FunctionStep(_append, init=list)
"""
Step which appends into a list in place, so nothing is reallocated on every
loop iteration. init is a fresh empty list.
"""

def joined_with(separator):
    """Step which joins the str of each value with separator. init is ''."""
    def joint(acc, val):
        if acc == '':
            return str(val)
        else:
            return "%s%s%s" % (acc, separator, val)
    joint.__name__ = "joined_with_" + repr(separator)
    return FunctionStep(joint, init=str)
