import logging
from xducer.step import Step, Reduced, step_from
from xducer.errors import UnsupportedArityError, EmptyReductionError

log = logging.getLogger(__name__)

_missing = object()

def _step_fn(step):
    if isinstance(step, Step):
        return step.step
    if callable(step):
        return step
    raise TypeError("Can't reduce with %r, it is not a step" % (step,))

def _init(step):
    if not isinstance(step, Step):
        raise EmptyReductionError("Empty sequence, no seed, and %r has no init" % (step,))
    try:
        return step.init()
    except UnsupportedArityError as e:
        raise EmptyReductionError("Empty sequence, no seed, and %r has no init" % (step,)) from e

def _fold(rf, accumulation, values):
    for value in values:
        accumulation = rf(accumulation, value)
        if isinstance(accumulation, Reduced):
            log.debug("reduction terminated early")
            return accumulation.value
    return accumulation

def reduce(step, *args):
    """
    reduce(step, coll) or reduce(step, seed, coll).
    Think foldl from Haskell.
    step is a Step, or a plain (b -> a -> b).
    Without a seed the first value of coll seeds the fold. If coll is empty,
    step.init() provides the result instead.
    A Reduced accumulator stops the fold and is unwrapped.
    complete is never called; that is transduce's job.
    """
    if len(args) == 1:
        (coll,) = args
        values = iter(coll)
        accumulation = next(values, _missing)
        if accumulation is _missing:
            return _init(step)
    elif len(args) == 2:
        accumulation, coll = args
        values = iter(coll)
    else:
        raise TypeError("reduce takes a step, an optional seed and a sequence (%d args given)" % (len(args) + 1))
    return _fold(_step_fn(step), accumulation, values)

def transduce(xform, step, init, coll):
    """
    xform is a transducer (Step -> Step)
    step is a Step or a plain (b -> a -> b)
    init is b
    coll is [a]
    Folds coll through xform(step) starting at init, then calls complete
    exactly once on the final accumulator. If the fold raises, complete is
    not called.
    """
    transformed = xform(step_from(step))
    log.debug("transducing with %r", transformed)
    accumulation = reduce(transformed, init, coll)
    return transformed.complete(accumulation)
