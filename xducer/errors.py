class XducerError(Exception):
    """Base class for all exceptions raised by xducer."""
    pass


class UnsupportedArityError(XducerError):
    """
    A reduction step was invoked through a call shape (init, step, complete)
    which it does not implement.
    """
    def __init__(self, step, arity):
        self.step = step
        self.arity = arity
        super().__init__("%s does not support the %s arity" % (step, arity))


class EmptyReductionError(XducerError):
    """reduce was asked to fold an empty sequence with no seed and no init."""
    pass
