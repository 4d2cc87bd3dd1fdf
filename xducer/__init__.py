from xducer.errors import XducerError, UnsupportedArityError, EmptyReductionError
from xducer.step import \
    Step,           \
    FunctionStep,   \
    Reduced,        \
    array_of,       \
    ensure_reduced, \
    is_reduced,     \
    joined_with,    \
    reduced,        \
    step_from,      \
    sum_of,         \
    unreduced
from xducer.transducers import Transducer, Mapping, Filtering, mapping, filtering, identity
from xducer.compose import compose
from xducer.reduce import reduce, transduce
