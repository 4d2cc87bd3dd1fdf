"""
Transducer composition.

compose(a, b, c)(rf) == a(b(c(rf))). The leftmost transducer ends up as the
outermost wrapper, so it is the first to see each input.
"""
from xducer.transducers import identity


def _comp_0():
    return identity


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(rf):
        return a(b(rf))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(rf):
        return a(b(c(rf)))

    return _combined3


def _comp_4(a, b, c, d):
    def _combined4(rf):
        return a(b(c(d(rf))))

    return _combined4


def _comp_5(a, b, c, d, e):
    def _combined5(rf):
        return a(b(c(d(e(rf)))))

    return _combined5


def _comp_6(a, b, c, d, e, f):
    def _combined6(rf):
        return a(b(c(d(e(f(rf))))))

    return _combined6


def _comp_7(a, b, c, d, e, f, g):
    def _combined7(rf):
        return a(b(c(d(e(f(g(rf)))))))

    return _combined7


def _comp_8(a, b, c, d, e, f, g, h):
    def _combined8(rf):
        return a(b(c(d(e(f(g(h(rf))))))))

    return _combined8


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
    _comp_5,
    _comp_6,
    _comp_7,
    _comp_8,
]


def _comp_n(xforms):
    def _combinedN(rf):
        for xform in reversed(xforms):
            rf = xform(rf)
        return rf

    return _combinedN


def compose(*xforms):
    n = len(xforms)
    if n < len(_comp_fns):
        return _comp_fns[n](*xforms)
    return _comp_n(xforms)
