import functools
import timeit
from tabulate import tabulate
from xducer import transduce, reduce, compose, mapping, filtering, array_of, sum_of

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x

def plus(x, y):
    return x + y

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_comprehension(ns):
    return sum([n for n in ns if isEven(n)])

def sum_even_filter(ns):
    return sum(filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(filtering(isEven), sum_of, 0, ns)

def sum_even_transduce_plain(ns):
    return transduce(filtering(isEven), plus, 0, ns)

def sum_functools_reduce(ns):
    return functools.reduce(plus, ns, 0)

def sum_reduce(ns):
    return reduce(plus, 0, ns)

def sum_reduce_step(ns):
    return reduce(sum_of, 0, ns)

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_map(nums):
    return list(map(square, map(inc, nums)))

incs = mapping(inc)
squares = mapping(square)
inc_squares = compose(incs, squares)

def inc_square_transduce_compose(nums):
    return transduce(inc_squares, array_of, [], nums)

def inc_square_transduce_fused(nums):
    return transduce(mapping(lambda x: square(inc(x))), array_of, [], nums)

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = functools.partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))


hundredK = range(100000)

def test_sums():
    performance_compare(sum_functools_reduce,
                        sum_reduce,
                        sum_reduce_step,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_comprehension,
                        sum_even_filter,
                        sum_even_transduce,
                        sum_even_transduce_plain,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_map,
                        inc_square_transduce_compose,
                        inc_square_transduce_fused,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})


if __name__ == '__main__':
    test_sums()
    test_sum_even()
    test_inc_square()
