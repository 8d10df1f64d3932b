import timeit
from tabulate import tabulate
from tqdm import tqdm
from foldfuse.transducer import mapping, filtering, arrayOf, sumOf
from foldfuse.transduce import transduce, compose, into
from foldfuse.source import ConsList
from foldfuse.util import partial

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x


incs = mapping(inc)
squares = mapping(square)
evens = filtering(isEven)

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_staged(nums):
    incremented = transduce(incs, arrayOf, [], nums)
    return transduce(squares, arrayOf, [], incremented)

def inc_square_transduce_compose(nums):
    return transduce(compose(incs, squares), arrayOf, [], nums)

def sum_even_loop(nums):
    total = 0
    for n in nums:
        if isEven(n):
            total += n
    return total

def sum_even_transduce(nums):
    return transduce(evens, sumOf, 0, nums)

def inc_square_cons(nums):
    return into(ConsList, compose(incs, squares), nums)


CASES = [
    inc_square_comprehension,
    inc_square_loop,
    inc_square_staged,
    inc_square_transduce_compose,
    sum_even_loop,
    sum_even_transduce,
    inc_square_cons,
]

def performance_compare(*cases, case_args=[], timeit_kwargs={}, quiet=False):
    """
    Times each case called with case_args. Returns rows of
    (name, time, scale) where scale is relative to the fastest case.
    """
    results = {}
    if not cases:
        return []
    for case in tqdm(cases, desc="Timing", disable=quiet, leave=False):
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    return [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]

def perf_table(rows):
    return tabulate(rows, headers=['case', 'time', 'scale'])