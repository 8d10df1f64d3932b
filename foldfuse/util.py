from functools import partial as functools_partial

def partial(fn, *args, **kwargs):
    out = functools_partial(fn, *args, **kwargs)
    out.__name__ = "partial_" + fn.__name__
    return out

def identity(x):
    return x

def invert(v):
    return not v

def finvert(f):
    def inverted(*args, **kwargs):
        return invert(f(*args, **kwargs))
    return inverted

def count(iterator):
    c = 0
    for _ in iterator:
        c += 1
    return c

def pipeline(*funcs):
    if funcs:
        foo = funcs[0]
        rest = funcs[1:]
        if rest:
            next_hop = pipeline(*rest)
            def pipe(*args, **kwargs):
                return next_hop(foo(*args, **kwargs))
            return pipe
        else:  # no rest, foo is final function.
            return foo
    else:  # no funcs at all.
        return identity

def flip(func):
    """Swaps the two arguments of a binary function."""
    def flipped(a, b):
        return func(b, a)
    flipped.__name__ = "flipped_" + getattr(func, '__name__', 'fn')
    return flipped
