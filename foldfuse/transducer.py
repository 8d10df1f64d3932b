from typing import TypeVar, Callable, Generic
from func_prototypes import typed
from foldfuse.step import Continue, Stop, ensure_step, ensure_stop
from foldfuse.util import finvert

LEFT = 'left'
RIGHT = 'right'
ASSOCIATIVITIES = (LEFT, RIGHT)

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
B = TypeVar("B")

class Reducer(Generic[T, U]):
    """
    Knows how to append one U to an accumulator T.
    step(result, input) is always called accumulator first and returns a
    Continue or Stop token. assoc is fixed at construction and decides which
    fold driver may run the reducer.
    """
    assoc = LEFT

    def step(self, result: T, input: U):
        raise NotImplementedError()

class Reducing(Reducer[T, U]):
    """
    Base reducer built from a plain function.
    LEFT functions are (acc, val) -> acc, RIGHT functions are (val, acc) -> acc.
    """

    def __init__(self, fn, assoc=LEFT):
        if assoc not in ASSOCIATIVITIES:
            raise ValueError("Unknown associativity: %r" % (assoc,))
        self.fn = fn
        self.assoc = assoc

    def step(self, result: T, input: U):
        if self.assoc == LEFT:
            return Continue(self.fn(result, input))
        return Continue(self.fn(input, result))

    def __repr__(self):
        return "Reducing(%s, %s)" % (getattr(self.fn, '__name__', self.fn), self.assoc)

def left(fn):
    return Reducing(fn, LEFT)

def right(fn):
    return Reducing(fn, RIGHT)

def as_reducer(rf):
    """Plain callables are taken to be left reducers."""
    if isinstance(rf, Reducer):
        return rf
    if callable(rf):
        return Reducing(rf, LEFT)
    raise TypeError("Can't reduce with value of type %s" % type(rf))

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Optimized version of array accumulator which doesn't reallocate on every loop
iteration. Only the accumulator handed in is mutated.
"""

insertOf = lambda val, acc: acc.insert(0, val) or acc
insertOf.__doc__ = """Right associative array accumulator, inserts at the front."""

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Reducer which computes a sum"""

def joinedWith(seperator):
    """
    Joins values into a string with seperator between them.
    An empty string accumulator counts as "nothing joined yet", so an empty
    value at the front leaves no separator: ['', 'a'] joins to 'a'.
    """
    def joint(acc, val):
        if acc == '':
            return "%s" % (val,)
        else:
            return "%s%s%s" % (acc, seperator, val)
    return joint

class Transducer(Reducer[T, U]):
    """
    A reducer wrapping another reducer. The default step forwards to the
    wrapped reducer untouched, including any Stop it hands back.
    """

    def __init__(self, rf):
        self.rf = as_reducer(rf)
        self.assoc = self.rf.assoc

    def step(self, result: T, input: U):
        return self.rf.step(result, input)

class Mapping(Transducer[T, A], Generic[T, A, B]):

    def __init__(self, f: Callable[[A], B], rf: Reducer[T, B]):
        super().__init__(rf)
        self.f = f

    def step(self, result: T, input: A):
        return self.rf.step(result, self.f(input))

def mapping(f: Callable[[A], B]):
    def mapped(rf: Reducer[T, B]):
        return Mapping(f, rf)
    return mapped

class Filtering(Transducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, result, input):
        if self.pred(input):
            return self.rf.step(result, input)
        return Continue(result)

def filtering(pred: Callable[[U], bool]):
    def filtered(rf: Reducer[T, U]):
        return Filtering(pred, rf)
    return filtered

def removing(pred: Callable[[U], bool]):
    return filtering(finvert(pred))

def _check_count(n):
    if isinstance(n, bool):
        raise TypeError("Count must be an int, not bool: %r" % n)
    if n < 0:
        raise ValueError("Count must be non-negative: %d" % n)
    return n

class Taking(Transducer):
    """
    Delegates the first n inputs, then stops the fold. The Stop is raised on
    the step which delegates the n-th input so the driver never pulls n+1.
    """

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.seen = 0

    def step(self, result, input):
        if self.seen >= self.n:
            return Stop(result)
        self.seen += 1
        token = ensure_step(self.rf.step(result, input))
        if self.seen >= self.n:
            return ensure_stop(token)
        return token

@typed(int)
def taking(n):
    _check_count(n)
    # A fresh Taking, and so a fresh counter, per reducer it wraps.
    def taker(rf: Reducer[T, U]):
        return Taking(n, rf)
    return taker

class TakingWhile(Transducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, result, input):
        if self.pred(input):
            return self.rf.step(result, input)
        return Stop(result)

def taking_while(pred: Callable[[U], bool]):
    def taker(rf: Reducer[T, U]):
        return TakingWhile(pred, rf)
    return taker

class Dropping(Transducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.dropped = 0

    def step(self, result, input):
        if self.dropped < self.n:
            self.dropped += 1
            return Continue(result)
        return self.rf.step(result, input)

@typed(int)
def dropping(n):
    _check_count(n)
    def dropper(rf: Reducer[T, U]):
        return Dropping(n, rf)
    return dropper
