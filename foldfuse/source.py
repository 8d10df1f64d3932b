from collections.abc import Sequence, Iterable
from itertools import zip_longest
from foldfuse.step import ContractViolation, Continue, drive, ensure_step
from foldfuse.transducer import LEFT, RIGHT, as_reducer, left, right, arrayOf, insertOf
from foldfuse.util import count, flip

# Deepest cons list fold_right_recursive will walk before giving up.
# fold_right has no such limit.
RECURSION_LIMIT = 500

def _checked(reducer, assoc):
    reducer = as_reducer(reducer)
    if reducer.assoc != assoc:
        raise ContractViolation("Can't run a %s associative reducer in a %s fold" % (reducer.assoc, assoc))
    return reducer

class Foldable(object):
    """
    Anything the engine can fold. Subclasses provide iter_left (front to back)
    and, when they can, iter_right (back to front).
    """

    def iter_left(self):
        raise NotImplementedError()

    def iter_right(self):
        raise NotImplementedError("%s can't be folded from the right" % type(self).__name__)

    def fold_left(self, reducer, seed):
        reducer = _checked(reducer, LEFT)
        return drive(reducer, seed, self.iter_left())

    def fold_right(self, reducer, seed):
        reducer = _checked(reducer, RIGHT)
        return drive(reducer, seed, self.iter_right())

    @classmethod
    def appender(cls, assoc=LEFT):
        raise NotImplementedError("%s has no append operation" % cls.__name__)

    @classmethod
    def empty(cls):
        raise NotImplementedError("%s has no empty value" % cls.__name__)

    def __iter__(self):
        return self.iter_left()

class Dense(Foldable):
    """An indexable sequence, list by default."""

    def __init__(self, seq=None):
        if seq is None:
            seq = []
        assert isinstance(seq, Sequence), "Dense needs a sequence, got %s" % type(seq)
        self.seq = seq

    def iter_left(self):
        return iter(self.seq)

    def iter_right(self):
        return reversed(self.seq)

    @classmethod
    def appender(cls, assoc=LEFT):
        if assoc == LEFT:
            return left(arrayOf)
        elif assoc == RIGHT:
            return right(insertOf)
        raise ValueError("Unknown associativity: %r" % (assoc,))

    @classmethod
    def empty(cls):
        return []

    def __len__(self):
        return len(self.seq)

    def __eq__(self, other):
        if isinstance(other, Dense):
            other = other.seq
        if not isinstance(other, Sequence):
            return NotImplemented
        return list(self.seq) == list(other)

    def __repr__(self):
        return "Dense(%r)" % (self.seq,)

class Stream(Foldable):
    """
    Any iterable, generators included. Only folds from the left, and only
    once when the iterable is single shot.
    """

    def __init__(self, iterable):
        self.iterable = iterable

    def iter_left(self):
        return iter(self.iterable)

    def __repr__(self):
        return "Stream(%r)" % (self.iterable,)

class ConsList(Foldable):
    """
    Singly linked list: either Nil or Cons(head, tail).
    Every walk is a loop over the tail chain, so length is bounded by memory,
    not by the interpreter stack.
    """
    __slots__ = ()

    def iter_left(self):
        node = self
        while True:
            if isinstance(node, Cons):
                yield node.head
                node = node.tail
            elif isinstance(node, Nil):
                return
            else:
                raise TypeError("Not a cons list: %r" % (node,))

    def iter_right(self):
        worklist = list(self.iter_left())
        while worklist:
            yield worklist.pop()

    def fold_right_recursive(self, reducer, seed, limit=None):
        """
        Right fold by structural recursion. Raises ValueError instead of
        recursing past limit (RECURSION_LIMIT by default) nodes.
        """
        reducer = _checked(reducer, RIGHT)
        if limit is None:
            limit = RECURSION_LIMIT
        def fold(node, depth):
            if isinstance(node, Nil):
                return Continue(seed)
            elif isinstance(node, Cons):
                if depth >= limit:
                    raise ValueError("Cons list is deeper than the recursion limit %d, use fold_right" % limit)
                token = fold(node.tail, depth + 1)
                if token.stopped:
                    return token
                return ensure_step(reducer.step(token.value, node.head))
            else:
                raise TypeError("Not a cons list: %r" % (node,))
        return fold(self, 0).value

    @classmethod
    def appender(cls, assoc=LEFT):
        if assoc == LEFT:
            return left(flip(Cons))
        elif assoc == RIGHT:
            return right(Cons)
        raise ValueError("Unknown associativity: %r" % (assoc,))

    @classmethod
    def empty(cls):
        return NIL

    def __len__(self):
        return count(self.iter_left())

    def __eq__(self, other):
        if not isinstance(other, ConsList):
            return NotImplemented
        missing = object()
        for a, b in zip_longest(self.iter_left(), other.iter_left(), fillvalue=missing):
            if a is missing or b is missing or a != b:
                return False
        return True

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __repr__(self):
        return "cons_list(%r)" % (list(self.iter_left()),)

class Nil(ConsList):
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return "NIL"

class Cons(ConsList):
    __slots__ = ('head', 'tail')

    def __init__(self, head, tail):
        assert isinstance(tail, ConsList), "Cons tail must be a cons list, got %s" % type(tail)
        self.head = head
        self.tail = tail

    def __bool__(self):
        return True


NIL = Nil()

def cons_list(values):
    """Builds a cons list holding values in their original order."""
    return Dense(list(values)).fold_right(ConsList.appender(RIGHT), NIL)

def foldable(source):
    if isinstance(source, Foldable):
        return source
    elif isinstance(source, Sequence):
        return Dense(source)
    elif isinstance(source, Iterable):
        return Stream(source)
    else:
        raise TypeError("Can't fold data of type %s" % type(source))
