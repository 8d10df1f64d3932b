# Worked out from https://raganwald.com/2017/04/30/transducers.html
# JS -> Python conversion, with associativity and early termination.
from foldfuse.transducer import LEFT, RIGHT, as_reducer, right
from foldfuse.source import foldable
from foldfuse.util import identity

def fold_left(reducer, seed, source):
    """
    Think foldl from Haskell.
    reducer is a left Reducer, or a plain (b -> a -> b)
    seed is b
    source is [a] or any Foldable
    """
    return foldable(source).fold_left(reducer, seed)

def fold_right(reducer, seed, source):
    """
    Think foldr from Haskell. The last element is reduced first.
    reducer is a right Reducer, (a -> b -> b)
    """
    return foldable(source).fold_right(reducer, seed)

def reduceWith(reducer, seed, source):
    """
    reduceWith takes reducer as first argument, computes a reduction over source.
    The reducer's associativity picks the fold direction.
    """
    reducer = as_reducer(reducer)
    if reducer.assoc == LEFT:
        return fold_left(reducer, seed, source)
    return fold_right(reducer, seed, source)

"""
How can we perform an arbitrary series of compositions?
Yes, with a reduction!
compose(f, g)(rf) == f(g(rf)), so values reach f before g.
"""
compositionOf = lambda acc, val: lambda rf: acc(val(rf))
compose = lambda *xforms: reduceWith(compositionOf, identity, xforms)

"""
The same composition, associated the other way round. Composition is
associative, so composeRight(*xforms) behaves exactly like compose(*xforms).
"""
compositionOfRight = lambda val, acc: lambda rf: val(acc(rf))
composeRight = lambda *xforms: reduceWith(right(compositionOfRight), identity, xforms)

def transduce(transformer, reducer, seed, source):
    """
    transformer is Reducer -> Reducer
    reducer is a Reducer or a plain left reducer (b -> a -> b)
    seed is b
    source is [a] or any Foldable
    The transformed reducer's associativity picks the fold direction.
    """
    transformedReducer = as_reducer(transformer(as_reducer(reducer)))
    return reduceWith(transformedReducer, seed, source)

def into(kind, transformer, source, assoc=LEFT):
    """
    Transduces source into a fresh accumulator of kind (a Foldable class or
    instance), appending with kind's own appender.
    """
    if assoc not in (LEFT, RIGHT):
        raise ValueError("Unknown associativity: %r" % (assoc,))
    return transduce(transformer, kind.appender(assoc), kind.empty(), source)
