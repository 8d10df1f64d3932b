from foldfuse.step import ContractViolation, Continue, Stop, drive
from foldfuse.transducer import \
    LEFT,         \
    RIGHT,        \
    Reducer,      \
    Reducing,     \
    Transducer,   \
    arrayOf,      \
    as_reducer,   \
    dropping,     \
    filtering,    \
    insertOf,     \
    joinedWith,   \
    left,         \
    mapping,      \
    removing,     \
    right,        \
    sumOf,        \
    taking,       \
    taking_while
from foldfuse.source import Foldable, Dense, Stream, ConsList, Cons, Nil, NIL, cons_list, foldable
from foldfuse.transduce import compose, composeRight, fold_left, fold_right, into, reduceWith, transduce
from foldfuse.util import identity
