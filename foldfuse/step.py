class ContractViolation(RuntimeError):
    """
    Raised when a reducer, transducer or driver breaks the fold protocol.
    These are programming errors, never something to retry.
    """
    pass

class Step(object):
    """
    Result of one reducer step. Subclasses tell the driver whether to keep
    going (Continue) or to stop the whole fold (Stop).
    """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.value)

class Continue(Step):
    __slots__ = ()
    stopped = False

class Stop(Step):
    __slots__ = ()
    stopped = True

def ensure_step(token):
    """Fail fast when a reducer hands back something that isn't a step token."""
    if isinstance(token, Step):
        return token
    raise ContractViolation("Reducer must return Continue or Stop, got %r" % (token,))

def ensure_stop(token):
    """Turns a Continue into a Stop carrying the same accumulator."""
    token = ensure_step(token)
    if token.stopped:
        return token
    return Stop(token.value)

def unwrap(token):
    return ensure_step(token).value

def drive(reducer, seed, inputs):
    """
    Runs reducer over inputs in the order given, starting from seed.
    A Continue carries the accumulator into the next step, a Stop ends the
    fold on the spot and no further input is pulled. Running out of inputs
    returns the last accumulator, so empty inputs return seed.
    """
    result = seed
    for input in inputs:
        token = ensure_step(reducer.step(result, input))
        if token.stopped:
            return token.value
        result = token.value
    return result
