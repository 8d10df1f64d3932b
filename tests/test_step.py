import pytest
from foldfuse.step import Continue, Stop, ContractViolation, drive, ensure_step, ensure_stop, unwrap
from foldfuse.transducer import left, arrayOf
from .conftest import recording

def test_tokens():
    assert Continue(1) == Continue(1)
    assert Continue(1) != Stop(1)
    assert Stop([1]) == Stop([1])
    assert Continue(1).stopped is False
    assert Stop(1).stopped is True
    assert repr(Stop(3)) == "Stop(3)"
    assert len(set([Continue(1), Continue(1), Stop(1)])) == 2

def test_ensure_step():
    token = Continue(5)
    assert ensure_step(token) is token
    with pytest.raises(ContractViolation):
        ensure_step(5)
    with pytest.raises(ContractViolation):
        ensure_step(None)

def test_ensure_stop():
    stop = Stop(1)
    assert ensure_stop(stop) is stop
    assert ensure_stop(Continue(2)) == Stop(2)
    with pytest.raises(ContractViolation):
        ensure_stop([2])

def test_unwrap():
    assert unwrap(Continue('a')) == 'a'
    assert unwrap(Stop('b')) == 'b'

def test_drive_runs_to_exhaustion():
    assert drive(left(arrayOf), [], [1, 2, 3]) == [1, 2, 3]

def test_drive_empty_returns_seed():
    seed = object()
    assert drive(left(arrayOf), seed, []) is seed

class StopAt(object):
    def __init__(self, limit):
        self.limit = limit

    def step(self, result, input):
        if input >= self.limit:
            return Stop(result)
        return Continue(result + [input])

def test_drive_stops_without_pulling_more(visits):
    assert drive(StopAt(3), [], recording([1, 2, 3, 4, 5], visits)) == [1, 2]
    assert visits == [1, 2, 3]

class Silent(object):
    def step(self, result, input):
        pass

def test_drive_rejects_reducer_without_token():
    with pytest.raises(ContractViolation):
        drive(Silent(), [], [1])
