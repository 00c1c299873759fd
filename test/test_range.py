# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from pytest import raises

from rangeframe.range import StepRange


def test_within() -> None:
  r = StepRange.within(2, 1, 8)
  assert (r.i_start, r.i_stop) == (1, 4)
  assert list(r) == [2.0, 4.0, 6.0, 8.0]
  assert len(r) == 4


def test_within_keeps_boundary_multiple() -> None:
  # 0.3 / 0.1 is 2.9999999999999996 in floating point.
  assert list(StepRange.within(0.1, 0.0, 0.3)) == [0.0, 0.1, 0.2, 0.3]


def test_within_empty() -> None:
  r = StepRange.within(1, 5.2, 5.8)
  assert len(r) == 0
  assert list(r) == []
  assert not r


def test_covering() -> None:
  r = StepRange.covering(2, 1, 8)
  assert (r.start, r.stop) == (0.0, 8.0)
  assert len(r) == 5
  r = StepRange.covering(2, -7, -1)
  assert (r.start, r.stop) == (-8.0, 0.0)


def test_elements_are_canonical() -> None:
  r = StepRange(0.2, 0, 4)
  assert list(r) == [0.0, 0.2, 0.4, 0.6, 0.8]
  assert r[3] == 0.6
  assert r[-1] == 0.8


def test_index_errors() -> None:
  r = StepRange(1, 0, 2)
  with raises(IndexError):
    r[3]
  with raises(IndexError):
    r[-4]
  with raises(NotImplementedError):
    r[0:1]


def test_readonly() -> None:
  r = StepRange(1, 0, 2)
  with raises(AttributeError):
    r.step = 2 # type: ignore[misc]


def test_eq_hash() -> None:
  assert StepRange(2, 0, 4) == StepRange(2, 0, 4)
  assert StepRange(2, 0, 4) != StepRange(2, 0, 5)
  assert hash(StepRange(2, 0, 4)) == hash(StepRange(2, 0, 4))
  assert 4.0 in StepRange(2, 0, 4)


def test_bad_step() -> None:
  with raises(ValueError):
    StepRange(0, 0, 1)
