# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import inf, nan

from pytest import mark, raises

from rangeframe.dataset import Bounds, Dataset, Series
from rangeframe.exceptions import InvalidArgument, InvalidState


xs0 = [1, 2, 3, 4, 5, 6, 7, 8]
ys0 = [.1, .2, .7, .4, .8, .6, 0, .2]
xs1 = [10, 11, 13, 14, 15, 16, 17, 18]
ys1 = [.7, .3, .1, .7, .9, .3, .9, .4]


def test_bounds() -> None:
  ds = Dataset()
  ds.add_series(xs0, ys0)
  assert ds.bounds() == Bounds(1, 8, 0, 0.8)
  ds.add_series(xs1, ys1)
  b = ds.bounds()
  assert b.x_range == (1, 18)
  assert b.y_range == (0, 0.9)


def test_bounds_contain_every_point() -> None:
  ds = Dataset()
  ds.add_series(xs0, ys0)
  ds.add_series(xs1, ys1)
  b = ds.bounds()
  for s in ds.series:
    for x, y in s:
      assert b.x_min <= x <= b.x_max
      assert b.y_min <= y <= b.y_max


def test_bounds_never_shrink() -> None:
  ds = Dataset()
  ds.add_series([-5, 5], [-1, 1])
  ds.add_series([0], [0])
  assert ds.bounds() == Bounds(-5, 5, -1, 1)


def test_bounds_before_add() -> None:
  ds = Dataset()
  assert not ds
  with raises(InvalidState):
    ds.bounds()
  with raises(RuntimeError):
    ds.bounds()


def test_series_are_copied() -> None:
  xs = [1, 2, 3]
  ys = [4, 5, 6]
  ds = Dataset()
  s = ds.add_series(xs, ys, name='s')
  xs[0] = 100
  ys.append(7)
  assert s.xs == (1.0, 2.0, 3.0)
  assert s.ys == (4.0, 5.0, 6.0)
  assert ds.bounds() == Bounds(1, 3, 4, 6)


def test_series_accepts_iterables() -> None:
  s = Series(range(3), (v * 2 for v in range(3)))
  assert list(s) == [(0.0, 0.0), (1.0, 2.0), (2.0, 4.0)]
  assert len(s) == 3


def test_add_points() -> None:
  ds = Dataset()
  s = ds.add_points([(1, 2), (3, 4)], name='p')
  assert s.name == 'p'
  assert s.xs == (1, 3)
  assert s.ys == (2, 4)
  assert len(ds) == 1
  assert ds.series == (s,)


def test_add_points_bad_pair() -> None:
  with raises(InvalidArgument):
    Dataset().add_points([(1, 2), (3,)])
  with raises(InvalidArgument):
    Dataset().add_points([1, 2])


@mark.parametrize('xs, ys', [
  ([1, 2], [1]),
  ([], []),
  ([1, 'a'], [1, 2]),
  ([1, None], [1, 2]),
  ([1, 2], [nan, 2]),
  ([inf], [1]),
  ('12', '34'),
  (1, 2),
])
def test_add_series_invalid(xs:object, ys:object) -> None:
  ds = Dataset()
  with raises(InvalidArgument):
    ds.add_series(xs, ys) # type: ignore[arg-type]
  assert not ds # A rejected series leaves the dataset unchanged.


def test_union() -> None:
  a = Bounds(0, 1, 0, 1)
  b = Bounds(-1, 0.5, 0.5, 2)
  assert a.union(b) == Bounds(-1, 1, 0, 2)
  assert a.union(b) == b.union(a)


def test_series_repr() -> None:
  assert repr(Series([1], [2], name='a')) == "<Series 'a': 1 points>"
