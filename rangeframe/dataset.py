# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The dataset accumulator: registered series and the running bounding box over all of their points.
'''

from dataclasses import dataclass
from math import isfinite
from typing import Any, Iterable, Iterator

from .exceptions import InvalidArgument, InvalidState


F2 = tuple[float,float]


@dataclass(frozen=True)
class Bounds:
  '''
  The tightest axis-aligned box containing a set of points.
  Invariant: `x_min <= x_max` and `y_min <= y_max`.
  '''
  x_min:float
  x_max:float
  y_min:float
  y_max:float

  @property
  def x_range(self) -> F2: return (self.x_min, self.x_max)

  @property
  def y_range(self) -> F2: return (self.y_min, self.y_max)

  def union(self, other:'Bounds') -> 'Bounds':
    return Bounds(
      x_min=min(self.x_min, other.x_min),
      x_max=max(self.x_max, other.x_max),
      y_min=min(self.y_min, other.y_min),
      y_max=max(self.y_max, other.y_max))


class Series:
  '''
  An immutable polyline of (x, y) points.
  The values are copied into tuples of float at construction, so later mutation of the caller's sequences has no effect.
  '''

  __slots__ = ('name', 'xs', 'ys', 'bounds')

  name:str
  xs:tuple[float,...]
  ys:tuple[float,...]
  bounds:Bounds

  def __init__(self, xs:Iterable[Any], ys:Iterable[Any], name:str='') -> None:
    xs_ = _float_tuple(xs, 'x')
    ys_ = _float_tuple(ys, 'y')
    if len(xs_) != len(ys_):
      raise InvalidArgument(f'series x and y lengths differ: {len(xs_)} != {len(ys_)}')
    if not xs_: raise InvalidArgument('series must have at least one point')
    self.name = name
    self.xs = xs_
    self.ys = ys_
    self.bounds = Bounds(x_min=min(xs_), x_max=max(xs_), y_min=min(ys_), y_max=max(ys_))

  @classmethod
  def from_points(cls, points:Iterable[Iterable[Any]], name:str='') -> 'Series':
    'Create a series from an iterable of (x, y) pairs.'
    xs = []
    ys = []
    for i, p in enumerate(points):
      try: x, y = p
      except (TypeError, ValueError) as e:
        raise InvalidArgument(f'point {i} is not an (x, y) pair: {p!r}') from e
      xs.append(x)
      ys.append(y)
    return cls(xs, ys, name=name)

  def __len__(self) -> int: return len(self.xs)

  def __iter__(self) -> Iterator[F2]: return zip(self.xs, self.ys)

  def __repr__(self) -> str:
    name = f' {self.name!r}' if self.name else ''
    return f'<{type(self).__name__}{name}: {len(self)} points>'


class Dataset:
  '''
  Accumulates series and the bounding box over all of their points.
  The box only ever widens; it is undefined until the first series is added, and reading it before then is an error.
  '''

  def __init__(self) -> None:
    self._series:list[Series] = []
    self._bounds:Bounds|None = None


  def __len__(self) -> int: return len(self._series)

  def __bool__(self) -> bool: return bool(self._series)


  @property
  def series(self) -> tuple[Series,...]:
    'The registered series in registration order.'
    return tuple(self._series)


  def add(self, series:Series) -> Series:
    'Register an existing series and widen the bounding box to include it.'
    self._series.append(series)
    self._bounds = series.bounds if self._bounds is None else self._bounds.union(series.bounds)
    return series


  def add_series(self, xs:Iterable[Any], ys:Iterable[Any], name:str='') -> Series:
    'Copy and register the series given by parallel `xs` and `ys` sequences.'
    return self.add(Series(xs, ys, name=name))


  def add_points(self, points:Iterable[Iterable[Any]], name:str='') -> Series:
    'Copy and register the series given as (x, y) pairs.'
    return self.add(Series.from_points(points, name=name))


  def bounds(self) -> Bounds:
    if self._bounds is None: raise InvalidState('bounds requested before any series was added')
    return self._bounds


def _float_tuple(vals:Iterable[Any], axis:str) -> tuple[float,...]:
  if isinstance(vals, (str, bytes)): raise InvalidArgument(f'series {axis} values must be numeric; received: {vals!r}')
  try: it = iter(vals)
  except TypeError as e: raise InvalidArgument(f'series {axis} values must be iterable; received: {vals!r}') from e
  res = []
  for i, v in enumerate(it):
    try: f = float(v)
    except (TypeError, ValueError) as e:
      raise InvalidArgument(f'series {axis}[{i}] is not numeric: {v!r}') from e
    if not isfinite(f): raise InvalidArgument(f'series {axis}[{i}] is not finite: {v!r}')
    res.append(f)
  return tuple(res)
