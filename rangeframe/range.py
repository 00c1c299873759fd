# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Hashable
from math import ceil, floor
from typing import Iterator, Sequence

from .num import canonical, snap


_setattr = object.__setattr__


class StepRange(Sequence[float], Hashable):
  '''
  A closed range of the multiples of `step`: `i * step` for each integer `i` in `[i_start, i_stop]`.
  Elements are computed from the integer index rather than by repeated addition,
  so no error accumulates across the range; each element is rounded to the precision of the step.
  '''

  step:float
  i_start:int
  i_stop:int

  def __init__(self, step:float, i_start:int, i_stop:int) -> None:
    if step <= 0: raise ValueError(f'StepRange step must be positive: {step!r}')
    _setattr(self, 'step', step)
    _setattr(self, 'i_start', i_start)
    _setattr(self, 'i_stop', i_stop)

  @classmethod
  def within(cls, step:float, lo:float, hi:float) -> 'StepRange':
    'The multiples of `step` that lie in the closed interval `[lo, hi]`. The range is empty if there are none.'
    i_start = ceil(snap(lo / step))
    i_stop = floor(snap(hi / step))
    # Snapping can admit a multiple whose canonical value falls just outside the interval.
    while canonical(i_start * step, step) < lo: i_start += 1
    while canonical(i_stop * step, step) > hi: i_stop -= 1
    return cls(step, i_start, i_stop)

  @classmethod
  def covering(cls, step:float, lo:float, hi:float) -> 'StepRange':
    'The smallest range of multiples of `step` whose first and last elements enclose `[lo, hi]`.'
    i_start = floor(snap(lo / step))
    i_stop = ceil(snap(hi / step))
    while canonical(i_start * step, step) > lo: i_start -= 1
    while canonical(i_stop * step, step) < hi: i_stop += 1
    return cls(step, i_start, i_stop)

  @property
  def start(self) -> float: return canonical(self.i_start * self.step, self.step)

  @property
  def stop(self) -> float: return canonical(self.i_stop * self.step, self.step)

  def __len__(self) -> int:
    return max(0, self.i_stop - self.i_start + 1)

  def __getitem__(self, i:int|slice) -> float: # type: ignore[override]
    if isinstance(i, int):
      n = len(self)
      if i < 0: i += n
      if not 0 <= i < n: raise IndexError(i)
      return canonical((self.i_start + i) * self.step, self.step)
    elif isinstance(i, slice):
      raise NotImplementedError('StepRange does not support slicing')
    raise TypeError(f'StepRange indices must be integers; received: {i!r}')

  def __iter__(self) -> Iterator[float]:
    step = self.step
    return (canonical(i * step, step) for i in range(self.i_start, self.i_stop + 1))

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.step}, {self.i_start}, {self.i_stop})'

  def __setattr__(self, name:str, val:object) -> None:
    raise AttributeError('StepRange attributes are readonly')

  def __hash__(self) -> int:
    return hash(self.step)^hash(self.i_start)^hash(self.i_stop)

  def __eq__(self, other:object) -> bool:
    return type(self) == type(other) and vars(self) == vars(other)
