# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Axis layout for range-frame charts.

For each axis independently:
* choose a nice tick step from the data extent and the requested tick count;
* round the extent outward to multiples of the step to obtain the axis range;
* enumerate the multiples of the step that lie inside the data extent (not the axis range) as ticks.

The axis range is the denominator of the single transform from data space to normalized [0,1] drawing space.
Series points, ticks, and the range-frame lines are all projected through `ChartLayout.project`,
so the three can never disagree.
'''

from dataclasses import dataclass
from math import inf, isfinite
from typing import Any, Sequence

from .dataset import Bounds
from .exceptions import InvalidArgument
from .num import canonical, magnitude, nice_num, resolution_step
from .range import StepRange


F2 = tuple[float,float]


@dataclass(frozen=True)
class AxisLayout:
  '''
  The layout of one axis.
  `data_min`, `data_max`: the data extent along the axis.
  `step`: the tick step.
  `axis_min`, `axis_max`: the outward-rounded axis range; both are multiples of `step` and enclose the data extent.
  `ticks`: ascending multiples of `step` within the data extent.
  `degenerate`: true when the data extent has zero width and the step was derived from the magnitude of the value.
  '''
  data_min:float
  data_max:float
  step:float
  axis_min:float
  axis_max:float
  ticks:tuple[float,...]
  degenerate:bool = False


  @property
  def axis_range(self) -> F2: return (self.axis_min, self.axis_max)

  @property
  def data_range(self) -> F2: return (self.data_min, self.data_max)


  def transform(self, v:float) -> float:
    'Map a data value to its normalized position within the axis range.'
    lo = self.axis_min
    hi = self.axis_max
    span = hi - lo
    if span == inf: return (v * 0.5 - lo * 0.5) / (hi * 0.5 - lo * 0.5) # Halving is exact for normal floats.
    return (v - lo) / span


  @property
  def frame(self) -> F2:
    'The normalized endpoints of the range-frame line: the data extent positioned within the axis range.'
    return (self.transform(self.data_min), self.transform(self.data_max))



@dataclass(frozen=True)
class ChartLayout:
  '''
  The layout of both axes of a chart, computed once per draw.
  Normalized drawing space has its origin at the top left, so the y mapping is flipped.
  '''
  x:AxisLayout
  y:AxisLayout


  def project(self, point:Sequence[float]) -> F2:
    'Map a data point to normalized drawing space: (0, 0) is the top left corner of the axis box.'
    return (self.x.transform(point[0]), 1.0 - self.y.transform(point[1]))


  def project_x(self, x:float) -> float: return self.x.transform(x)

  def project_y(self, y:float) -> float: return 1.0 - self.y.transform(y)


  @property
  def x_frame(self) -> tuple[F2,F2]:
    'Normalized endpoints of the x range-frame line, which lies along the bottom edge.'
    u0, u1 = self.x.frame
    return ((u0, 1.0), (u1, 1.0))


  @property
  def y_frame(self) -> tuple[F2,F2]:
    'Normalized endpoints of the y range-frame line, which lies along the left edge.'
    return ((0.0, self.project_y(self.y.data_min)), (0.0, self.project_y(self.y.data_max)))


  @property
  def x_ticks_projected(self) -> tuple[float,...]:
    return tuple(self.project_x(t) for t in self.x.ticks)


  @property
  def y_ticks_projected(self) -> tuple[float,...]:
    return tuple(self.project_y(t) for t in self.y.ticks)


  def as_dict(self) -> dict[str,Any]:
    'The layout as plain data for consumers outside of Python.'
    return {
      'xAxis': list(self.x.axis_range),
      'yAxis': list(self.y.axis_range),
      'xTicks': list(self.x.ticks),
      'yTicks': list(self.y.ticks),
    }


def check_tick_count(tick_count:Any) -> int:
  if isinstance(tick_count, bool) or not isinstance(tick_count, int):
    raise InvalidArgument(f'tick count must be an integer; received: {tick_count!r}')
  if tick_count < 2: raise InvalidArgument(f'tick count must be at least 2; received: {tick_count}')
  return tick_count


def layout_axis(lo:float, hi:float, tick_count:int) -> AxisLayout:
  '''
  Lay out one axis for the data extent `[lo, hi]`.

  The target step is the extent divided into `tick_count - 1` intervals, rounded to a nice number.
  A zero-width extent has no target step; the step is instead the power of ten at the magnitude of the value (1 for zero),
  and if the value is itself a multiple of that step the axis range is widened by one step on each side.
  The value then projects to the middle of the axis, and it receives a single tick if it is a multiple of the step.
  The step never drops below the spacing of floats at the magnitude of the extent,
  so subnormal values and extents near the float limits still yield distinct multiples.
  '''
  check_tick_count(tick_count)
  if not (isfinite(lo) and isfinite(hi)): raise InvalidArgument(f'axis extent must be finite: [{lo!r}, {hi!r}]')
  if lo > hi: raise InvalidArgument(f'axis extent is inverted: [{lo!r}, {hi!r}]')

  degenerate = (lo == hi)
  if degenerate:
    step = magnitude(abs(lo)) if lo else 1.0
  else:
    n = tick_count - 1
    width = hi - lo
    raw = width / n if isfinite(width) else hi / n - lo / n # The width of an extent near the float limits can overflow.
    step = nice_num(raw) if raw > 0 else 0.0
  step = max(step, resolution_step(max(abs(lo), abs(hi))))

  cover = StepRange.covering(step, lo, hi)
  i_start = cover.i_start
  i_stop = cover.i_stop
  if i_start == i_stop: # Only possible for a degenerate extent that lands on a multiple.
    i_start -= 1
    i_stop += 1
  axis_min = canonical(i_start * step, step)
  axis_max = canonical(i_stop * step, step)
  if not (isfinite(axis_min) and isfinite(axis_max)):
    raise InvalidArgument(f'axis range for extent [{lo!r}, {hi!r}] exceeds the float range; step: {step!r}')
  ticks = tuple(StepRange.within(step, lo, hi))

  return AxisLayout(data_min=lo, data_max=hi, step=step, axis_min=axis_min, axis_max=axis_max, ticks=ticks,
    degenerate=degenerate)


def layout_chart(bounds:Bounds, tick_count:int) -> ChartLayout:
  'Lay out both axes of a chart. The axes are independent and do not share a step.'
  return ChartLayout(
    x=layout_axis(bounds.x_min, bounds.x_max, tick_count),
    y=layout_axis(bounds.y_min, bounds.y_max, tick_count))
