# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
rangeframe renders numeric polylines as SVG charts with Tufte-style range-frame axes.

The axis lines span only the extent of the data; ticks are placed at "nice" multiples of a step chosen from
{1, 2, 5, 10} x 10^k, and the axis range is that extent rounded outward to the step.
'''

from .dataset import Bounds, Dataset, Series
from .exceptions import InvalidArgument, InvalidState
from .layout import AxisLayout, ChartLayout, layout_axis, layout_chart
from .num import fmt_tick, nice_num
from .plot import Plot, PlotStyle, render_plot


__all__ = [
  'AxisLayout',
  'Bounds',
  'ChartLayout',
  'Dataset',
  'InvalidArgument',
  'InvalidState',
  'Plot',
  'PlotStyle',
  'Series',
  'fmt_tick',
  'layout_axis',
  'layout_chart',
  'nice_num',
  'render_plot',
]
