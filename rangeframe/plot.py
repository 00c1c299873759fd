# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Range-frame plots.

`Plot` is a builder: it accumulates series and cosmetic configuration, and each registration or configuration method
returns the builder so that calls can be chained. Rendering never mutates the builder;
`render_plot` is a pure function of the series, the layout, and the style.

Drawing space: the layout maps data to the normalized unit square, with (0, 0) at the top left.
The renderer maps the unit square onto the area of the SVG canvas that remains after reserving margins for tick labels.
'''

from dataclasses import dataclass, replace
from math import hypot
from typing import Any, Callable, Iterable, Iterator, Self, Sequence

from .dataset import Bounds, Dataset, Series
from .exceptions import InvalidArgument, InvalidState
from .layout import check_tick_count, ChartLayout, layout_chart
from .num import fmt_num, fmt_tick
from .svg import PathCommand, Svg


F2 = tuple[float,float]
TickFmt = Callable[[float,float],str] # (value, step) -> label.


@dataclass(frozen=True)
class PlotStyle:
  '''
  Cosmetic configuration of a plot. All lengths are in SVG user units.
  `char_w` is the assumed width of one label character as a fraction of the font size;
  it is a crude stand-in for text metrics, used only to reserve margin space for the y labels.
  `subsample` is the minimum distance between consecutive drawn points of a series; zero draws every point.
  '''
  width:float = 800
  height:float = 600
  font_size:float = 20
  stroke_width:float = 1
  tick_count:int = 4
  tick_len:float = 8
  label_pad:float = 4
  char_w:float = 0.6
  subsample:float = 0
  xml_decl:bool = False
  tick_fmt:TickFmt|None = None


  def __post_init__(self) -> None:
    self.validate()


  def validate(self) -> Self:
    for name in ('width', 'height', 'font_size', 'stroke_width', 'char_w'):
      val = getattr(self, name)
      if not isinstance(val, (int, float)) or not val > 0:
        raise InvalidArgument(f'plot style {name} must be a positive number; received: {val!r}')
    for name in ('tick_len', 'label_pad', 'subsample'):
      val = getattr(self, name)
      if not isinstance(val, (int, float)) or not val >= 0:
        raise InvalidArgument(f'plot style {name} must be a non-negative number; received: {val!r}')
    check_tick_count(self.tick_count)
    return self


  def fmt_tick(self, val:float, step:float) -> str:
    return fmt_tick(val, step) if self.tick_fmt is None else str(self.tick_fmt(val, step))



class Plot:
  '''
  Builder for a range-frame plot.

  Example:
    svg_text = Plot().add_series([1, 2, 3], [4, 1, 3]).ticks(5).draw()

  Series values are copied at registration.
  `bounds`, `layout`, `render`, and `draw` are queries; calling them repeatedly yields identical results.
  '''

  def __init__(self, style:PlotStyle|None=None, **style_changes:Any) -> None:
    self.dataset = Dataset()
    self.plot_style = replace(style or PlotStyle(), **style_changes)


  def __repr__(self) -> str:
    return f'<{type(self).__name__}: {len(self.dataset)} series>'


  # Data.

  def add_series(self, xs:Iterable[Any], ys:Iterable[Any], name:str='') -> Self:
    'Add a polyline given parallel x and y sequences.'
    self.dataset.add_series(xs, ys, name=name)
    return self


  def add_points(self, points:Iterable[Iterable[Any]], name:str='') -> Self:
    'Add a polyline given a sequence of (x, y) pairs.'
    self.dataset.add_points(points, name=name)
    return self


  # Configuration.

  def style(self, **changes:Any) -> Self:
    'Replace fields of the plot style. Invalid values raise InvalidArgument immediately.'
    self.plot_style = replace(self.plot_style, **changes)
    return self


  def dimensions(self, width:float, height:float) -> Self: return self.style(width=width, height=height)

  def ticks(self, tick_count:int) -> Self: return self.style(tick_count=tick_count)

  def font_size(self, font_size:float) -> Self: return self.style(font_size=font_size)

  def stroke_width(self, stroke_width:float) -> Self: return self.style(stroke_width=stroke_width)

  def subsample(self, distance:float) -> Self: return self.style(subsample=distance)


  # Queries.

  def bounds(self) -> Bounds:
    'The bounding box of all added series. Raises InvalidState if no series has been added.'
    return self.dataset.bounds()


  def layout(self, tick_count:int|None=None) -> ChartLayout:
    'Compute the axis layout, using the style tick count unless `tick_count` is given.'
    return layout_chart(self.bounds(), self.plot_style.tick_count if tick_count is None else tick_count)


  def render(self) -> Svg:
    'Render the plot as an SVG tree.'
    if not self.dataset: raise InvalidState('plot rendered before any series was added')
    return render_plot(self.dataset.series, self.layout(), self.plot_style)


  def draw(self) -> str:
    'Render the plot as SVG markup.'
    return self.render().render_doc(xml_decl=self.plot_style.xml_decl)



@dataclass(frozen=True)
class PlotArea:
  '''
  The rectangle of the canvas onto which the normalized unit square is mapped.
  Margins outside of it hold the tick marks and labels.
  '''
  left:float
  top:float
  right:float
  bottom:float

  def to_canvas(self, p:F2) -> F2:
    u, v = p
    return (self.left + u * (self.right - self.left), self.top + v * (self.bottom - self.top))

  def x(self, u:float) -> float: return self.left + u * (self.right - self.left)

  def y(self, v:float) -> float: return self.top + v * (self.bottom - self.top)


def label_width(label:str, style:PlotStyle) -> float:
  'Estimated rendered width of a label, from its character count.'
  return len(label) * style.char_w * style.font_size


def calc_plot_area(x_labels:Sequence[str], y_labels:Sequence[str], style:PlotStyle) -> PlotArea:
  '''
  Reserve margins: on the left for the widest y label, below for the x labels,
  to the right for half of the last x label (labels are centered on their ticks),
  and above for half the height of the top y label (labels are vertically centered on their ticks).
  '''
  fs = style.font_size
  gap = style.tick_len + style.label_pad + style.stroke_width
  y_label_w = max((label_width(l, style) for l in y_labels), default=0.0)
  x_label_half_w = label_width(x_labels[-1], style) * 0.5 if x_labels else 0.0
  area = PlotArea(
    left=y_label_w + gap,
    top=max(fs * 0.5, style.height * 0.01),
    right=style.width - max(x_label_half_w, style.width * 0.01),
    bottom=style.height - fs - gap)
  if area.right <= area.left or area.bottom <= area.top:
    raise InvalidArgument(f'plot dimensions {style.width}x{style.height} leave no room for the data at font size {fs}')
  return area


def subsample_points(points:Iterable[F2], min_dist:float) -> Iterator[F2]:
  '''
  Yield the points of a polyline, dropping each point that lies within `min_dist` of the previously yielded point.
  The first and last points are always yielded. A `min_dist` of zero yields every point.
  '''
  last_yielded:F2|None = None
  pending:F2|None = None
  for p in points:
    if last_yielded is None or min_dist <= 0 or hypot(p[0] - last_yielded[0], p[1] - last_yielded[1]) > min_dist:
      yield p
      last_yielded = p
      pending = None
    else:
      pending = p
  if pending is not None: yield pending


def series_commands(series:Series, layout:ChartLayout, area:PlotArea, style:PlotStyle) -> list[PathCommand]:
  'Path commands for one series. A single point becomes a zero-length segment, which round caps draw as a dot.'
  pts = list(subsample_points((area.to_canvas(layout.project(p)) for p in series), style.subsample))
  cmds:list[PathCommand] = [('M', *pts[0])]
  cmds.extend(('L', *p) for p in pts[1:])
  if len(pts) == 1: cmds.append(('L', *pts[0]))
  return cmds


def frame_commands(layout:ChartLayout, area:PlotArea, style:PlotStyle) -> list[PathCommand]:
  'Path commands for both range-frame lines and all tick marks.'
  (x0, xb), (x1, _) = (area.to_canvas(p) for p in layout.x_frame)
  (yl, y0), (_, y1) = (area.to_canvas(p) for p in layout.y_frame)
  cmds:list[PathCommand] = [('M', x0, xb), ('L', x1, xb), ('M', yl, y0), ('L', yl, y1)]
  tl = style.tick_len
  if tl > 0:
    for u in layout.x_ticks_projected:
      x = area.x(u)
      cmds.extend((('M', x, xb), ('L', x, xb + tl)))
    for v in layout.y_ticks_projected:
      y = area.y(v)
      cmds.extend((('M', yl, y), ('L', yl - tl, y)))
  return cmds


def render_plot(series:Sequence[Series], layout:ChartLayout, style:PlotStyle) -> Svg:
  '''
  Render series onto a range-frame chart.
  The output contains a style element, one frame path (both axis lines and all tick marks),
  one path per series, and one text label per tick.
  '''
  if not series: raise InvalidState('no series to render')

  x_labels = [style.fmt_tick(t, layout.x.step) for t in layout.x.ticks]
  y_labels = [style.fmt_tick(t, layout.y.step) for t in layout.y.ticks]
  area = calc_plot_area(x_labels, y_labels, style)

  svg = Svg(cl='rangeframe', width=fmt_num(style.width), height=fmt_num(style.height))
  svg.viewbox(0, 0, style.width, style.height)
  svg.style(_plot_style.format(sw=fmt_num(style.stroke_width), fs=fmt_num(style.font_size)))

  svg.path(frame_commands(layout, area, style), cl='frame')

  with_series = svg.g(cl='series')
  for i, s in enumerate(series):
    with_series.path(series_commands(s, layout, area, style), cl=('series', f's{i}'), title=(s.name or None))

  label_off = style.tick_len + style.label_pad
  x_label_y = area.bottom + label_off
  y_label_x = area.left - label_off
  labels = svg.g(cl='labels')
  for u, label in zip(layout.x_ticks_projected, x_labels):
    labels.text(label, (area.x(u), x_label_y), cl='tick x')
  for v, label in zip(layout.y_ticks_projected, y_labels):
    labels.text(label, (y_label_x, area.y(v)), cl='tick y')

  return svg


_plot_style = '''
path {{ fill: none; stroke: currentColor; stroke-width: {sw}; vector-effect: non-scaling-stroke; }}
path.series {{ stroke-linecap: round; stroke-linejoin: round; }}
text {{ font-size: {fs}px; font-family: sans-serif; fill: currentColor; stroke: none; }}
text.tick.x {{ text-anchor: middle; dominant-baseline: hanging; }}
text.tick.y {{ text-anchor: end; dominant-baseline: central; }}
'''
