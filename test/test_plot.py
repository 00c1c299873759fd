# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import isfinite

from pytest import raises

from rangeframe.dataset import Bounds
from rangeframe.exceptions import InvalidArgument, InvalidState
from rangeframe.plot import Plot, PlotStyle, subsample_points
from rangeframe.svg import Path, Style, Svg, SvgNode, Text


xs0 = [1, 2, 3, 4, 5, 6, 7, 8]
ys0 = [.1, .2, .7, .4, .8, .6, 0, .2]
xs1 = [10, 11, 13, 14, 15, 16, 17, 18]
ys1 = [.7, .3, .1, .7, .9, .3, .9, .4]


def sample_plot() -> Plot:
  return Plot().add_series(xs0, ys0, name='a').add_series(xs1, ys1, name='b')


def parsed(plot:Plot) -> SvgNode:
  return SvgNode.parse(plot.draw())


def labels(svg:SvgNode, axis:str) -> list[str]:
  return [t.text for t in svg.find_all(Text, cl=axis)]


def test_draw_is_idempotent() -> None:
  plot = sample_plot()
  b = plot.bounds()
  first = plot.draw()
  assert plot.draw() == first
  assert plot.bounds() == b
  assert len(plot.dataset) == 2


def test_empty_plot() -> None:
  plot = Plot()
  with raises(InvalidState):
    plot.draw()
  with raises(InvalidState):
    plot.render()
  with raises(InvalidState):
    plot.bounds()
  with raises(InvalidState):
    plot.layout()


def test_builder_chaining() -> None:
  plot = Plot()
  assert plot.add_series([1, 2], [3, 4]) is plot
  assert plot.add_points([(0, 0)]) is plot
  assert plot.dimensions(400, 300) is plot
  assert plot.ticks(6) is plot
  assert plot.font_size(12) is plot
  assert plot.stroke_width(2) is plot
  assert plot.subsample(1.5) is plot
  assert plot.style(tick_len=4) is plot
  s = plot.plot_style
  assert (s.width, s.height, s.tick_count, s.font_size, s.stroke_width, s.subsample, s.tick_len) == (400, 300, 6, 12, 2, 1.5, 4)
  assert plot.bounds() == Bounds(0, 2, 0, 4)


def test_invalid_style() -> None:
  with raises(InvalidArgument):
    Plot().ticks(1)
  with raises(InvalidArgument):
    Plot().dimensions(0, 100)
  with raises(InvalidArgument):
    Plot().font_size(-1)
  with raises(InvalidArgument):
    Plot().stroke_width(0)
  with raises(InvalidArgument):
    Plot().subsample(-1)
  with raises(InvalidArgument):
    PlotStyle(tick_count=2.5) # type: ignore[arg-type]
  plot = Plot().ticks(5)
  with raises(InvalidArgument):
    plot.ticks(0)
  assert plot.plot_style.tick_count == 5 # A rejected change leaves the style unchanged.


def test_structure() -> None:
  plot = sample_plot()
  svg = parsed(plot)
  assert isinstance(svg, Svg)
  assert (svg['width'], svg['height'], svg['viewBox']) == ('800', '600', '0 0 800 600')
  assert len(list(svg.find_all(Style))) == 1
  frame = svg.find(Path, cl='frame')
  series = list(svg.find_all(Path, cl='series'))
  assert [p.cl for p in series] == ['series s0', 'series s1']
  assert [p.title for p in series] == ['a', 'b']
  layout = plot.layout()
  n_ticks = len(layout.x.ticks) + len(layout.y.ticks)
  assert len(frame.commands) == 4 + 2 * n_ticks # Two frame segments plus one segment per tick.
  assert len(list(svg.find_all(Text, cl='tick'))) == n_ticks


def test_tick_labels() -> None:
  svg = parsed(sample_plot())
  assert labels(svg, 'x') == ['5', '10', '15']
  assert labels(svg, 'y') == ['0.0', '0.2', '0.4', '0.6', '0.8']


def test_frame_spans_data_extent() -> None:
  svg = parsed(sample_plot())
  frame = svg.find(Path, cl='frame').commands
  s0 = svg.find(Path, cl='s0').commands
  s1 = svg.find(Path, cl='s1').commands
  (_, (x_start, x_line_y)), (_, (x_end, _)), (_, (y_line_x, y_start)), (_, (_, y_end)) = frame[:4]
  assert x_start == s0[0][1][0] # First point of `a` is at the x minimum.
  assert x_end == s1[-1][1][0] # Last point of `b` is at the x maximum.
  assert y_start == s0[6][1][1] # (7, 0) is at the y minimum.
  assert y_end == s1[4][1][1] # (15, 0.9) is at the y maximum.
  assert y_line_x < x_start # The y line sits at the left edge of the axis box, left of the data.
  assert x_line_y == y_start # The y minimum equals the axis minimum here, so the lines meet.


def test_coordinates_inside_canvas() -> None:
  svg = parsed(sample_plot().dimensions(300, 200).font_size(10))
  for path in svg.find_all(Path):
    for _, args in path.commands:
      x, y = args
      assert 0 <= x <= 300
      assert 0 <= y <= 200
  for text in svg.find_all(Text):
    assert 0 <= float(text['x']) <= 300
    assert 0 <= float(text['y']) <= 200


def test_single_point() -> None:
  plot = Plot().add_series([5], [5])
  svg = parsed(plot)
  for path in svg.find_all(Path):
    for _, args in path.commands:
      assert all(isfinite(a) for a in args)
  (m, p0), (l, p1) = svg.find(Path, cl='series').commands
  assert (m, l) == ('M', 'L')
  assert p0 == p1
  assert labels(svg, 'x') == ['5']
  assert labels(svg, 'y') == ['5']
  assert plot.layout().x.degenerate


def test_flat_series() -> None:
  svg = parsed(Plot().add_series([0, 1, 2, 3], [2.5, 2.5, 2.5, 2.5]))
  assert labels(svg, 'y') == []
  assert labels(svg, 'x') == ['0', '1', '2', '3']
  ys = {args[1] for _, args in svg.find(Path, cl='series').commands}
  assert len(ys) == 1


def test_subsample_points() -> None:
  pts = [(0, 0), (1, 0), (2, 0), (10, 0), (10.5, 0)]
  assert list(subsample_points(pts, 3)) == [(0, 0), (10, 0), (10.5, 0)]
  assert list(subsample_points(pts, 0)) == pts
  assert list(subsample_points(pts[:1], 3)) == pts[:1]
  assert list(subsample_points([], 3)) == []


def test_subsample_keeps_endpoints() -> None:
  xs = [i / 100 for i in range(101)]
  full = parsed(Plot().add_series(xs, xs)).find(Path, cl='series').commands
  thin = parsed(Plot().add_series(xs, xs).subsample(50)).find(Path, cl='series').commands
  assert len(full) == 101
  assert 2 < len(thin) < 101
  assert thin[0] == full[0]
  assert thin[-1] == full[-1]


def test_unnamed_series_has_no_title() -> None:
  svg = parsed(Plot().add_series([1, 2], [1, 2]))
  assert svg.find(Path, cl='series').title is None


def test_xml_decl() -> None:
  plot = Plot(xml_decl=True).add_series([1, 2], [1, 2])
  assert plot.draw().startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg ')
  assert Plot().add_series([1, 2], [1, 2]).draw().startswith('<svg ')


def test_custom_tick_format() -> None:
  plot = Plot(tick_fmt=lambda val, step: f'{val:g}%').add_series([0, 100], [0, 1])
  svg = parsed(plot)
  assert labels(svg, 'x')[-1] == '100%'
  assert all(l.endswith('%') for l in labels(svg, 'y'))


def test_no_tick_marks() -> None:
  svg = parsed(sample_plot().style(tick_len=0))
  assert len(svg.find(Path, cl='frame').commands) == 4


def test_canvas_too_small() -> None:
  with raises(InvalidArgument):
    sample_plot().dimensions(20, 20).draw()


def test_style_rules() -> None:
  svg = parsed(sample_plot().stroke_width(2).font_size(14))
  css = svg.find(Style).text
  assert 'stroke-width: 2;' in css
  assert 'font-size: 14px;' in css
