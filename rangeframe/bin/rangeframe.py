# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import json
from argparse import ArgumentParser, Namespace
from sys import stdin
from typing import Sequence

from ..exceptions import InvalidArgument, InvalidState
from ..io import errL, errSL, write_doc
from ..load import load_series_file, load_series_path
from ..plot import Plot, PlotStyle


demo_series = [
  ('a', [1, 2, 3, 4, 5, 6, 7, 8], [.1, .2, .7, .4, .8, .6, 0, .2]),
  ('b', [10, 11, 13, 14, 15, 16, 17, 18], [.7, .3, .1, .7, .9, .3, .9, .4]),
]


def main(argv:Sequence[str]|None=None) -> None:
  dflt = PlotStyle()
  parser = ArgumentParser(prog='rangeframe', description='Plot numeric series as an SVG chart with range-frame axes.')
  parser.add_argument('paths', nargs='*', help='delimited text files of x and y columns (defaults to stdin).')
  parser.add_argument('-o', dest='out', default='-', help='output path (defaults to stdout).')
  parser.add_argument('-ticks', type=int, default=dflt.tick_count, help='target number of ticks per axis.')
  parser.add_argument('-width', type=float, default=dflt.width, help='chart width.')
  parser.add_argument('-height', type=float, default=dflt.height, help='chart height.')
  parser.add_argument('-font-size', type=float, default=dflt.font_size, help='label font size.')
  parser.add_argument('-stroke-width', type=float, default=dflt.stroke_width, help='line stroke width.')
  parser.add_argument('-subsample', type=float, default=dflt.subsample,
    help='minimum distance between drawn points of a series; 0 draws every point.')
  parser.add_argument('-xml-decl', action='store_true', help='emit an XML declaration before the SVG element.')
  parser.add_argument('-layout', action='store_true', help='print the computed axis layout as JSON to stderr.')
  parser.add_argument('-demo', action='store_true', help='plot built-in sample data instead of reading input.')
  args = parser.parse_args(argv)

  try: plot_main(args)
  except (InvalidArgument, InvalidState) as e:
    errSL('rangeframe error:', e)
    exit(1)
  except OSError as e:
    errSL('rangeframe error:', e.strerror or e, e.filename or '')
    exit(1)


def plot_main(args:Namespace) -> None:
  plot = Plot(
    width=args.width,
    height=args.height,
    font_size=args.font_size,
    stroke_width=args.stroke_width,
    tick_count=args.ticks,
    subsample=args.subsample,
    xml_decl=args.xml_decl)

  if args.demo:
    if args.paths: raise InvalidArgument('-demo does not accept input paths')
    for name, xs, ys in demo_series:
      plot.add_series(xs, ys, name=name)
  elif args.paths:
    for path in args.paths:
      for series in load_series_path(path):
        plot.dataset.add(series)
  else:
    for series in load_series_file(stdin):
      plot.dataset.add(series)

  doc = plot.draw()
  if args.layout:
    errL(json.dumps(plot.layout().as_dict()))
  write_doc(args.out, doc)


if __name__ == '__main__': main()
