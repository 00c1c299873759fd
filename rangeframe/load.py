# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Load series from delimited text.

Each row holds an x value followed by one or more y values, separated by commas, tabs, or runs of whitespace.
Blank lines and lines starting with '#' are skipped. If the first row is not entirely numeric it is a header,
and its cells name the y columns. Each y column becomes one series sharing the x column.
'''

from os.path import basename, splitext
from typing import Iterable, TextIO

from .dataset import Series
from .exceptions import InvalidArgument


def split_row(line:str) -> list[str]:
  'Split a row on commas if it contains any, otherwise on whitespace.'
  if ',' in line: return [cell.strip() for cell in line.split(',')]
  return line.split()


def parse_cell(cell:str, path:str, line_num:int, col:int) -> float:
  try: return float(cell)
  except ValueError as e:
    raise InvalidArgument(f'{path}:{line_num}: column {col + 1} is not numeric: {cell!r}') from e


def is_numeric_row(cells:list[str]) -> bool:
  for cell in cells:
    try: float(cell)
    except ValueError: return False
  return True


def load_series(lines:Iterable[str], path:str='<input>') -> list[Series]:
  '''
  Parse delimited text into a list of series, one per y column.
  `path` is used in error messages and to name unnamed columns.
  Raises InvalidArgument for non-numeric cells, ragged rows, fewer than two columns, or no data rows.
  '''
  stem = splitext(basename(path))[0]
  header:list[str]|None = None
  width = 0
  xs:list[float] = []
  ys_cols:list[list[float]] = []

  for line_num, line in enumerate(lines, 1):
    text = line.strip()
    if not text or text.startswith('#'): continue
    cells = split_row(text)
    if not width:
      width = len(cells)
      if width < 2: raise InvalidArgument(f'{path}:{line_num}: expected at least two columns; found: {width}')
      ys_cols = [[] for _ in range(width - 1)]
      if not is_numeric_row(cells):
        header = cells
        continue
    if len(cells) != width:
      raise InvalidArgument(f'{path}:{line_num}: expected {width} columns; found: {len(cells)}')
    xs.append(parse_cell(cells[0], path, line_num, 0))
    for col, (cell, ys) in enumerate(zip(cells[1:], ys_cols), 1):
      ys.append(parse_cell(cell, path, line_num, col))

  if not xs: raise InvalidArgument(f'{path}: no data rows')

  if header is not None: names = header[1:]
  elif len(ys_cols) == 1: names = [stem]
  else: names = [f'{stem}.{i}' for i in range(1, len(ys_cols) + 1)]
  return [Series(xs, ys, name=name) for name, ys in zip(names, ys_cols)]


def load_series_file(file:TextIO) -> list[Series]:
  return load_series(file, path=getattr(file, 'name', '<input>'))


def load_series_path(path:str) -> list[Series]:
  'Read series from the delimited text file at `path`. OSError propagates to the caller.'
  with open(path, encoding='utf-8') as f:
    return load_series(f, path=path)
