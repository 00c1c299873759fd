# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Output helpers for the command line tool.
Charts are written to stdout or a file; diagnostics go to stderr, one line per problem.
The library modules never print; only `bin` scripts call these.
'''

from sys import stderr
from typing import Any, TextIO


def writeZ(file:TextIO, *items:Any, sep='', end='', flush=False) -> None:
  "Write `items` to file; default sep='', end=''."
  print(*items, sep=sep, end=end, file=file, flush=flush)


def outZ(*items:Any, sep='', end='', flush=False) -> None:
  "Write `items` to std out; sep='', end=''."
  print(*items, sep=sep, end=end, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)


def write_doc(path:str, doc:str) -> None:
  'Write a rendered document to `path`, or to std out if `path` is "-" or empty.'
  if not path or path == '-':
    outZ(doc)
    return
  with open(path, 'w', encoding='utf-8', newline='\n') as f:
    writeZ(f, doc)
