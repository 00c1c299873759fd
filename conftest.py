# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

# pytest inserts the directory of a root conftest into sys.path, so `rangeframe` imports from a source checkout.

import sys

from pytest import fixture


class _CurrentStderr:
  'Forwards to whatever `sys.stderr` is at the time of each call.'
  def __getattr__(self, name:str):
    return getattr(sys.stderr, name)


@fixture(autouse=True)
def _io_stderr_follows_capture(monkeypatch):
  '''
  `rangeframe.io` binds `stderr` at import time, so pytest's per-test `capsys` replacement of `sys.stderr` is not seen.
  Point the module's binding at a forwarder to the current `sys.stderr`.
  '''
  import rangeframe.io
  monkeypatch.setattr(rangeframe.io, 'stderr', _CurrentStderr())
  yield
