# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Numeric utilities for axis layout: "nice" step selection, quotient snapping, and number formatting.
All formatting here is locale independent; the decimal separator is always a period.
'''

from math import floor, isfinite, log10, ulp
from typing import overload

from .exceptions import InvalidArgument


Num = int|float


snap_tolerance = 1e-9 # Absolute tolerance in quotient space for treating a quotient as an integer.

nice_mults = (2.0, 5.0, 10.0) # Tried in order; the incumbent is only replaced on strict improvement.


def snap(q:float) -> float:
  '''
  Return the nearest integer (as a float) if `q` is within `snap_tolerance` of it, or within a few ulps for large `q`;
  otherwise return `q`.
  Quotients like `0.3 / 0.1` evaluate to 2.9999999999999996; snapping them before `floor` or `ceil`
  prevents a boundary multiple from being lost.
  '''
  r = round(q)
  if abs(q - r) <= max(snap_tolerance, 4 * ulp(q)): return float(r)
  return q


def pow10(exp:int) -> float:
  '''
  Exact-as-possible power of ten. Negative exponents divide so that 10^-1 is the float nearest to 0.1.
  Below the range of the divisor the power is taken directly, and underflows toward zero.
  '''
  if exp >= 0: return 10.0 ** exp
  if exp > -300: return 1.0 / 10.0 ** -exp
  return 10.0 ** exp


def decade_exp(v:float) -> int:
  'The exponent of the largest power of ten that does not exceed positive `v`.'
  return floor(snap(log10(v)))


def magnitude(v:float) -> float:
  'Round positive `v` down to a power of ten.'
  return pow10(decade_exp(v))


def nice_num(raw:float) -> float:
  '''
  Heckbert's "nice number" selection.
  Returns the value from {1, 2, 5, 10} x 10^k closest to `raw`, where 10^k is `raw` rounded down to a power of ten.
  Ties keep the earlier candidate.
  '''
  if not isinstance(raw, (int, float)) or not isfinite(raw) or raw <= 0:
    raise InvalidArgument(f'nice_num requires a finite positive value; received: {raw!r}')
  mag = magnitude(raw)
  nice = mag
  diff = abs(raw - mag)
  for mult in nice_mults: # 10 compensates for the floor in `magnitude`.
    candidate = mult * mag
    d = abs(raw - candidate)
    if d < diff:
      diff = d
      nice = candidate
  return nice


def resolution_step(v:float) -> float:
  '''
  The smallest power of ten that spans at least 16 floats at the magnitude of `v`.
  Steps below this cannot distinguish neighboring multiples near `v`.
  '''
  return pow10(decade_exp(16 * ulp(v)) + 1)


def frac_digits(step:float) -> int:
  'The number of fractional decimal digits needed to represent any multiple of a nice `step` exactly.'
  return max(0, -decade_exp(step))


def canonical(v:float, step:float) -> float:
  '''
  Round a multiple of `step` to the decimal precision of the step.
  This turns accumulated error like 0.30000000000000004 back into 0.3, and -0.0 into 0.0.
  '''
  return round(v, frac_digits(step)) + 0.0


@overload
def prefer_int(v:int) -> int: ...
@overload
def prefer_int(v:float) -> int|float: ...

def prefer_int(v:Num) -> Num:
  'Convert integral floats to int.'
  if isinstance(v, float) and isfinite(v):
    i = int(v)
    return i if i == v else v
  return v


def fmt_num(v:float, digits:int=2) -> str:
  '''
  Format a coordinate for markup: round to `digits` fractional digits and drop a trailing ".0".
  Uses `repr` of the rounded float, which never consults the process locale.
  '''
  if not isfinite(v): raise InvalidArgument(f'cannot format non-finite coordinate: {v!r}')
  return str(prefer_int(round(v, digits) + 0.0))


def fmt_tick(val:float, step:float) -> str:
  '''
  Format a tick value with exactly as many fractional digits as the tick step requires.
  For example, ticks with step 0.2 are formatted as '0.0', '0.2', '0.4'; ticks with step 50 as '0', '50', '100'.
  '''
  s = f'{val:.{frac_digits(step)}f}'
  if s.startswith('-') and not s.strip('-0.'): s = s[1:] # Negative zero.
  return s
