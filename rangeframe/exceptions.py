# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for chart construction and layout.
'''


class InvalidArgument(ValueError):
  '''
  Raised when a caller passes malformed input:
  mismatched or empty series, non-finite values, or a tick count less than two.
  Since the input has the right type but an unacceptable value, it subclasses ValueError.
  '''


class InvalidState(RuntimeError):
  '''
  Raised when bounds, layout, or rendering are requested before any series has been added.
  '''


class MultipleMatchesError(KeyError):
  'Raised when a markup query matches multiple children.'


class NoMatchError(KeyError):
  'Raised when a markup query matches no children.'
