class LightGridError(Exception):
  """Base class for errors raised while parsing or building light grids."""


class MalformedInstruction(LightGridError, ValueError):
  def __init__(self, line: str, reason: str, lineno: int | None = None) -> None:
    self.line = line
    self.reason = reason
    self.lineno = lineno

    where = f'line {lineno}' if lineno is not None else 'instruction'
    super().__init__(f'{where}: {reason}: {line!r}')


class InvalidDimensions(LightGridError, ValueError):
  def __init__(self, width: int, height: int, reason: str = '') -> None:
    self.width = width
    self.height = height

    message = f'invalid grid dimensions {width}x{height}'
    if reason:
      message = f'{message} ({reason})'
    super().__init__(message)
