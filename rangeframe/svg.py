# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
SVG types based on Markup (`Mu` class family).
Only the elements needed to draw charts are defined; unknown tags parse as generic `SvgNode` instances.
SVG elements reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element.
'''

from os import PathLike
from typing import Any, BinaryIO, cast, ClassVar, Iterable, Self, TextIO

from .exceptions import NoMatchError
from .markup import Mu
from .num import fmt_num


Vec = tuple[float,float]
PathCommand = str|tuple[str|float,...]

_LxmlFilePath = str | bytes | PathLike[str] | PathLike[bytes]
_LxmlFileReadSource = _LxmlFilePath | BinaryIO | TextIO

svg_ns = 'http://www.w3.org/2000/svg'

xml_decl_line = '<?xml version="1.0" encoding="UTF-8"?>\n'


class SvgNode(Mu):
  '''
  Abstract class for SVG elements.
  '''

  tag_types:ClassVar[dict[str,type[Mu]]] = {} # Dispatch table mapping tag names to Mu subtypes.

  inline_tags = frozenset({'text', 'title', 'tspan'})


  def __init__(self, *args:Any, title:str|None=None, **kwargs:Any) -> None:
    '''
    SvgNode constructor.
    The `title` parameter is converted into a `title` child element, which browsers show as a tooltip.
    '''
    super().__init__(*args, **kwargs)
    if title is not None:
      self._.insert(0, Title(_=title))


  @property
  def title(self) -> str|None:
    'Get the title text from the title child element. If it does not exist return None.'
    try: return self.pick('title').text
    except NoMatchError: return None


  @classmethod
  def parse(cls, source:str|bytes) -> 'SvgNode':
    'Parse SVG markup into a tree of SvgNode objects.'
    from lxml import etree
    if isinstance(source, str): source = source.encode('utf-8')
    root = etree.fromstring(source)
    node = SvgNode.from_etree(root) # type: ignore[arg-type]
    assert isinstance(node, SvgNode), node
    return node


  @classmethod
  def parse_file(cls, file:_LxmlFileReadSource) -> 'SvgNode':
    'Parse an SVG file into a tree of SvgNode objects.'
    from lxml import etree
    root = etree.parse(file).getroot()
    if root is None: # Empty or whitespace input produces None.
      return Svg() # type: ignore[unreachable]
    node = SvgNode.from_etree(root) # type: ignore[arg-type]
    assert isinstance(node, SvgNode), node
    return node



SvgNode.generic_tag_type = SvgNode # Note: this creates a circular reference.


def _tag(Subclass:type[Mu]) -> type[Mu]:
  'Decorator for associating a concrete subclass with the lowercase tag matching its name.'
  assert issubclass(Subclass, SvgNode)
  Subclass.tag = Subclass.__name__.lower()
  SvgNode.tag_types[Subclass.tag] = Subclass
  return Subclass


@_tag
class Style(SvgNode):
  'SVG Style element.'


@_tag
class Title(SvgNode):
  'SVG Title element.'


# SVG leaf elements.

@_tag
class Path(SvgNode):
  '''
  SVG Path element.
  The `d` argument is either a preformatted string or an iterable of commands;
  each command is either a string or a tuple of a command code followed by its numeric arguments.
  '''

  def __init__(self, *args:Any, d:str|Iterable[PathCommand]|None=None, **kw_attrs:Any) -> None:
    if d is None:
      super().__init__(*args, **kw_attrs)
      return
    if not isinstance(d, str): d = fmt_path_commands(d)
    super().__init__(*args, d=d, **kw_attrs)


  @property
  def commands(self) -> list[tuple[str,tuple[float,...]]]:
    'Parse the `d` attribute back into (code, args) pairs. Only the command codes written by `fmt_path_commands` are supported.'
    return parse_path_d(str(self.attrs.get('d', '')))


@_tag
class Text(SvgNode):
  'SVG Text element.'

  def pos(self, pos:Vec) -> Self:
    'Set the x and y attributes from the provided `pos` vector.'
    self.attrs['x'], self.attrs['y'] = (fmt_num(pos[0]), fmt_num(pos[1]))
    return self


class SvgBranch(SvgNode):
  'An abstract class for SVG nodes that can contain other nodes.'

  def g(self, **kw_attrs:Any) -> 'G':
    'Create child `g` element.'
    return self.append(G(**kw_attrs))


  def path(self, d:Iterable[PathCommand], **kw_attrs:Any) -> Path:
    'Create a child `path` element.'
    return self.append(Path(d=d, **kw_attrs))


  def style(self, *text:str, **kw_attrs:Any) -> Style:
    'Create a child `style` element.'
    return self.append(Style(_=''.join(text), **kw_attrs))


  def text(self, text:str, pos:Vec, **kw_attrs:Any) -> Text:
    'Create a child `text` element.'
    return self.append(Text(_=text, **kw_attrs).pos(pos))


@_tag
class Svg(SvgBranch):
  '''
  SVG root element.
  '''

  def __init__(self, *args:Any, **kw_attrs:Any) -> None:
    '''
    Add the xmlns as the first attribute.
    If the user wants to override this, they can do so by passing `xmlns` as a keyword argument.
    '''
    kw_attrs.setdefault('xmlns', svg_ns)
    super().__init__(*args, **kw_attrs)


  def viewbox(self, vx:float=0, vy:float=0, vw:float|None=None, vh:float|None=None) -> Self:
    'Set the viewBox attribute.'
    self.attrs['viewBox'] = fmt_viewBox(vx, vy, vw, vh)
    return self


  def render_doc(self, xml_decl:bool=False) -> str:
    'Render a complete document, optionally preceded by an XML declaration.'
    return (xml_decl_line if xml_decl else '') + self.render_str()


# SVG branch elements.

@_tag
class G(SvgBranch):
  'SVG Group element.'


# Miscellaneous.

_path_command_lens = {
  'M' : 2,
  'm' : 2,
  'L' : 2,
  'l' : 2,
  'H' : 1,
  'h' : 1,
  'V' : 1,
  'v' : 1,
  'Z' : 0,
  'z' : 0
}


def fmt_path_commands(commands:Iterable[PathCommand]) -> str:
  'Format path commands as a compact `d` attribute string.'
  cmd_strs = []
  for c in commands:

    if isinstance(c, str):
      if c: cmd_strs.append(c) # Ignore empty strings.
      continue

    try: code = c[0]
    except IndexError: continue # Ignore empty tuples.

    if not isinstance(code, str): raise ValueError(f'path command code must be a string; received command: {c!r}')

    try: exp_len = _path_command_lens[code]
    except KeyError as e: raise ValueError(f'bad path command code: {code!r}; received command: {c!r}') from e

    if len(c) != exp_len + 1:
      raise ValueError(f'path command code {code!r} requires {exp_len} arguments; received command: {c!r}')

    cmd_strs.append(code + ','.join(fmt_num(cast(float, n)) for n in c[1:]))

  return ' '.join(cmd_strs)


def parse_path_d(d:str) -> list[tuple[str,tuple[float,...]]]:
  'Parse a `d` string produced by `fmt_path_commands`.'
  commands = []
  for word in d.split():
    code = word[0]
    if code not in _path_command_lens: raise ValueError(f'bad path command code: {code!r}; in word: {word!r}')
    args = tuple(float(a) for a in word[1:].split(',')) if len(word) > 1 else ()
    if len(args) != _path_command_lens[code]:
      raise ValueError(f'path command code {code!r} requires {_path_command_lens[code]} arguments; received: {word!r}')
    commands.append((code, args))
  return commands


def fmt_viewBox(vx:float, vy:float, vw:float|None, vh:float|None) -> str|None:
  if vw is None and vh is None:
    return None
  assert vw is not None and vw > 0
  assert vh is not None and vh > 0
  return f'{fmt_num(vx)} {fmt_num(vy)} {fmt_num(vw)} {fmt_num(vh)}'
