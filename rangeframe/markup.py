# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the `Mu` class, a minimal document tree used to assemble SVG output.
Child nodes and text are interleaved in a single list, `_`.
'''

import re
from itertools import chain
from typing import Any, Callable, ClassVar, Iterable, Iterator, TypeVar, overload
from xml.etree.ElementTree import Element

from .exceptions import MultipleMatchesError, NoMatchError
from .num import prefer_int


# Attr values are Any so that exact numerical values are preserved until rendering.
MuAttrs = dict[str,Any]

_Mu = TypeVar('_Mu', bound='Mu')

MuPred = Callable[['Mu'],bool]


class Mu:
  '''
  Base markup type.

  Every node has a tag string, usually provided as a static override by a subclass.
  For example, the `Path` subclass represents an SVG path and defines `tag = 'path'`.
  A parser can instead return generic nodes with tags set per node.
  '''

  tag = '' # Subclasses override the class tag, or give each instance its own tag attribute.

  tag_types:ClassVar[dict[str,type['Mu']]] = {} # Dispatch table mapping tag names to Mu subtypes.
  generic_tag_type:ClassVar[type['Mu']] # The subtype to use for tags that are not in `tag_types`. Set to `Mu` below.
  inline_tags:ClassVar[frozenset[str]] = frozenset() # Tags whose children are rendered without newlines.

  attr_sort_ranks = {
    'xmlns': -3,
    'id': -2,
    'class': -1,
  }

  attrs:MuAttrs
  _:list[Any]

  def __init__(self, *positional_children:Any, _:Any=(), tag:str='', cl:Iterable[str]|None=None,
   attrs:MuAttrs|None=None, **kw_attrs:Any) -> None:
    '''
    Children can be passed positionally or as the `_` argument (a single child or an iterable of children).
    Numeric children are converted to strings.

    Keyword attribute names have underscores replaced with hyphens, so `stroke_width=1` becomes `stroke-width="1"`.
    The `cl` argument is shorthand for the `class` attribute; an iterable is joined with spaces.
    '''
    if tag:
      if cls_tag := getattr(self, 'tag', None):
        if cls_tag != tag:
          raise ValueError(f'Mu subclass {type(self)!r} already has tag: {self.tag!r}; instance tag: {tag!r}')
      else:
        self.tag = tag

    if attrs is None: attrs = {}
    for k, v in kw_attrs.items():
      attrs[k.replace('_', '-')] = v
    if cl is not None:
      if not isinstance(cl, str): cl = ' '.join(filter(None, cl))
      attrs['class'] = cl
    self.attrs = attrs

    children = [_] if isinstance(_, (str, Mu, int, float)) else list(_)
    children.extend(positional_children)
    self._ = [_validate_child(c) for c in children]


  def __repr__(self) -> str: return f'{type(self).__name__}{self}'


  def __str__(self) -> str:
    words = ''.join(chain(
      (f' {k}={v!r}' for k, v in self.attrs.items() if k in ('id', 'class')),
      (f' {c.tag}' if isinstance(c, Mu) else f' {c!r}' for c in self._)))
    return f'<{self.tag}:{words}>'


  def __getitem__(self, key:str) -> Any: return self.attrs[key]

  def get(self, key:str, default:Any=None) -> Any: return self.attrs.get(key, default)

  def __iter__(self) -> Iterator[Any]: return iter(self._)


  @classmethod
  def from_etree(cls:type[_Mu], el:Element) -> _Mu:
    '''
    Create a Mu object (possibly a subclass chosen by tag) from an element tree element.
    Namespace prefixes in the ElementTree `{uri}tag` form are removed.
    '''
    tag = strip_ns(el.tag)
    attrs = {strip_ns(k): v for k, v in el.attrib.items()}
    children:list[Any] = []
    if el.text: children.append(el.text)
    TagClass = cls.tag_types.get(tag, cls.generic_tag_type)
    for child in el:
      if not isinstance(child.tag, str): continue # Comments and processing instructions.
      children.append(TagClass.from_etree(child))
      if child.tail: children.append(child.tail)
    return TagClass(tag=tag, attrs=attrs, _=children) # type: ignore[return-value]


  @property
  def texts(self) -> Iterator[str]:
    'Yield the text of the tree sequentially.'
    for c in self._:
      if isinstance(c, str): yield c
      else: yield from c.texts


  @property
  def text(self) -> str:
    'Return the text of the tree joined as a single string.'
    return ''.join(self.texts)


  @property
  def cl(self) -> str:
    '`cl` is shorthand for the `class` attribute.'
    return str(self.attrs.get('class', ''))


  @property
  def classes(self) -> list[str]:
    'The `class` attribute split into individual words.'
    return self.cl.split()


  def append(self, child:Any) -> Any:
    self._.append(_validate_child(child))
    return child


  # Picking and finding.

  @overload
  def pick_all(self, type_or_tag:type[_Mu], *, cl:str='', **attrs:str) -> Iterator[_Mu]: ...

  @overload
  def pick_all(self, type_or_tag:str='', *, cl:str='', **attrs:str) -> Iterator['Mu']: ...

  def pick_all(self, type_or_tag:Any='', *, cl:str='', **attrs:str) -> Iterator[Any]:
    'Yield the matching children of this node.'
    pred = xml_pred(type_or_tag=type_or_tag, cl=cl, attrs=attrs)
    return (c for c in self._ if isinstance(c, Mu) and pred(c))


  @overload
  def find_all(self, type_or_tag:type[_Mu], *, cl:str='', **attrs:str) -> Iterator[_Mu]: ...

  @overload
  def find_all(self, type_or_tag:str='', *, cl:str='', **attrs:str) -> Iterator['Mu']: ...

  def find_all(self, type_or_tag:Any='', *, cl:str='', **attrs:str) -> Iterator[Any]:
    'Yield the matching nodes of this node\'s subtree, in document order.'
    pred = xml_pred(type_or_tag=type_or_tag, cl=cl, attrs=attrs)
    return self._find_all(pred)


  def _find_all(self, pred:MuPred) -> Iterator['Mu']:
    for c in self._:
      if isinstance(c, Mu):
        if pred(c): yield c
        yield from c._find_all(pred)


  def pick(self, type_or_tag:Any='', *, cl:str='', **attrs:str) -> Any:
    '''
    Pick the matching child of this node.
    Raises NoMatchError if no matching node is found, and MultipleMatchesError if multiple matching nodes are found.
    '''
    return _single_match(self, self.pick_all(type_or_tag, cl=cl, **attrs), type_or_tag, cl, attrs)


  def find(self, type_or_tag:Any='', *, cl:str='', **attrs:str) -> Any:
    '''
    Find the matching node of this node's subtree.
    Raises NoMatchError if no matching node is found, and MultipleMatchesError if multiple matching nodes are found.
    '''
    return _single_match(self, self.find_all(type_or_tag, cl=cl, **attrs), type_or_tag, cl, attrs)


  # Rendering.

  @staticmethod
  def esc_text(text:str) -> str:
    text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
    text = text.replace('<', '&lt;')
    # Note: we do not replace '>' because it is not required and helpful to leave unescaped for embedded CSS.
    return text


  @staticmethod
  def quote_attr_val(text:str) -> str:
    text = text.replace('&', '&amp;')
    text = text.replace('<', '&lt;')
    if '"' in text:
      text = text.replace("'", '&apos;')
      return f"'{text}'"
    return f'"{text}"'


  def fmt_attr_items(self, items:Iterable[tuple[str,Any]]) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted items.'
    parts:list[str] = []
    for k, v in sorted(items, key=lambda item: self.attr_sort_ranks.get(item[0], 0)):
      if v is None or isinstance(v, bool): v = str(v).lower() # Note: `0 in (False,)` is true, so test by type.
      parts.append(f' {k}={self.quote_attr_val(str(prefer_int(v)))}')
    return ''.join(parts)


  def render(self, newline=True) -> Iterator[str]:
    'Render the tree as a stream of text fragments.'
    yield from self._render()
    if newline: yield '\n'


  def _render(self) -> Iterator[str]:
    attrs_str = self.fmt_attr_items(self.attrs.items())
    if not self._:
      yield f'<{self.tag}{attrs_str}/>'
      return
    yield f'<{self.tag}{attrs_str}>'
    yield from self.render_children()
    yield f'</{self.tag}>'


  def render_children(self) -> Iterator[str]:
    child_newlines = len(self._) > 1 and self.tag not in self.inline_tags
    if child_newlines: yield '\n'
    for child in self._:
      if isinstance(child, str): yield self.esc_text(child)
      else: yield from child._render()
      if child_newlines: yield '\n'


  def render_str(self, newline=True) -> str:
    'Render the tree into a single string.'
    return ''.join(self.render(newline=newline))


Mu.generic_tag_type = Mu # Note: this creates a circular reference.


def _validate_child(c:Any) -> Any:
  if isinstance(c, (str, Mu)): return c
  if isinstance(c, (int, float)) and not isinstance(c, bool): return str(prefer_int(c))
  raise TypeError(f'Invalid child type: {type(c)!r}; value: {c!r}')


def _single_match(node:Mu, matches:Iterator[Mu], type_or_tag:Any, cl:str, attrs:dict[str,str]) -> Mu:
  first_match:Mu|None = None
  for c in matches:
    if first_match is None: first_match = c
    else:
      raise MultipleMatchesError(node, fmt_xml_predicate_args(type_or_tag, cl, attrs), first_match, c)
  if first_match is None:
    raise NoMatchError(node, fmt_xml_predicate_args(type_or_tag, cl, attrs))
  return first_match


def xml_pred(type_or_tag:str|type='', *, cl:str='', attrs:dict[str,Any]={}) -> MuPred:
  'Construct a predicate that tests Mu nodes by type or tag, class word, and attribute values.'

  tag_pred:Callable[[Mu],bool]
  if not type_or_tag: tag_pred = lambda node: True
  elif isinstance(type_or_tag, type): tag_pred = lambda node: isinstance(node, type_or_tag) # type: ignore[arg-type]
  else: tag_pred = lambda node: node.tag == type_or_tag

  def predicate(node:Mu) -> bool:
    return (
      tag_pred(node) and
      (not cl or cl in node.classes) and
      all(node.attrs.get(k.replace('_', '-')) == v for k, v in attrs.items()))

  return predicate


def fmt_xml_predicate_args(type_or_tag:str|type, cl:str, attrs:dict[str,str]) -> str:
  'Format the arguments of a predicate function for an error message.'
  words:list[str] = []
  if type_or_tag: words.append(f'`{type_or_tag.__name__}`' if isinstance(type_or_tag, type) else repr(type_or_tag))
  if cl: words.append(f'cl={cl!r}')
  for k, v in attrs.items(): words.append(f'{k}={v!r}')
  return ' '.join(words)


def strip_ns(name:str) -> str:
  'Remove an ElementTree namespace prefix: "{http://www.w3.org/2000/svg}path" -> "path".'
  return _ns_re.sub('', name)


_ns_re = re.compile(r'^\{[^}]*\}')
