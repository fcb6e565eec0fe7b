# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` provides `MarkupNode`, a dynamically shaped element tree that renders to markup text or extracts to plain data.

Child keys are classified by their spelling:
* keys that start with the attribute selector (`_` by default) are attributes;
* the value selector key (`_value` by default) holds the element's own text;
* all other keys are child elements.

A node whose element keys all parse as numbers is an "array group".
Its children render as repeated sibling elements that share the tag of the group,
and extract as a list.

Reading a missing element key creates an empty child node, so deep paths can be assigned directly:
`root.a.b.c = 1` or `root['a']['b']['c'] = 1`.
Item access works for any key; attribute access works for keys that are not members of the class
(`name`, `elements`, `options`, `from_sequence`, and the methods below).
'''

import re
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, final, Union

from .escape import esc_xml, fmt_scalar
from .exceptions import ValidationError
from .options import MarkupOptions, mk_options, OptionsArg


@final
class Absent(Enum):
  '''
  Singleton class and value representing an undefined value.
  Assigning `Absent._` is a no-op, whereas assigning `None` stores an explicit null element.
  '''
  _ = 0


Scalar = Union[str,int,float,bool,None]
NodeValue = Union[Scalar,'MarkupNode']


class MarkupNode:
  '''
  A markup element: a tag name, plus an ordered mapping of attributes, direct value, and child elements.

  `MarkupNode(name, elements, options)` constructs a node named `name`.
  `MarkupNode({name: elements}, options)` constructs the same node from a single-root wrapper mapping.

  `elements` can be a mapping (or another node, which is copied),
  in which case nested mappings and sequences become child nodes named by their keys;
  or a sequence, in which case the entries are keyed by position and nested entries become unnamed child nodes.
  '''

  __slots__ = ('name', 'elements', 'options', 'from_sequence')

  name:str|None
  elements:dict[str,NodeValue]
  options:MarkupOptions
  from_sequence:bool # Set when the elements were given as a list or tuple.

  def __init__(self, name:Any=None, elements:Any=None, options:OptionsArg=None) -> None:
    if is_structured(name):
      root_items = list(structured_items(name))
      if len(root_items) != 1: raise ValidationError('object root must have a single element')
      if isinstance(elements, (Mapping, MarkupOptions)): # The second positional argument holds the options.
        options = elements
      name, elements = root_items[0]

    self.name = None if name is None else str(name)
    self.options = mk_options(options)
    self.elements = {}
    self.from_sequence = isinstance(elements, (list, tuple)) or (
      isinstance(elements, MarkupNode) and elements.from_sequence)

    if isinstance(elements, (list, tuple)):
      for i, el in enumerate(elements):
        if is_structured(el):
          self.elements[str(i)] = MarkupNode(None, el, self.options)
        else:
          self.set_value(i, el)
    elif isinstance(elements, (Mapping, MarkupNode)):
      for key, val in list(structured_items(elements)):
        self[key] = val


  def __repr__(self) -> str: return f'{type(self).__name__}({self.name!r}, {self.elements!r})'


  def __getitem__(self, key:Any) -> NodeValue:
    '''
    Return the value stored under `key`.
    If an element key is missing, an empty child node is created and stored under it.
    Missing attribute and value keys raise KeyError.
    '''
    key = str(key)
    try: return self.elements[key]
    except KeyError: pass
    if self._is_attr(key, self.options) or key == self.options.value_sel: raise KeyError(key)
    child = MarkupNode(key, None, self.options)
    self.elements[key] = child
    return child


  def __setitem__(self, key:Any, val:Any) -> None:
    key = str(key)
    if is_structured(val) and not self._is_attr(key, self.options):
      self.elements[key] = MarkupNode(key, val, self.options) # Replaces any existing subtree.
    else:
      self.set_value(key, val)


  def __delitem__(self, key:Any) -> None: del self.elements[str(key)]

  def __contains__(self, key:Any) -> bool: return str(key) in self.elements

  def __iter__(self) -> Iterator[str]: return iter(self.elements)

  def __len__(self) -> int: return len(self.elements)


  def __getattr__(self, name:str) -> NodeValue:
    # Only called when regular lookup fails, so members and slots take precedence over element keys.
    if name.startswith('__') or name in MarkupNode.__slots__: raise AttributeError(name)
    try: return self[name]
    except KeyError as e: raise AttributeError(name) from e


  def __setattr__(self, name:str, val:Any) -> None:
    if name in MarkupNode.__slots__: object.__setattr__(self, name, val)
    else: self[name] = val


  def __delattr__(self, name:str) -> None:
    if name in MarkupNode.__slots__: raise AttributeError(f'cannot delete node member: {name!r}')
    try: del self.elements[name]
    except KeyError as e: raise AttributeError(name) from e


  def set_value(self, key:Any, val:Any) -> None:
    '''
    Store the scalar `val` under `key`.
    `Absent._` is ignored; `None` is stored as is;
    any other value whose string form is empty is replaced by the `def_val` option.
    '''
    if val is Absent._: return
    self.elements[str(key)] = val if len(str(val)) else self.options.def_val


  # Classification.

  def attr_keys(self) -> list[str]:
    'The attribute names of the node (the attribute keys without the selector prefix), in insertion order.'
    return self._attr_keys(self.options)

  def element_keys(self) -> list[str]:
    'The keys of the child elements of the node, in insertion order.'
    return self._element_keys(self.options)

  def is_array(self) -> bool:
    'True if the node has at least one element key and all element keys parse as numbers.'
    return self._is_array(self.options)


  @staticmethod
  def _is_attr(key:str, opts:MarkupOptions) -> bool:
    return bool(opts.attr_sel) and key.startswith(opts.attr_sel)

  def _attr_keys(self, opts:MarkupOptions) -> list[str]:
    n = len(opts.attr_sel)
    return [k[n:] for k in self.elements if self._is_attr(k, opts) and k != opts.value_sel]

  def _element_keys(self, opts:MarkupOptions) -> list[str]:
    return [k for k in self.elements if not self._is_attr(k, opts) and k != opts.value_sel]

  def _is_array(self, opts:MarkupOptions) -> bool:
    keys = self._element_keys(opts)
    return bool(keys) and all(parse_numeric_key(k) is not None for k in keys)

  def _direct_value(self, opts:MarkupOptions) -> Scalar:
    'Return the direct value of the node, or None if it is missing, null, or formats as empty.'
    val = self.elements.get(opts.value_sel)
    if val is None or not fmt_scalar(val): return None
    return val


  # Rendering.

  def render(self, options:OptionsArg=None, name:str|None=None, depth:int=0, **overrides:Any) -> str:
    '''
    Render the tree as markup text.
    `options` and then `overrides` take precedence over the options stored in the node.
    `name` defaults to the name of the node; `depth` is the indentation level of the outermost tag.
    The declaration, if configured, is emitted once at the start of the output.
    '''
    opts = self.options.merged(options, **overrides).resolved()
    head = opts.declaration_line
    if opts.declaration is not None:
      opts = opts.merged(declaration=None) # Child renderings must not repeat the declaration.
    return head + self._render(opts, self.name if name is None else name, depth)


  def _render(self, opts:MarkupOptions, name:str|None, depth:int) -> str:
    'Recursive helper to `render`.'
    if self.from_sequence and not self.elements: return ''
    if self._is_array(opts):
      return opts.new_line.join(self._render_group(opts, name, depth))

    nl = opts.new_line
    indenting = opts.indent * depth
    elements = self.elements
    elem_keys = self._element_keys(opts)
    value = self._direct_value(opts)
    parts:list[str] = []
    child_prefix = ''

    if name:
      attrs_str = ''.join(f' {k}="{esc_xml(elements[opts.attr_sel + k])}"' for k in self._attr_keys(opts))
      parts.append(f'{indenting}<{name}{attrs_str}')
      if not elem_keys and value is None:
        parts.append('/>' if opts.self_close else f'></{name}>')
        return ''.join(parts)
      parts.append('>')
      child_prefix = nl + opts.indent

    if value is not None: # The direct value supersedes any child elements.
      parts.append(esc_xml(value))
      if name: parts.append(f'</{name}>')
      return ''.join(parts)

    for key in elem_keys:
      child = elements[key]
      if isinstance(child, MarkupNode):
        text = child._render(opts, child.name, depth + 1)
        if text: parts.append(nl + text)
      else:
        parts.append(child_prefix + indenting + fmt_scalar_element(key, child, opts))

    if name: parts.append(f'{nl}{indenting}</{name}>')
    return ''.join(parts)


  def _render_group(self, opts:MarkupOptions, name:str|None, depth:int) -> Iterator[str]:
    'Render the children of an array group as siblings that all use the tag `name`.'
    indenting = opts.indent * depth
    for key in self._element_keys(opts):
      child = self.elements[key]
      if isinstance(child, MarkupNode):
        if child._is_array(opts): # Nested groups are rendered inline, inside a single wrapper.
          inline = child._render(opts.merged(indent='', new_line=''), child.name, 0)
          yield f'{indenting}<{name}>{inline}</{name}>' if name else inline
        else:
          yield child._render(opts, name, depth)
      elif name:
        yield indenting + fmt_scalar_element(name, child, opts)
      else:
        yield esc_xml(child)


  # Extraction.

  def extract(self, acc:dict[str,Any]|None=None) -> dict[str,Any]:
    '''
    Extract the tree into plain dictionaries and lists.
    The result is stored under the name of the node in `acc` (a new dict by default), which is returned.
    An unnamed node writes its contents directly into `acc`.
    '''
    if acc is None: acc = {}
    val = self._extract_value()
    if self.name: acc[self.name] = val
    elif isinstance(val, list): acc.update((str(i), v) for i, v in enumerate(val))
    else: acc.update(val)
    return acc


  def _extract_value(self) -> dict[str,Any]|list[Any]:
    'Return the contents of the node: a list for an array group, otherwise a dict.'
    if self.is_array(): return self._extract_items()
    opts = self.options
    elements = self.elements
    obj:dict[str,Any] = {}

    attr_keys = self.attr_keys()
    if attr_keys:
      if opts.attr_key:
        obj[opts.attr_key] = { k: elements[opts.attr_sel + k] for k in attr_keys }
      else:
        for k in attr_keys:
          key = opts.attr_sel + k
          obj[key] = elements[key]

    value = self._direct_value(opts)
    if value is not None:
      obj[opts.value_sel] = value
      return obj

    for key in self.element_keys():
      child = elements[key]
      if isinstance(child, MarkupNode): child.extract(obj)
      else: obj[key] = child
    return obj


  def _extract_items(self) -> list[Any]:
    'Extract the children of an array group. Nested groups are flattened by one level.'
    items:list[Any] = []
    for key in self.element_keys():
      child = self.elements[key]
      if not isinstance(child, MarkupNode):
        put_at_key_index(items, key, child)
      elif child.is_array():
        for sub_key in child.element_keys():
          sub = child.elements[sub_key]
          items.append(sub._extract_value() if isinstance(sub, MarkupNode) else sub)
      else:
        put_at_key_index(items, key, child._extract_value())
    return items


def is_structured(val:Any) -> bool:
  'True for values that become child nodes when assigned: mappings, lists, tuples, and nodes.'
  return isinstance(val, (Mapping, list, tuple, MarkupNode))


def structured_items(val:Any) -> Iterable[tuple[str,Any]]:
  'Yield the (key, value) pairs of a structured value; sequences are keyed by position.'
  if isinstance(val, MarkupNode): return val.elements.items()
  if isinstance(val, Mapping): return ((str(k), v) for k, v in val.items())
  return ((str(i), v) for i, v in enumerate(val))


def fmt_scalar_element(tag:str, val:Scalar, opts:MarkupOptions) -> str:
  'Format a scalar child as an element; `None` becomes an empty element.'
  if val is None: return f'<{tag}/>' if opts.self_close else f'<{tag}></{tag}>'
  return f'<{tag}>{esc_xml(val)}</{tag}>'


def parse_numeric_key(key:str) -> float|None:
  '''
  Parse `key` the way JavaScript's `Number()` parses strings, returning None for NaN.
  Surrounding whitespace is ignored and the empty string parses as zero.
  '''
  k = key.strip()
  if not k: return 0.0
  if _decimal_re.fullmatch(k): return float(k.replace('Infinity', 'inf'))
  if _radix_re.fullmatch(k): return float(int(k, 0))
  return None


def put_at_key_index(items:list[Any], key:str, val:Any) -> None:
  '''
  Place `val` at the index named by `key`, padding the list with None as necessary.
  Values are appended if the key is not the canonical decimal form of a non-negative integer,
  or if placing them would require more than `max_index_gap` padding entries.
  '''
  k = key.strip()
  if not _index_re.fullmatch(k):
    items.append(val)
    return
  i = int(k)
  if i < len(items):
    items[i] = val
  elif i - len(items) <= max_index_gap:
    items.extend([None] * (i - len(items)))
    items.append(val)
  else:
    items.append(val)


max_index_gap = 1024

_decimal_re = re.compile(r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)', re.ASCII)
_radix_re = re.compile(r'0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+')
_index_re = re.compile(r'0|[1-9][0-9]*')
