# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Options controlling how `MarkupNode` trees are classified, rendered, and extracted.

Options are immutable; merging produces a new `MarkupOptions` value.
Every node created during a single construction or assignment shares the same options object.
'''

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Union


xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>'


@dataclass(frozen=True)
class MarkupOptions:
  '''
  * indent: the indentation string, or an integer number of spaces.
  * new_line: the line separator.
  * attr_sel: key prefix that marks a child key as an attribute.
  * attr_key: if set, extraction groups attributes under this key instead of copying the prefixed keys.
  * value_sel: reserved key holding the direct text value of an element.
  * def_val: substituted for assigned values whose string form is empty.
  * declaration: `True` for the standard XML declaration, or a string to emit verbatim as the first line.
  * self_close: render empty elements as `<tag/>` rather than `<tag></tag>`.
  '''
  indent:str|int = '\t'
  new_line:str = '\r\n'
  attr_sel:str = '_'
  attr_key:str|None = None
  value_sel:str = '_value'
  def_val:Any = ''
  declaration:bool|str|None = None
  self_close:bool = True


  def merged(self, options:'OptionsArg'=None, **overrides:Any) -> 'MarkupOptions':
    'Return options with the items of `options` and then `overrides` replacing the values of `self`.'
    items = option_items(options)
    items.update(overrides)
    if not items: return self
    return replace(self, **items)


  def resolved(self) -> 'MarkupOptions':
    'Return options ready for rendering: an integer indent is converted to that many spaces.'
    indent = self.indent
    if isinstance(indent, int) and not isinstance(indent, bool):
      return replace(self, indent=' ' * indent)
    return self


  @property
  def declaration_line(self) -> str:
    'The declaration text followed by `new_line`, or the empty string if there is no declaration.'
    d = self.declaration
    if d is True: return xml_declaration + self.new_line
    if isinstance(d, str): return d + self.new_line
    return ''


OptionsArg = Union[MarkupOptions,Mapping[str,Any],None]

default_options = MarkupOptions()


def option_items(options:OptionsArg) -> dict[str,Any]:
  'Convert an options argument to a dictionary of field names and values.'
  if options is None: return {}
  if isinstance(options, MarkupOptions):
    return { f.name: getattr(options, f.name) for f in fields(options) }
  return dict(options)


def mk_options(options:OptionsArg) -> MarkupOptions:
  '''
  Return the options for a newly constructed node.
  A `MarkupOptions` argument is used as is, so that subtrees share the options object of their parent;
  a mapping is merged over the defaults.
  '''
  if isinstance(options, MarkupOptions): return options
  return default_options.merged(options)
