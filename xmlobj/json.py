# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
JSON input and output for node trees and their extracted structures.
Key order is significant for markup, so output is never sorted by default.
'''

import json as _json
from functools import singledispatch
from json.decoder import JSONDecodeError
from sys import stdout
from typing import IO, Any, Callable, Optional, TextIO, Tuple

from .node import MarkupNode


EncodeObj = Callable[[Any],Any]

_Seps = Optional[Tuple[str,str]]


class JSONEmptyDocument(JSONDecodeError): pass


@singledispatch
def encode_obj(obj:Any) -> Any:
  '''
  Encode an object that the json module cannot serialize.
  Iterables become lists; anything else is converted to a string as a last resort.
  '''
  try: it = iter(obj)
  except TypeError: pass
  else: return list(it)
  return str(obj)


@encode_obj.register
def _(obj:MarkupNode) -> Any: return obj.extract()


def render_json(item:Any, default:EncodeObj=encode_obj, sort=False, indent:int|None=2, separators:_Seps=None, **kwargs) -> str:
  'Render `item` as a json string.'
  if not separators:
    separators = (',', ': ') if indent else (',', ':')
  return _json.dumps(item, indent=indent, default=default, sort_keys=sort, separators=separators, **kwargs)


def write_json(file:TextIO, *items:Any, default:EncodeObj=encode_obj, sort=False, indent:int|None=2, separators:_Seps=None,
 end='\n', flush=False, **kwargs) -> None:
  'Write each item in `items` as json to file.'
  try: write = file.write # If the `file` argument was omitted, the first `item` may have taken its place.
  except AttributeError as e:
    raise ValueError('`file` (first) argument does not have a `write` attribute; was the file omitted from the call?') from e
  for item in items:
    write(render_json(item, default=default, sort=sort, indent=indent, separators=separators, **kwargs))
    if end: write(end)
    if flush: file.flush()


def out_json(*items:Any, default:EncodeObj=encode_obj, sort=False, indent:int|None=2, separators:_Seps=None, end='\n',
 flush=False, **kwargs) -> None:
  'Write items as json to std out.'
  write_json(stdout, *items, default=default, sort=sort, indent=indent, separators=separators, end=end, flush=flush, **kwargs)


def parse_json(text:str|bytes|bytearray) -> Any:
  'Parse json from `text`.'
  return _load(_json.loads, text)


def load_json(file:IO) -> Any:
  'Read json from `file`.'
  return _load(_json.load, file)


def _load(loader:Callable[[Any],Any], src:Any) -> Any:
  try: return loader(src)
  except JSONDecodeError as e:
    if e.pos == 0 and e.msg == 'Expecting value':
      raise JSONEmptyDocument(msg=e.msg, doc=e.doc, pos=e.pos) from e
    raise
