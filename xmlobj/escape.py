# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Formatting and escaping of scalar values for markup output.
'''

from typing import Any
from xml.sax.saxutils import escape as _escape


# `escape` always replaces '&', '<' and '>'; the quote characters are added here.
_quote_entities = {
  "'": '&apos;',
  '"': '&quot;',
}


def fmt_scalar(val:Any) -> str:
  'Format a scalar value as markup text, prior to escaping.'
  if val is None: return ''
  if val is True: return 'true'
  if val is False: return 'false'
  return str(prefer_int(val))


def esc_xml(val:Any) -> str:
  'Format `val` and escape the XML special characters, including both quote characters.'
  return _escape(fmt_scalar(val), _quote_entities)


def prefer_int(v:Any) -> Any:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer(): return int(v)
  return v
