# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render JSON documents as markup text, or extract them back to plain JSON structures.
Each document must be a single-root object, e.g. `{"html": {"_lang": "en", "body": {"p": ["one", "two"]}}}`.
'''

import re
from argparse import ArgumentParser, Namespace
from sys import stdin
from typing import Any

from lxml.etree import fromstring as parse_xml_data, XMLSyntaxError

from ..exceptions import ValidationError, XmlObjError
from ..io import errL, outZ
from ..json import JSONDecodeError, parse_json, render_json
from ..node import MarkupNode
from ..options import default_options, MarkupOptions


def main() -> None:
  arg_parser = ArgumentParser(description='Render single-root JSON documents as markup text.')
  arg_parser.add_argument('paths', nargs='*', default=['-'], help='JSON files to render. Pass "-" to read from stdin.')
  arg_parser.add_argument('-extract', action='store_true', help='Write the extracted plain structure as JSON instead of markup.')
  arg_parser.add_argument('-indent', help='Indentation string, or an integer number of spaces.')
  arg_parser.add_argument('-newline', help=r'Line separator; the escapes \n, \r and \t are interpreted.')
  arg_parser.add_argument('-attr-sel', help='Key prefix that marks attributes.')
  arg_parser.add_argument('-attr-key', help='Group extracted attributes under this key.')
  arg_parser.add_argument('-value-sel', help='Key that holds the direct text value of an element.')
  arg_parser.add_argument('-def-val', help='Value substituted for empty values.')
  arg_parser.add_argument('-declaration', nargs='?', const=True, help='Emit the XML declaration, or the provided line.')
  arg_parser.add_argument('-no-self-close', action='store_true', help='Render empty elements with open and close tags.')
  arg_parser.add_argument('-check', action='store_true', help='Verify that the rendered markup is well-formed XML.')
  args = arg_parser.parse_args()

  options = options_from_args(args)
  ok = True
  for path in args.paths:
    try:
      text = read_input(path)
      output = convert(text, options, extract=args.extract, check=args.check)
    except (OSError, JSONDecodeError, XmlObjError, XMLSyntaxError) as e:
      errL(f'{path}: {type(e).__name__}: {e}')
      ok = False
      continue
    outZ(output, end='\n')

  if not ok: exit(1)


def options_from_args(args:Namespace) -> MarkupOptions:
  'Build the options from the parsed command line arguments; omitted flags keep their default values.'
  items:dict[str,Any] = {}
  if args.indent is not None:
    items['indent'] = int(args.indent) if args.indent.isdigit() else unescape_arg(args.indent)
  if args.newline is not None:
    items['new_line'] = unescape_arg(args.newline)
  for key in ('attr_sel', 'attr_key', 'value_sel', 'def_val'):
    val = getattr(args, key)
    if val is not None: items[key] = val
  if args.declaration is not None:
    items['declaration'] = args.declaration
  if args.no_self_close:
    items['self_close'] = False
  return default_options.merged(items)


def read_input(path:str) -> str:
  if path == '-': return stdin.read()
  with open(path) as f:
    return f.read()


def convert(text:str, options:MarkupOptions, extract:bool, check:bool) -> str:
  'Convert a JSON document to markup text, or to the JSON text of its extracted structure.'
  doc = parse_json(text)
  if not isinstance(doc, dict):
    raise ValidationError(f'document must be a single-root JSON object; received {type(doc).__name__}')
  node = MarkupNode(doc, options)
  if extract: return render_json(node.extract())
  markup = node.render()
  if check: check_markup(markup)
  return markup


def check_markup(markup:str) -> None:
  'Parse `markup` with lxml, raising XMLSyntaxError if it is not well-formed.'
  # lxml rejects str input that carries an encoding declaration.
  parse_xml_data(markup.encode('utf-8'))


def unescape_arg(arg:str) -> str:
  'Interpret the backslash escapes for newline, carriage return, and tab in a command line argument.'
  return _arg_escape_re.sub(lambda m: _arg_escapes[m[0]], arg)


_arg_escapes = {
  r'\n': '\n',
  r'\r': '\r',
  r'\t': '\t',
  '\\\\': '\\',
}

_arg_escape_re = re.compile(r'\\[nrt\\]')


if __name__ == '__main__': main()
