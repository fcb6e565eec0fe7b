# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import Namespace

from lxml.etree import XMLSyntaxError

from xmlobj.bin.xmlobj import check_markup, convert, options_from_args, unescape_arg
from xmlobj.exceptions import ValidationError
from xmlobj.options import default_options, MarkupOptions, xml_declaration
from utest import utest, utest_exc


def mk_args(**kwargs) -> Namespace:
  args = Namespace(indent=None, newline=None, attr_sel=None, attr_key=None, value_sel=None, def_val=None,
    declaration=None, no_self_close=False)
  for k, v in kwargs.items(): setattr(args, k, v)
  return args


flat = MarkupOptions(indent='', new_line='')


utest('a\tb', unescape_arg, r'a\tb')
utest('\r\n', unescape_arg, r'\r\n')
utest('\\n', unescape_arg, r'\\n')
utest('plain', unescape_arg, 'plain')

utest(default_options, options_from_args, mk_args())
utest(MarkupOptions(indent=2), options_from_args, mk_args(indent='2'))
utest(MarkupOptions(indent='\t\t', new_line='\n'), options_from_args, mk_args(indent=r'\t\t', newline=r'\n'))
utest(MarkupOptions(attr_sel='@', attr_key='attrs', value_sel='#text', def_val='-'), options_from_args,
  mk_args(attr_sel='@', attr_key='attrs', value_sel='#text', def_val='-'))
utest(MarkupOptions(declaration=True, self_close=False), options_from_args, mk_args(declaration=True, no_self_close=True))

utest('<t><a>1</a><b/></t>', convert, '{"t": {"a": 1, "b": null}}', flat, extract=False, check=True)
utest('<t a="x">y</t>', convert, '{"t": {"_a": "x", "_value": "y"}}', flat, extract=False, check=True)
utest('<t>\n  <a>1</a>\n</t>', convert, '{"t": {"a": 1}}', MarkupOptions(indent=2, new_line='\n'), extract=False, check=False)
utest(xml_declaration + '<t/>', convert, '{"t": {}}', flat.merged(declaration=True), extract=False, check=True)

utest('{\n  "t": {\n    "a": [\n      1,\n      2\n    ]\n  }\n}', convert, '{"t": {"a": [1, 2]}}', flat, extract=True, check=False)

utest_exc(ValidationError('document must be a single-root JSON object; received list'),
  convert, '[1]', flat, extract=False, check=False)
utest_exc(ValidationError('object root must have a single element'),
  convert, '{"a": 1, "b": 2}', flat, extract=False, check=False)

# An array root renders sibling elements, which is not a well-formed document.
utest('<item>a</item><item>b</item>', convert, '{"item": ["a", "b"]}', flat, extract=False, check=False)
utest_exc(XMLSyntaxError, convert, '{"item": ["a", "b"]}', flat, extract=False, check=True)
utest_exc(XMLSyntaxError, check_markup, '<a b>1</a b>')
utest(None, check_markup, '<a>&amp;</a>')
