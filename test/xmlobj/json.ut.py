# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import StringIO

from xmlobj.json import JSONDecodeError, JSONEmptyDocument, load_json, parse_json, render_json, write_json
from xmlobj.node import MarkupNode
from utest import utest, utest_call, utest_exc, utest_val


utest('{"a":{"b":1}}', render_json, MarkupNode('a', {'b': 1}), indent=None)
utest('{"z":1,"a":2}', render_json, {'z': 1, 'a': 2}, indent=None)
utest('{"a":2,"z":1}', render_json, {'z': 1, 'a': 2}, sort=True, indent=None)
utest('[1,2]', render_json, (1, 2), indent=None)
utest('[1,2]', render_json, range(1, 3), indent=None)

utest({'a': [1, None]}, parse_json, '{"a": [1, null]}')
utest_exc(JSONEmptyDocument, parse_json, '')
utest_exc(JSONDecodeError, parse_json, '{"a":')
utest({'a': 1}, load_json, StringIO('{"a": 1}'))


@utest_call
def test_write_json():
  f = StringIO()
  write_json(f, {'a': 1}, [2], indent=None)
  utest_val('{"a":1}\n[2]\n', f.getvalue(), 'write_json output')
  utest_exc(ValueError, write_json, {'a': 1})
