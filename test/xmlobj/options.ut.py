# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import FrozenInstanceError

from xmlobj.options import default_options, MarkupOptions, mk_options, option_items, xml_declaration
from utest import utest, utest_call, utest_exc, utest_val


utest('\t', getattr, default_options, 'indent')
utest('\r\n', getattr, default_options, 'new_line')
utest('_', getattr, default_options, 'attr_sel')
utest(None, getattr, default_options, 'attr_key')
utest('_value', getattr, default_options, 'value_sel')
utest('', getattr, default_options, 'def_val')
utest(None, getattr, default_options, 'declaration')
utest(True, getattr, default_options, 'self_close')

utest(MarkupOptions(indent=' ', new_line='\n'), default_options.merged, {'indent': ' '}, new_line='\n')
utest(MarkupOptions(indent=''), default_options.merged, {'indent': ' '}, indent='')
utest_exc(TypeError, default_options.merged, {'newLine': '\n'})

utest(MarkupOptions(indent='   '), MarkupOptions(indent=3).resolved)
utest(MarkupOptions(indent=''), MarkupOptions(indent=0).resolved)
utest(MarkupOptions(indent='-'), MarkupOptions(indent='-').resolved)

utest('', getattr, MarkupOptions(), 'declaration_line')
utest('', getattr, MarkupOptions(declaration=False), 'declaration_line')
utest(xml_declaration + '\n', getattr, MarkupOptions(declaration=True, new_line='\n'), 'declaration_line')
utest('<!doctype html>\r\n', getattr, MarkupOptions(declaration='<!doctype html>'), 'declaration_line')

utest({}, option_items, None)
utest({'indent': ''}, option_items, {'indent': ''})
utest(8, len, option_items(default_options))


@utest_call
def test_merged_without_changes_is_identity():
  utest_val(True, default_options.merged() is default_options, 'merged() is self')
  utest_val(True, default_options.merged({}) is default_options, 'merged({}) is self')


@utest_call
def test_mk_options():
  opts = MarkupOptions(attr_sel='@')
  utest_val(True, mk_options(opts) is opts, 'mk_options(opts) is opts')
  utest_val(default_options, mk_options(None), 'mk_options(None)')
  utest_val(MarkupOptions(def_val='?'), mk_options({'def_val': '?'}), 'mk_options(dict)')


@utest_call
def test_frozen():
  utest_exc(FrozenInstanceError, setattr, default_options, 'indent', '  ')
