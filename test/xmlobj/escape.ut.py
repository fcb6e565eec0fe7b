# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from xmlobj.escape import esc_xml, fmt_scalar, prefer_int
from utest import utest


utest('&lt;&gt;&amp;&apos;&quot;', esc_xml, '<>&\'"')
utest('a &amp;amp; b', esc_xml, 'a &amp; b')
utest('plain', esc_xml, 'plain')
utest('3', esc_xml, 3)
utest('', esc_xml, None)

utest('', fmt_scalar, None)
utest('true', fmt_scalar, True)
utest('false', fmt_scalar, False)
utest('0', fmt_scalar, 0)
utest('2', fmt_scalar, 2.0)
utest('2.5', fmt_scalar, 2.5)
utest('inf', fmt_scalar, float('inf'))

utest(1, prefer_int, 1.0)
utest(1.5, prefer_int, 1.5)
utest('1.0', prefer_int, '1.0')
