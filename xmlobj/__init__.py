# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
xmlobj builds markup documents from nested dictionaries and lists, or by assignment into auto-created paths.
Trees render to markup text with `MarkupNode.render` and to plain data with `MarkupNode.extract`.
'''

from .exceptions import ValidationError, XmlObjError
from .node import Absent, MarkupNode
from .options import default_options, MarkupOptions, xml_declaration


__version__ = '0.1.0'
