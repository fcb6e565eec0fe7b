# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''


class XmlObjError(ValueError):
  'Base class for errors raised by the xmlobj package.'


class ValidationError(XmlObjError):
  '''
  Raised when a node cannot be constructed from the provided arguments.
  Currently the only such case is a root wrapper mapping that does not contain exactly one key.
  '''
