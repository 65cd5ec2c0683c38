# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'dashy is a small collection of lodash-style array utilities and a stack for Python 3.'

from .array import *
from .stack import *
