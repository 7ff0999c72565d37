from .functions import *  # noqa
from .placeholder import *  # noqa
from .util import UNBOUND  # noqa

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
