""" imports for funcset """
from .array import Array
from .config import SetConfig, Selection, configure, get_config, reset_config
from .curry import uncurry2
from .either import Either, Left, Right
from .functor import Functor, map #pylint: disable=redefined-builtin
from .hashset import HashSet, SetError
from .iterator import SetIterator
from .log import configure_logging
from .maybe import Maybe, Just, Nothing
from .monoid import Monoid, mconcat
from .semigroup import Semigroup
from .tuple import Tuple
