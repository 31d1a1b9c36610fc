from __future__ import annotations

from ._pymaybe import *
from ._pymaybe import (  # for pickling and the docs
    __all__,
    __version__,
    _unpkl_just,
    _unpkl_nothing,
)
