from __future__ import annotations

from .common import Bidirectional
from .pairs import Paired, PairIterator, paired, paired_list
from .wrapping import Wrapping

__version__ = __import__("importlib.metadata").metadata.version(__name__)

__all__ = [
    # pairing
    "paired",
    "paired_list",
    "Paired",
    "PairIterator",
    # options
    "Wrapping",
    # common
    "Bidirectional",
]
