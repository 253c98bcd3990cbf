from funfacts.source.base import FactSource
from funfacts.source.prefetch import PrefetchingFactSource

__all__ = [
    "FactSource",
    "PrefetchingFactSource",
]
