from funfacts.providers.base import FactProvider
from funfacts.providers.chain import FallbackChain
from funfacts.providers.opentdb import OpenTriviaProvider
from funfacts.providers.retry import RetryingProvider
from funfacts.providers.static import StaticFactPool, StaticFactProvider
from funfacts.providers.uselessfacts import UselessFactsProvider

__all__ = [
    "FactProvider",
    "FallbackChain",
    "OpenTriviaProvider",
    "RetryingProvider",
    "StaticFactPool",
    "StaticFactProvider",
    "UselessFactsProvider",
]
