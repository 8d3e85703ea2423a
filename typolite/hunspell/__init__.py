from .dictionary import Dictionary, NotLoadedError

__all__ = [
    "Dictionary",
    "NotLoadedError"
]
