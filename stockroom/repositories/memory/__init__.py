from .keyed_store import KeyedStore

__all__ = ["KeyedStore"]
