from .json_persistence import JsonPersistenceAdapter

__all__ = ["JsonPersistenceAdapter"]
