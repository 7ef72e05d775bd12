from enum import Enum


class PersistenceStatus(str, Enum):
    SAVED = "SAVED"
    LOADED = "LOADED"
    ABSENT = "ABSENT"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
    IO_FAILURE = "IO_FAILURE"
