from .entity import E, StockedEntity

__all__ = ["E", "StockedEntity"]
