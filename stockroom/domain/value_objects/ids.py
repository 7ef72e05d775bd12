from typing import NewType

ItemId = NewType("ItemId", int)
