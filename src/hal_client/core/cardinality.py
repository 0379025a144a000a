from enum import Enum


class Cardinality(Enum):
    """Wire shape of a link relation: one link object, or an array of them."""

    SINGULAR = "singular"
    PLURAL = "plural"

    def __str__(self) -> str:
        return self.value


__all__ = ["Cardinality"]
