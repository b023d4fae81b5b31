from chachastream.core.base_object import BaseObject
from enum import Enum


class SizeType(Enum):
    NA     = 0
    SINGLE = 1


class SizeSpec(BaseObject):
    """
    Describes the sizes (in bits) a primitive accepts for an input such as its key or nonce.
    """

    def __init__(self, size_type: SizeType, sizes: int=None):
        """
        Parameters:
            size_type (SizeType): How to interpret `sizes`.
            sizes          (int): Size in bits.
        """
        self.size_type = size_type
        self.sizes     = sizes


    @property
    def minimum(self) -> int:
        if self.size_type == SizeType.SINGLE:
            return self.sizes
        return 0


    def __contains__(self, size: int) -> bool:
        if self.size_type == SizeType.SINGLE:
            return size == self.sizes
        return True
