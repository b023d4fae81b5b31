from chachastream.utilities.manipulation import get_blocks
from chachastream.utilities.runtime import RUNTIME


class Bytes(bytearray):
    """
    Bytearray that carries its own byteorder and knows how to XOR, chunk and pad itself.
    """

    def __init__(self, data=b'', byteorder: str='big'):
        """
        Parameters:
            data       (bytes/int): Bytes-like object or integer to be wrapped.
            byteorder        (str): Byteorder used when converting to and from integers.
        """
        if type(data) is int:
            data = data.to_bytes(max(1, (data.bit_length() + 7) // 8), byteorder)

        super().__init__(data)
        self.byteorder = byteorder


    def __repr__(self):
        return f'<Bytes: {bytes(self)}, byteorder={self.byteorder!r}>'


    def __str__(self):
        return self.__repr__()


    @staticmethod
    def wrap(data, byteorder: str=None) -> 'Bytes':
        """
        Wraps `data` in a Bytes object if it isn't one already.

        Parameters:
            data      (bytes): Bytes-like object.
            byteorder   (str): Byteorder to impose. Keeps the current one if `data` is already Bytes.

        Returns:
            Bytes: Wrapped data.
        """
        if type(data) is Bytes:
            if byteorder and byteorder != data.byteorder:
                return Bytes(data, byteorder=byteorder)
            return data

        return Bytes(data, byteorder=byteorder or 'big')


    @staticmethod
    def random(size: int=16) -> 'Bytes':
        """
        Returns `size` random bytes from the configured RNG.

        Parameters:
            size (int): Number of bytes.

        Returns:
            Bytes: Random bytes.
        """
        return Bytes(RUNTIME.random(size))


    def __getitem__(self, index):
        result = bytearray.__getitem__(self, index)
        if type(index) is slice:
            return Bytes(result, self.byteorder)
        return result


    def __add__(self, other):
        return Bytes(bytearray.__add__(self, other), self.byteorder)


    def __xor__(self, other):
        other = Bytes.wrap(other)
        if len(other) != len(self):
            raise ValueError(f"Cannot XOR {len(self)} bytes with {len(other)} bytes")

        return Bytes(bytes(a ^ b for a, b in zip(self, other)), self.byteorder)

    __rxor__ = __xor__


    def int(self) -> int:
        """
        Interprets the bytes as an integer using `self.byteorder`.

        Returns:
            int: Integer representation.
        """
        return int.from_bytes(self, self.byteorder)


    def chunk(self, size: int, allow_partials: bool=False) -> list:
        """
        Splits the bytes into chunks of `size`.

        Parameters:
            size            (int): Chunk size.
            allow_partials (bool): Whether to keep a trailing chunk smaller than `size`.

        Returns:
            list: Chunks as Bytes.
        """
        return [Bytes(block, self.byteorder) for block in get_blocks(self, size, allow_partials)]
