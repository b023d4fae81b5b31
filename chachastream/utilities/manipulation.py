def left_rotate(x: int, amount: int, bits: int=32) -> int:
    """
    Performs a left-rotate on `x`.

    Parameters:
        x      (int): Integer to rotate.
        amount (int): Amount to rotate by.
        bits   (int): Bit-size of `x`.

    Returns:
        int: Rotated integer.
    """
    mask = 2**bits - 1
    x   &= mask
    return ((x << amount) | (x >> (bits - amount))) & mask


def get_blocks(data: bytes, block_size: int=16, allow_partials: bool=False) -> list:
    """
    Splits `data` into blocks of `block_size`.

    Parameters:
        data           (bytes): Bytes-like object to split.
        block_size       (int): Size of each block.
        allow_partials  (bool): Whether to keep a trailing block smaller than `block_size`.

    Returns:
        list: Blocks.
    """
    upper = len(data) if allow_partials else len(data) - len(data) % block_size
    return [data[i:i + block_size] for i in range(0, upper, block_size)]
