from chachastream.utilities.manipulation import left_rotate
from chachastream.utilities.bytes import Bytes
from chachastream.utilities.exceptions import InvalidKeyLength, InvalidNonceLength, InvalidRoundCount, LengthMismatch, KeystreamExhausted
from chachastream.utilities.runtime import RUNTIME
from chachastream.core.metadata import SizeType, SizeSpec
from chachastream.core.primitives import StreamCipher
import logging

log = logging.getLogger(__name__)

CONSTANT    = b"expand 32-byte k"
BLOCK_BYTES = 64
MASK32      = 2**32-1
MAX_COUNTER = 2**64-1


def QUARTER_ROUND(a: int, b: int, c: int, d: int) -> (int, int, int, int):
    """
    Performs the ChaCha quarter round on four 32-bit words.

    Parameters:
        a (int): First word.
        b (int): Second word.
        c (int): Third word.
        d (int): Fourth word.

    Returns:
        (int, int, int, int): Mixed words.
    """
    a = (a + b) & MASK32
    d = left_rotate(d ^ a, 16)
    c = (c + d) & MASK32
    b = left_rotate(b ^ c, 12)

    a = (a + b) & MASK32
    d = left_rotate(d ^ a, 8)
    c = (c + d) & MASK32
    b = left_rotate(b ^ c, 7)
    return a, b, c, d



def DOUBLE_ROUND(x: list):
    """
    Performs a column round followed by a diagonal round on the 16-word working state `x` in place.
    """
    # Column round
    x[0], x[4], x[ 8], x[12] = QUARTER_ROUND(x[0], x[4], x[ 8], x[12])
    x[1], x[5], x[ 9], x[13] = QUARTER_ROUND(x[1], x[5], x[ 9], x[13])
    x[2], x[6], x[10], x[14] = QUARTER_ROUND(x[2], x[6], x[10], x[14])
    x[3], x[7], x[11], x[15] = QUARTER_ROUND(x[3], x[7], x[11], x[15])

    # Diagonal round
    x[0], x[5], x[10], x[15] = QUARTER_ROUND(x[0], x[5], x[10], x[15])
    x[1], x[6], x[11], x[12] = QUARTER_ROUND(x[1], x[6], x[11], x[12])
    x[2], x[7], x[ 8], x[13] = QUARTER_ROUND(x[2], x[7], x[ 8], x[13])
    x[3], x[4], x[ 9], x[14] = QUARTER_ROUND(x[3], x[4], x[ 9], x[14])



class ChaCha(StreamCipher):
    """
    ChaCha stream cipher with a 64-bit block counter and a 64-bit nonce.

    Add-rotate-xor (ARX) structure.

    The keystream can be consumed three ways: sequentially (`read`, `readinto`, iteration),
    by jumping to a block (`seek`), or by XORing it into data (`xor_key_stream`, `encrypt`, `decrypt`).
    Sequential reads report the end of the keystream as a short read; the XOR path raises
    `KeystreamExhausted` instead since it can't express partial success.

    Instances are not thread-safe. Use `SynchronizedStream` to share one between threads.

    References:
        https://cr.yp.to/chacha/chacha-20080128.pdf
    """

    KEY_SIZE   = SizeSpec(size_type=SizeType.SINGLE, sizes=256)
    NONCE_SIZE = SizeSpec(size_type=SizeType.SINGLE, sizes=64)
    BLOCK_SIZE = SizeSpec(size_type=SizeType.SINGLE, sizes=BLOCK_BYTES*8)

    def __init__(self, key: bytes, nonce: bytes, rounds: int=20):
        """
        Parameters:
            key    (bytes): Key (at least 32 bytes; only the first 32 are used).
            nonce  (bytes): Nonce (at least 8 bytes; only the first 8 are used).
            rounds   (int): Number of rounds to perform. Must be positive and even (usually 8, 12, or 20).
        """
        if type(rounds) is not int or rounds <= 0 or rounds % 2:
            raise InvalidRoundCount(f"Rounds must be a positive, even integer, got {rounds!r}")

        key_bytes   = self.KEY_SIZE.minimum // 8
        nonce_bytes = self.NONCE_SIZE.minimum // 8

        if len(key) < key_bytes:
            raise InvalidKeyLength(f"Key must be at least {key_bytes} bytes, got {len(key)}")

        if len(nonce) < nonce_bytes:
            raise InvalidNonceLength(f"Nonce must be at least {nonce_bytes} bytes, got {len(nonce)}")

        if len(key)*8 not in self.KEY_SIZE or len(nonce)*8 not in self.NONCE_SIZE:
            log.debug(f"Truncating {len(key)}-byte key and {len(nonce)}-byte nonce to {key_bytes} and {nonce_bytes} bytes")

        self.key    = Bytes.wrap(key[:key_bytes], 'little')
        self.nonce  = Bytes.wrap(nonce[:nonce_bytes], 'little')
        self.rounds = rounds

        self.state = [
            *[word.int() for word in Bytes(CONSTANT, 'little').chunk(4)],
            *[word.int() for word in self.key.chunk(4)],
            0, 0,
            *[word.int() for word in self.nonce.chunk(4)]
        ]

        self.output    = Bytes(bytes(BLOCK_BYTES), 'little')
        self.cursor    = BLOCK_BYTES
        self.exhausted = False


    def __iter__(self):
        while True:
            if self.cursor >= BLOCK_BYTES:
                try:
                    self.next_block()
                except KeystreamExhausted:
                    return

            self.cursor += 1
            yield self.output[self.cursor - 1]


    @property
    def counter(self) -> int:
        """
        Index of the next block to be generated.
        """
        return (self.state[13] << 32) | self.state[12]


    @counter.setter
    def counter(self, value: int):
        self.state[12] = value & MASK32
        self.state[13] = (value >> 32) & MASK32


    @property
    def remaining(self) -> int:
        """
        Number of keystream bytes that can still be produced before the counter wraps.
        """
        blocks = 0 if self.exhausted else MAX_COUNTER + 1 - self.counter
        return BLOCK_BYTES - self.cursor + blocks * BLOCK_BYTES



    def full_round(self, block_index: int, state: list=None) -> Bytes:
        """
        Computes the keystream block at `block_index` without touching the cipher's position.

        Parameters:
            block_index (int): Block number.
            state      (list): Custom 16-word state to be directly injected (overrides `block_index`).

        Returns:
            Bytes: 64-byte keystream block.
        """
        if state is None:
            state     = list(self.state)
            state[12] = block_index & MASK32
            state[13] = (block_index >> 32) & MASK32

        x = list(state)
        for _ in range(self.rounds // 2):
            DOUBLE_ROUND(x)

        return Bytes(b''.join([int.to_bytes((x[i] + state[i]) & MASK32, 4, 'little') for i in range(16)]), byteorder='little')



    def next_block(self):
        """
        Generates the block at the current counter into the output buffer, advances the counter, and resets the cursor.
        If the counter wraps, the generated block is still valid but the cipher becomes exhausted.
        """
        if self.exhausted:
            raise KeystreamExhausted("Keystream exhausted; the 64-bit block counter has wrapped")

        self.output = self.full_round(self.counter)
        counter     = (self.counter + 1) & MAX_COUNTER

        if not counter:
            log.debug("Block counter wrapped; keystream exhausted after this block")
            self.exhausted = True

        self.counter = counter
        self.cursor  = 0



    def seek(self, block_index: int):
        """
        Sets the stream position to the start of the `block_index`-th 64-byte block. `seek(0)` returns to the initial keystream.

        Parameters:
            block_index (int): Block number in [0, 2**64).
        """
        if type(block_index) is not int or not 0 <= block_index <= MAX_COUNTER:
            raise ValueError(f"Block index must be an integer in [0, 2**64), got {block_index!r}")

        log.debug(f"Seeking to block {block_index}")
        self.counter   = block_index
        self.exhausted = False
        self.next_block()



    def readinto(self, buffer: bytearray) -> (int, bool):
        """
        Fills `buffer` with keystream bytes.

        Parameters:
            buffer (bytearray): Writable bytes-like object.

        Returns:
            (int, bool): Number of bytes written and whether the end of the keystream was reached.
        """
        written = 0
        while written < len(buffer):
            if self.cursor >= BLOCK_BYTES:
                try:
                    self.next_block()
                except KeystreamExhausted:
                    return written, True

            n = min(len(buffer) - written, BLOCK_BYTES - self.cursor)
            buffer[written:written + n] = self.output[self.cursor:self.cursor + n]
            self.cursor += n
            written     += n

        return written, False



    def read(self, size: int) -> Bytes:
        """
        Reads up to `size` keystream bytes. Returns fewer bytes (possibly none) once the keystream ends.

        Parameters:
            size (int): Number of bytes to read.

        Returns:
            Bytes: Keystream.
        """
        buffer     = Bytes(bytes(size))
        written, _ = self.readinto(buffer)
        return buffer[:written]



    def _yield_keystream(self, length: int):
        while length:
            if self.cursor >= BLOCK_BYTES:
                self.next_block()

            n = min(length, BLOCK_BYTES - self.cursor)
            yield self.output[self.cursor:self.cursor + n]
            self.cursor += n
            length      -= n



    def generate(self, length: int) -> Bytes:
        """
        Generates exactly `length` keystream bytes.

        Parameters:
            length (int): Number of bytes.

        Returns:
            Bytes: Keystream.
        """
        if length < 0:
            raise ValueError("Length must be non-negative")

        if length > self.remaining:
            raise KeystreamExhausted(f"Requested {length} bytes but only {self.remaining} remain in the keystream")

        chunks = self._yield_keystream(length)

        if length >= RUNTIME.min_progress_length:
            buffered = BLOCK_BYTES - self.cursor
            total    = (1 if buffered else 0) + max(0, -(-(length - buffered) // BLOCK_BYTES))
            chunks   = RUNTIME.report_progress(chunks, total=total, unit='block', desc='ChaCha keystream')

        return Bytes(b''.join(chunks))



    def xor_key_stream(self, dst: bytearray, src: bytes):
        """
        XORs the next `len(src)` keystream bytes with `src` and writes the result to `dst`.
        `dst` may be the same buffer as `src`. Nothing is written if the keystream cannot cover `src`.

        Parameters:
            dst (bytearray): Writable bytes-like object the same length as `src`.
            src     (bytes): Bytes-like object to be transformed.
        """
        if len(dst) != len(src):
            raise LengthMismatch(f"Destination ({len(dst)} bytes) and source ({len(src)} bytes) lengths differ")

        keystream = self.generate(len(src))
        dst[:]    = keystream ^ src
