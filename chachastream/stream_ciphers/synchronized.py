from chachastream.core.base_object import BaseObject
from chachastream.utilities.bytes import Bytes
from threading import Lock


class SynchronizedStream(BaseObject):
    """
    Serializes access to a stream cipher shared between threads. Every call that moves the keystream position holds the same lock.
    """

    def __init__(self, cipher: 'StreamCipher'):
        """
        Parameters:
            cipher (StreamCipher): Cipher to guard. It should not be used directly while wrapped.
        """
        self.cipher = cipher
        self._lock  = Lock()


    def seek(self, block_index: int):
        with self._lock:
            self.cipher.seek(block_index)


    def read(self, size: int) -> Bytes:
        with self._lock:
            return self.cipher.read(size)


    def readinto(self, buffer: bytearray) -> (int, bool):
        with self._lock:
            return self.cipher.readinto(buffer)


    def generate(self, length: int) -> Bytes:
        with self._lock:
            return self.cipher.generate(length)


    def xor_key_stream(self, dst: bytearray, src: bytes):
        with self._lock:
            self.cipher.xor_key_stream(dst, src)


    def encrypt(self, plaintext: bytes) -> Bytes:
        with self._lock:
            return self.cipher.encrypt(plaintext)


    def decrypt(self, ciphertext: bytes) -> Bytes:
        with self._lock:
            return self.cipher.decrypt(ciphertext)
