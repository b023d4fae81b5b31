from chachastream.core.base_object import BaseObject
from chachastream.core.metadata import SizeSpec, SizeType
from chachastream.utilities.bytes import Bytes


class Primitive(BaseObject):
    KEY_SIZE   = SizeSpec(size_type=SizeType.NA)
    BLOCK_SIZE = SizeSpec(size_type=SizeType.NA)


class StreamCipher(Primitive):
    """
    Cipher that encrypts by XORing a keystream into the data. Subclasses implement `xor_key_stream`.
    """

    def xor_key_stream(self, dst: bytearray, src: bytes):
        raise NotImplementedError()


    def encrypt(self, plaintext: bytes) -> Bytes:
        """
        Encrypts `plaintext` with the next keystream bytes.

        Parameters:
            plaintext (bytes): Bytes-like object to be encrypted.

        Returns:
            Bytes: Resulting ciphertext.
        """
        ciphertext = Bytes(bytes(len(plaintext)))
        self.xor_key_stream(ciphertext, plaintext)
        return ciphertext


    def decrypt(self, ciphertext: bytes) -> Bytes:
        """
        Decrypts `ciphertext` with the next keystream bytes.

        Parameters:
            ciphertext (bytes): Bytes-like object to be decrypted.

        Returns:
            Bytes: Resulting plaintext.
        """
        return self.encrypt(ciphertext)
