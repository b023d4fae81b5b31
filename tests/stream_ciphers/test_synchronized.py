from chachastream.stream_ciphers.all import ChaCha, SynchronizedStream
from chachastream.utilities.bytes import Bytes
from threading import Thread
import unittest


class SynchronizedStreamTestCase(unittest.TestCase):
    def test_concurrent_reads(self):
        key, nonce = Bytes.random(32), Bytes.random(8)
        stream     = SynchronizedStream(ChaCha(key, nonce, 8))
        results    = []

        def worker():
            for _ in range(25):
                results.append(bytes(stream.read(64)))

        threads = [Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()

        for thread in threads:
            thread.join()

        reference = ChaCha(key, nonce, 8)
        expected  = {bytes(reference.full_round(i)) for i in range(100)}

        self.assertEqual(len(results), 100)
        self.assertEqual(set(results), expected)


    def test_forwarding(self):
        key, nonce = Bytes.random(32), Bytes.random(8)
        stream     = SynchronizedStream(ChaCha(key, nonce))
        reference  = ChaCha(key, nonce)

        stream.seek(3)
        reference.seek(3)
        self.assertEqual(stream.generate(10), reference.generate(10))

        buffer = bytearray(20)
        self.assertEqual(stream.readinto(buffer), (20, False))
        self.assertEqual(buffer, reference.read(20))

        plaintext  = Bytes.random(50)
        ciphertext = stream.encrypt(plaintext)
        self.assertEqual(ciphertext, reference.encrypt(plaintext))

        stream.seek(3)
        stream.read(30)
        self.assertEqual(stream.decrypt(ciphertext), plaintext)

        dst = bytearray(8)
        stream.xor_key_stream(dst, bytes(8))
        self.assertEqual(dst, reference.read(8))
