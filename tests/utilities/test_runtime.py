from chachastream.stream_ciphers.chacha import ChaCha
from chachastream.utilities.runtime import RUNTIME
from chachastream.utilities.bytes import Bytes
from tqdm import tqdm
import logging
import unittest


class RuntimeTestCase(unittest.TestCase):
    def setUp(self):
        self.random               = RUNTIME.random
        self.enable_progress_bars = RUNTIME.enable_progress_bars
        self.min_progress_length  = RUNTIME.min_progress_length


    def tearDown(self):
        RUNTIME.random               = self.random
        RUNTIME.enable_progress_bars = self.enable_progress_bars
        RUNTIME.min_progress_length  = self.min_progress_length
        RUNTIME.set_log_level(logging.NOTSET)


    def test_custom_random(self):
        RUNTIME.random = lambda size: b'\xaa' * size
        self.assertEqual(Bytes.random(4), b'\xaa\xaa\xaa\xaa')


    def test_report_progress(self):
        items = [1, 2, 3]
        self.assertIs(RUNTIME.report_progress(items), items)

        RUNTIME.enable_progress_bars = True
        progress = RUNTIME.report_progress(items, total=3, disable=True)
        self.assertIsInstance(progress, tqdm)
        self.assertEqual(list(progress), items)


    def test_generate_with_progress(self):
        RUNTIME.enable_progress_bars = True
        RUNTIME.min_progress_length  = 64

        cipher = ChaCha(bytes(32), bytes(8))
        cipher.read(10)
        self.assertEqual(cipher.generate(300), ChaCha(bytes(32), bytes(8)).read(310)[10:])


    def test_set_log_level(self):
        RUNTIME.set_log_level(logging.DEBUG)
        self.assertEqual(logging.getLogger('chachastream').level, logging.DEBUG)

        with self.assertLogs('chachastream.stream_ciphers.chacha', level=logging.DEBUG):
            ChaCha(bytes(32), bytes(8)).seek(5)
