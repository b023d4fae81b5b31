from chachastream.utilities.bytes import Bytes
from chachastream.utilities.manipulation import left_rotate, get_blocks
import unittest


class BytesTestCase(unittest.TestCase):
    def test_int_conversion(self):
        self.assertEqual(Bytes(0x0102), b'\x01\x02')
        self.assertEqual(Bytes(0x0102, 'little'), b'\x02\x01')
        self.assertEqual(Bytes(b'\x02\x01', 'little').int(), 0x0102)
        self.assertEqual(Bytes(0), b'\x00')


    def test_wrap(self):
        data = Bytes(b'abc')
        self.assertIs(Bytes.wrap(data), data)
        self.assertEqual(Bytes.wrap(data, 'little').byteorder, 'little')
        self.assertEqual(Bytes.wrap(b'abc').byteorder, 'big')


    def test_slice_keeps_type(self):
        data = Bytes(b'abcdef', 'little')
        self.assertIsInstance(data[1:3], Bytes)
        self.assertEqual(data[1:3].byteorder, 'little')
        self.assertEqual(data[0], ord('a'))
        self.assertIsInstance(data + b'g', Bytes)


    def test_xor(self):
        self.assertEqual(Bytes(b'\x0f\xf0') ^ b'\xff\xff', b'\xf0\x0f')
        self.assertEqual(b'\xff\xff' ^ Bytes(b'\x0f\xf0'), b'\xf0\x0f')

        with self.assertRaises(ValueError):
            Bytes(b'\x00') ^ b'\x00\x00'


    def test_chunk(self):
        data = Bytes(b'abcdefg')
        self.assertEqual(data.chunk(3), [b'abc', b'def'])
        self.assertEqual(data.chunk(3, allow_partials=True), [b'abc', b'def', b'g'])


    def test_left_rotate(self):
        self.assertEqual(left_rotate(0x80000001, 1), 0x00000003)
        self.assertEqual(left_rotate(0x12345678, 16), 0x56781234)
        self.assertEqual(left_rotate(0x1, 7, 8), 0x80)


    def test_get_blocks(self):
        self.assertEqual(get_blocks(b'abcdefgh', 4), [b'abcd', b'efgh'])
        self.assertEqual(get_blocks(b'abcdefghi', 4), [b'abcd', b'efgh'])
        self.assertEqual(get_blocks(b'abcdefghi', 4, True), [b'abcd', b'efgh', b'i'])
