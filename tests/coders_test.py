import unittest
from io import BytesIO

from huffcodec.coders import BitOutputStream, BitInputStream


class TestBitStreamHelpers(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bits = [1, 0, 1, 0, 1, 0, 1, 0]
        for bit in bits:
            bos.write(bit)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1]:
            bos.write(bit)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10100000]))
        self.assertEqual(bos.bits_written, 3)

    def test_write_bits_msb_first(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(32, 0xface8201)
        bos.write_bits(9, 256)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0xfa, 0xce, 0x82, 0x01, 0b10000000, 0b00000000]))

    def test_write_bits_keeps_low_bits(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(4, 0xff3)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b00110000]))

    def test_write_code(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_code("0110")
        bos.write_code("")
        bos.write_code("1111")
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b01101111]))

    def test_invalid_arguments(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write(2)
        with self.assertRaises(ValueError):
            bos.write_bits(0, 1)
        with self.assertRaises(ValueError):
            bos.write_bits(33, 1)
        with self.assertRaises(ValueError):
            bos.write_bits(8, -1)

    def test_close_flushes_once(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write(1)
        bos.close()
        self.assertTrue(out.closed)
        bos.close()

    def test_bit_input_stream(self):
        bis = BitInputStream(BytesIO(bytes([0b11001010])))
        bits = [bis.read() for _ in range(8)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0])
        self.assertEqual(bis.read(), -1)
        self.assertEqual(bis.bits_read, 8)

    def test_read_bits(self):
        bis = BitInputStream(BytesIO(bytes([0xfa, 0xce, 0x82, 0x01, 0x80])))
        self.assertEqual(bis.read_bits(32), 0xface8201)
        self.assertEqual(bis.read_bits(1), 1)
        self.assertEqual(bis.read_bits(7), 0)

    def test_read_bits_end_of_stream(self):
        bis = BitInputStream(BytesIO(bytes([0xff])))
        self.assertEqual(bis.read_bits(9), -1)

    def test_read_bits_invalid_count(self):
        bis = BitInputStream(BytesIO(b"\x00"))
        with self.assertRaises(ValueError):
            bis.read_bits(0)

    def test_write_then_read(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(9, 300)
        bos.write_bits(3, 5)
        bos.finish()
        bis = BitInputStream(BytesIO(out.getvalue()))
        self.assertEqual(bis.read_bits(9), 300)
        self.assertEqual(bis.read_bits(3), 5)
        # padding bits
        self.assertEqual(bis.read_bits(4), 0)
        self.assertEqual(bis.read(), -1)


if __name__ == '__main__':
    unittest.main()
