import unittest

from i2cbreakout.crc import crc8


def crc8_bitwise(data, crc=0xFF, polynom=0x131):
    """reference: one shift per bit"""
    for d in data:
        crc ^= d
        for _ in range(8):
            crc <<= 1
            if crc & 0x100:
                crc ^= polynom
    return crc


class CRC8Test(unittest.TestCase):
    def test_sensirion_example(self):
        # datasheet example: 0xBEEF -> 0x92
        self.assertEqual(crc8(b'\xBE\xEF'), 0x92)
        self.assertEqual(crc8_bitwise(b'\xBE\xEF'), 0x92)

    def test_data_including_crc(self):
        self.assertEqual(crc8(b'\xBE\xEF\x92'), 0)
        self.assertNotEqual(crc8(b'\xBE\xEE\x92'), 0)

    def test_initial_value(self):
        self.assertEqual(crc8(b''), 0xFF)
        self.assertEqual(crc8(b'', 0x00), 0x00)

    def test_bitwise_equal(self):
        for value in range(0x10000):
            data = value.to_bytes(2, 'big')
            self.assertEqual(crc8(data), crc8_bitwise(data))


if __name__ == '__main__':
    unittest.main()
