import unittest
from unittest import mock
from smbus2 import SMBus

from i2cbreakout.i2c import I2C
from i2cbreakout.errors import I2CError

from .fakebus import FakeBusTestCase


class RegisterAccessTest(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        self.dev = I2C(1, 0x35)

    def test_read_is_one_combined_transaction(self):
        self.device.set(0x05, b'\x01\x7B')
        self.assertEqual(self.dev.read_u16be(0x05), 379)
        self.assertEqual(self.device.transactions, [
            [('w', 0x35, b'\x05'), ('r', 0x35, b'\x01\x7B')],
        ])

    def test_byte_order(self):
        self.device.set(0x05, b'\x01\x7B\x00\x00')
        self.assertEqual(self.dev.read_u16be(0x05), 0x017B)
        self.assertEqual(self.dev.read_u16le(0x05), 0x7B01)
        self.assertEqual(self.dev.read_u24be(0x05), 0x017B00)
        self.assertEqual(self.dev.read_u32le(0x05), 0x7B01)

    def test_signed(self):
        self.device.set(0x00, b'\xFF\xFE')
        self.assertEqual(self.dev.read_s16be(0x00), -2)

    def test_struct_format(self):
        self.device.set(0x20, b'\x02\x03\x64\x00\xBC\x02')
        self.assertEqual(self.dev.read_register(0x20, '<BBHH'), (2, 3, 100, 700))
        self.assertEqual(self.dev.read_register(0x20, 2), b'\x02\x03')

    def test_write(self):
        self.dev.write_u16be(0x21, 0x0102)
        self.dev.write_u16le(0x22, 0x0102)
        self.dev.write_u8(0x23, 0xFF)
        self.dev.write(0x1E)
        self.assertEqual(self.device.writes, [
            (0x21, b'\x01\x02'), (0x22, b'\x02\x01'), (0x23, b'\xFF'), (0x1E, b''),
        ])

    def test_value_range(self):
        with self.assertRaises(ValueError):
            self.dev.write_u8(0x00, 256)
        with self.assertRaises(ValueError):
            self.dev.write_u16be(0x00, -1)
        with self.assertRaises(ValueError):
            self.dev.read_u8(0x100)
        self.assertEqual(self.device.writes, [])

    def test_write_bits(self):
        self.device.set(0x1F, b'\xAF')
        self.dev.write_bits(0x1F, 4, 3, 0b011)
        self.assertEqual(self.device.get(0x1F), b'\xBF')
        self.assertEqual(self.dev.read_bits(0x1F, 4, 3), 3)

    def test_write_bit(self):
        self.device.set(0x00, b'\x41')
        self.dev.write_bit(0x00, 0, False)
        self.assertEqual(self.device.get(0x00), b'\x40')
        self.dev.write_bit(0x00, 7, True)
        self.assertEqual(self.device.get(0x00), b'\xC0')
        self.assertTrue(self.dev.read_bit(0x00, 6))

    def test_bit_field_check(self):
        self.device.set(0x00, b'\x00')
        with self.assertRaises(ValueError):
            self.dev.write_bits(0x00, 4, 3, 8)
        with self.assertRaises(ValueError):
            self.dev.write_bits(0x00, 6, 3, 0)
        with self.assertRaises(ValueError):
            self.dev.read_bits(0x00, 0, 0)
        self.assertEqual(self.device.writes, [])

    def test_modify_register(self):
        self.device.set(0x1C, b'\x07')
        self.assertEqual(self.dev.modify_register(0x1C, 0x18, 0x18), 1)
        self.assertEqual(self.device.get(0x1C), b'\x1F')

        self.clear_writes()
        self.assertIsNone(self.dev.modify_register(0x1C, 0x18, 0x18))
        self.assertEqual(self.device.writes, [(0x1C, b'')])  # register address of the read

    def test_i2c_read_write(self):
        self.device.set(0xE0, b'\x66\x55\x00')
        self.assertEqual(self.dev.i2c_read_write(0xE0, 3), b'\x66\x55\x00')
        self.assertEqual(len(self.device.transactions[-1]), 2)

        self.assertEqual(self.dev.i2c_read_write(b'\xF3\x00', 2, rdelay=0.05), b'\x00\x00')
        self.assertEqual(len(self.device.transactions[-1]), 1)

        self.assertEqual(self.dev.i2c_read_write(b'\x30\xA2'), 2)

    def test_transfer_error(self):
        self.device.fail = OSError(121, 'Remote I/O error')
        with self.assertRaises(I2CError) as cm:
            self.dev.read_u8(0x05)
        self.assertEqual(cm.exception.errno, 121)
        self.assertIn('0x5', str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, OSError)


class RegisterAccess16Test(FakeBusTestCase):
    address_width = 2

    def setUp(self):
        super().setUp()
        self.dev = I2C(1, 0x29)

    def test_16bit_register_address(self):
        self.device.set(0x010F, b'\xEA\xCC')
        self.assertEqual(self.dev.read16_u16be(0x010F), 0xEACC)
        self.assertEqual(self.dev.read16_u16le(0x010F), 0xCCEA)
        self.assertEqual(self.dev.read16_u8(0x010F), 0xEA)
        self.assertEqual(self.device.transactions[0][0], ('w', 0x29, b'\x01\x0F'))

    def test_16bit_write(self):
        self.dev.write16_u8(0x0000, 1)
        self.dev.write16_u16be(0x001E, 0x0400)
        self.dev.write16_u16le(0x001E, 0x0400)
        self.assertEqual(self.device.writes, [
            (0x0000, b'\x01'), (0x001E, b'\x04\x00'), (0x001E, b'\x00\x04'),
        ])


class OpenCloseTest(FakeBusTestCase):
    def test_address_range(self):
        for addr in (0x00, 0x02, 0x78, 0x80):
            with self.assertRaises(ValueError):
                I2C(1, addr)
        SMBus.open.assert_not_called()

    def test_failed_configuration_closes(self):
        class Broken(I2C):
            def _configure(self):
                self.read_u8(0x00)

        self.device.fail = OSError(6, 'No such device or address')
        with mock.patch.object(SMBus, 'close') as close:
            with self.assertRaises(I2CError):
                Broken(1, 0x40)
        close.assert_called_once_with()

    def test_context_manager(self):
        with mock.patch.object(SMBus, 'close') as close:
            with I2C(1, 0x40) as dev:
                self.assertEqual(dev.device_addr, 0x40)
        close.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
