import unittest

from i2cbreakout.potentiometer import Potentiometer, PotType, Reg
from i2cbreakout.errors import IdentificationError

from .fakebus import FakeBusTestCase


class PotentiometerTest(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        self.device.set(Reg.whoami, b'\x01\x7B')

    def test_variants(self):
        self.assertEqual(Potentiometer().pot_type, PotType.rotary)
        self.device.set(Reg.whoami, b'\x01\x9B')
        self.assertEqual(Potentiometer().pot_type, PotType.slide)

    def test_unknown_device(self):
        self.device.set(Reg.whoami, b'\x01\x00')
        with self.assertRaises(IdentificationError):
            Potentiometer()

    def test_value(self):
        pot = Potentiometer()
        self.device.set(Reg.pot, b'\x03\xFF')
        self.assertEqual(pot.raw_value, 1023)
        self.assertAlmostEqual(pot.value, 100.0)

        self.device.set(Reg.pot, b'\x00\x00')
        self.assertAlmostEqual(pot.value, 0.0)

    def test_scaled_value(self):
        pot = Potentiometer(minimum=-1.0, maximum=1.0)
        self.device.set(Reg.pot, b'\x03\xFF')
        self.assertAlmostEqual(pot.value, 1.0)
        self.device.set(Reg.pot, b'\x00\x00')
        self.assertAlmostEqual(pot.value, -1.0)

    def test_led(self):
        pot = Potentiometer()
        pot.led = True
        self.assertEqual(self.device.writes[-1], (Reg.led | 0x80, b'\x01'))
        self.device.set(Reg.led, b'\x01')
        self.assertTrue(pot.led)

    def test_firmware(self):
        pot = Potentiometer()
        self.device.set(Reg.firmware_major, b'\x01')
        self.device.set(Reg.firmware_minor, b'\x00')
        self.device.set(Reg.self_test, b'\x01')
        self.assertEqual(pot.firmware_version, (1, 0))
        self.assertEqual(pot.self_test(), 1)


if __name__ == '__main__':
    unittest.main()
