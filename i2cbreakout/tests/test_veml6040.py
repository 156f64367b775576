import math
import unittest
from unittest import mock

from i2cbreakout.veml6040 import VEML6040, Reg, XYZ_MATRIX, cct, hsv

from .fakebus import FakeBusTestCase


class ColourTest(unittest.TestCase):
    def test_hsv_primaries(self):
        self.assertEqual(hsv(65535, 0, 0), (0.0, 100.0, 100.0))
        self.assertEqual(hsv(0, 65535, 0), (120.0, 100.0, 100.0))
        self.assertEqual(hsv(0, 0, 65535), (240.0, 100.0, 100.0))
        self.assertEqual(hsv(65535, 0, 65535), (300.0, 100.0, 100.0))

    def test_hsv_grey(self):
        hue, saturation, value = hsv(6553.5, 6553.5, 6553.5)
        self.assertEqual((hue, saturation), (0.0, 0.0))
        self.assertAlmostEqual(value, 10.0)

    def test_cct_no_light(self):
        self.assertEqual(cct(0, 0, 0), 0.0)

    def test_cct_scale_invariant(self):
        self.assertAlmostEqual(cct(100, 200, 50), cct(1000, 2000, 500), places=6)
        self.assertNotAlmostEqual(cct(100, 200, 50, 'indoor'), cct(100, 200, 50, 'outdoor'))

    def test_cct_epicenter(self):
        # XYZ == RGB, y = 1858 / 10000
        with mock.patch.dict(XYZ_MATRIX, identity=((1, 0, 0), (0, 1, 0), (0, 0, 1))):
            self.assertEqual(cct(4000, 1858, 4142, 'identity'), math.inf)

    def test_cct_location(self):
        with self.assertRaises(KeyError):
            cct(100, 200, 50, 'space')


class VEML6040Test(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        self.sensor = VEML6040()

    def test_init(self):
        self.assertEqual(self.device.writes, [(Reg.config, b'\x01'), (Reg.config, b'\x00')])

    def test_read_rgbw(self):
        self.device.set(Reg.red, b'\x10\x00')
        self.device.set(Reg.green, b'\x00\x01')
        self.device.set(Reg.blue, b'\xFF\xFF')
        self.device.set(Reg.white, b'\x00\x00')
        self.assertEqual(self.sensor.read_rgbw(), (0x10, 0x100, 0xFFFF, 0))

    def test_integration_time(self):
        self.assertEqual(self.sensor.integration_time, 0)
        self.sensor.integration_time = 2
        self.assertEqual(self.device.get(Reg.config), b'\x20')
        self.assertEqual(self.sensor.integration_time, 2)

        with self.assertRaises(ValueError):
            self.sensor.integration_time = 6

    def test_luminance(self):
        self.device.set(Reg.green, b'\xE8\x03')
        self.assertAlmostEqual(self.sensor.luminance(), 251.68)
        self.device.set(Reg.config, b'\x10\x00')
        self.assertAlmostEqual(self.sensor.luminance(), 125.84)


if __name__ == '__main__':
    unittest.main()
