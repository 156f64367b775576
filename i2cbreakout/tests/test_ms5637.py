import struct
import unittest
from unittest import mock

from i2cbreakout.ms5637 import MS5637, Cmd, Resolution

from .fakebus import FakeBusTestCase

# calibration and conversion example of the datasheet
PROM = (0x0000, 46372, 43981, 29059, 27842, 31553, 28165)
D1 = 6465444  # pressure
D2 = 8077636  # temperature


class MS5637Test(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        for idx, coeff in enumerate(PROM):
            self.device.set(Cmd.prom_read + 2 * idx, struct.pack('>H', coeff))
        self.sensor = MS5637()

    def test_init(self):
        self.assertEqual(self.device.writes[0], (Cmd.soft_reset, b''))
        self.assertEqual(self.sensor.coeffs, PROM)

    def test_read(self):
        self.device.set(Cmd.adc_read, D2.to_bytes(3, 'big'), D1.to_bytes(3, 'big'))
        self.clear_writes()

        pressure, temperature = self.sensor.read()
        self.assertAlmostEqual(pressure, 1100.02)
        self.assertAlmostEqual(temperature, 20.00)

        commands = [reg for reg, payload in self.device.writes if reg != Cmd.adc_read]
        self.assertEqual(commands, [Cmd.start_temperature | 0x0A, Cmd.start_pressure | 0x0A])

    def test_resolution(self):
        self.device.set(Cmd.adc_read, D2.to_bytes(3, 'big'), D1.to_bytes(3, 'big'))
        self.sensor.resolution = Resolution.osr_256
        self.clear_writes()

        self.sensor.read()
        commands = [reg for reg, payload in self.device.writes if reg != Cmd.adc_read]
        self.assertEqual(commands, [Cmd.start_temperature, Cmd.start_pressure])

        with self.assertRaises(ValueError):
            self.sensor.resolution = 6

    def test_low_temperature(self):
        # second order compensation, TEMP = 992 (below 20 C)
        pressure, temperature = self.sensor.compensate(D1, PROM[5] * 256 - 300000)
        self.assertAlmostEqual(temperature, 9.61)
        self.assertAlmostEqual(pressure, 1075.22)

    def test_very_low_temperature(self):
        # additional second order terms, TEMP = -2001 (below -15 C)
        pressure, temperature = self.sensor.compensate(D1, PROM[5] * 256 - 1191400)
        self.assertAlmostEqual(temperature, -24.96)
        self.assertAlmostEqual(pressure, 994.22)

    def test_altitude(self):
        with mock.patch.object(MS5637, 'read', return_value=(1013.25, 20.0)):
            self.assertAlmostEqual(self.sensor.altitude(), 0.0)
        with mock.patch.object(MS5637, 'read', return_value=(900.0, 20.0)):
            self.assertAlmostEqual(self.sensor.altitude(), 988.6, delta=0.5)


if __name__ == '__main__':
    unittest.main()
