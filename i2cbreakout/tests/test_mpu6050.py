import unittest

from i2cbreakout.mpu6050 import MPU6050, Reg, AccelRange, GyroRange, GRAVITY

from .fakebus import FakeBusTestCase


class MPU6050Test(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        self.motion = MPU6050()

    def test_wake_up(self):
        self.assertEqual(self.device.writes, [(Reg.pwr_mgmt_1, b'\x00')] * 3)

    def test_temperature(self):
        self.device.set(Reg.temp_out, b'\x01\x54')
        self.assertAlmostEqual(self.motion.read_temperature(), 37.53)
        self.device.set(Reg.temp_out, b'\xFE\xAC')
        self.assertAlmostEqual(self.motion.read_temperature(), 35.53)

    def test_accel_range(self):
        self.device.set(Reg.accel_config, b'\xE8')
        self.assertEqual(self.motion.accel_range, AccelRange.range_4g)
        self.assertEqual(self.motion.accel_range_value, 4)

        # self test bits kept
        self.motion.accel_range = AccelRange.range_16g
        self.assertEqual(self.device.get(Reg.accel_config), b'\xF8')
        self.motion.accel_range = AccelRange.range_2g
        self.assertEqual(self.device.get(Reg.accel_config), b'\xE0')

    def test_gyro_range(self):
        self.device.set(Reg.gyro_config, b'\x18')
        self.assertEqual(self.motion.gyro_range, GyroRange.range_2000deg)
        self.assertEqual(self.motion.gyro_range_value, 2000)

        self.motion.gyro_range = GyroRange.range_500deg
        self.assertEqual(self.device.get(Reg.gyro_config), b'\x08')

    def test_accel_data(self):
        self.device.set(Reg.accel_config, b'\x08')
        self.device.set(Reg.accel_xout, b'\x20\x00\xE0\x00\x00\x00')
        x, y, z = self.motion.read_accel_data()
        self.assertAlmostEqual(x, GRAVITY)
        self.assertAlmostEqual(y, -GRAVITY)
        self.assertAlmostEqual(z, 0.0)

    def test_gyro_data(self):
        self.device.set(Reg.gyro_config, b'\x18')
        self.device.set(Reg.gyro_xout, b'\x00\xA4\xFF\x5C\x00\x00')
        x, y, z = self.motion.read_gyro_data()
        self.assertAlmostEqual(x, 10.0)
        self.assertAlmostEqual(y, -10.0)
        self.assertAlmostEqual(z, 0.0)


if __name__ == '__main__':
    unittest.main()
