#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
InvenSense MPU-6050 3-axis accelerometer and gyroscope (PiicoDev Motion Sensor).
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C


_LOG = logging.getLogger(__name__)

ADDRESS = 0x68

GRAVITY = 9.80665  # m/s^2


class Reg(enum.IntEnum):
    """I2C registers"""
    self_test_x  = 0x0D
    self_test_y  = 0x0E
    self_test_z  = 0x0F
    self_test_a  = 0x10
    gyro_config  = 0x1B
    accel_config = 0x1C
    accel_xout   = 0x3B  # ... 0x40
    accel_yout   = 0x3D
    accel_zout   = 0x3F
    temp_out     = 0x41  # ... 0x42
    gyro_xout    = 0x43  # ... 0x48
    gyro_yout    = 0x45
    gyro_zout    = 0x47
    pwr_mgmt_1   = 0x6B
    pwr_mgmt_2   = 0x6C


class AccelRange(enum.IntEnum):
    """AFS_SEL, bits 4:3 of the accelerometer configuration"""
    range_2g  = 0x00
    range_4g  = 0x08
    range_8g  = 0x10
    range_16g = 0x18


class GyroRange(enum.IntEnum):
    """FS_SEL, bits 4:3 of the gyroscope configuration"""
    range_250deg  = 0x00
    range_500deg  = 0x08
    range_1000deg = 0x10
    range_2000deg = 0x18


# full scale value and LSB per unit
ACCEL_SCALE = {
    AccelRange.range_2g:  (2, 16384.0),
    AccelRange.range_4g:  (4, 8192.0),
    AccelRange.range_8g:  (8, 4096.0),
    AccelRange.range_16g: (16, 2048.0),
}

GYRO_SCALE = {
    GyroRange.range_250deg:  (250, 131.0),
    GyroRange.range_500deg:  (500, 65.5),
    GyroRange.range_1000deg: (1000, 32.8),
    GyroRange.range_2000deg: (2000, 16.4),
}

_RANGE_MASK = 0x18


class MPU6050(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address 0x68 or 0x69
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        # the device starts in sleep mode, wake it up
        _LOG.debug('wake up')
        for _ in range(3):
            self.write_u8(Reg.pwr_mgmt_1, 0x00)
            time.sleep(0.005)

    def read_temperature(self) -> float:
        """die temperature in C"""
        return self.read_s16be(Reg.temp_out) / 340.0 + 36.53

    @property
    def accel_range(self) -> AccelRange:
        return AccelRange(self.read_u8(Reg.accel_config) & _RANGE_MASK)

    @accel_range.setter
    def accel_range(self, value: AccelRange):
        self.modify_register(Reg.accel_config, AccelRange(value), _RANGE_MASK)

    @property
    def accel_range_value(self) -> int:
        """full scale in g"""
        return ACCEL_SCALE[self.accel_range][0]

    @property
    def gyro_range(self) -> GyroRange:
        return GyroRange(self.read_u8(Reg.gyro_config) & _RANGE_MASK)

    @gyro_range.setter
    def gyro_range(self, value: GyroRange):
        self.modify_register(Reg.gyro_config, GyroRange(value), _RANGE_MASK)

    @property
    def gyro_range_value(self) -> int:
        """full scale in deg/s"""
        return GYRO_SCALE[self.gyro_range][0]

    def _read_axes(self, register: int) -> Tuple[int, int, int]:
        return self.read_register(register, '>3h')

    def read_accel_data(self) -> Tuple[float, float, float]:
        """acceleration x, y, z in m/s^2"""
        scaler = ACCEL_SCALE[self.accel_range][1]
        return tuple(raw * GRAVITY / scaler for raw in self._read_axes(Reg.accel_xout))

    def read_gyro_data(self) -> Tuple[float, float, float]:
        """angular rate x, y, z in deg/s"""
        scaler = GYRO_SCALE[self.gyro_range][1]
        return tuple(raw / scaler for raw in self._read_axes(Reg.gyro_xout))


def example():
    with MPU6050() as motion:
        motion.accel_range = AccelRange.range_2g
        motion.gyro_range = GyroRange.range_250deg
        print("Temperature:     {:.2f} C".format(motion.read_temperature()))
        print("Accel range:     {} g".format(motion.accel_range_value))
        print("Gyro range:      {} deg/s".format(motion.gyro_range_value))
        print("Acceleration:    ({:.3f}, {:.3f}, {:.3f}) m/s^2".format(*motion.read_accel_data()))
        print("Angular rate:    ({:.3f}, {:.3f}, {:.3f}) deg/s".format(*motion.read_gyro_data()))


if __name__ == '__main__':
    example()
