#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Texas Instruments TMP117 precision temperature sensor (PiicoDev Precision Temperature Sensor).

16-bit two's complement, 7.8125 mC per LSB.
"""

import enum
from typing import Union

from .i2c import I2C


ADDRESS = 0x48


class Reg(enum.IntEnum):
    """I2C registers"""
    temperature = 0x00


class TMP117(I2C):
    RESOLUTION = 7.8125e-3

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address 0x48 ... 0x4B
        """
        I2C.__init__(self, bus, device_addr)

    def read_temp_c(self) -> float:
        return self.read_s16be(Reg.temperature) * self.RESOLUTION

    def read_temp_f(self) -> float:
        return self.read_temp_c() * 1.8 + 32.0

    def read_temp_k(self) -> float:
        return self.read_temp_c() + 273.15


def example():
    with TMP117() as sensor:
        print("Temperature: {:.3f} C".format(sensor.read_temp_c()))
        print("Temperature: {:.3f} F".format(sensor.read_temp_f()))
        print("Temperature: {:.3f} K".format(sensor.read_temp_k()))


if __name__ == '__main__':
    example()
