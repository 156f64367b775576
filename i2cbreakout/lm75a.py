#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
NXP LM75A temperature sensor and thermal watchdog.

`LM75A Datasheet <https://www.nxp.com/docs/en/data-sheet/LM75A.pdf>`
"""

import enum
import time
from typing import Union

from .i2c import I2C


ADDRESS = 0x4F


class Reg(enum.IntEnum):
    """I2C registers"""
    temperature = 0x00
    config      = 0x01
    hysteresis  = 0x02
    overtemp    = 0x03


class LM75A(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address 0x48 ... 0x4F
        """
        I2C.__init__(self, bus, device_addr)

    def read_temperature(self) -> float:
        """temperature in C, 11-bit two's complement left aligned"""
        return self.read_s16be(Reg.temperature) / 256.0


def example():
    with LM75A() as sensor:
        for _ in range(10):
            print("Temperature: {:.3f} C".format(sensor.read_temperature()))
            time.sleep(0.100)


if __name__ == '__main__':
    example()
