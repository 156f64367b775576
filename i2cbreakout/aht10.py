#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Aosong AHT10 temperature and humidity sensor.

- temperature range -40 ... +85 C, accuracy +-0.3 C
- relative humidity range 0 ... 100 %, accuracy +-2 %
- measurements should be more than 2 seconds apart, otherwise
  self-heating exceeds 0.1 C

`AHT10 Datasheet <https://eleparts.co.kr/data/goods_attach/202306/good-pdf-12751003-1.pdf>`
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .crc import crc8
from .errors import ChecksumError, MeasurementTimeout


_LOG = logging.getLogger(__name__)

ADDRESS = 0x38


class Reg(enum.IntEnum):
    """I2C registers / commands"""
    init              = 0xBE
    status            = 0x71
    start_measurement = 0xAC
    soft_reset        = 0xBA


class Init(enum.IntFlag):
    """init register bits"""
    normal_mode    = 0x00  # bit[6:5]
    cycle_mode     = 0x20
    command_mode   = 0x40
    calibration_on = 0x08  # bit[3]


class Status(enum.IntFlag):
    """status byte: BSY, MOD, MOD, CRC, CAL, x, x, x"""
    busy           = 0x80
    cycle_mode     = 0x20
    command_mode   = 0x40
    crc            = 0x10
    calibration_on = 0x08


class AHT10(I2C):
    """AHT10 temperature and humidity sensor."""
    POLL_COUNT = 20
    POLL_INTERVAL = 0.010

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x38
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        self.soft_reset()
        time.sleep(0.100)
        self.set_init_register(Init.calibration_on | Init.normal_mode)
        time.sleep(0.100)

    def soft_reset(self) -> None:
        self.write(Reg.soft_reset)

    def set_init_register(self, value: int) -> None:
        """mode bits [6:5] and calibration bit [3]"""
        self.write_register(Reg.init, (value, 0x00))

    @property
    def status(self) -> int:
        return self.read_u8(Reg.status)

    def read(self) -> Tuple[float, float]:
        """Trigger a measurement and wait for the result, typ. 75ms.

        :return: temperature in C, relative humidity in %
        """
        self.write_register(Reg.start_measurement, (0x33, 0x00))

        for _ in range(self.POLL_COUNT):
            time.sleep(self.POLL_INTERVAL)
            status = self.status
            _LOG.debug('status 0x%02X', status)
            if not status & Status.busy:
                break
        else:
            raise MeasurementTimeout('timeout waiting for AHT10 measurement to complete')

        # status, RH, RH, RH+T, T, T, CRC
        data = self.read_register(Reg.status, 7)
        crc = crc8(data)
        if crc != 0:
            raise ChecksumError('AHT10 data CRC mismatch, remainder 0x{:02X}'.format(crc))

        raw = int.from_bytes(data[1:6], 'big')
        humidity = (raw >> 20) * 100.0 / 2**20
        temperature = (raw & 0xFFFFF) * 200.0 / 2**20 - 50.0
        return temperature, humidity


def example():
    """Output data to screen"""
    with AHT10() as sensor:
        for _ in range(10):
            temperature, humidity = sensor.read()
            print("Temperature: {:.2f} C".format(temperature))
            print("Humidity:    {:.2f} %".format(humidity))
            time.sleep(2.0)


if __name__ == '__main__':
    example()
