#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Vishay VEML6040: red green blue and white light sensor (PiicoDev Colour Sensor).

`Application note <https://www.vishay.com/docs/84331/designingveml6040.pdf>`
"""

import math
import time
import enum
import logging
from typing import Union, Tuple

from .i2c import I2C


_LOG = logging.getLogger(__name__)

ADDRESS = 0x10


class Reg(enum.IntEnum):
    """I2C registers, all 16-bit little endian"""
    config = 0x00
    red    = 0x08
    green  = 0x09
    blue   = 0x0A
    white  = 0x0B


class Config(enum.IntFlag):
    """configuration register bits"""
    shutdown = 0x01  # SD
    force    = 0x02  # AF, manual force mode
    trigger  = 0x04  # TRIG


# RGB -> XYZ correlation matrices
XYZ_MATRIX = dict(
    indoor=(
        (-0.023249, 0.291014, -0.364880),
        (-0.042799, 0.272148, -0.279591),
        (-0.155901, 0.251534, -0.076240)
    ),
    outdoor=(
        (0.048403, 0.183633, -0.253589),
        (0.022916, 0.176388, -0.183205),
        (-0.077436, 0.124541, 0.032081)
    )
)


def cct(red: int, green: int, blue: int, location: str = 'indoor') -> float:
    """Correlated colour temperature.

    :param location: either 'indoor' or 'outdoor' correlation matrix
    :return: colour temperature in Kelvin, 0.0 if there is no light at all,
             infinite at the McCamy epicenter y = 0.1858
    """
    mat = XYZ_MATRIX[location]
    X, Y, Z = (sum(m * c for m, c in zip(row, (red, green, blue))) for row in mat)

    total = X + Y + Z
    if total == 0:
        return 0.0
    x = X / total
    y = Y / total
    if y == 0.1858:
        return math.inf

    # McCamy
    n = (x - 0.3320) / (0.1858 - y)
    return 449.0 * n**3 + 3525.0 * n**2 + 6823.3 * n + 5520.33


def hsv(red: int, green: int, blue: int) -> Tuple[float, float, float]:
    """RGB channel values 0 ... 65535 to hue, saturation and value.

    :return: hue 0 ... 360, saturation 0 ... 100, value 0 ... 100
    """
    r, g, b = (c / 65535.0 for c in (red, green, blue))
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    value = c_max * 100.0
    if delta == 0:
        # grey, no chroma
        return 0.0, 0.0, value

    saturation = delta / c_max * 100.0
    if r == c_max:
        hue = (g - b) / delta          # between yellow and magenta
    elif g == c_max:
        hue = 2.0 + (b - r) / delta    # between cyan and yellow
    else:
        hue = 4.0 + (r - g) / delta    # between magenta and cyan

    hue *= 60.0
    if hue < 0.0:
        hue += 360.0
    return hue, saturation, value


class VEML6040(I2C):
    MAX_IT = 5  # max integration time, 40ms * 2^5 = 1280ms
    IT_POS = 4
    IT_MASK = 0x70
    GREEN_SENSITIVITY = 0.25168  # lux per count @ 40ms

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize Object.

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x10
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        """shutdown, then 40ms integration, no trigger, auto mode, enabled"""
        self.write_u8(Reg.config, Config.shutdown)
        self.write_u8(Reg.config, 0x00)
        time.sleep(0.050)

    def read_rgbw(self) -> Tuple[int, int, int, int]:
        """16-bit ADC values of red, green, blue and white channel"""
        return tuple(self.read_u16le(reg) for reg in (Reg.red, Reg.green, Reg.blue, Reg.white))

    @property
    def integration_time(self) -> int:
        """integration time exponent, 40ms * 2^n"""
        return (self.read_u16le(Reg.config) & self.IT_MASK) >> self.IT_POS

    @integration_time.setter
    def integration_time(self, value: int):
        if not 0 <= value <= self.MAX_IT:
            raise ValueError('integration time {} not in 0..{}'.format(value, self.MAX_IT))
        self.modify_register(Reg.config, value << self.IT_POS, self.IT_MASK)
        _LOG.debug('integration time %d ms', 40 * 2**value)
        time.sleep(0.050 * 2**value)

    def luminance(self) -> float:
        """Ambient luminance as [Lux]=lx"""
        green = self.read_u16le(Reg.green)
        return green * self.GREEN_SENSITIVITY / 2**self.integration_time


def example():
    # Output data to screen
    with VEML6040() as rgbw_sensor:
        for _ in range(10):
            red, green, blue, white = rgbw_sensor.read_rgbw()
            print('rgbw        : ({}, {}, {}) {}'.format(red, green, blue, white))
            print('luminance   : {:.2f} lux'.format(rgbw_sensor.luminance()))
            print('temperature : {} K'.format(int(cct(red, green, blue))))
            print('hsv         : ({:.1f}, {:.1f}, {:.1f})'.format(*hsv(red, green, blue)))
            time.sleep(0.100)


if __name__ == '__main__':
    example()
