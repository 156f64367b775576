#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Vishay VEML6030: ambient light sensor (PiicoDev Ambient Light Sensor).

`VEML6030 Datasheet <https://www.vishay.com/docs/84366/veml6030.pdf>`
`Application note <https://www.vishay.com/docs/84367/designingveml6030.pdf>`
"""

import enum
import struct
import logging
from typing import Union

from .i2c import I2C


_LOG = logging.getLogger(__name__)

ADDRESS = 0x10


class Reg(enum.IntEnum):
    """I2C registers, all 16-bit little endian"""
    setting    = 0x00
    power_save = 0x03
    als        = 0x04


class Gain(enum.IntEnum):
    """ALS_GAIN, bits 12:11"""
    gain_1     = 0
    gain_2     = 1
    gain_1_8   = 2
    gain_1_4   = 3


class IntegrationTime(enum.IntEnum):
    """ALS_IT, bits 9:6"""
    it_25ms  = 12
    it_50ms  = 8
    it_100ms = 0
    it_200ms = 1
    it_400ms = 2
    it_800ms = 3


GAIN = {
    Gain.gain_1: 1.0,
    Gain.gain_2: 2.0,
    Gain.gain_1_8: 1.0 / 8.0,
    Gain.gain_1_4: 1.0 / 4.0,
}

INTEGRATION_TIME = {
    IntegrationTime.it_25ms: 25,
    IntegrationTime.it_50ms: 50,
    IntegrationTime.it_100ms: 100,
    IntegrationTime.it_200ms: 200,
    IntegrationTime.it_400ms: 400,
    IntegrationTime.it_800ms: 800,
}

# lux per count for gain 2, 1, 1/4, 1/8
_RESOLUTION = {
    IntegrationTime.it_800ms: (.0036, .0072, .0288, .0576),
    IntegrationTime.it_400ms: (.0072, .0144, .0576, .1152),
    IntegrationTime.it_200ms: (.0144, .0288, .1152, .2304),
    IntegrationTime.it_100ms: (.0288, .0576, .2304, .4608),
    IntegrationTime.it_50ms:  (.0576, .1152, .4608, .9216),
    IntegrationTime.it_25ms:  (.1152, .2304, .9216, 1.8432),
}
_GAIN_INDEX = {Gain.gain_2: 0, Gain.gain_1: 1, Gain.gain_1_4: 2, Gain.gain_1_8: 3}


def resolution(gain: Gain, integration_time: IntegrationTime) -> float:
    """lux per count"""
    return _RESOLUTION[integration_time][_GAIN_INDEX[gain]]


class VEML6030(I2C):
    GAIN_POS = 11
    GAIN_MASK = 0x1800
    IT_POS = 6
    IT_MASK = 0x03C0
    SD_MASK = 0x0001
    PSM_EN_MASK = 0x0001

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address 0x10 or 0x48
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        self.power_on()

    def _update_register(self, register: int, mask: int, value: int) -> None:
        """replace the bits of `mask` in a 16-bit register with `value`"""
        self.modify_register(register, struct.pack('<H', value), struct.pack('<H', mask))

    def shutdown(self) -> None:
        self._update_register(Reg.setting, self.SD_MASK, 1)

    def power_on(self) -> None:
        self._update_register(Reg.setting, self.SD_MASK, 0)

    def enable_power_save(self) -> None:
        self._update_register(Reg.power_save, self.PSM_EN_MASK, 1)

    def disable_power_save(self) -> None:
        self._update_register(Reg.power_save, self.PSM_EN_MASK, 0)

    @property
    def power_save(self) -> bool:
        return bool(self.read_u16le(Reg.power_save) & self.PSM_EN_MASK)

    @property
    def gain(self) -> Gain:
        return Gain((self.read_u16le(Reg.setting) & self.GAIN_MASK) >> self.GAIN_POS)

    @gain.setter
    def gain(self, gain: Gain):
        self._update_register(Reg.setting, self.GAIN_MASK, Gain(gain) << self.GAIN_POS)

    @property
    def gain_value(self) -> float:
        return GAIN[self.gain]

    @property
    def integration_time(self) -> IntegrationTime:
        return IntegrationTime((self.read_u16le(Reg.setting) & self.IT_MASK) >> self.IT_POS)

    @integration_time.setter
    def integration_time(self, integration_time: IntegrationTime):
        self._update_register(Reg.setting, self.IT_MASK, IntegrationTime(integration_time) << self.IT_POS)

    @property
    def integration_time_value(self) -> int:
        """integration time in ms"""
        return INTEGRATION_TIME[self.integration_time]

    def read(self) -> float:
        """ambient light in lux"""
        raw = self.read_u16le(Reg.als)
        setting = self.read_u16le(Reg.setting)
        gain = Gain((setting & self.GAIN_MASK) >> self.GAIN_POS)
        integration_time = IntegrationTime((setting & self.IT_MASK) >> self.IT_POS)
        _LOG.debug('raw %d gain %s integration time %s', raw, gain.name, integration_time.name)
        return raw * resolution(gain, integration_time)


def example():
    with VEML6030() as light:
        light.gain = Gain.gain_1
        light.integration_time = IntegrationTime.it_100ms
        print("Power save:       {}".format(light.power_save))
        print("Gain:             {}".format(light.gain_value))
        print("Integration time: {} ms".format(light.integration_time_value))
        print("Ambient light:    {:.2f} lux".format(light.read()))


if __name__ == '__main__':
    example()
