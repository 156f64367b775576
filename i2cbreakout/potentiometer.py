#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Core Electronics PiicoDev Potentiometer, rotary and slide versions.

Writes to the module's registers are flagged by setting bit 7 of the register address.
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x35

WRITE_BIT = 0x80


class Reg(enum.IntEnum):
    """I2C registers"""
    whoami         = 0x01
    firmware_major = 0x02
    firmware_minor = 0x03
    i2c_address    = 0x04
    pot            = 0x05
    led            = 0x07
    self_test      = 0x09


class PotType(enum.IntEnum):
    """device ID of the variants"""
    rotary = 379
    slide  = 411


class Potentiometer(I2C):
    RAW_MAX = 1023

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS,
                 minimum: float = 0.0, maximum: float = 100.0) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x35
        :param minimum: :attr:`value` at the lower end
        :param maximum: :attr:`value` at the upper end
        """
        self.minimum = minimum
        self.maximum = maximum
        self.pot_type = None
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        device_id = self.read_u16be(Reg.whoami)
        try:
            self.pot_type = PotType(device_id)
        except ValueError:
            raise IdentificationError(
                'potentiometer device ID {} is neither {} (rotary) nor {} (slide)'.format(
                    device_id, PotType.rotary.value, PotType.slide.value)) from None
        _LOG.debug('%s potentiometer', self.pot_type.name)

    @property
    def firmware_version(self) -> Tuple[int, int]:
        return self.read_u8(Reg.firmware_major), self.read_u8(Reg.firmware_minor)

    def self_test(self) -> int:
        return self.read_u8(Reg.self_test)

    @property
    def led(self) -> bool:
        return bool(self.read_u8(Reg.led))

    @led.setter
    def led(self, state: bool):
        self.write_u8(Reg.led | WRITE_BIT, int(bool(state)))

    @property
    def raw_value(self) -> int:
        """0 ... 1023"""
        return self.read_u16be(Reg.pot)

    @property
    def value(self) -> float:
        """raw value scaled to :attr:`minimum` ... :attr:`maximum`"""
        return self.minimum + (self.maximum - self.minimum) * self.raw_value / self.RAW_MAX


def example():
    with Potentiometer() as pot:
        print("Type:             {}".format(pot.pot_type.name))
        print("Firmware version: {}.{}".format(*pot.firmware_version))
        pot.led = True
        for _ in range(20):
            print("Value: {:6.2f}  (raw {})".format(pot.value, pot.raw_value))
            time.sleep(0.200)


if __name__ == '__main__':
    example()
