#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Core Electronics PiicoDev Button (switch).

Writes to the module's registers are flagged by setting bit 7 of the register address.
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x42
DEVICE_ID = 409

WRITE_BIT = 0x80


class Reg(enum.IntEnum):
    """I2C registers"""
    whoami                = 0x01
    firmware_major        = 0x02
    firmware_minor        = 0x03
    i2c_address           = 0x04
    led                   = 0x05
    is_pressed            = 0x11
    was_pressed           = 0x12
    double_press_detected = 0x13
    press_count           = 0x14
    double_press_duration = 0x21
    ema_parameter         = 0x22
    ema_period            = 0x23


class Switch(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x42
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        device_id = self.read_u16be(Reg.whoami)
        if device_id != DEVICE_ID:
            raise IdentificationError('switch device ID {} is not {}'.format(device_id, DEVICE_ID))
        _LOG.debug('switch found at 0x%02X', self.device_addr)

    @property
    def firmware_version(self) -> Tuple[int, int]:
        return self.read_u8(Reg.firmware_major), self.read_u8(Reg.firmware_minor)

    @property
    def led(self) -> bool:
        return bool(self.read_u8(Reg.led))

    @led.setter
    def led(self, state: bool):
        self.write_u8(Reg.led | WRITE_BIT, int(bool(state)))

    @property
    def press_count(self) -> int:
        """presses since the last read"""
        return self.read_u16be(Reg.press_count)

    @property
    def is_pressed(self) -> bool:
        # active low
        return self.read_u8(Reg.is_pressed) == 0

    @property
    def was_pressed(self) -> bool:
        """pressed since the last read"""
        return self.read_u8(Reg.was_pressed) == 1

    @property
    def was_double_pressed(self) -> bool:
        """pressed twice within :attr:`double_press_duration` since the last read"""
        return self.read_u8(Reg.double_press_detected) == 1

    @property
    def double_press_duration(self) -> int:
        """double press window in ms, default 300"""
        return self.read_u16be(Reg.double_press_duration)

    @double_press_duration.setter
    def double_press_duration(self, milliseconds: int):
        self.write_u16be(Reg.double_press_duration | WRITE_BIT, milliseconds)

    @property
    def debounce_ema(self) -> Tuple[int, int]:
        """exponential moving average debounce parameter and period, default (63, 20)"""
        return self.read_u8(Reg.ema_parameter), self.read_u8(Reg.ema_period)

    @debounce_ema.setter
    def debounce_ema(self, parameter_period: Tuple[int, int]):
        parameter, period = parameter_period
        self.write_u8(Reg.ema_parameter | WRITE_BIT, parameter)
        self.write_u8(Reg.ema_period | WRITE_BIT, period)


def example():
    with Switch() as button:
        print("Firmware version: {}.{}".format(*button.firmware_version))
        print("Double press:     {} ms".format(button.double_press_duration))
        print("Debounce EMA:     {} {}".format(*button.debounce_ema))

        for _ in range(20):
            print("Pressed: {}  Was pressed: {}  Double: {}  Count: {}".format(
                button.is_pressed, button.was_pressed, button.was_double_pressed, button.press_count))
            time.sleep(0.500)


if __name__ == '__main__':
    example()
