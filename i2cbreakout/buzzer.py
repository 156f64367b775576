#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Core Electronics PiicoDev Buzzer.

`Firmware and MicroPython driver <https://github.com/CoreElectronics/CE-PiicoDev-Buzzer-MicroPython-Module>`
"""

import enum
import time
import struct
from typing import Union, Tuple

from .i2c import I2C


ADDRESS = 0x5C
DEVICE_ID = 0x51


class Reg(enum.IntEnum):
    """I2C registers"""
    status         = 0x01
    firmware_major = 0x02
    firmware_minor = 0x03
    i2c_address    = 0x04
    tone           = 0x05
    volume         = 0x06
    power_led      = 0x07
    device_id      = 0x11


class Buzzer(I2C):
    """PiicoDev piezo buzzer module."""
    MAX_VOLUME = 2

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x5C
        """
        I2C.__init__(self, bus, device_addr)

    @property
    def device_id(self) -> int:
        """should be 0x51"""
        return self.read_u8(Reg.device_id)

    @property
    def firmware_version(self) -> Tuple[int, int]:
        return self.read_u8(Reg.firmware_major), self.read_u8(Reg.firmware_minor)

    @property
    def status(self) -> int:
        """bit 1: last command succeeded, bit 2: last command known"""
        return self.read_u8(Reg.status)

    def power_led(self, state: bool) -> None:
        """green power LED on or off"""
        self.write_u8(Reg.power_led, int(bool(state)))

    def set_volume(self, volume: int) -> None:
        """0 is quietest, 2 loudest"""
        if not 0 <= volume <= self.MAX_VOLUME:
            raise ValueError('volume {} not in 0..{}'.format(volume, self.MAX_VOLUME))
        self.write_u8(Reg.volume, volume)

    def tone(self, frequency: int, duration: int = 0) -> None:
        """Play a tone.

        :param frequency: frequency in Hz, 0 is silence
        :param duration: duration in ms, 0 plays until the next command
        """
        if not (0 <= frequency <= 0xFFFF and 0 <= duration <= 0xFFFF):
            raise ValueError('frequency and duration must fit into 16 bits')
        self.write_register(Reg.tone, struct.pack('>HH', frequency, duration))

    def no_tone(self) -> None:
        self.tone(0, 0)


def example():
    with Buzzer() as buzzer:
        print("Device ID:        0x{:02X}".format(buzzer.device_id))
        print("Firmware version: {}.{}".format(*buzzer.firmware_version))

        for volume in range(Buzzer.MAX_VOLUME + 1):
            buzzer.set_volume(volume)
            for frequency in (500, 800):
                buzzer.tone(frequency)
                time.sleep(0.150)
        buzzer.no_tone()


if __name__ == '__main__':
    example()
