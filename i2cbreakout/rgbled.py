#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Core Electronics PiicoDev RGB LED, three addressable pixels.

`Firmware and MicroPython driver <https://github.com/CoreElectronics/CE-PiicoDev-RGB-LED-MicroPython-Module>`

Pixel colours are kept in a local buffer; :meth:`RGBLED.show` sends it.
"""

import enum
import time
from typing import Union

from .i2c import I2C


ADDRESS = 0x08


class Reg(enum.IntEnum):
    """I2C registers"""
    device_id        = 0x00
    firmware_version = 0x01  # ... 0x02
    control          = 0x03  # power LED
    clear            = 0x04
    brightness       = 0x06
    values           = 0x07  # 3 x RGB


class RGBLED(I2C):
    NUM_PIXELS = 3

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x08
        """
        self.leds = bytearray(3 * self.NUM_PIXELS)
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        self.clear()
        self.show()

    @property
    def device_id(self) -> int:
        return self.read_u8(Reg.device_id)

    @property
    def firmware_version(self) -> int:
        return self.read_u16le(Reg.firmware_version)

    def power_led(self, state: bool) -> None:
        """green power LED on or off"""
        self.write_u8(Reg.control, int(bool(state)))

    def set_brightness(self, brightness: int) -> None:
        """brightness of all pixels, 0 ... 255"""
        self.write_u8(Reg.brightness, brightness)

    def clear(self) -> None:
        """Turn all pixels off, on the device and in the buffer."""
        self.write_u8(Reg.clear, 1)
        self.clear_pixels()

    def clear_pixels(self) -> None:
        """call :meth:`show` afterwards"""
        self.fill(0, 0, 0)

    def fill(self, red: int, green: int, blue: int) -> None:
        """all pixels to one colour, call :meth:`show` afterwards"""
        for num in range(self.NUM_PIXELS):
            self.set_pixel(num, red, green, blue)

    def set_pixel(self, num: int, red: int, green: int, blue: int) -> None:
        """Set a pixel colour, levels 0 ... 255. Call :meth:`show` afterwards.

        :param num: pixel 0 ... 2
        """
        if not 0 <= num < self.NUM_PIXELS:
            raise ValueError('pixel {} not in 0..{}'.format(num, self.NUM_PIXELS - 1))
        self.leds[3 * num:3 * num + 3] = bytes((red, green, blue))

    def show(self) -> None:
        """Send the pixel buffer."""
        self.write_register(Reg.values, self.leds)


def example():
    with RGBLED() as led:
        for i in range(6 * 3):
            led.set_brightness((255, 50, 5)[i // 6])
            led.clear_pixels()
            num = (i // 2) % 3
            colour = [0, 0, 0]
            colour[num] = 255
            led.set_pixel(num, *colour)
            led.power_led(i % 2)
            led.show()
            time.sleep(0.150)

        led.clear()
        led.power_led(False)


if __name__ == '__main__':
    example()
