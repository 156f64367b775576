#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Microchip CAP1203 3-channel capacitive touch sensor (PiicoDev Capacitive Touch).

`CAP1203 Datasheet <https://ww1.microchip.com/downloads/en/DeviceDoc/00001572B.pdf>`
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x28
PRODUCT_ID = 0x6D


class Reg(enum.IntEnum):
    """I2C registers"""
    main_control          = 0x00
    general_status        = 0x02
    input_status          = 0x03
    input1_delta_count    = 0x10
    input2_delta_count    = 0x11
    input3_delta_count    = 0x12
    sensitivity_control   = 0x1F
    multiple_touch_config = 0x2A
    product_id            = 0xFD


class CAP1203(I2C):
    """CAP1203 touch sensor with three pads."""
    BIT_INT = 0               # main control: interrupt flag
    BIT_TOUCH = 0             # general status: touch detected
    BIT_DELTA_SENSE = 4       # sensitivity control, bits 6:4
    BIT_MULT_BLK_EN = 7       # multiple touch config: block multiple touches

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS, sensitivity: int = 3) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x28
        :param sensitivity: initial touch sensitivity, see :meth:`set_sensitivity`
        """
        self._initial_sensitivity = sensitivity
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        product_id = self.read_u8(Reg.product_id)
        _LOG.debug('product ID 0x%02X', product_id)
        if product_id != PRODUCT_ID:
            raise IdentificationError(
                'CAP1203 product ID 0x{:02X} is not 0x{:02X}'.format(product_id, PRODUCT_ID))
        self.set_sensitivity(self._initial_sensitivity)

    @property
    def sensitivity(self) -> int:
        """0 is most, 7 least sensitive"""
        return self.read_bits(Reg.sensitivity_control, self.BIT_DELTA_SENSE, 3)

    def set_sensitivity(self, sensitivity: int) -> None:
        if not 0 <= sensitivity <= 7:
            raise ValueError('sensitivity {} not in 0..7'.format(sensitivity))
        self.write_bits(Reg.sensitivity_control, self.BIT_DELTA_SENSE, 3, sensitivity)

    @property
    def multiple_touch(self) -> bool:
        """multiple simultaneous touches reported"""
        return not self.read_bit(Reg.multiple_touch_config, self.BIT_MULT_BLK_EN)

    @multiple_touch.setter
    def multiple_touch(self, enabled: bool):
        self.write_bit(Reg.multiple_touch_config, self.BIT_MULT_BLK_EN, not enabled)

    def clear_interrupt(self) -> None:
        """Clears the interrupt flag and with it the input status flags."""
        self.write_bit(Reg.main_control, self.BIT_INT, False)

    @property
    def touched(self) -> bool:
        """touch flagged since the interrupt was cleared last"""
        return self.read_bit(Reg.general_status, self.BIT_TOUCH)

    def read(self) -> Tuple[bool, bool, bool]:
        """Touch status of the three pads. Clears the interrupt."""
        status = self.read_u8(Reg.input_status)
        self.clear_interrupt()
        return tuple(bool(status >> pad & 1) for pad in range(3))

    def delta_counts(self) -> Tuple[int, int, int]:
        """Raw readings of the three pads."""
        return tuple(self.read_u8(reg) for reg in (
            Reg.input1_delta_count, Reg.input2_delta_count, Reg.input3_delta_count))


def example():
    with CAP1203() as touch:
        print("Sensitivity:    {}".format(touch.sensitivity))
        touch.multiple_touch = True
        print("Multiple touch: {}".format(touch.multiple_touch))
        for _ in range(20):
            print("Touch: {} {} {}   Delta: {:3d} {:3d} {:3d}".format(*touch.read(), *touch.delta_counts()))
            time.sleep(0.200)


if __name__ == '__main__':
    example()
