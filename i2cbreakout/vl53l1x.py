#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ST VL53L1X time-of-flight distance sensor (PiicoDev Distance Sensor).

The sensor uses a 16-bit register address space. Initialisation writes the
default configuration of ST's ultra lite driver, ranging starts right away.
"""

import enum
import time
import logging
import collections
from typing import Union

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x29
MODEL_ID = 0xEACC


class Reg(enum.IntEnum):
    """I2C registers"""
    soft_reset                     = 0x0000
    vhv_config_timeout_macrop_loop = 0x0008
    default_config                 = 0x002D  # ... 0x0087
    mm_config_outer_offset         = 0x001E
    mm_config_inner_offset         = 0x0020
    range_config_timeout           = 0x0022
    result_range_status            = 0x0089  # 17 bytes result block
    model_id                       = 0x010F


DEFAULT_CONFIGURATION = bytes((
    0x00,  # 0x2d : set bit 2 and 5 to 1 for fast plus mode (1MHz I2C), else don't touch
    0x00,  # 0x2e : bit 0 if I2C pulled up at 1.8V, else set bit 0 to 1 (pull up at AVDD)
    0x00,  # 0x2f : bit 0 if GPIO pulled up at 1.8V, else set bit 0 to 1 (pull up at AVDD)
    0x01,  # 0x30 : set bit 4 to 0 for active high interrupt and 1 for active low (bits 3:0 must be 0x1)
    0x02,  # 0x31 : bit 1 = interrupt depending on the polarity
    0x00,  # 0x32 : not user-modifiable
    0x02,  # 0x33
    0x08,  # 0x34
    0x00,  # 0x35
    0x08,  # 0x36
    0x10,  # 0x37
    0x01,  # 0x38
    0x01,  # 0x39
    0x00,  # 0x3a
    0x00,  # 0x3b
    0x00,  # 0x3c
    0x00,  # 0x3d
    0xff,  # 0x3e
    0x00,  # 0x3f
    0x0F,  # 0x40
    0x00,  # 0x41
    0x00,  # 0x42
    0x00,  # 0x43
    0x00,  # 0x44
    0x00,  # 0x45
    0x20,  # 0x46 : interrupt configuration, 0x20 -> new sample ready
    0x0b,  # 0x47
    0x00,  # 0x48
    0x00,  # 0x49
    0x02,  # 0x4a
    0x0a,  # 0x4b
    0x21,  # 0x4c
    0x00,  # 0x4d
    0x00,  # 0x4e
    0x05,  # 0x4f
    0x00,  # 0x50
    0x00,  # 0x51
    0x00,  # 0x52
    0x00,  # 0x53
    0xc8,  # 0x54
    0x00,  # 0x55
    0x00,  # 0x56
    0x38,  # 0x57
    0xff,  # 0x58
    0x01,  # 0x59
    0x00,  # 0x5a
    0x08,  # 0x5b
    0x00,  # 0x5c
    0x00,  # 0x5d
    0x01,  # 0x5e
    0xdb,  # 0x5f
    0x0f,  # 0x60
    0x01,  # 0x61
    0xf1,  # 0x62
    0x0d,  # 0x63
    0x01,  # 0x64 : sigma threshold MSB (mm in 14.2 format), default 90 mm
    0x68,  # 0x65 : sigma threshold LSB
    0x00,  # 0x66 : min count rate MSB (MCPS in 9.7 format)
    0x80,  # 0x67 : min count rate LSB
    0x08,  # 0x68
    0xb8,  # 0x69
    0x00,  # 0x6a
    0x00,  # 0x6b
    0x00,  # 0x6c : intermeasurement period MSB, 32 bits
    0x00,  # 0x6d
    0x0f,  # 0x6e
    0x89,  # 0x6f : intermeasurement period LSB
    0x00,  # 0x70
    0x00,  # 0x71
    0x00,  # 0x72 : distance threshold high MSB (mm)
    0x00,  # 0x73 : distance threshold high LSB
    0x00,  # 0x74 : distance threshold low MSB (mm)
    0x00,  # 0x75 : distance threshold low LSB
    0x00,  # 0x76
    0x01,  # 0x77
    0x0f,  # 0x78
    0x0d,  # 0x79
    0x0e,  # 0x7a
    0x0e,  # 0x7b
    0x00,  # 0x7c
    0x00,  # 0x7d
    0x02,  # 0x7e
    0xc7,  # 0x7f : ROI center
    0xff,  # 0x80 : XY ROI (X=width, Y=height)
    0x9B,  # 0x81
    0x00,  # 0x82
    0x00,  # 0x83
    0x00,  # 0x84
    0x01,  # 0x85
    0x01,  # 0x86 : clear interrupt
    0x40,  # 0x87 : start ranging
))


# range status byte -> status text
RANGE_STATUS = {
    1: 'HardwareFail',
    2: 'HardwareFail',
    3: 'HardwareFail',
    17: 'HardwareFail',
    4: 'SignalFail',
    6: 'SignalFail',
    5: 'OutOfBoundsFail',
    7: 'WrapTargetFail',
    8: 'RangeValidMinRangeClipped',
    12: 'XtalkSignalFail',
    13: 'MinRangeFail',
    18: 'SynchronizationInt',
}

Measurement = collections.namedtuple('Measurement', ('distance', 'status'))


def range_status(status: int, stream_count: int) -> str:
    """Decode the range status byte of a result block."""
    if status == 9:
        return 'OK' if stream_count else 'RangeValidNoWrapCheckFail'
    return RANGE_STATUS.get(status, 'Unknown')


class VL53L1X(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x29
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        self.reset()

        model_id = self.model_id
        if model_id != MODEL_ID:
            raise IdentificationError(
                'VL53L1X model ID 0x{:04X} is not 0x{:04X}'.format(model_id, MODEL_ID))

        self.write_register16(Reg.default_config, DEFAULT_CONFIGURATION)
        time.sleep(0.100)

        # done by ST's API in VL53L1_init_and_start_range() once a measurement is
        # started; assumes MM1 and MM2 are disabled
        timeout = self.read16_u16be(Reg.range_config_timeout)
        _LOG.debug('range config timeout 0x%04X', timeout)
        self.write16_u16be(Reg.mm_config_outer_offset, (timeout * 4) & 0xFFFF)
        time.sleep(0.200)

    def reset(self) -> None:
        for value in (0, 1):
            self.write16_u8(Reg.soft_reset, value)
            time.sleep(0.100)

    @property
    def model_id(self) -> int:
        return self.read16_u16be(Reg.model_id)

    def read_measurement(self) -> Measurement:
        """Read the result block.

        :return: distance in mm and decoded range status
        """
        data = self.read_register16(Reg.result_range_status, 17)
        # range status, report status, stream count, effective SPADs,
        # peak signal rate, ambient rate, sigma, phase, final range, ...
        distance = int.from_bytes(data[13:15], 'big')
        return Measurement(distance, range_status(data[0], data[2]))

    def read(self) -> int:
        """distance in mm"""
        return self.read_measurement().distance


def example():
    with VL53L1X() as sensor:
        for _ in range(10):
            measurement = sensor.read_measurement()
            print("Distance: {:5d} mm  [{}]".format(measurement.distance, measurement.status))
            time.sleep(0.100)


if __name__ == '__main__':
    example()
