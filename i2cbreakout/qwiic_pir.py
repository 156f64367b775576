#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
SparkFun Qwiic PIR motion sensor.

`Firmware <https://github.com/sparkfun/Qwiic_PIR>`
`Python driver <https://github.com/sparkfun/Qwiic_PIR_Py>`

The firmware debounces the raw PIR output and queues the timestamps of
detect and remove events.
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x12
DEVICE_ID = 0x72


class Reg(enum.IntEnum):
    """I2C registers"""
    device_id              = 0x00
    firmware_major         = 0x01
    firmware_minor         = 0x02
    event_status           = 0x03
    interrupt_config       = 0x04
    event_debounce_time    = 0x05  # ... 0x06
    detected_queue_status  = 0x07
    detected_queue_front   = 0x08  # ... 0x0B
    detected_queue_back    = 0x0C  # ... 0x0F
    removed_queue_status   = 0x10
    removed_queue_front    = 0x11  # ... 0x14
    removed_queue_back     = 0x15  # ... 0x18
    i2c_address            = 0x19


class Event(enum.IntEnum):
    """event status bit positions"""
    raw       = 0
    available = 1
    removed   = 2
    detected  = 3


class Queue(enum.IntEnum):
    """queue status bit positions"""
    pop   = 0
    empty = 1
    full  = 2


class QwiicPIR(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, normally 0x12
        """
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        device_id = self.device_id
        if device_id != DEVICE_ID:
            raise IdentificationError(
                'Qwiic PIR device ID 0x{:02X} is not 0x{:02X}'.format(device_id, DEVICE_ID))

    @property
    def device_id(self) -> int:
        return self.read_u8(Reg.device_id)

    @property
    def firmware_version(self) -> Tuple[int, int]:
        return self.read_u8(Reg.firmware_major), self.read_u8(Reg.firmware_minor)

    @property
    def raw_reading(self) -> bool:
        """PIR output without debouncing"""
        return self.read_bit(Reg.event_status, Event.raw)

    @property
    def object_detected(self) -> bool:
        return self.read_bit(Reg.event_status, Event.detected)

    @property
    def object_removed(self) -> bool:
        return self.read_bit(Reg.event_status, Event.removed)

    @property
    def available(self) -> bool:
        """either a detected or a removed event is pending"""
        return self.read_bit(Reg.event_status, Event.available)

    def clear_event_bits(self) -> None:
        """clear available, removed and detected flags"""
        self.write_bits(Reg.event_status, Event.available, 3, 0)

    def debounce_events(self) -> Tuple[bool, bool, bool]:
        """Read and clear the debounced event flags.

        :return: available, detected, removed
        """
        status = self.read_u8(Reg.event_status)
        self.write_u8(Reg.event_status, status & ~0x0E & 0xFF)

        available = bool(status >> Event.available & 1)
        detected = bool(status >> Event.detected & 1)
        removed = bool(status >> Event.removed & 1)
        if available:
            _LOG.debug('event detected=%s removed=%s', detected, removed)
        return available, detected, removed

    @property
    def debounce_time(self) -> int:
        """debounce time in ms"""
        return self.read_u16le(Reg.event_debounce_time)

    @debounce_time.setter
    def debounce_time(self, milliseconds: int):
        self.write_u16le(Reg.event_debounce_time, milliseconds)

    # detected queue
    @property
    def detected_queue_full(self) -> bool:
        return self.read_bit(Reg.detected_queue_status, Queue.full)

    @property
    def detected_queue_empty(self) -> bool:
        return self.read_bit(Reg.detected_queue_status, Queue.empty)

    def time_since_last_detect(self) -> int:
        """ms since the newest detect event"""
        return self.read_u32le(Reg.detected_queue_front)

    def time_since_first_detect(self) -> int:
        """ms since the oldest detect event"""
        return self.read_u32le(Reg.detected_queue_back)

    def pop_detected_queue(self) -> int:
        """Remove the oldest detect event from the queue.

        :return: ms since that event
        """
        milliseconds = self.time_since_first_detect()
        self.write_bit(Reg.detected_queue_status, Queue.pop, True)
        return milliseconds

    # removed queue
    @property
    def removed_queue_full(self) -> bool:
        return self.read_bit(Reg.removed_queue_status, Queue.full)

    @property
    def removed_queue_empty(self) -> bool:
        return self.read_bit(Reg.removed_queue_status, Queue.empty)

    def time_since_last_remove(self) -> int:
        """ms since the newest remove event"""
        return self.read_u32le(Reg.removed_queue_front)

    def time_since_first_remove(self) -> int:
        """ms since the oldest remove event"""
        return self.read_u32le(Reg.removed_queue_back)

    def pop_removed_queue(self) -> int:
        """Remove the oldest remove event from the queue.

        :return: ms since that event
        """
        milliseconds = self.time_since_first_remove()
        self.write_bit(Reg.removed_queue_status, Queue.pop, True)
        return milliseconds


def example():
    with QwiicPIR() as pir:
        print("Device ID:        0x{:02X}".format(pir.device_id))
        print("Firmware version: {}.{}".format(*pir.firmware_version))
        print("Debounce time:    {} ms".format(pir.debounce_time))

        for _ in range(50):
            available, detected, removed = pir.debounce_events()
            if available:
                if detected:
                    print("Detected")
                if removed:
                    print("Removed")
            time.sleep(0.200)


if __name__ == '__main__':
    example()
