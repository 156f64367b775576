#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exceptions raised by the I2C bus layer and the device drivers.
"""


class I2CError(OSError):
    """A bus transaction failed. Carries the errno of the underlying :class:`OSError`."""


class DeviceError(Exception):
    """Device level failure, the bus itself works."""


class IdentificationError(DeviceError):
    """Device, part or model identifier does not match the driver."""


class ChecksumError(DeviceError):
    """CRC of received data is wrong."""


class MeasurementTimeout(DeviceError):
    """Device did not finish a measurement in time."""
