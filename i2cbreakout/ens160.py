#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ScioSense ENS160 digital metal-oxide multi-gas sensor (PiicoDev Air Quality Sensor).

Delivers an air quality index (AQI-UBA), total volatile organic compounds
(TVOC) and CO2 equivalents (eCO2). Ambient temperature and humidity can be
written to the sensor for compensation.
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C
from .errors import IdentificationError


_LOG = logging.getLogger(__name__)

ADDRESS = 0x53
PART_ID = 0x0160


class Reg(enum.IntEnum):
    """I2C registers"""
    part_id       = 0x00
    opmode        = 0x10
    config        = 0x11
    command       = 0x12
    temp_in       = 0x13
    rh_in         = 0x15
    device_status = 0x20
    data_aqi      = 0x21
    data_tvoc     = 0x22
    data_eco2     = 0x24
    data_t        = 0x30
    data_rh       = 0x32
    data_misr     = 0x38
    gpr_write     = 0x40
    gpr_read      = 0x48


class OpMode(enum.IntEnum):
    deep_sleep = 0x00
    idle       = 0x01
    standard   = 0x02
    reset      = 0xF0


class Status(enum.IntEnum):
    """device status bit positions"""
    newgpr   = 0
    newdat   = 1
    validity = 2  # bits 3:2
    stater   = 6
    statas   = 7


OPERATION = ('operating ok', 'warm-up', 'initial start-up', 'no valid output')
AQI_RATING = {1: 'excellent', 2: 'good', 3: 'moderate', 4: 'poor', 5: 'unhealthy'}


def eco2_rating(eco2: int) -> str:
    """rating of a CO2 equivalent in ppm"""
    if eco2 > 1500:
        return 'unhealthy'
    if eco2 > 1000:
        return 'poor'
    if eco2 > 800:
        return 'fair'
    if eco2 > 600:
        return 'good'
    if eco2 >= 400:
        return 'excellent'
    return 'invalid'


class ENS160(I2C):
    """ENS160 air quality sensor."""

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, 0x52 or 0x53
        """
        self.config = 0x00
        self._status = 0
        self._aqi = 0
        self._tvoc = 0
        self._eco2 = 0
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        part_id = self.read_u16le(Reg.part_id)
        if part_id != PART_ID:
            raise IdentificationError(
                'ENS160 part ID 0x{:04X} is not 0x{:04X}'.format(part_id, PART_ID))

        self.write_u8(Reg.opmode, OpMode.standard)
        time.sleep(0.020)
        _LOG.debug('operating mode 0x%02X', self.read_u8(Reg.opmode))
        time.sleep(0.020)
        self.write_u8(Reg.config, self.config)

    def update(self) -> None:
        """Fetch status and measurement data if the sensor flags new data."""
        status = self.read_u8(Reg.device_status)
        if status & (1 << Status.newdat):
            self._status, self._aqi, self._tvoc, self._eco2 = \
                self.read_register(Reg.device_status, '<BBHH')
            _LOG.debug('status 0x%02X AQI %d TVOC %d eCO2 %d', self._status, self._aqi, self._tvoc, self._eco2)

    @property
    def status(self) -> int:
        self.update()
        return self._status

    @property
    def operation(self) -> str:
        """state of the validity flag"""
        return OPERATION[(self.status >> Status.validity) & 0x03]

    def read_aqi(self) -> Tuple[int, str]:
        """air quality index 1..5 and its rating"""
        self.update()
        return self._aqi, AQI_RATING.get(self._aqi, 'invalid')

    def read_tvoc(self) -> int:
        """total volatile organic compounds in ppb"""
        self.update()
        return self._tvoc

    def read_eco2(self) -> Tuple[int, str]:
        """CO2 equivalent in ppm and its rating"""
        self.update()
        return self._eco2, eco2_rating(self._eco2)

    @property
    def temperature(self) -> float:
        """compensation temperature in C"""
        return self.read_u16le(Reg.temp_in) / 64.0 - 273.15

    @temperature.setter
    def temperature(self, centigrade: float):
        self.write_u16le(Reg.temp_in, round((centigrade + 273.15) * 64.0))

    @property
    def humidity(self) -> float:
        """compensation relative humidity in %"""
        return self.read_u16le(Reg.rh_in) / 512.0

    @humidity.setter
    def humidity(self, humidity: float):
        if not 0.0 <= humidity <= 100.0:
            raise ValueError('humidity {} not in 0..100%'.format(humidity))
        self.write_u16le(Reg.rh_in, round(humidity * 512.0))


def example():
    with ENS160() as sensor:
        sensor.temperature = 22.5
        sensor.humidity = 40.0
        time.sleep(0.020)
        print("Compensation: {:.2f} C  {:.2f} %".format(sensor.temperature, sensor.humidity))

        for _ in range(5):
            aqi, aqi_rating = sensor.read_aqi()
            eco2, eco2_rating_ = sensor.read_eco2()
            print("-" * 32)
            print("    flag: 0x{:02X}".format(sensor.status))
            print("     AQI: {} [{}]".format(aqi, aqi_rating))
            print("    TVOC: {} ppb".format(sensor.read_tvoc()))
            print("    eCO2: {} ppm [{}]".format(eco2, eco2_rating_))
            print("  Status: {}".format(sensor.operation))
            time.sleep(1.0)


if __name__ == '__main__':
    example()
