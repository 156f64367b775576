#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
TE Connectivity MS5637 barometric pressure and temperature sensor (PiicoDev Pressure Sensor).

Compensation follows the manufacturer's C driver
`MS5637_Generic_C_Driver <https://github.com/TEConnectivity/MS5637_Generic_C_Driver>`
"""

import enum
import time
import logging
from typing import Union, Tuple

from .i2c import I2C


_LOG = logging.getLogger(__name__)

ADDRESS = 0x76


class Cmd(enum.IntEnum):
    """I2C commands"""
    soft_reset        = 0x1E
    start_pressure    = 0x40
    start_temperature = 0x50
    adc_read          = 0x00
    prom_read         = 0xA0  # ... 0xAC, step 2


class Resolution(enum.IntEnum):
    """ADC oversampling ratio"""
    osr_256  = 0
    osr_512  = 1
    osr_1024 = 2
    osr_2048 = 3
    osr_4096 = 4
    osr_8192 = 5


# ADC conversion time in seconds, index is the resolution
CONVERSION_TIME = (0.001, 0.002, 0.003, 0.005, 0.009, 0.017)


class Coeff(enum.IntEnum):
    """PROM coefficient index"""
    crc                     = 0
    pressure_sensitivity    = 1
    pressure_offset         = 2
    temp_coeff_sensitivity  = 3
    temp_coeff_offset       = 4
    reference_temperature   = 5
    temp_coeff_temperature  = 6


class MS5637(I2C):
    def __init__(self, bus: Union[int, str] = 1, device_addr: int = ADDRESS) -> None:
        """Initialize

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: I2C device address, fixed 0x76
        """
        self.coeffs = None
        self._resolution = Resolution.osr_8192
        I2C.__init__(self, bus, device_addr)

    def _configure(self) -> None:
        self.soft_reset()
        self.coeffs = self.read_prom()
        _LOG.debug('PROM coefficients %s', self.coeffs)

    def soft_reset(self) -> None:
        self.write(Cmd.soft_reset)
        time.sleep(0.015)

    def read_prom(self) -> Tuple[int, ...]:
        """Read the 7 factory calibration coefficients."""
        return tuple(self.read_u16be(Cmd.prom_read + 2 * idx) for idx in range(len(Coeff)))

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @resolution.setter
    def resolution(self, value: int):
        self._resolution = Resolution(value)

    def _read_adc(self, conversion: int) -> int:
        """Start an ADC conversion, wait for it and read the 24-bit result."""
        self.write(conversion | (self._resolution * 2))
        time.sleep(CONVERSION_TIME[self._resolution])
        return self.read_u24be(Cmd.adc_read)

    def read(self) -> Tuple[float, float]:
        """Measure pressure and temperature.

        :return: pressure in hPa, temperature in C
        """
        adc_temperature = self._read_adc(Cmd.start_temperature)
        adc_pressure = self._read_adc(Cmd.start_pressure)
        return self.compensate(adc_pressure, adc_temperature)

    def compensate(self, adc_pressure: int, adc_temperature: int) -> Tuple[float, float]:
        """first and second order compensation of raw ADC values

        :return: pressure in hPa, temperature in C
        """
        c = self.coeffs

        # difference between actual and reference temperature
        d_t = adc_temperature - (c[Coeff.reference_temperature] << 8)
        temp = 2000 + ((d_t * c[Coeff.temp_coeff_temperature]) >> 23)

        # second order
        if temp < 2000:
            t2 = (3 * d_t * d_t) >> 33
            off2 = 61 * (temp - 2000) ** 2 // 16
            sens2 = 29 * (temp - 2000) ** 2 // 16
            if temp < -1500:
                off2 += 17 * (temp + 1500) ** 2
                sens2 += 9 * (temp + 1500) ** 2
        else:
            t2 = (5 * d_t * d_t) >> 38
            off2 = 0
            sens2 = 0

        off = (c[Coeff.pressure_offset] << 17) + ((c[Coeff.temp_coeff_offset] * d_t) >> 6) - off2
        sens = (c[Coeff.pressure_sensitivity] << 16) + ((c[Coeff.temp_coeff_sensitivity] * d_t) >> 7) - sens2
        pressure = (((adc_pressure * sens) >> 21) - off) >> 15

        return pressure / 100.0, (temp - t2) / 100.0

    def altitude(self, pressure_sea_level: float = 1013.25) -> float:
        """Altitude in meters from the measured pressure.

        :param pressure_sea_level: pressure at sea level in hPa
        """
        pressure, _ = self.read()
        return 44330.0 * (1.0 - (pressure / pressure_sea_level) ** (1.0 / 5.255))


def example():
    with MS5637() as sensor:
        pressure, temperature = sensor.read()
        print("Pressure:    {:.2f} hPa".format(pressure))
        print("Temperature: {:.2f} C".format(temperature))
        print("Altitude:    {:.1f} m".format(sensor.altitude()))


if __name__ == '__main__':
    example()
