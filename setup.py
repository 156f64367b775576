#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup

_package = 'i2cbreakout'


LONG_DESCRIPTION = """
Drivers for I2C sensor and actuator breakout boards on Linux `/dev/i2c-*` buses:
AHT10, LM75A, TMP117, MS5637, ENS160, MPU6050, VL53L1X, Qwiic PIR, VEML6030,
VEML6040, CAP1203 and the PiicoDev potentiometer, button, buzzer and RGB LED modules.
"""

setup(name=_package,
    version='0.1.0',
    description='A collection of I2C breakout board drivers',
    long_description=LONG_DESCRIPTION,
    license='MIT',

    python_requires='>=3.6',

    install_requires = [
        'smbus2',
        ],

    extras_require = {
        'test': ['pytest'],
        },

    packages=[_package, _package + '.tests'],

    )
