#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
A collection of I2C connected sensor and actuator breakout boards
"""

__version__ = '0.1.0'

from .i2c import I2C
from .errors import I2CError, DeviceError, IdentificationError, ChecksumError, MeasurementTimeout

# temperature / humidity
from .aht10 import AHT10
from .lm75a import LM75A
from .tmp117 import TMP117

# pressure / temperature
from .ms5637 import MS5637

# air quality
from .ens160 import ENS160

# motion / distance
from .mpu6050 import MPU6050
from .vl53l1x import VL53L1X
from .qwiic_pir import QwiicPIR

# light / colour
from .veml6030 import VEML6030
from .veml6040 import VEML6040

# user input
from .cap1203 import CAP1203
from .potentiometer import Potentiometer
from .switch import Switch

# output
from .buzzer import Buzzer
from .rgbled import RGBLED
