#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exercise breakout boards connected to a real I2C bus.

Each check opens one device, reads it or drives it for a few seconds and
prints the results. A failing device does not stop the other checks.

    hardware_check.py --bus 1 temperature pressure light
"""

import sys
import time
import logging
import argparse

from i2cbreakout import (DeviceError, AHT10, LM75A, TMP117, MS5637, ENS160, MPU6050, VL53L1X,
                         QwiicPIR, VEML6030, VEML6040, CAP1203, Potentiometer, Switch, Buzzer, RGBLED)
from i2cbreakout.veml6030 import Gain, IntegrationTime
from i2cbreakout.veml6040 import cct, hsv


_LOG = logging.getLogger('hardware_check')


def check_temperature(bus):
    with TMP117(bus) as sensor:
        print("TMP117 temperature:  {:.3f} C".format(sensor.read_temp_c()))
    with LM75A(bus) as sensor:
        print("LM75A temperature:   {:.3f} C".format(sensor.read_temperature()))
    with AHT10(bus) as sensor:
        print("AHT10:               {:.2f} C  {:.2f} %".format(*sensor.read()))


def check_pressure(bus):
    with MS5637(bus) as sensor:
        print("Pressure:            {:.2f} hPa ({:.2f} C)".format(*sensor.read()))


def check_light(bus):
    with VEML6030(bus) as light:
        print("Power save:          {}".format(light.power_save))
        light.gain = Gain.gain_1
        light.integration_time = IntegrationTime.it_100ms
        print("Ambient light:       {:.2f} lux".format(light.read()))


def check_distance(bus):
    with VL53L1X(bus) as sensor:
        for _ in range(10):
            measurement = sensor.read_measurement()
            print("Distance:            {} mm [{}]".format(measurement.distance, measurement.status))
            time.sleep(0.100)


def check_motion(bus):
    with MPU6050(bus) as motion:
        print("Temperature:         {:.2f} C".format(motion.read_temperature()))
        print("Accel range:         {} g".format(motion.accel_range_value))
        print("Gyro range:          {} deg/s".format(motion.gyro_range_value))
        for _ in range(5):
            print("Acceleration:        ({:.3f}, {:.3f}, {:.3f}) m/s^2".format(*motion.read_accel_data()))
            print("Angular rate:        ({:.3f}, {:.3f}, {:.3f}) deg/s".format(*motion.read_gyro_data()))
            time.sleep(0.200)


def check_pir(bus):
    with QwiicPIR(bus) as pir:
        print("Debounce time:       {} ms".format(pir.debounce_time))
        for _ in range(25):
            available, detected, removed = pir.debounce_events()
            if available:
                print("Object {}".format('detected' if detected else 'removed'))
            time.sleep(0.200)


def check_touch(bus):
    with CAP1203(bus) as touch:
        touch.multiple_touch = True
        print("Multiple touch:      {}".format(touch.multiple_touch))
        print("Sensitivity:         {}".format(touch.sensitivity))
        for _ in range(20):
            print("Touch:               {} {} {}".format(*touch.read()))
            time.sleep(0.200)


def check_potentiometer(bus):
    with Potentiometer(bus) as pot:
        print("Type:                {}".format(pot.pot_type.name))
        for _ in range(10):
            print("Value:               {:.1f}".format(pot.value))
            time.sleep(0.200)


def check_switch(bus):
    with Switch(bus) as button:
        for _ in range(10):
            print("Pressed:             {}  count {}".format(button.is_pressed, button.press_count))
            time.sleep(0.500)


def check_rgbled(bus):
    with RGBLED(bus) as led:
        led.set_brightness(50)
        for num in range(RGBLED.NUM_PIXELS):
            led.clear_pixels()
            led.set_pixel(num, 255, 255, 255)
            led.power_led(num % 2)
            led.show()
            time.sleep(0.300)
        led.clear()
        led.power_led(False)


def check_buzzer(bus):
    with Buzzer(bus) as buzzer:
        print("Firmware version:    {}.{}".format(*buzzer.firmware_version))
        for volume in range(Buzzer.MAX_VOLUME + 1):
            buzzer.set_volume(volume)
            buzzer.tone(800, 150)
            time.sleep(0.300)
        buzzer.no_tone()


def check_colour(bus):
    with VEML6040(bus) as sensor:
        red, green, blue, white = sensor.read_rgbw()
        print("RGBW:                ({}, {}, {}) {}".format(red, green, blue, white))
        print("Colour temperature:  {:.0f} K".format(cct(red, green, blue)))
        print("HSV:                 ({:.1f}, {:.1f}, {:.1f})".format(*hsv(red, green, blue)))
        print("Luminance:           {:.2f} lux".format(sensor.luminance()))


def check_air_quality(bus):
    with ENS160(bus) as sensor:
        sensor.temperature = 22.5
        sensor.humidity = 40.0
        for _ in range(5):
            print("AQI:                 {} [{}]".format(*sensor.read_aqi()))
            print("TVOC:                {} ppb".format(sensor.read_tvoc()))
            print("eCO2:                {} ppm [{}]".format(*sensor.read_eco2()))
            print("Status:              {}".format(sensor.operation))
            time.sleep(1.0)


def check_colour_to_rgbled(bus):
    """mirror the colour seen by the VEML6040 on the RGB LED"""
    with VEML6040(bus) as sensor, RGBLED(bus) as led:
        for _ in range(50):
            red, green, blue, _ = sensor.read_rgbw()
            peak = max(red, green, blue, 1)
            led.fill(*(255 * c // peak for c in (red, green, blue)))
            led.show()
            time.sleep(0.100)
        led.clear()


CHECKS = {
    'temperature': check_temperature,
    'pressure': check_pressure,
    'light': check_light,
    'distance': check_distance,
    'motion': check_motion,
    'pir': check_pir,
    'touch': check_touch,
    'potentiometer': check_potentiometer,
    'switch': check_switch,
    'rgbled': check_rgbled,
    'buzzer': check_buzzer,
    'colour': check_colour,
    'air-quality': check_air_quality,
    'colour-to-rgbled': check_colour_to_rgbled,
}

DEFAULT_CHECKS = [name for name in CHECKS if name not in ('pir', 'potentiometer', 'switch', 'colour-to-rgbled')]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--bus', default='1',
                        help='I2C bus number or device path like /dev/i2c-1 (default: 1)')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    parser.add_argument('checks', nargs='*', default=DEFAULT_CHECKS, metavar='CHECK',
                        help='checks to run: {}'.format(', '.join(CHECKS)))
    args = parser.parse_args(argv)

    unknown = [name for name in args.checks if name not in CHECKS]
    if unknown:
        parser.error('unknown check: {}'.format(', '.join(unknown)))

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    bus = int(args.bus) if args.bus.isdigit() else args.bus

    failed = []
    for name in args.checks:
        print("-" * 79)
        print(name)
        try:
            CHECKS[name](bus)
        except (OSError, DeviceError) as exc:
            # bus errors, missing or inaccessible /dev/i2c-* and device failures
            _LOG.error('%s check failed: %s', name, exc)
            failed.append(name)

    if failed:
        _LOG.error('failed: %s', ', '.join(failed))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
