#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CRC-8 used by humidity sensor ICs.

Polynom x^8 + x^5 + x^4 + 1, most significant bit first. Sensirion and
Aosong (AHT1x/AHT2x) parts use it with an initial value of 0xFF.
"""

from typing import Union


def crc8(data: Union[bytes, bytearray], crc: int = 0xFF) -> int:
    """Calculates CRC checksum of data

    When `data` is inclusive CRC the result is 0.

    :param data: data bytes
    :param crc: initial crc value
    :return: CRC value
    """
    for d in data:
        crc ^= d
        # polynom 0x131 applied to all 8 bits at once
        crc ^= ((crc >> 3) ^ (crc >> 4) ^ (crc >> 6))
        crc ^= ((crc << 4) ^ (crc << 5)) & 0xFF
    return crc
