#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
I2C register access through the Linux `/dev/i2c-*` character devices.

Every transfer is done with the `I2C_RDWR` ioctl. A register read is one
combined transaction: the register address is written, a repeated start
follows and the data is read back. Nothing else on the bus can sneak in
between the two.

Devices with 8-bit register addresses use the plain methods, devices with
a 16-bit register space (address sent MSB first) the `*16` variants.
"""

import time
import struct
import logging
from typing import Union, Iterable, Optional
from smbus2 import SMBus, i2c_msg

from .errors import I2CError


_LOG = logging.getLogger(__name__)


Data = Union[int, bytes, bytearray, Iterable[int]]


def _to_bytes(data: Data) -> bytes:
    """single byte value, bytes or a sequence of byte values"""
    if isinstance(data, int):
        data = (data,)
    return bytes(data)


def _check_range(value: int, bits: int, name: str = 'value') -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError('{} {} does not fit into {} bits'.format(name, value, bits))
    return value


class I2C(SMBus):
    """One I2C device at a fixed address on a bus."""

    def __init__(self, bus: Union[int, str] = 1, device_addr: int = 0x00) -> None:
        """Open the bus and initialize the device.

        :param bus: I2C bus identification number or a filesystem name like `/dev/i2c-something`
        :param device_addr: 7-bit I2C device address
        """
        if not 0x03 <= device_addr <= 0x77:
            raise ValueError('I2C device address 0x{:02X} out of range 0x03..0x77'.format(device_addr))

        SMBus.__init__(self, bus, force=True)
        self.device_addr = device_addr
        _LOG.debug('%s opened at address 0x%02X on bus %s', type(self).__name__, device_addr, bus)

        try:
            self._configure()
        except Exception:
            self.close()
            raise

    def _configure(self) -> None:
        """Initial device configuration. Overridden by the drivers."""

    def _transfer(self, *messages, register: Optional[int] = None) -> None:
        """Execute messages as one `I2C_RDWR` transaction."""
        try:
            self.i2c_rdwr(*messages)
        except OSError as exc:
            where = '' if register is None else ' register 0x{:X}'.format(register)
            msg = 'I2C transfer to{} at address 0x{:02X} failed: {}'.format(
                where, self.device_addr, exc.strerror or exc)
            if exc.errno is None:
                raise I2CError(msg) from exc
            raise I2CError(exc.errno, msg) from exc

    def _read(self, pointer: bytes, length: Union[int, str], register: int) -> Union[int, tuple, bytes]:
        struct_obj = None
        if isinstance(length, str):
            struct_obj = struct.Struct(length)
            length = struct_obj.size

        wr_msg = i2c_msg.write(self.device_addr, pointer)
        rd_msg = i2c_msg.read(self.device_addr, length)
        self._transfer(wr_msg, rd_msg, register=register)
        data = bytes(tuple(rd_msg))

        if struct_obj is None:
            return data
        data = struct_obj.unpack(data)
        return data[0] if len(data) == 1 else data

    def read_register(self, register: int, length: Union[int, str] = 1) -> Union[int, tuple, bytes]:
        """Read register

        :param register: 8-bit register address to read
        :param length: bytes to read. Either an :type:int value or a `struct` format string
        :return: bytes if length is int. value or tuple if length is `struct` format string
        """
        pointer = bytes((_check_range(register, 8, 'register'),))
        return self._read(pointer, length, register)

    def read_register16(self, register: int, length: Union[int, str] = 1) -> Union[int, tuple, bytes]:
        """Read register of a 16-bit register space. See :meth:`read_register`"""
        pointer = struct.pack('>H', _check_range(register, 16, 'register'))
        return self._read(pointer, length, register)

    def write(self, data: Data) -> int:
        """Write raw bytes, e.g. a command.

        :return: number of bytes written
        """
        data = _to_bytes(data)
        self._transfer(i2c_msg.write(self.device_addr, data))
        return len(data)

    def write_register(self, register: int, data: Data) -> None:
        """Write data to an 8-bit addressed register."""
        pointer = bytes((_check_range(register, 8, 'register'),))
        self._transfer(i2c_msg.write(self.device_addr, pointer + _to_bytes(data)), register=register)

    def write_register16(self, register: int, data: Data) -> None:
        """Write data to a register of a 16-bit register space."""
        pointer = struct.pack('>H', _check_range(register, 16, 'register'))
        self._transfer(i2c_msg.write(self.device_addr, pointer + _to_bytes(data)), register=register)

    def i2c_read_write(self, write: Data, read: int = 0, rdelay: Optional[float] = None) -> Union[int, bytes]:
        """ Generic I2C read/write operation.

        :param write: stream to send
        :param read: number of bytes to read
        :param rdelay: read delay. The write is executed first, after the delay the read follows.
        :return: read bytes if final operation is read else int with number of bytes written
        """
        write = _to_bytes(write)

        messages = [i2c_msg.write(self.device_addr, write)]
        if rdelay is not None:
            # write it already and wait afterwards
            self._transfer(*messages)
            messages.clear()
            time.sleep(rdelay)

        if read > 0:
            rd_msg = i2c_msg.read(self.device_addr, read)
            messages.append(rd_msg)
            self._transfer(*messages)
            return bytes(tuple(rd_msg))

        if messages:
            self._transfer(*messages)
        return len(write)

    # typed accessors, 8-bit register address
    def read_u8(self, register: int) -> int:
        return self.read_register(register, 'B')

    def read_u16be(self, register: int) -> int:
        return self.read_register(register, '>H')

    def read_u16le(self, register: int) -> int:
        return self.read_register(register, '<H')

    def read_s16be(self, register: int) -> int:
        return self.read_register(register, '>h')

    def read_u24be(self, register: int) -> int:
        return int.from_bytes(self.read_register(register, 3), 'big')

    def read_u32le(self, register: int) -> int:
        return self.read_register(register, '<I')

    def write_u8(self, register: int, value: int) -> None:
        self.write_register(register, _check_range(value, 8))

    def write_u16be(self, register: int, value: int) -> None:
        self.write_register(register, struct.pack('>H', _check_range(value, 16)))

    def write_u16le(self, register: int, value: int) -> None:
        self.write_register(register, struct.pack('<H', _check_range(value, 16)))

    # typed accessors, 16-bit register address
    def read16_u8(self, register: int) -> int:
        return self.read_register16(register, 'B')

    def read16_u16be(self, register: int) -> int:
        return self.read_register16(register, '>H')

    def read16_u16le(self, register: int) -> int:
        return self.read_register16(register, '<H')

    def write16_u8(self, register: int, value: int) -> None:
        self.write_register16(register, _check_range(value, 8))

    def write16_u16be(self, register: int, value: int) -> None:
        self.write_register16(register, struct.pack('>H', _check_range(value, 16)))

    def write16_u16le(self, register: int, value: int) -> None:
        self.write_register16(register, struct.pack('<H', _check_range(value, 16)))

    # bit fields of 8-bit registers
    def read_bits(self, register: int, start: int, length: int) -> int:
        """Read a bit field.

        :param register: register address
        :param start: position of the least significant bit of the field
        :param length: number of bits
        """
        if start < 0 or length < 1 or start + length > 8:
            raise ValueError('bit field {}:{} outside of a byte'.format(start + length - 1, start))
        return (self.read_u8(register) >> start) & ((1 << length) - 1)

    def write_bits(self, register: int, start: int, length: int, value: int) -> None:
        """Read-modify-write of a bit field, all other bits are kept.

        :param register: register address
        :param start: position of the least significant bit of the field
        :param length: number of bits
        :param value: new field value
        """
        if start < 0 or length < 1 or start + length > 8:
            raise ValueError('bit field {}:{} outside of a byte'.format(start + length - 1, start))
        _check_range(value, length)

        mask = ((1 << length) - 1) << start
        reg_value = self.read_u8(register)
        self.write_u8(register, (reg_value & ~mask & 0xFF) | (value << start))

    def read_bit(self, register: int, bit: int) -> bool:
        return bool(self.read_bits(register, bit, 1))

    def write_bit(self, register: int, bit: int, state: bool) -> None:
        self.write_bits(register, bit, 1, int(bool(state)))

    def modify_register(self,
                        register: int,
                        set_msk: Union[Iterable, int],
                        clr_msk: Optional[Union[Iterable, int]] = None) -> Optional[int]:
        """read, modify and conditionally write to I2C register(s)

        :param register:  register address/command
        :param set_msk:   bit-mask which defined the bits to set (=1)
        :param clr_msk:   bit-mask which defines the bits to clear (=0). Can be None which means
                          that all bits will be cleared.
        :return: number of bytes modified. None means no modification was needed and therefore
                 not register write operation was done.
        """
        set_msk = _to_bytes(set_msk)
        if clr_msk is None:
            clr_msk = [0xFF] * len(set_msk)
        clr_msk = _to_bytes(clr_msk)

        reg_value = self.read_register(register, len(set_msk))
        value = bytes((reg & ~_and | _or) & 0xFF for reg, _and, _or in zip(reg_value, clr_msk, set_msk))

        # already set?
        if value == reg_value:
            return None
        self.write_register(register, value)
        return len(value)
