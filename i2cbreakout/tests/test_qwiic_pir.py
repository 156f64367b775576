import unittest

from i2cbreakout.qwiic_pir import QwiicPIR, Reg
from i2cbreakout.errors import IdentificationError

from .fakebus import FakeBusTestCase


class QwiicPIRTest(FakeBusTestCase):
    def setUp(self):
        super().setUp()
        self.device.set(Reg.device_id, b'\x72')
        self.pir = QwiicPIR()

    def test_wrong_device(self):
        self.device.set(Reg.device_id, b'\x5D')
        with self.assertRaises(IdentificationError):
            QwiicPIR()

    def test_event_flags(self):
        self.device.set(Reg.event_status, b'\x0B')
        self.assertTrue(self.pir.raw_reading)
        self.assertTrue(self.pir.available)
        self.assertTrue(self.pir.object_detected)
        self.assertFalse(self.pir.object_removed)

    def test_debounce_events(self):
        self.device.set(Reg.event_status, b'\x0B')
        self.assertEqual(self.pir.debounce_events(), (True, True, False))
        self.assertEqual(self.device.get(Reg.event_status), b'\x01')

        self.assertEqual(self.pir.debounce_events(), (False, False, False))

    def test_clear_event_bits(self):
        self.device.set(Reg.event_status, b'\x0F')
        self.pir.clear_event_bits()
        self.assertEqual(self.device.get(Reg.event_status), b'\x01')

    def test_debounce_time(self):
        self.device.set(Reg.event_debounce_time, b'\xF4\x01')
        self.assertEqual(self.pir.debounce_time, 500)
        self.pir.debounce_time = 750
        self.assertEqual(self.device.writes[-1], (Reg.event_debounce_time, b'\xEE\x02'))

    def test_detected_queue(self):
        self.device.set(Reg.detected_queue_status, b'\x02')
        self.device.set(Reg.detected_queue_front, b'\xE8\x03\x00\x00')
        self.device.set(Reg.detected_queue_back, b'\x10\x27\x00\x00')
        self.assertTrue(self.pir.detected_queue_empty)
        self.assertFalse(self.pir.detected_queue_full)
        self.assertEqual(self.pir.time_since_last_detect(), 1000)

        self.assertEqual(self.pir.pop_detected_queue(), 10000)
        self.assertEqual(self.device.get(Reg.detected_queue_status), b'\x03')

    def test_removed_queue(self):
        self.device.set(Reg.removed_queue_status, b'\x04')
        self.device.set(Reg.removed_queue_front, b'\x64\x00\x00\x00')
        self.device.set(Reg.removed_queue_back, b'\x00\x00\x01\x00')
        self.assertTrue(self.pir.removed_queue_full)
        self.assertFalse(self.pir.removed_queue_empty)
        self.assertEqual(self.pir.time_since_last_remove(), 100)

        self.assertEqual(self.pir.pop_removed_queue(), 0x10000)
        self.assertEqual(self.device.get(Reg.removed_queue_status), b'\x05')


if __name__ == '__main__':
    unittest.main()
