"""
Slot partitioning:
- divisible window -> (end-start)/block slots, first=start, step=block, last<end
- block <= 0 rejected
- non-divisible window stops strictly before end
"""
from datetime import date, time

from django.test import SimpleTestCase

from auditions.slots import partition_slot_times, window_minutes

DAY = date(2026, 4, 11)


def _minutes(t):
    return t.hour * 60 + t.minute


class PartitionSlotTimesTests(SimpleTestCase):
    def test_two_hour_window_fifteen_minute_blocks(self):
        times = partition_slot_times(DAY, time(9, 0), time(11, 0), 15)
        self.assertEqual(
            [t.strftime("%H:%M") for t in times],
            ["09:00", "09:15", "09:30", "09:45", "10:00", "10:15", "10:30", "10:45"],
        )

    def test_divisible_windows_have_exact_count_and_spacing(self):
        cases = [
            (time(9, 0), time(10, 0), 60),
            (time(9, 0), time(10, 0), 1),
            (time(8, 30), time(17, 30), 30),
            (time(0, 0), time(23, 45), 15),
            (time(13, 10), time(14, 40), 45),
        ]
        for start, end, block in cases:
            with self.subTest(start=start, end=end, block=block):
                times = partition_slot_times(DAY, start, end, block)
                self.assertEqual(len(times), int(window_minutes(DAY, start, end)) // block)
                self.assertEqual(times[0], start)
                for prev, cur in zip(times, times[1:]):
                    self.assertEqual(_minutes(cur) - _minutes(prev), block)
                self.assertLess(times[-1], end)

    def test_single_block_window(self):
        self.assertEqual(partition_slot_times(DAY, time(9, 0), time(9, 20), 20), [time(9, 0)])

    def test_non_positive_block_rejected(self):
        with self.assertRaises(ValueError):
            partition_slot_times(DAY, time(9, 0), time(10, 0), 0)
        with self.assertRaises(ValueError):
            partition_slot_times(DAY, time(9, 0), time(10, 0), -15)

    def test_empty_when_start_not_before_end(self):
        self.assertEqual(partition_slot_times(DAY, time(10, 0), time(10, 0), 15), [])

    def test_window_minutes(self):
        self.assertEqual(window_minutes(DAY, time(9, 0), time(9, 50)), 50)
        self.assertEqual(window_minutes(DAY, time(9, 0), time(9, 0, 30)), 0.5)
