"""
Slot partitioning: split an audition window into fixed-length blocks.
"""
from datetime import datetime, timedelta


def window_minutes(day, start_time, end_time):
    """Length of [start_time, end_time) on day, in (possibly fractional) minutes."""
    delta = datetime.combine(day, end_time) - datetime.combine(day, start_time)
    return delta.total_seconds() / 60


def partition_slot_times(day, start_time, end_time, block_length_minutes):
    """
    Ordered slot start times: start, start+block, start+2*block, ...,
    stopping strictly before end_time.

    When (end - start) is a multiple of the block length the result has
    exactly (end - start) / block entries.
    """
    if block_length_minutes <= 0:
        raise ValueError('block_length_minutes must be positive')

    current = datetime.combine(day, start_time)
    end = datetime.combine(day, end_time)
    step = timedelta(minutes=block_length_minutes)

    times = []
    while current < end:
        times.append(current.time())
        current += step
    return times
