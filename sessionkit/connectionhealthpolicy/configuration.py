# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Connection Health Policy Configuration - SessionKit

Thresholds used by the reconnection, unusable-audio warning and signal
strength bar policies.
"""

from pydantic import BaseModel


class ConnectionHealthPolicyConfiguration(BaseModel):
    min_health: int = 0
    max_health: int = 1
    initial_health: int = 1
    connection_unhealthy_threshold: int = 25
    no_signal_threshold_time_ms: int = 10000
    one_bar_weak_signal_time_ms: int = 5000
    two_bars_time_ms: int = 5000
    three_bars_time_ms: int = 10000
    four_bars_time_ms: int = 20000
    five_bars_time_ms: int = 60000
    cooldown_time_ms: int = 60000
    past_samples_to_consider: int = 15
    fractional_loss: float = 0.5
    packets_expected: int = 50
    maximum_times_to_warn: int = 2
    connection_wait_time_ms: int = 12000
    zero_bars_no_signal_time_ms: int = 5000
    missed_pongs_lower_threshold: int = 1
    missed_pongs_upper_threshold: int = 4
    maximum_audio_delay_ms: int = 60000
    maximum_audio_delay_data_points: int = 10
