# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Video uplink bandwidth policies.
"""

from .policy import NScaleVideoUplinkBandwidthPolicy, VideoUplinkBandwidthPolicy

__all__ = ["NScaleVideoUplinkBandwidthPolicy", "VideoUplinkBandwidthPolicy"]
