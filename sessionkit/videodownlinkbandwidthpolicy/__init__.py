# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Video downlink bandwidth policies.
"""

from .policy import AllHighestVideoBandwidthPolicy, VideoDownlinkBandwidthPolicy

__all__ = ["AllHighestVideoBandwidthPolicy", "VideoDownlinkBandwidthPolicy"]
