# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Platform capability probes.
"""

from .browser_behavior import BrowserBehavior, DefaultBrowserBehavior

__all__ = ["BrowserBehavior", "DefaultBrowserBehavior"]
