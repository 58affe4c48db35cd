# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Utilities - SessionKit

Shared utility functions used across multiple modules.
"""

from .lowercase_keys import NormalizedResponse, lowercase_keys

__all__ = ["NormalizedResponse", "lowercase_keys"]
