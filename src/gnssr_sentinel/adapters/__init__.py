# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for orbit propagation and frame I/O.

External dependencies (sgp4, json, file I/O) are confined to this layer.
"""
