# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for orbit propagation and frame export.

Adapters implement these; the domain depends only on the protocols.
"""
