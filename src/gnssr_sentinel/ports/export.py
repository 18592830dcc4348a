# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for frame export.

Adapters implement this to hand a computed frame to a presentation layer.
"""
from typing import Protocol, Sequence, runtime_checkable

from gnssr_sentinel.domain.frame import FrameSnapshot
from gnssr_sentinel.domain.orbit_paths import OrbitPath


@runtime_checkable
class FrameExporter(Protocol):
    """Port for exporting a frame snapshot to file."""

    def export(
        self,
        frame: FrameSnapshot,
        path: str,
        orbit_paths: Sequence[OrbitPath] = (),
    ) -> int:
        """
        Export a frame (and optional orbit paths) to a file.

        Returns:
            Number of satellites with a position in the frame.
        """
        ...
