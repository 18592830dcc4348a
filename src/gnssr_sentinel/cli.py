# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for inspecting globe frames.

Usage:
    # Frame for now, built-in catalog, no target
    gnssr-sentinel

    # Frame at a fixed instant with the Baltic alert selected
    gnssr-sentinel --at 2024-01-01T12:00:00Z --target baltic

    # Arbitrary target, JSON export with orbit paths
    gnssr-sentinel --target-lat 54.2 --target-lon 12.1 -o frame.json --paths

    # Custom catalog and scene config
    gnssr-sentinel --catalog sats.tle --config scene.json --verbose
"""
import argparse
import logging
import sys
from datetime import datetime, timezone

from gnssr_sentinel.adapters.frame_json import JsonFrameExporter
from gnssr_sentinel.adapters.json_io import load_catalog_file, load_scene_config
from gnssr_sentinel.adapters.sgp4_propagator import SGP4Propagator
from gnssr_sentinel.domain.catalog import default_catalog, find_point_of_interest
from gnssr_sentinel.domain.frame import FrameSnapshot, compute_frame
from gnssr_sentinel.domain.orbit_paths import compute_orbit_paths, epoch_window_start
from gnssr_sentinel.domain.projection import GeodeticCoordinate
from gnssr_sentinel.domain.scene_config import DEFAULT_SCENE_CONFIG
from gnssr_sentinel.domain.tle import MalformedElementSet


def _parse_epoch(text: str | None) -> datetime:
    if not text:
        return datetime.now(tz=timezone.utc)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def format_summary(frame: FrameSnapshot) -> str:
    """Human-readable frame summary, one satellite per line."""
    lines = [f"Frame at {frame.epoch.isoformat()}"]
    for view in frame.satellites:
        if view.position is None:
            lines.append(f"  {view.name:<22} unavailable: {view.failure}")
            continue
        p = view.position
        lines.append(
            f"  {view.name:<22} r={view.state.radius_km:9.1f} km  "
            f"scene=({p.x:7.3f}, {p.y:7.3f}, {p.z:7.3f})"
        )
    if frame.target is not None:
        label = frame.target.label or "target"
        lines.append(
            f"Target {label} ({frame.target.lat_deg:.2f}, {frame.target.lon_deg:.2f})"
        )
        if not frame.links:
            lines.append("  no signal links")
        for link in frame.links:
            lines.append(
                f"  {link.role:<11} {link.satellite_name:<22} distance={link.distance:.3f}"
            )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute satellite and target geometry for one globe frame"
    )
    parser.add_argument(
        '--at',
        help="UTC instant in ISO-8601 (default: now)"
    )
    parser.add_argument(
        '--catalog',
        help="TLE file to use instead of the built-in catalog"
    )
    parser.add_argument(
        '--config',
        help="JSON file with scene config overrides"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write the frame as JSON to this path"
    )
    parser.add_argument(
        '--paths', action='store_true', default=False,
        help="Include orbit paths for the current epoch window (with --output)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Debug logging"
    )

    target_group = parser.add_argument_group('target')
    target_group.add_argument(
        '--target',
        help="Named point of interest (e.g. baltic, north-sea, hormuz)"
    )
    target_group.add_argument('--target-lat', type=float, help="Target latitude (deg)")
    target_group.add_argument('--target-lon', type=float, help="Target longitude (deg)")

    args = parser.parse_args(argv)

    if args.paths and not args.output:
        _fail("--paths requires --output")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        epoch = _parse_epoch(args.at)
    except ValueError as e:
        _fail(f"Invalid --at value {args.at!r}: {e}")

    config = DEFAULT_SCENE_CONFIG
    if args.config:
        try:
            config = load_scene_config(args.config)
        except FileNotFoundError:
            _fail(f"Config file not found: {args.config}")
        except OSError as e:
            _fail(f"Cannot read config file {args.config}: {e}")
        except UnicodeDecodeError as e:
            _fail(f"Config file {args.config} is not valid UTF-8: {e}")
        except ValueError as e:
            _fail(str(e))

    try:
        catalog = load_catalog_file(args.catalog) if args.catalog else default_catalog()
    except FileNotFoundError:
        _fail(f"Catalog file not found: {args.catalog}")
    except OSError as e:
        _fail(f"Cannot read catalog file {args.catalog}: {e}")
    except UnicodeDecodeError as e:
        _fail(f"Catalog file {args.catalog} is not valid UTF-8: {e}")
    except MalformedElementSet as e:
        _fail(f"Malformed catalog: {e}")

    target = None
    if args.target:
        try:
            target = find_point_of_interest(args.target)
        except KeyError as e:
            _fail(str(e.args[0]))
    elif args.target_lat is not None or args.target_lon is not None:
        if args.target_lat is None or args.target_lon is None:
            _fail("--target-lat and --target-lon must be given together")
        try:
            target = GeodeticCoordinate(args.target_lat, args.target_lon, "custom")
        except ValueError as e:
            _fail(str(e))

    propagator = SGP4Propagator()
    frame = compute_frame(catalog, propagator, epoch, target=target, config=config)
    print(format_summary(frame))

    if args.output:
        paths = []
        if args.paths:
            paths = compute_orbit_paths(
                catalog, propagator, epoch_window_start(epoch), config
            )
        try:
            count = JsonFrameExporter().export(frame, args.output, orbit_paths=paths)
        except OSError as e:
            _fail(f"Cannot write {args.output}: {e}")
        print(f"Wrote {count} satellite positions to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
