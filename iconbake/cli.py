"""
iconbake CLI: convert SVG icons into C sources of flattened polylines.

Usage:
  iconbake --in icons/ --out generated/                  # whole folder
  iconbake --in home.svg --size 32 --flatness 0.1        # one icon, normalized
  iconbake --in filled/ --prefix vg_icon_f_ --upscale 4  # filled set (grouped)

Writes one ``<icon>.c`` per SVG file plus a shared ``icons.h``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from iconbake.config import settings
from iconbake.engine.builder import build_geometry
from iconbake.svg.emitter import auto_group, emit_c, emit_header
from iconbake.svg.parser import parse_svg

logger = logging.getLogger(__name__)


def discover_svgs(in_path: Path) -> list[Path]:
    """SVG files under ``in_path`` (or the file itself), sorted."""
    if not in_path.exists():
        raise FileNotFoundError(f"{in_path}: no such file or directory")
    if in_path.is_dir():
        files = [p for p in in_path.rglob("*") if p.is_file() and p.suffix.lower() == ".svg"]
    else:
        files = [in_path]
    return sorted(files, key=str)


def run(
    in_path: Path,
    out_dir: Path,
    prefix: str,
    size: int = 0,
    flatness: float = 0.25,
    limit: int = 0,
    upscale: int = 1,
    group: bool = False,
) -> list[str]:
    """Convert every discovered SVG; returns the icon names written."""
    files = discover_svgs(in_path)
    if not files:
        raise ValueError("no svg files found")
    if limit > 0:
        files = files[:limit]
    out_dir.mkdir(parents=True, exist_ok=True)

    names: list[str] = []
    for f in files:
        name = f.stem
        try:
            doc = parse_svg(f.read_text(encoding="utf-8"))
        except ValueError as e:
            raise ValueError(f"{f}: {e}") from e
        geometry = build_geometry(doc, size=size, flatness=flatness, upscale=upscale)
        source = emit_c(
            name,
            prefix,
            geometry.subpaths,
            int(geometry.width),
            int(geometry.height),
            geometry.warnings,
            upscale,
            group,
        )
        (out_dir / f"{name}.c").write_text(source, encoding="utf-8")
        names.append(name)
        logger.debug("Wrote %s.c (%d subpaths)", name, len(geometry.subpaths))

    (out_dir / "icons.h").write_text(emit_header(names, prefix, upscale), encoding="utf-8")
    logger.info("Converted %d icons into %s", len(names), out_dir)
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iconbake", description="Flatten SVG icons into C polyline sources")
    parser.add_argument("--in", dest="in_path", required=True, help="Input SVG file or directory")
    parser.add_argument("--out", default="generated", help="Output directory for C sources")
    parser.add_argument("--prefix", default=settings.iconbake_prefix, help="Symbol name prefix")
    parser.add_argument(
        "--size", type=int, default=settings.iconbake_size, help="Normalize to square size (0 = keep viewBox)"
    )
    parser.add_argument(
        "--flatness", type=float, default=settings.iconbake_flatness, help="Curve flattening tolerance (px)"
    )
    parser.add_argument("--limit", type=int, default=0, help="Process only first N files (debug)")
    parser.add_argument(
        "--upscale", type=int, default=settings.iconbake_upscale, help="Pre-round geometry up-scale factor (>=1)"
    )
    parser.add_argument(
        "--group",
        action="store_true",
        help="Group all SVG subpaths into one vg_path_t with segment breaks (useful for filled icons with holes)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.iconbake_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        run(
            Path(args.in_path),
            Path(args.out),
            args.prefix,
            size=args.size,
            flatness=args.flatness,
            limit=args.limit,
            upscale=max(args.upscale, 1),
            group=auto_group(args.prefix, args.group),
        )
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
