"""Regenerate the sector diagram as SVG and/or PNG.

Usage:
    sector-diagram                          # sectors.svg + sectors.png in cwd
    sector-diagram --format svg --dark      # dark SVG only
    sector-diagram --separation 0.5         # pull the sectors apart
    sector-diagram --points                 # print the construction and exit
"""
import argparse
import os
import sys

from planar.geometry import GeometryError, poly_area
from sectors.construction import compute_construction, pentagon
from sectors.labels import fmt_theta
from sectors.style import DiagramConfig


def print_points(c):
    """Point table, one named point per line, then the sector areas."""
    A, B, C, D, E = c.seeds
    for name, p in [("A", A), ("B", B), ("C", C), ("D", D), ("E", E),
                    ("α", c.alpha), ("β", c.beta), ("γ", c.gamma),
                    ("Θ", c.theta), ("χ", c.chi)]:
        print(f"  {name:<2s} ({p[0]:8.4f}, {p[1]:8.4f})")
    for name, shape in zip(c.sectors._fields, c.sectors):
        print(f"  {name:<5s} sector: {len(shape)} points, area {poly_area(shape):.4f}")
    print(f"  pentagon area {poly_area(pentagon(c)):.4f}")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate the pentagon sector diagram."
    )
    parser.add_argument("--format", choices=["svg", "png", "all"], default="all",
                        help="Output format (default: all)")
    parser.add_argument("--out-dir", default=".", help="Output directory (default: cwd)")
    parser.add_argument("--separation", type=float, default=0.0,
                        help="Pull-apart distance between sectors, grid units")
    parser.add_argument("--no-grid", action="store_true", help="Hide the background grid")
    parser.add_argument("--no-labels", action="store_true", help="Hide labels and construction lines")
    parser.add_argument("--dark", action="store_true", help="Use the dark color scheme")
    parser.add_argument("--points", action="store_true",
                        help="Print the construction points and exit")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = DiagramConfig(
        separation=args.separation,
        show_grid=not args.no_grid,
        show_labels=not args.no_labels,
        dark=args.dark,
    )

    try:
        c = compute_construction()
        if args.points:
            print_points(c)
            return 0

        os.makedirs(args.out_dir, exist_ok=True)
        written = []
        if args.format in ("svg", "all"):
            from sectors.gen_svg import write_svg
            written.append(write_svg(os.path.join(args.out_dir, "sectors.svg"), c, config))
        if args.format in ("png", "all"):
            from sectors.gen_canvas import write_png
            written.append(write_png(os.path.join(args.out_dir, "sectors.png"), c, config))
    except GeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for path in written:
        print(f"  {os.path.relpath(path)}")
    print(f"Θ = {fmt_theta(c.theta)}")
    print(f"\nGenerated {len(written)} diagram(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
