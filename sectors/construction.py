"""Derive the named points, construction lines and sector polygons from five seed points."""
from typing import NamedTuple

from planar.types import Point, Line, Shape
from planar.geometry import (
    midpoint, section_point, line_intersection, perpendicular_offset_point,
    translate, subtract,
)
from sectors.constants import SEED_A, SEED_B, SEED_C, SEED_D, SEED_E


class Seeds(NamedTuple):
    """Pentagon vertices, clockwise from the top."""
    A: Point
    B: Point
    C: Point
    D: Point
    E: Point


SEEDS = Seeds(SEED_A, SEED_B, SEED_C, SEED_D, SEED_E)


class Sectors(NamedTuple):
    top: Shape     # A α Θ χ
    right: Shape   # α B C β Θ
    left: Shape    # χ Θ β D E


class Construction(NamedTuple):
    """Complete construction result."""
    seeds: Seeds
    alpha: Point     # midpoint of AB
    beta: Point      # 1/3 of the way from D to C
    gamma: Point     # 2/3 of the way from D to C
    theta: Point     # concurrency point of αD, ψ and ω
    chi: Point       # AE ∩ line(γ, Θ)
    ae: Line         # left-hand pentagon edge A→E
    alpha_d: Line    # α→D
    psi: Line        # β→AE, vertical through β
    omega: Line      # γ→χ, passes through Θ
    sectors: Sectors


def compute_construction(seeds: Seeds = SEEDS) -> Construction:
    """Compute every derived point and sector from the seeds.

    Raises GeometryError (or ParallelLinesError) if the seeds make any
    intersection degenerate; there is no fallback.
    """
    A, B, C, D, E = seeds
    alpha = midpoint((A, B))
    dc = (D, C)
    beta = section_point(dc, 1, 3)
    gamma = section_point(dc, 2, 3)

    ae = (A, E)
    alpha_d = (alpha, D)
    # Vertical helper through β, dropped to the top of the grid
    psi = (beta, line_intersection(ae, (beta, (beta[0], 0.0))))
    theta = line_intersection(alpha_d, psi)
    chi = line_intersection(ae, (gamma, theta))
    omega = (gamma, chi)

    sectors = Sectors(
        top=[A, alpha, theta, chi],
        right=[alpha, B, C, beta, theta],
        left=[chi, theta, beta, D, E],
    )
    return Construction(seeds, alpha, beta, gamma, theta, chi,
                        ae, alpha_d, psi, omega, sectors)


def separate_sectors(c: Construction, separation: float) -> Sectors:
    """Pull the three sectors apart by *separation* grid units.

    Top moves straight up; right and left move perpendicular to the
    Θα and χΘ dividing lines. The construction itself is unchanged.
    """
    top, right, left = c.sectors
    theta_alpha = (c.theta, c.alpha)
    chi_theta = (c.chi, c.theta)
    right_off = subtract(perpendicular_offset_point(theta_alpha, separation), midpoint(theta_alpha))
    left_off = subtract(perpendicular_offset_point(chi_theta, -separation), midpoint(chi_theta))
    return Sectors(
        top=translate(top)((0.0, -separation)),
        right=translate(right)(right_off),
        left=translate(left)(left_off),
    )


def pentagon(c: Construction) -> Shape:
    """The outer boundary A B C D E."""
    return list(c.seeds)
