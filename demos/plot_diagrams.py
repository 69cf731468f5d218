# File: demos/plot_diagrams.py
"""
Plots shear, moment, deflection and bending stress for a mixed load case:
overhanging beam with an interior support, a partial UDL and a couple.
"""

import matplotlib.pyplot as plt

from mini_beam import (
    BeamInput,
    DistributedLoad,
    PointLoad,
    PointMoment,
    SectionProperties,
    Support,
    SupportKind,
    analyze_beam,
    section_response,
)
from mini_beam.post import format_reactions


def main():
    beam = BeamInput(
        span=12.0,
        left_support=SupportKind.PINNED,
        right_support=SupportKind.FREE,
        point_loads=(PointLoad(-15.0, 12.0),),
        distributed_loads=(DistributedLoad(0.0, 9.0, -4.0),),
        point_moments=(PointMoment(20.0, 4.0),),
        interior_supports=(Support(9.0, SupportKind.ROLLER),),
        section=SectionProperties(E=200e6, I=8.0e-5, h=0.3),  # kN/m², m⁴, m
    )

    result = analyze_beam(beam)
    scaled = section_response(result, beam.section)

    print("Reactions:")
    for line in format_reactions(result.reactions):
        print(f"  {line}")

    fig, axes = plt.subplots(4, 1, figsize=(10, 12), sharex=True)
    panels = [
        (result.V, "V(x) [kN]", "Shear Force Diagram"),
        (result.M, "M(x) [kN·m]", "Bending Moment Diagram"),
        (scaled.deflection * 1000, "v(x) [mm]", "Deflection Diagram"),
        (scaled.stress / 1000, "σ(x) [MPa]", "Bending Stress Diagram"),
    ]
    for ax, (values, ylabel, title) in zip(axes, panels):
        ax.plot(result.x, values, linewidth=2)
        ax.axhline(0.0, color="k", linewidth=1)
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, alpha=0.3)
    axes[-1].set_xlabel("Position x [m]")

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
