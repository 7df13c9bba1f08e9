#!/usr/bin/env python3
"""
Stand Cutting Files Example

Generates cutting files for a small exhibition stand with:
- Rectangular back panel
- Circular logo disc
- Triangular bracket
- L-shaped corner piece
- Irregular curved shelf (normalized path + fold line)
- Irregular piece without a path (drawn with the warning placeholder)

Outputs:
- One SVG cutting file per component
- ZIP archive with all cutting files and LEEME.txt
"""

from pathlib import Path

from cutgen.components import Component, Dimensions, MaterialSpec
from cutgen.drawing_generator.batch import generate_all
from cutgen.export.archive import build_archive
from cutgen.export.single_file import download_svg


def mdf(thickness: str, quantity: int) -> MaterialSpec:
    return MaterialSpec(type="MDF", spec_summary=thickness, quantity=quantity, quantity_unit="pzas")


def main():
    # Create output directories
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Stand Cutting Files Example")
    print("=" * 50)

    components = [
        Component(
            id="c1", name="Panel trasero",
            dimensions=Dimensions(length=240, width=1.8, height=120, shape="rectangle"),
            material=mdf("18 mm", 1),
        ),
        Component(
            id="c2", name="Disco logo",
            dimensions=Dimensions(length=60, width=0.9, height=60, shape="circle"),
            material=mdf("9 mm", 1),
        ),
        Component(
            id="c3", name="Ménsula",
            dimensions=Dimensions(length=30, width=1.8, height=30, shape="triangle"),
            material=mdf("18 mm", 4),
        ),
        Component(
            id="c4", name="Esquinero",
            dimensions=Dimensions(length=45, width=1.8, height=45, shape="L-shape"),
            material=mdf("18 mm", 2),
        ),
        Component(
            id="c5", name="Repisa curva",
            dimensions=Dimensions(length=90, width=1.5, height=35, shape="irregular"),
            material=MaterialSpec(type="Triplay", spec_summary="15 mm", quantity=2, quantity_unit="pzas"),
            cut_path="M0,100 L0,20 Q50,0 100,20 L100,100 Z",
            fold_path="M0,60 L100,60",
            notes="Respetar veta",
        ),
        Component(
            id="c6", name="Faldón decorativo",
            dimensions=Dimensions(length=120, width=0.6, height=20, shape="irregular"),
            material=mdf("6 mm", 1),
        ),
    ]

    # Generate every cutting file
    svg_files = generate_all(components)
    print(f"\nGenerated {len(svg_files)} cutting files")

    by_id = {c.id: c for c in components}
    for component_id, svg_content in svg_files.items():
        download_svg(svg_content, by_id[component_id], output_dir)

    # Package everything for the workshop
    archive = build_archive(svg_files, components, "Stand Expo 2026")
    archive_path = archive.save(output_dir)

    print(f"\nArchive contents ({archive_path.name}):")
    for entry in archive.entries:
        print(f"  {entry}")

    print("\nDone!")


if __name__ == "__main__":
    main()
