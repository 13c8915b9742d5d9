"""
Demo: Logistic Label Element Strings

Shows the element strings and JSON output for a GS1-128 logistic label.
"""

import json
import random

from gs1_label import (
    LabelData,
    assemble,
    build_label_sections,
    generate_sscc,
    label_to_dict,
    validate_label_data,
)


def demo_label_output():
    """Build a label and print each section."""

    print("=" * 80)
    print("  LOGISTIC LABEL DEMO")
    print("=" * 80)

    label = LabelData(
        gtin="00012345678905",
        lot_number="LOT42",
        production_date="2024-03-05",
        quantity=24,
        weight_pounds=12.5,
    )

    sections = build_label_sections(label, rng=random.Random(42))
    print(f"\nContent:  {sections.content}")
    print(f"Quantity: {sections.quantity}")
    print(f"SSCC:     {sections.sscc}")

    print("\nJSON Output:")
    print(json.dumps(label_to_dict(sections, human_readable=True), indent=2))

    print("\n\n" + "=" * 80)
    print("  VALIDATION ERRORS")
    print("=" * 80)

    bad = LabelData(gtin="00012345678906", lot_number="LOT 42", production_date="soon",
                    quantity=24, weight_pounds=12.5)
    for error in validate_label_data(bad).errors:
        print(f"  {error}")

    print("\n\n" + "=" * 80)
    print("  CUSTOM ELEMENT STRING")
    print("=" * 80)

    sscc = generate_sscc("0614141", 1)
    print(assemble({"SSCC": sscc, "37": "12", "EXP_DATE": "2026-06-30", "10": "B77"}))


if __name__ == "__main__":
    demo_label_output()
