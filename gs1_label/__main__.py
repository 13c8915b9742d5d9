"""
CLI interface for the GS1 label toolkit.

Usage:
    python -m gs1_label check-digit 0001234567890
    python -m gs1_label validate gtin 00012345678905
    python -m gs1_label sscc --prefix 0614141 --extension 1 --count 3
    python -m gs1_label date 2024-03-05
    python -m gs1_label weight 12.5 --decimals 1
    python -m gs1_label assemble GTIN=00012345678905 BATCH_LOT=LOT42 EXP_DATE=2025-12-31
    python -m gs1_label label --gtin 00012345678905 --lot LOT42 \\
        --production-date 2024-03-05 --quantity 24 --weight 12.5 --json

Options:
    -v, --verbose         Enable debug logging
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional, Tuple

from .core.element_string import GS, GS_TEXT, ComposeOptions, compose_element_string, to_human_readable
from .core.sscc import generate_sscc
from .errors import InvalidInputError
from .formatters.fields import format_gs1_date, format_gs1_weight
from .label import LabelData, build_label_sections, label_to_dict
from .validators.validators import check_gtin, check_lot_number, check_sscc, compute_check_digit

logger = logging.getLogger("gs1_label")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

CHECKS = {
    'gtin': check_gtin,
    'sscc': check_sscc,
    'lot': check_lot_number,
}


def parse_pair(text: str) -> Tuple[str, str]:
    """Split a KEY=VALUE command line argument."""
    key, sep, value = text.partition('=')
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def format_sections(sections, separator: str) -> str:
    """Format label sections for display."""
    lines = [
        "=" * 60,
        "GS1-128 Logistic Label",
        "=" * 60,
        f"SSCC: {sections.sscc_value}",
        "",
    ]
    for title, text in (
        ("Content", sections.content),
        ("Quantity", sections.quantity),
        ("SSCC", sections.sscc),
    ):
        lines.extend([
            f"{title} barcode:",
            f"  Data: {text!r}",
            f"  Text: {to_human_readable(text, separator)}",
            "",
        ])
    return '\n'.join(lines)


def cmd_check_digit(args: argparse.Namespace) -> int:
    print(compute_check_digit(args.digits))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    result = CHECKS[args.kind](args.value)
    if result.valid:
        print(f"{args.value}: valid")
        return 0
    print(f"{args.value}: invalid ({'; '.join(result.errors)})")
    return 1


def cmd_sscc(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    for _ in range(args.count):
        print(generate_sscc(args.prefix, args.extension, rng=rng))
    return 0


def cmd_date(args: argparse.Namespace) -> int:
    formatted = format_gs1_date(args.value)
    if not formatted:
        print(f"error: not a date: {args.value!r}", file=sys.stderr)
        return 1
    print(formatted)
    return 0


def cmd_weight(args: argparse.Namespace) -> int:
    print(format_gs1_weight(args.value, args.decimals))
    return 0


def cmd_assemble(args: argparse.Namespace) -> int:
    separator = GS if args.raw_separator else GS_TEXT
    result = compose_element_string(args.pairs, ComposeOptions(separator=separator))
    if args.human_readable:
        print(to_human_readable(result.text, separator))
    else:
        print(result.text)
    return 1 if result.warnings and args.strict else 0


def cmd_label(args: argparse.Namespace) -> int:
    label = LabelData(
        gtin=args.gtin,
        lot_number=args.lot,
        production_date=args.production_date,
        quantity=args.quantity,
        weight_pounds=args.weight,
        sscc=args.sscc,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    sections = build_label_sections(label, rng=rng)

    if args.json:
        print(json.dumps(label_to_dict(sections, human_readable=True), indent=2, ensure_ascii=False))
    else:
        print(format_sections(sections, GS_TEXT))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gs1_label',
        description='GS1 check digits, SSCCs, field formatting and GS1-128 element strings'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('check-digit', help='Compute the Mod10 check digit of a digit string')
    p.add_argument('digits', help='Digits without check digit')
    p.set_defaults(func=cmd_check_digit)

    p = sub.add_parser('validate', help='Validate a GTIN, SSCC or lot number')
    p.add_argument('kind', choices=sorted(CHECKS))
    p.add_argument('value')
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser('sscc', help='Generate SSCCs')
    p.add_argument('--prefix', default=None, help='GS1 company prefix (random if omitted)')
    p.add_argument('--extension', default=None, help='Extension digit 0-9 (random if omitted)')
    p.add_argument('--count', type=int, default=1, help='Number of SSCCs to generate')
    p.add_argument('--seed', type=int, default=None, help='Seed for repeatable output')
    p.set_defaults(func=cmd_sscc)

    p = sub.add_parser('date', help='Format a date as YYMMDD')
    p.add_argument('value')
    p.set_defaults(func=cmd_date)

    p = sub.add_parser('weight', help='Format a weight as a 6-digit field')
    p.add_argument('value')
    p.add_argument('--decimals', type=int, default=0, help='Implied decimal places (0-6)')
    p.set_defaults(func=cmd_weight)

    p = sub.add_parser('assemble', help='Assemble a GS1-128 element string')
    p.add_argument('pairs', nargs='+', type=parse_pair, metavar='KEY=VALUE',
                   help='AI code or field name (GTIN, BATCH_LOT, EXP_DATE, ...) and value')
    p.add_argument('--raw-separator', action='store_true',
                   help='Use ASCII 29 instead of <GS> as separator')
    p.add_argument('--human-readable', action='store_true',
                   help='Print the text shown under the barcode')
    p.add_argument('--strict', action='store_true',
                   help='Exit with status 1 if any key was skipped')
    p.set_defaults(func=cmd_assemble)

    p = sub.add_parser('label', help='Build the element strings of a logistic label')
    p.add_argument('--gtin', required=True)
    p.add_argument('--lot', required=True)
    p.add_argument('--production-date', required=True)
    p.add_argument('--quantity', required=True)
    p.add_argument('--weight', required=True, help='Net weight in pounds')
    p.add_argument('--sscc', default=None, help='SSCC (generated if omitted)')
    p.add_argument('--seed', type=int, default=None, help='Seed for the generated SSCC')
    p.add_argument('--json', action='store_true', help='Output result as JSON')
    p.set_defaults(func=cmd_label)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        return args.func(args)
    except InvalidInputError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
