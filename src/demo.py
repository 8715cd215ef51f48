from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from employee_engine.generator import EmployeeGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic list of employees and print it as JSON."
    )
    parser.add_argument("--count", type=int, default=10, help="Number of employees")
    parser.add_argument("--min-age", type=int, default=18, help="Youngest allowed age in years")
    parser.add_argument("--max-age", type=int, default=65, help="Oldest allowed age in years")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (for reproducibility)",
    )
    parser.add_argument("--output", default=None, help="Write JSON to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    request = {"count": args.count, "age": {"min": args.min_age, "max": args.max_age}}
    employees = EmployeeGenerator(seed=args.seed).generate(request)
    payload = json.dumps(
        [employee.model_dump(mode="json") for employee in employees],
        ensure_ascii=False,
        indent=2,
    )

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote {len(employees)} employees to {output_path}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
