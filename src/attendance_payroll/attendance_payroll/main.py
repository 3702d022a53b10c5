from __future__ import annotations

import argparse
import importlib
import json
import logging
from dataclasses import asdict
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .common.validators import require_month, require_non_empty, require_positive_amount, require_year
from .container import build_container
from .core.constants import DEFAULT_UPCOMING_MONTHS
from .core.exceptions import DomainError, ValidationError
from .payroll.policy import PayrollPolicy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attendance-payroll", description="Monthly salary from attendance and leave.")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calculate", help="Calculate one employee's salary for a month")
    calc.add_argument("--employee", required=True)
    calc.add_argument("--month", required=True)
    calc.add_argument("--year", required=True)
    calc.add_argument("--base-salary", required=True)
    calc.add_argument("--save", action="store_true", help="Persist the result as the month's salary record")

    days = sub.add_parser("working-days", help="Show calendar and working days of a month")
    days.add_argument("--month", required=True)
    days.add_argument("--year", required=True)

    upcoming = sub.add_parser("upcoming", help="Working days of the current and following months")
    upcoming.add_argument("--count", type=int, default=DEFAULT_UPCOMING_MONTHS)

    saved = sub.add_parser("salary-records", help="List saved salary records of a month")
    saved.add_argument("--month", required=True)
    saved.add_argument("--year", required=True)
    saved.add_argument("--employee", help="Only this employee's record")
    return parser


def run(argv: Optional[Sequence[str]] = None) -> dict:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=logging.DEBUG if getattr(settings, "DEBUG", False) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    policy = PayrollPolicy.from_config(settings)
    container = build_container(db_config=settings.DB_CONFIG, policy=policy)
    service = container.payroll_service

    if args.command == "upcoming":
        if args.count <= 0:
            raise ValidationError("Count must be greater than 0")
        return {"months": [asdict(m) for m in service.get_upcoming_months(args.count)]}

    month = require_month(args.month)
    year = require_year(args.year)

    if args.command == "working-days":
        return asdict(service.get_month_details(month, year))

    if args.command == "salary-records":
        if args.employee:
            record = service.get_salary_record(require_non_empty(args.employee, "Employee"), month, year)
            records = [record] if record is not None else []
        else:
            records = service.list_salary_records(month, year)
        return {"salaryRecords": [r.to_dict() for r in records]}

    employee_id = require_non_empty(args.employee, "Employee")
    base_salary = require_positive_amount(args.base_salary, "Base salary")
    calculation = service.calculate_salary(employee_id, month, year, base_salary)
    if args.save:
        service.save_salary_record(employee_id, month, year, calculation)
    return {"calculation": calculation.to_dict()}


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        result = run(argv)
    except DomainError as exc:
        raise SystemExit(f"Error: {exc}")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
