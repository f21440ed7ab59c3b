"""Compensation Command Line Interface.

Usage:
    compensation-engine bonus --salary 75000 --rating 5
    compensation-engine status --rating 4 --years 3
    compensation-engine raise --employee-id 1 --percentage 10
    compensation-engine report --department IT
    compensation-engine seed
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from datetime import date
from decimal import Decimal
from typing import Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from compensation_engine.calculators.engine import CompensationEngine
from compensation_engine.calculators.types import InvalidArgumentError, RaiseStatus
from compensation_engine.config import configure_logging, get_settings
from compensation_engine.database import create_schema, get_engine
from compensation_engine.services.compensation_service import CompensationService
from compensation_engine.services.seed import seed_sample_employees


def parse_date(s: str) -> date:
    """Parse ISO date string."""
    return date.fromisoformat(s)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Cannot serialize {type(value).__name__}")


class CompensationCli:
    """Compensation Command Line Interface."""

    def __init__(self, engine: CompensationEngine | None = None) -> None:
        self.engine = engine
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="compensation-engine",
            description="Raise, bonus and status calculations",
        )
        parser.add_argument(
            "--database-url",
            type=str,
            help="Database URL (default: DATABASE_URL from environment)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        bonus = subparsers.add_parser("bonus", help="Calculate an annual bonus")
        bonus.add_argument("--salary", type=Decimal, required=True)
        bonus.add_argument("--rating", type=int, required=True)

        status = subparsers.add_parser("status", help="Classify rating and tenure")
        status.add_argument("--rating", type=int, required=True)
        status.add_argument("--years", type=int, required=True, help="Years of service")

        give_raise = subparsers.add_parser("raise", help="Give an employee a raise")
        give_raise.add_argument("--employee-id", type=int, required=True)
        give_raise.add_argument("--percentage", type=Decimal, required=True)
        give_raise.add_argument(
            "--as-of",
            type=parse_date,
            help="Evaluation date for tenure (default: today)",
        )

        report = subparsers.add_parser("report", help="Department salary report")
        report.add_argument("--department", type=str, required=True)

        subparsers.add_parser("seed", help="Create tables and load sample employees")

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        if self.engine is None:
            self.engine = CompensationEngine.from_settings(get_settings())

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "bonus": self._cmd_bonus,
            "status": self._cmd_status,
            "raise": self._cmd_raise,
            "report": self._cmd_report,
            "seed": self._cmd_seed,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        try:
            return handler(parsed)
        except InvalidArgumentError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    def _print(self, data: dict[str, Any]) -> None:
        print(json.dumps(data, indent=2, default=_json_default))

    def _cmd_bonus(self, args: argparse.Namespace) -> int:
        """Calculate bonus and total compensation."""
        assert self.engine is not None
        self._print(
            {
                "salary": args.salary,
                "rating": args.rating,
                "bonus": self.engine.calculate_bonus(args.salary, args.rating),
                "total_compensation": self.engine.total_compensation(
                    args.salary, args.rating
                ),
            }
        )
        return 0

    def _cmd_status(self, args: argparse.Namespace) -> int:
        """Classify a rating and tenure."""
        assert self.engine is not None
        label = self.engine.classify_status(args.rating, args.years)
        self._print({"rating": args.rating, "years_of_service": args.years, "status": label})
        return 0

    def _cmd_raise(self, args: argparse.Namespace) -> int:
        """Evaluate and apply a raise."""
        result = asyncio.run(
            self._with_session(
                args.database_url,
                lambda service: service.give_raise(
                    args.employee_id, args.percentage, as_of=args.as_of
                ),
            )
        )
        print(result.message)
        return 0 if result.status == RaiseStatus.APPROVED else 1

    def _cmd_report(self, args: argparse.Namespace) -> int:
        """Print a department rollup."""
        rollup = asyncio.run(
            self._with_session(
                args.database_url,
                lambda service: service.department_report(args.department),
            )
        )
        self._print(rollup.to_dict())
        return 0

    def _cmd_seed(self, args: argparse.Namespace) -> int:
        """Create the schema and load the sample employees."""

        async def seed(service: CompensationService) -> int:
            return await seed_sample_employees(service.session)

        count = asyncio.run(self._with_session(args.database_url, seed, create=True))
        print(f"Inserted {count} employees")
        return 0

    async def _with_session(
        self,
        database_url: str | None,
        action: Callable[[CompensationService], Any],
        create: bool = False,
    ) -> Any:
        """Run an action in a committed session against the database."""
        db_engine = get_engine(database_url)
        try:
            if create:
                await create_schema(db_engine)
            async with AsyncSession(db_engine, expire_on_commit=False) as session:
                result = await action(CompensationService(session, self.engine))
                await session.commit()
                return result
        finally:
            await db_engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    configure_logging()
    cli = CompensationCli()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
