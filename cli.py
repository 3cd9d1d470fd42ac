"""CLI entry point for the budget simulator."""

import argparse
import random
import sys

import settings
from models.errors import ConfigurationError, ScenarioError
from services.export_service import write_csv, write_xlsx
from services.scenario_service import load_account, load_portfolio
from services.schema_service import generate_json_schemas
from services.simulation_service import run_simulation
from utils.money import format_money


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daily account balance simulator")
    parser.add_argument("--run-sim", action="store_true", help="Run a simulation with --config")
    parser.add_argument("--config", help="Path to account JSON or YAML file")
    parser.add_argument("--portfolio", help="Optional portfolio JSON or YAML file")
    parser.add_argument("--excel", help="Write results to this .xlsx file")
    parser.add_argument("--csv", help="Write results to this .csv file")
    parser.add_argument("--seed", type=int, help="Random seed for the portfolio overlay")
    parser.add_argument("--summary", action="store_true", help="Print text summary to stdout")
    parser.add_argument("--gen-schema", action="store_true", help="Write JSON schemas")
    parser.add_argument("--schema-dir", default=settings.SCHEMA_DIR, help="Directory for --gen-schema output")
    parser.add_argument("--log-file", default=settings.LOG_FILE, help="Log file path")
    return parser


def _print_summary(account, result) -> None:
    print(f"Account: {account.name}")
    if not result.balances:
        print("No days in simulation window.")
        return
    first = result.balances[0]
    last = result.balances[-1]
    print(f"Days: {first.date} - {last.date} ({len(result.balances)})")
    print(f"Payments: {len(result.payments)}")
    print(f"Ending balance: {format_money(last.balance)}")


def _run_sim(args: argparse.Namespace) -> int:
    try:
        account = load_account(args.config)
        portfolio = load_portfolio(args.portfolio) if args.portfolio else None
    except ScenarioError as exc:
        print(f"Failed to load scenario: {exc}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        result = run_simulation(account, portfolio=portfolio, rng=rng)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        _print_summary(account, result)
    if args.excel:
        print(f"Wrote results to {write_xlsx(result, args.excel)}")
    if args.csv:
        print(f"Wrote results to {write_csv(result, args.csv)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings.configure_logging(log_file=args.log_file)

    if args.run_sim:
        if not args.config:
            print("--run-sim requires --config <config_file>", file=sys.stderr)
            return 1
        code = _run_sim(args)
        if code != 0:
            return code

    if args.gen_schema:
        for path in generate_json_schemas(args.schema_dir):
            print(f"Wrote schema {path}")

    if not args.run_sim and not args.gen_schema:
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
