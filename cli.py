import argparse
import json
import sys
from typing import List, Optional

import logging
from config.settings import get_settings
from db.connection import get_connection
from db import schema
from db.repos.companies_repo import CompaniesRepo
from models import Dimension, FilterSpec, ValueRange, YearRange
from pipelines.company_queries import list_companies, run_company_stats
from services.dashboard_metrics import compute_dashboard_metrics
from services.errors import MalformedHierarchyError, NotFoundError, RecordLoadError
from services.hierarchy_store import HierarchyStore
from services.reporting import print_summary
from services.subtree_locator import find_by_code, subtree_summary
from sources.csv_records import CsvRecordSource
from utils.logging_setup import init_logging


logger = logging.getLogger("cli")


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    parts = [p.strip() for p in value.split(",")]
    return [p for p in parts if p]


def _int_list(value: str) -> List[int]:
    try:
        return [int(x) for x in _split_csv(value) or []]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated integers, got {value!r}")


def _filter_spec_from_args(args) -> FilterSpec:
    levels = args.level
    founded = None
    if args.min_year is not None or args.max_year is not None:
        founded = YearRange(start=args.min_year, end=args.max_year)
    revenue = None
    if args.min_revenue is not None or args.max_revenue is not None:
        revenue = ValueRange(min=args.min_revenue, max=args.max_revenue)
    employees = None
    if args.min_employees is not None or args.max_employees is not None:
        employees = ValueRange(min=args.min_employees, max=args.max_employees)
    return FilterSpec(
        levels=frozenset(levels or []),
        countries=frozenset(_split_csv(args.country) or []),
        cities=frozenset(_split_csv(args.city) or []),
        founded_year=founded,
        annual_revenue=revenue,
        employees=employees,
        name_contains=args.name,
    )


def _open_store(args) -> HierarchyStore:
    source = CsvRecordSource(args.companies, args.relationships, encoding=get_settings().csv_encoding)
    store = HierarchyStore(source)
    store.initialize()
    return store


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_tree(args):
    store = _open_store(args)
    node = store.get_root()
    if args.code:
        node = find_by_code(node, args.code)
    try:
        rendered = json.dumps(node.to_dict(), indent=2, ensure_ascii=False)
    except RecursionError:
        print(f"Tree under {node.code} is too deep to render as JSON; use list or subtree", file=sys.stderr)
        sys.exit(3)
    print(rendered)


def cmd_list(args):
    store = _open_store(args)
    views = list_companies(store, _filter_spec_from_args(args))
    _print_json([v.model_dump() for v in views])


def cmd_stats(args):
    store = _open_store(args)
    series = run_company_stats(store, Dimension(args.dimension), _filter_spec_from_args(args))
    _print_json(series)


def cmd_subtree(args):
    store = _open_store(args)
    node = find_by_code(store.get_root(), args.code)
    _print_json(subtree_summary(node))


def cmd_summary(args):
    store = _open_store(args)
    views = list_companies(store, _filter_spec_from_args(args))
    print_summary(compute_dashboard_metrics(views), source=args.companies)


def cmd_export_db(args):
    store = _open_store(args)
    views = list_companies(store)
    conn = get_connection(args.db)
    try:
        schema.bootstrap(conn)
        written = CompaniesRepo(conn).replace_all(views)
    finally:
        conn.close()
    print(f"Exported {written} companies to {args.db}")


def _add_filter_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--level", type=_int_list, help="Filter: levels, comma separated (e.g. 2,3)")
    p.add_argument("--country", help="Filter: countries, comma separated")
    p.add_argument("--city", help="Filter: cities, comma separated")
    p.add_argument("--name", help="Filter: substring of company name")
    p.add_argument("--min-employees", type=int, default=None)
    p.add_argument("--max-employees", type=int, default=None)
    p.add_argument("--min-revenue", type=float, default=None)
    p.add_argument("--max-revenue", type=float, default=None)
    p.add_argument("--min-year", type=int, default=None, help="Filter: earliest founded year")
    p.add_argument("--max-year", type=int, default=None, help="Filter: latest founded year")


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Company structure CLI")
    parser.add_argument("--companies", default=settings.companies_csv_path, help="Path to companies CSV (default from settings)")
    parser.add_argument("--relationships", default=settings.relationships_csv_path, help="Path to relationships CSV (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_tree = sub.add_parser("tree", help="Print the company tree as nested JSON")
    p_tree.add_argument("--code", help="Only the subtree rooted at this company")
    p_tree.set_defaults(func=cmd_tree)

    p_list = sub.add_parser("list", help="Flattened company list with efficiency")
    _add_filter_flags(p_list)
    p_list.set_defaults(func=cmd_list)

    p_stats = sub.add_parser("stats", help="Company counts grouped by a dimension")
    p_stats.add_argument("--dimension", "-d", required=True, choices=[d.value for d in Dimension])
    _add_filter_flags(p_stats)
    p_stats.set_defaults(func=cmd_stats)

    p_sub = sub.add_parser("subtree", help="Summary of one company and its descendants")
    p_sub.add_argument("code", help="Company code")
    p_sub.set_defaults(func=cmd_subtree)

    p_sum = sub.add_parser("summary", help="Dashboard metrics and tier distribution")
    _add_filter_flags(p_sum)
    p_sum.set_defaults(func=cmd_summary)

    p_exp = sub.add_parser("export-db", help="Write the flattened companies to SQLite")
    p_exp.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    p_exp.set_defaults(func=cmd_export_db)

    args = parser.parse_args()
    try:
        args.func(args)
    except NotFoundError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except (MalformedHierarchyError, RecordLoadError) as e:
        logger.error("Cannot load company tree: %s", e, extra={"status": "error", "error": type(e).__name__})
        sys.exit(2)


if __name__ == "__main__":
    main()
