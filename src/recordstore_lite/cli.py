"""recordstore-lite CLI entry point.

Usage: uv run recordstore-lite [command]
"""
import argparse
import asyncio
import logging
import sys


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "demo",
        help="Walk one user through create, list, update, get and delete.",
    )
    p.add_argument("--name", default="jdoe", help="User name (default: jdoe)")
    p.add_argument(
        "--email", default="j@x.com", help="Initial email (default: j@x.com)",
    )
    p.add_argument(
        "--new-email", default="j2@x.com",
        help="Email to switch to in the update step (default: j2@x.com)",
    )
    _add_common_args(p)


def _add_stress_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "stress",
        help="Run a mixed CRUD load against one store from many threads.",
    )
    p.add_argument(
        "--workers", type=int, default=8,
        help="Concurrent worker threads (default: 8)",
    )
    p.add_argument(
        "--ops", type=int, default=5_000,
        help="Operations per worker (default: 5000)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible operation sequences (default: 42)",
    )
    _add_common_args(p)


async def _demo(name: str, email: str, new_email: str) -> int:
    from recordstore_lite.domain.records import User, UserPatch
    from recordstore_lite.domain.results import NotFound
    from recordstore_lite.repositories import UserRepository

    users = UserRepository()

    user_id = await users.create_user(User(name=name, email=email))
    print(f"create  -> id={user_id}")

    for view in await users.list_users():
        print(f"list    -> {view.model_dump()}")

    print(f"update  -> {await users.update_user(user_id, UserPatch(email=new_email))}")

    current = await users.get_user(user_id)
    if isinstance(current, NotFound):
        print(f"get     -> record vanished before delete: {current}", file=sys.stderr)
        return 1
    print(f"get     -> {current.model_dump()}")

    print(f"delete  -> {await users.delete_user(user_id)}")

    gone = await users.get_user(user_id)
    if isinstance(gone, NotFound):
        print(f"get     -> {gone.details('User')}")
        return 0
    print(f"get     -> unexpected record after delete: {gone}", file=sys.stderr)
    return 1


def _run_demo(args: argparse.Namespace) -> int:
    return asyncio.run(_demo(args.name, args.email, args.new_email))


def _run_stress(args: argparse.Namespace) -> int:
    from recordstore_lite.profiling.harness import run_stress
    from recordstore_lite.profiling.report import format_report

    try:
        result = run_stress(
            workers=args.workers, ops_per_worker=args.ops, seed=args.seed,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(format_report(result))
    return 0 if result.consistent else 1


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="recordstore-lite",
        description="Concurrent in-memory record store -- pure Python, zero infrastructure.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_demo_parser(subparsers)
    _add_stress_parser(subparsers)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "demo":
        sys.exit(_run_demo(args))
    if args.command == "stress":
        sys.exit(_run_stress(args))
