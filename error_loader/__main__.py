"""
Entry point for the error_loader component.
"""

import argparse
import asyncio
import logging
import sys

from .application.exceptions import ErrorLoaderError
from .infrastructure.containers import Container

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Applies basic logging configuration."""
    logging.basicConfig(level=level)
    # httpx logs full request URLs, which carry the read API token.
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def find_error(container: Container, fault_id: str) -> int:
    """Loads one fault and prints it as JSON."""

    service = container.error_loader_service()
    try:
        report = await service.find_error_details(fault_id)
    finally:
        await container.http_client().aclose()

    if report is None:
        logger.error(f"No fault found for id {fault_id}")
        return 1

    print(report.model_dump_json(indent=2, by_alias=True))
    return 0


def show_server_details(container: Container) -> int:
    """Prints the server details that would be attached to a report."""

    details = container.server_context().collect()
    print(details.model_dump_json(indent=2))
    return 0


async def run_application(args: argparse.Namespace) -> int:
    """Wires and runs the application using the DI container."""

    container = Container()
    container.cli_args.from_dict(vars(args))
    setup_logging(level=container.config().logging.level)

    try:
        if args.command == "find":
            return await find_error(container, args.fault_id)
        return show_server_details(container)
    except ErrorLoaderError as e:
        logger.error(f"An application error occurred: {e}")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Honeybadger Error Loader")
    subparsers = parser.add_subparsers(dest="command", required=True)

    find_parser = subparsers.add_parser(
        "find", help="Load a reported error by its Honeybadger UUID."
    )
    find_parser.add_argument(
        "fault_id",
        help="The UUID returned when the error was reported.",
    )

    details_parser = subparsers.add_parser(
        "server-details",
        help="Print the server details attached to outbound reports.",
    )
    details_parser.add_argument(
        "--environment",
        help="Environment name to report, e.g. production.",
    )

    return parser


def main():
    cli_args = build_parser().parse_args()
    sys.exit(asyncio.run(run_application(cli_args)))


if __name__ == "__main__":
    main()
