#!/usr/bin/env python3
"""
CredHub command line client

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .application.exceptions import ApplicationError
from .application.use_cases import FindPaths, GetCredential
from .domain.exceptions import DomainError
from .infrastructure.adapters import CredHubClient, MutualTLSStrategy, TokenStrategy
from .infrastructure.adapters.credhub import decode_value
from .infrastructure.adapters.output import render_json, render_paths, render_text, select_key
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import CredentialRepository
    from .infrastructure.adapters.auth import BaseAuthStrategy

logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_request_signer(self) -> BaseAuthStrategy:
        """Create the auth strategy: mutual TLS when a client certificate is set, else UAA tokens."""
        if self._settings.uses_mutual_tls:
            logger.debug("Authenticating with client certificate %s", self._settings.client_cert)
            return MutualTLSStrategy(self._settings.mutual_tls_config)

        logger.debug("Authenticating with UAA at %s", self._settings.auth_url)
        return TokenStrategy(self._settings.token_config)

    def create_credential_repository(self, signer: BaseAuthStrategy) -> CredHubClient:
        """Create the CredHub retrieval client."""
        return CredHubClient(self._settings.server, signer)


class Application:
    """
    Command dispatcher.

    Runs one parsed command against a credential repository and writes the
    rendered result to ``stdout``.
    """

    def __init__(self, repository: CredentialRepository, *, stdout: TextIO | None = None) -> None:
        self._get_credential = GetCredential(repository, decode_value)
        self._find_paths = FindPaths(repository)
        self._stdout = stdout or sys.stdout

    def run(self, args: argparse.Namespace) -> int:
        """
        Execute the parsed command.

        Returns:
            Exit code (0 for success).
        """
        match args.command:
            case "get":
                return self.get(args)
            case "find":
                return self.find(args)
            case _:
                msg = f"unknown command: {args.command}"
                raise ValueError(msg)

    def get(self, args: argparse.Namespace) -> int:
        result = self._get_credential.execute(args.name, args.versions)

        if args.key:
            output = select_key(result.latest, args.key)
        elif args.output_json:
            output = render_json(result)
        else:
            output = render_text(result)

        print(output, file=self._stdout)
        return 0

    def find(self, args: argparse.Namespace) -> int:
        paths = self._find_paths.execute()
        print(render_paths(paths, as_json=args.output_json), file=self._stdout)
        return 0


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        msg = f"must be an integer, got {raw!r}"
        raise argparse.ArgumentTypeError(msg) from e
    if value < 1:
        msg = f"must be a positive integer, got {raw!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the ``credhub`` argument parser."""
    parser = argparse.ArgumentParser(prog="credhub", description="Read credentials from a CredHub server")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Log requests and responses to stderr")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    get = subparsers.add_parser("get", help="Get a credential value")
    get.add_argument("-n", "--name", required=True, help="Name of the credential to retrieve")
    get.add_argument("-j", "--output-json", action="store_true", help="Return response in JSON format")
    selection = get.add_mutually_exclusive_group()
    selection.add_argument(
        "--versions",
        type=_positive_int,
        metavar="N",
        help="Number of versions to return, most recent first",
    )
    selection.add_argument("-k", "--key", help="Return only the given field of the credential value")

    find = subparsers.add_parser("find", help="Find existing credentials")
    find.add_argument(
        "-a",
        "--all-paths",
        action="store_true",
        required=True,
        help="List all existing credential paths",
    )
    find.add_argument("-j", "--output-json", action="store_true", help="Return response in JSON format")

    return parser


def run(argv: list[str] | None = None, *, application: Application | None = None) -> int:
    """
    Parse ``argv`` and run the command.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when omitted.
        application: Pre-built application, used instead of one wired from
            the environment.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        if application is not None:
            return application.run(args)

        settings = load_settings()
        logging.getLogger().setLevel("DEBUG" if args.debug else settings.log_level.upper())

        container = ApplicationContainer(settings)
        with container.create_request_signer() as signer:
            repository = container.create_credential_repository(signer)
            return Application(repository).run(args)

    except (DomainError, ApplicationError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
