"""
Command-line interface.

Usage:
    google-drive-provisioner provision --team "Team A" --incident "Outage at checkout"
    google-drive-provisioner resolve --parent FOLDER_ID --name TEMPLATE --kind document
    google-drive-provisioner link FILE_ID
    google-drive-provisioner list-drives
    google-drive-provisioner list-files
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, List

from .auth.oauth import ConsoleCodeProvider, StaticCodeProvider
from .config import DriveConfig, AUTH_METHODS
from .drive_client import DriveClient
from .exceptions import GoogleAPIClientError
from .services.drive.types import ResourceKind

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="google-drive-provisioner",
        description="Find or create folders and documents in Google Drive.",
    )
    parser.add_argument("--auth-method", choices=AUTH_METHODS, help="How to authenticate")
    parser.add_argument("--credentials", dest="credentials_path",
                        help="Service account or Google credentials file")
    parser.add_argument("--client-secrets", dest="client_secrets_path", help="OAuth client secrets file")
    parser.add_argument("--token", dest="token_path", help="Cached token file")
    parser.add_argument("--drive-id", help="Shared drive to scope queries to")
    parser.add_argument("--auth-code",
                        help="Authorization code for non-interactive runs (default: $DRIVE_AUTH_CODE)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    provision = subparsers.add_parser("provision", help="Create the post-mortem layout for an incident")
    provision.add_argument("--team", required=True, help="Team folder name")
    provision.add_argument("--incident", required=True, help="Post-mortem document name")
    provision.add_argument("--root-parent", dest="root_parent_id",
                           help="Folder holding the review root folder")
    provision.add_argument("--root-folder", dest="root_folder_name", help="Name of the review root folder")
    provision.add_argument("--template", dest="template_name", help="Name of the base template document")

    resolve = subparsers.add_parser("resolve", help="Find the single resource with a name under a parent")
    resolve.add_argument("--parent", required=True, help="Parent folder id")
    resolve.add_argument("--name", required=True, help="Exact resource name")
    resolve.add_argument("--kind", choices=[kind.label for kind in ResourceKind], default="folder")
    resolve.add_argument("--create", action="store_true", help="Create folders that do not exist")
    resolve.add_argument("--template-id", help="Template to copy when creating a missing document")

    link = subparsers.add_parser("link", help="Print the web link of a file")
    link.add_argument("file_id", help="File id")

    subparsers.add_parser("list-drives", help="List shared drives")
    subparsers.add_parser("list-files", help="List visible files (first page)")

    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def build_config(args: argparse.Namespace) -> DriveConfig:
    return DriveConfig.from_env().with_overrides(
        auth_method=args.auth_method,
        credentials_path=args.credentials_path,
        client_secrets_path=args.client_secrets_path,
        token_path=args.token_path,
        drive_id=args.drive_id,
        root_parent_id=getattr(args, "root_parent_id", None),
        root_folder_name=getattr(args, "root_folder_name", None),
        template_name=getattr(args, "template_name", None),
    )


def build_code_provider(args: argparse.Namespace):
    code = args.auth_code or os.getenv("DRIVE_AUTH_CODE")
    if code:
        return StaticCodeProvider(code)
    return ConsoleCodeProvider()


def run_command(client: DriveClient, args: argparse.Namespace) -> None:
    if args.command == "provision":
        result = client.incidents.provision(args.team, args.incident)
        print(json.dumps(result.to_dict(), indent=2))

    elif args.command == "resolve":
        kind = ResourceKind.from_label(args.kind)
        if not args.create:
            resource_id = client.resolver.resolve(args.parent, args.name, kind)
        elif kind is ResourceKind.FOLDER:
            resource_id = client.resolver.get_or_create_folder(args.parent, args.name)
        else:
            if not args.template_id:
                raise ValueError("--template-id is required to create a document")
            resource_id = client.resolver.get_or_create_document(args.parent, args.template_id, args.name)
        print(resource_id)

    elif args.command == "link":
        print(client.drive.get_web_view_link(args.file_id))

    elif args.command == "list-drives":
        print(json.dumps([drive.to_dict() for drive in client.drive.list_drives()], indent=2))

    elif args.command == "list-files":
        print(json.dumps([drive_file.to_dict() for drive_file in client.drive.list_all_files()], indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = build_config(args)
        client = DriveClient.from_config(config, build_code_provider(args))
        run_command(client, args)
    except (GoogleAPIClientError, ValueError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
