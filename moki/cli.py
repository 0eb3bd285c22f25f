"""CLI tool implementation, mainly for testing purpose."""

import argparse
import json
import logging
import os
import sys

from moki.client import MokiClient
from moki.config import MokiConfig
from moki.error import MokiError
from moki.globals import API_KEY_ENV, API_URL_ENV, TENANT_ID_ENV

CLI_LOGGER = logging.getLogger("moki.cli")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI application.

    This function parses command-line arguments, configures logging, and
    runs the requested command against the Moki API.

    Returns:
        int: Exit code of the application. Returns 0 on success, 1 when the
        library reports an error.

    Command-line Arguments:
        command (str): The command to run. Choices are:
            - "ios-profiles": List the iOS profiles of the tenant.
            - "device-profiles DEVICE": List the profiles of a device.
            - "device-managed-apps DEVICE": List the managed apps of a device.
            - "tenant-managed-apps": List the managed apps of the tenant.
            - "action DEVICE ACTION_ID": Get the status of an action.
            - "perform-action DEVICE BODY": Send an action, BODY is JSON.
        -v, --verbose (bool): Enables verbose logging if specified.
        --api-url (str): Base url of the Moki API.
            Defaults to the value of the environment variable `MOKI_API_URL`.
        --tenant-id (str): The tenant id.
            Defaults to the value of the environment variable `MOKI_TENANT_ID`.
        --api-key (str): The tenant API key.
            Defaults to the value of the environment variable `MOKI_API_KEY`.

    """
    parser = argparse.ArgumentParser(prog="moki")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logs",
    )

    parser.add_argument(
        "--api-url",
        type=str,
        default=os.environ.get(API_URL_ENV, ""),
        help="Base url of the Moki API, e.g. https://api.moki.com",
    )
    parser.add_argument(
        "--tenant-id",
        type=str,
        default=os.environ.get(TENANT_ID_ENV, ""),
        help="The tenant id, used to scope every request",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=os.environ.get(API_KEY_ENV, ""),
        help="The tenant API key",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ios-profiles")
    commands.add_parser("device-profiles").add_argument("device")
    commands.add_parser("device-managed-apps").add_argument("device")
    commands.add_parser("tenant-managed-apps")
    action_parser = commands.add_parser("action")
    action_parser.add_argument("device")
    action_parser.add_argument("action_id")
    perform_parser = commands.add_parser("perform-action")
    perform_parser.add_argument("device")
    perform_parser.add_argument("body", type=json.loads)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    client = MokiClient(
        MokiConfig(
            base_url=args.api_url,
            tenant_id=args.tenant_id,
            api_key=args.api_key,
        )
    )

    try:
        result = _do_command(client, args)
    except MokiError as error:
        CLI_LOGGER.error("%s: %s", type(error).__name__, error)
        return 1

    print(json.dumps(result, indent=4, ensure_ascii=False))
    return 0


def _do_command(client: MokiClient, args: argparse.Namespace) -> object:
    match args.command:
        case "ios-profiles":
            records = client.ios_profiles()
        case "device-profiles":
            records = client.device_profiles(args.device)
        case "device-managed-apps":
            records = client.device_managed_apps(args.device)
        case "tenant-managed-apps":
            records = client.tenant_managed_apps()
        case "action":
            return client.action(args.device, args.action_id).to_hash()
        case "perform-action":
            return client.perform_action(args.device, args.body).to_hash()
        case _:
            raise ValueError(f"Unknown command {args.command}")

    return [record.to_hash() for record in records]


if __name__ == "__main__":
    sys.exit(main())
