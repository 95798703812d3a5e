"""
Data Share CLI

Command-line entry for removing an Azure Data Share subscription:
- name it by fields, by resource id, or by a share subscription object
- confirmation prompt unless --force (nothing runs with --what-if)
- --as-job submits the delete and returns without waiting
"""

import argparse
import json
import os
import sys
from typing import Optional

from azure.core.exceptions import AzureError
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .confirmation import ConfirmationPolicy
from .context import DataShareConfig, DataShareContext
from .errors import DataShareCliError, InvalidArgumentError
from .observability import configure_logger
from .remove import COMMAND_NAME, ExecutionMode, RemoveShareSubscription
from .selectors import InputSelector, ShareSubscriptionHandle, selector_from_options

EXIT_OK = 0
EXIT_REMOTE_ERROR = 1
EXIT_INVALID_ARGUMENT = 2

# Rich Console configuration
console = Console(
    legacy_windows=(sys.platform == 'win32'),
    no_color=os.getenv('NO_COLOR') is not None,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datashare-remove-subscription",
        description="Remove an Azure Data Share subscription",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # By name
  %(prog)s -g rg1 -a acct1 -n sub1

  # By resource id, without prompting
  %(prog)s --resource-id /subscriptions/.../accounts/acct1/shareSubscriptions/sub1 --force

  # By object (JSON from a show call), submitted as a job
  %(prog)s --input-object sub1.json --as-job --pass-thru
""",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "-n", "--name",
        help="Share subscription name (with --resource-group and --account-name)",
    )
    target.add_argument(
        "--resource-id",
        help="Resource id of the share subscription",
    )
    target.add_argument(
        "--input-object",
        metavar="FILE",
        help="JSON share subscription object, '-' reads stdin",
    )

    parser.add_argument(
        "-g", "--resource-group",
        help="Resource group of the Data Share account (default: $DATASHARE_RESOURCE_GROUP)",
    )
    parser.add_argument(
        "-a", "--account-name",
        help="Data Share account name (default: $DATASHARE_ACCOUNT_NAME)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Do not ask for confirmation",
    )
    parser.add_argument(
        "--what-if",
        action="store_true",
        help="Show what would be removed without removing it",
    )
    parser.add_argument(
        "--as-job",
        action="store_true",
        help="Submit the delete and return without waiting for it",
    )
    parser.add_argument(
        "--pass-thru",
        action="store_true",
        help="Print True once the delete was issued",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log at INFO level",
    )
    return parser


def read_input_object(source: str) -> Optional[ShareSubscriptionHandle]:
    """Load a share subscription object from a JSON file or stdin"""
    try:
        if source == "-":
            raw = sys.stdin.read()
        else:
            with open(source, encoding="utf-8") as f:
                raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"Cannot read share subscription object from {source}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"Share subscription object is not valid JSON: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise InvalidArgumentError("Share subscription object must be a JSON object")
    return ShareSubscriptionHandle.from_dict(data)


def selector_from_args(args: argparse.Namespace, config: DataShareConfig) -> InputSelector:
    if args.resource_id is not None or args.input_object is not None:
        if args.resource_group or args.account_name:
            raise InvalidArgumentError(
                "--resource-group/--account-name can only be used with --name"
            )

    if args.resource_id is not None:
        if not args.resource_id:
            raise InvalidArgumentError("--resource-id must not be empty")
        return selector_from_options(resource_id=args.resource_id)

    if args.input_object is not None:
        return selector_from_options(
            share_subscription=read_input_object(args.input_object),
            use_handle=True,
        )

    defaults = DataShareConfig(
        resource_group=args.resource_group or config.resource_group,
        account_name=args.account_name or config.account_name,
    )
    missing = defaults.missing_fields()
    if args.name and missing:
        raise InvalidArgumentError(
            f"Missing required fields: {', '.join(missing)} "
            "(pass --resource-group/--account-name or set DATASHARE_RESOURCE_GROUP/DATASHARE_ACCOUNT_NAME)"
        )

    return selector_from_options(
        resource_group=defaults.resource_group,
        account_name=defaults.account_name,
        name=args.name,
    )


class _LazyClient:
    """Defers DataShareClient creation until a delete is dispatched"""

    def __init__(self, context: DataShareContext):
        self._context = context

    def delete(self, resource_group: str, account_name: str, name: str) -> None:
        self._context.client.delete(resource_group, account_name, name)

    def begin_delete(self, resource_group: str, account_name: str, name: str):
        return self._context.client.begin_delete(resource_group, account_name, name)


def cmd_remove(args: argparse.Namespace, context: DataShareContext) -> int:
    """Run the removal; returns the process exit code"""
    try:
        selector = selector_from_args(args, context.config)
        confirmation = ConfirmationPolicy(force=args.force, what_if=args.what_if)
        mode = ExecutionMode.ASYNC if args.as_job else ExecutionMode.SYNC

        command = RemoveShareSubscription(
            client=_LazyClient(context),
            confirmation=confirmation,
            command_name=COMMAND_NAME,
        )
        result = command.execute(selector, mode=mode, pass_thru=args.pass_thru)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_INVALID_ARGUMENT
    except (DataShareCliError, AzureError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_REMOTE_ERROR

    if command.last_job is not None:
        console.print(f"[dim]Delete submitted, status: {command.last_job.status()}[/dim]")
    if result is not None:
        console.print(result)
    return EXIT_OK


def main(argv: Optional[list[str]] = None):
    """CLI main entry"""
    load_dotenv(override=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    config = DataShareConfig.from_env()
    configure_logger("INFO" if args.verbose else config.log_level)

    sys.exit(cmd_remove(args, DataShareContext(config=config)))


if __name__ == "__main__":
    main()
