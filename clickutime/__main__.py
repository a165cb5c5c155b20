"""Main module for the clickuTime package."""
import os
import sys
import argparse
from typing import Optional, List
from dotenv import load_dotenv, find_dotenv

from . import __version__
from .api.client import ClickUpClient, ClickUpError
from .reports.aggregator import DaySummary
from .utils.date_utils import today_window


class ConfigError(Exception):
    """Required configuration is missing."""


# --- Environment Setup ---
def load_environment(env_file: Optional[str] = None) -> None:
    """Load environment variables from a .env file.

    Args:
        env_file: Explicit file to load. Without it the nearest .env from the
            working directory is used, if there is one.

    Raises:
        ConfigError: If an explicitly requested file does not exist
    """
    if env_file:
        if not os.path.exists(env_file):
            raise ConfigError(f"Missing environment file: {env_file}")
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))


def get_env_var(key: str) -> str:
    """Get an environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ConfigError: If the variable is unset or empty
    """
    value = os.getenv(key)
    if not value:
        raise ConfigError(f"Set {key} in your environment or .env file.")
    return value


# --- CLI Logic ---
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Show the time tracked in ClickUp today.",
        epilog="""
Output:
  H:M [+] [!]   [+] a timer is running, [!] 8 hours or more tracked

Examples:
  clickutime
  clickutime --breakdown
  clickutime --env-file ~/.config/clickutime.env
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="clickutime"
    )
    parser.add_argument('--env-file', help='Load CLICKUP_TOKEN and CLICKUP_TEAM from this file')
    parser.add_argument('-b', '--breakdown', action='store_true', help="Print a table of today's entries before the total")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def today_summary(client: ClickUpClient) -> DaySummary:
    """Fetch today's entries and the running timer, and sum them.

    Args:
        client: ClickUp API client

    Returns:
        DaySummary for the current local day
    """
    start_ms, end_ms = today_window()
    entries = client.get_time_entries(start_ms, end_ms)
    current = client.get_current_entry()
    return DaySummary(entries, current)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    try:
        load_environment(args.env_file)
        token = get_env_var("CLICKUP_TOKEN")
        team_id = get_env_var("CLICKUP_TEAM")
        summary = today_summary(ClickUpClient(token, team_id))
    except (ConfigError, ClickUpError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    if args.breakdown:
        print(summary.breakdown_table())
    print(summary.summary_line())


if __name__ == "__main__":
    main()
