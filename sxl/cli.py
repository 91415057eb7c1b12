"""
Command line entry point for sxl.
"""
import argparse
import asyncio
import platform
import sys
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from . import __version__, __license__
from .client.errors import FetchError
from .config import ConfigError, SxlConfig
from .logging_config import LogConfig, get_logger, setup_logging
from .models.schemas import ResourceKind
from .processing.launch_pipeline import run_launch_report
from .rendering.renderer import render_banner

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INTERRUPTED = 130

# Exit status identifies which fetch failed
EXIT_CODES = {
    ResourceKind.LAUNCH: 1,
    ResourceKind.LAUNCHPAD: 2,
    ResourceKind.PAYLOAD: 3,
}


class SxlArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n{self.format_usage()}")


def version_text(prog: str = "sxl") -> str:
    """Program and runtime details shown by --version."""
    return (
        f"{prog} version {__version__} ({__license__} License)\n"
        f"Running on {platform.python_implementation()} {platform.python_version()} "
        f"on {platform.system()} {platform.release()} ({platform.machine()})"
    )


def build_parser() -> SxlArgumentParser:
    parser = SxlArgumentParser(
        prog="sxl",
        description="Show the latest and next scheduled SpaceX launches.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  SXL_API_BASE_URL     SpaceX API base URL (default https://api.spacexdata.com/v4)
  SXL_REQUEST_TIMEOUT  Per request timeout in seconds
  LOG_LEVEL            Diagnostic log level (default WARNING)
  LOG_FORMAT           console or json
        """
    )
    parser.add_argument('-l', '--last', action='store_true', help='Show only the latest launch')
    parser.add_argument('-n', '--next', action='store_true', help='Show only the next scheduled launch')
    parser.add_argument('--parallel', action='store_true',
                        help='Fetch payload and launchpad details concurrently')
    parser.add_argument('-v', '--version', action='version', version=version_text(),
                        help='Show version information and exit')
    return parser


def report_fetch_error(console: Console, error: FetchError) -> None:
    """Describe a failed fetch on the diagnostic console."""
    console.print()
    console.print(Text(f"ERROR: unable to obtain website {error.resource.value} data", style="bold red"), soft_wrap=True)
    if error.status is not None:
        console.print(Text(f"Server response: '{error.reason}' (Code: '{error.status}')"), soft_wrap=True)
    else:
        console.print(Text(f"Server response: '{error.reason or error}'"), soft_wrap=True)
    console.print("Exit.")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SxlConfig.from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(LogConfig())

    out = Console(highlight=False)
    err = Console(stderr=True, highlight=False)

    def print_block(block: Text) -> None:
        out.print()
        out.print(block, soft_wrap=True)

    out.print()
    out.print(render_banner())

    try:
        asyncio.run(run_launch_report(config, print_block))
    except FetchError as e:
        logger.debug("Launch report aborted", resource=e.resource.value, url=e.url)
        report_fetch_error(err, e)
        sys.exit(EXIT_CODES[e.resource])
    except KeyboardInterrupt:
        err.print("\nOperation cancelled by user")
        sys.exit(EXIT_INTERRUPTED)

    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
