"""
Run configuration for sxl.

Built once from the parsed command line and the environment, then passed into
the launch report. Nothing here is modified after start up.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .client.endpoints import DEFAULT_API_BASE_URL
from .models.schemas import LaunchKind


class ConfigError(ValueError):
    """A configuration value could not be used."""
    pass


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"SXL_REQUEST_TIMEOUT must be a number of seconds, got '{raw}'")
    if timeout <= 0:
        raise ConfigError(f"SXL_REQUEST_TIMEOUT must be greater than zero, got '{raw}'")
    return timeout


@dataclass(frozen=True)
class SxlConfig:
    """Immutable settings for one run."""
    show_latest: bool = True
    show_next: bool = True
    parallel_lookups: bool = False
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: Optional[float] = None

    @classmethod
    def from_args(cls, args, environ: Optional[Mapping[str, str]] = None) -> "SxlConfig":
        """
        Create the configuration from parsed arguments and environment variables.

        Args:
            args: argparse Namespace with ``last``, ``next`` and ``parallel``
            environ: Environment mapping, defaults to os.environ

        Raises:
            ConfigError: If an environment value is invalid
        """
        env = os.environ if environ is None else environ

        # No selection means both launches
        show_latest, show_next = bool(args.last), bool(args.next)
        if not show_latest and not show_next:
            show_latest = show_next = True

        return cls(
            show_latest=show_latest,
            show_next=show_next,
            parallel_lookups=bool(getattr(args, 'parallel', False)),
            api_base_url=env.get('SXL_API_BASE_URL') or DEFAULT_API_BASE_URL,
            request_timeout=_parse_timeout(env.get('SXL_REQUEST_TIMEOUT')),
        )

    @property
    def launch_kinds(self) -> Tuple[LaunchKind, ...]:
        """Launches to report, latest first."""
        kinds = []
        if self.show_latest:
            kinds.append(LaunchKind.LATEST)
        if self.show_next:
            kinds.append(LaunchKind.NEXT)
        return tuple(kinds)
