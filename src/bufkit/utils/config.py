"""Configuration management utilities."""

from dataclasses import dataclass
import argparse
import os
from typing import Optional, List

from .env import EnvData

DEFAULT_KEEP = 5


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError(f"must be positive: {raw!r}")
    return value


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {raw!r}")
    return value


def _lookup(env: Optional[EnvData], name: str, default: str) -> str:
    if env is not None and name in env:
        return env.get(name)
    return os.getenv(name, default)


def parse_args(
    args: Optional[List[str]] = None, env: Optional[EnvData] = None
) -> argparse.Namespace:
    """Parse command line arguments or provided list.

    Defaults are read from ``env`` first, then from the process environment.
    """
    parser = argparse.ArgumentParser(description="bufkit container inspector")
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="Values pushed into every container",
    )
    parser.add_argument(
        "--capacity",
        type=_positive_int,
        default=_lookup(env, "BUFKIT_CAPACITY", "3"),
        help="Bounded queue capacity",
    )
    parser.add_argument(
        "--offset",
        type=_non_negative_int,
        default=_lookup(env, "BUFKIT_OFFSET", "0"),
        help="Number of largest values dropped by trim",
    )
    parser.add_argument(
        "--keep",
        type=_non_negative_int,
        default=_lookup(env, "BUFKIT_KEEP", str(DEFAULT_KEEP)),
        help="Pushes retained by the tagged stack",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Sort largest first",
    )
    parser.add_argument(
        "--log-level",
        default=_lookup(env, "LOG_LEVEL", "INFO"),
        help="Logging level",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file with defaults",
    )
    return parser.parse_args(args)


@dataclass
class BufkitConfig:
    values: List[float]
    capacity: int
    offset: int
    keep: int
    log_level: str
    descending: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "BufkitConfig":
        return cls(
            values=list(args.values),
            capacity=args.capacity,
            offset=args.offset,
            keep=args.keep,
            log_level=args.log_level,
            descending=args.descending,
        )
