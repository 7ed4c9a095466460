"""Command line entry point.

Pushes the given values through each container and prints what every one of
them retains, which is handy for checking capacity and trim settings before
wiring them into a larger program.
"""

import argparse
import logging
from typing import Iterable, List, Optional

from bufkit.containers import BoundedQueue, LazySortedQueue, TaggedFilterStack
from bufkit.utils import BufkitConfig, float_sort_func, load_env, parse_args


def _fmt(values: Iterable[float]) -> str:
    return " ".join(f"{v:g}" for v in values)


def run(cfg: BufkitConfig) -> List[str]:
    """Feed ``cfg.values`` into the containers and return the report lines."""
    window: BoundedQueue[float] = BoundedQueue(cfg.capacity)

    pushes = 0

    def next_tag() -> int:
        nonlocal pushes
        pushes += 1
        return pushes

    recent: TaggedFilterStack[float, int] = TaggedFilterStack(
        next_tag, lambda tag: tag > pushes - cfg.keep
    )
    if cfg.descending:
        ordered = LazySortedQueue(lambda a, b: float_sort_func(b, a))
    else:
        ordered = LazySortedQueue(float_sort_func)

    for value in cfg.values:
        window.push(value)
        recent.push(value)
        ordered.push(value)
    logging.debug("pushed %d values", len(cfg.values))

    return [
        f"window: {_fmt(window)}",
        f"recent: {_fmt(recent.data())}",
        f"sorted: {_fmt(ordered.sorted())}",
        f"trimmed: {_fmt(ordered.trim(cfg.offset))}",
    ]


def main(argv: Optional[List[str]] = None) -> None:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--env-file", default=None)
    known, _ = pre.parse_known_args(argv)
    env = load_env(known.env_file) if known.env_file else None

    cfg = BufkitConfig.from_args(parse_args(argv, env))
    logging.basicConfig(level=getattr(logging, cfg.log_level.upper(), logging.INFO))

    for line in run(cfg):
        print(line)


if __name__ == "__main__":
    main()
