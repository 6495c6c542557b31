import os
from typing import Iterable, Optional

import click
from dotenv import load_dotenv

from ..._utils.constants import DOTENV_FILE


def load_environment(dotenv_path: Optional[str] = None) -> None:
    """Load ``NETROUTER_*`` defaults from a .env file without overriding the environment."""
    path = dotenv_path or os.path.join(os.getcwd(), DOTENV_FILE)
    if os.path.isfile(path):
        load_dotenv(path, override=False)


def parse_pairs(values: Iterable[str], separator: str, option: str) -> dict[str, str]:
    """Parse repeated ``KEY<sep>VALUE`` options into a dict, last one winning."""
    pairs: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition(separator)
        key = key.strip()
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY{separator}VALUE, got {raw!r}", param_hint=option
            )
        pairs[key] = value.strip() if separator == ":" else value
    return pairs
