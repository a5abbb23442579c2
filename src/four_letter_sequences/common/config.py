from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "dictionary.txt"
DEFAULT_SEQUENCES_OUT = "sequences.txt"
DEFAULT_WORDS_OUT = "words.txt"

ENV_DICTIONARY = "FOUR_LETTER_DICTIONARY"
ENV_SEQUENCES_OUT = "FOUR_LETTER_SEQUENCES_OUT"
ENV_WORDS_OUT = "FOUR_LETTER_WORDS_OUT"


def _load_env(env_file: str | Path | None) -> None:
    if env_file is not None:
        if not Path(env_file).is_file():
            raise FileNotFoundError(f"Environment file '{env_file}' does not exist")
        load_dotenv(env_file, override=False)
        return

    found = find_dotenv(".env", usecwd=True)
    if found:
        logger.debug(f"Loading settings from {found}")
        load_dotenv(found, override=False)


def get_config_paths(env_file: str | Path | None = None) -> dict[str, Path]:
    """Return the input and output locations, honoring ``.env`` overrides.

    Values already present in the process environment take precedence over the
    ``.env`` file. Relative paths resolve against the working directory.
    """

    _load_env(env_file)

    return {
        "dictionary": Path(os.environ.get(ENV_DICTIONARY) or DEFAULT_DICTIONARY),
        "sequences": Path(os.environ.get(ENV_SEQUENCES_OUT) or DEFAULT_SEQUENCES_OUT),
        "words": Path(os.environ.get(ENV_WORDS_OUT) or DEFAULT_WORDS_OUT),
    }
