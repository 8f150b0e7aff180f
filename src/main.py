"""Parser process entrypoint.

Parses the configured `PERSON_INPUT` string and prints the resulting record.
"""

from __future__ import annotations

import logging

from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.person.parser import ParsePersonError, parse_person

logger = logging.getLogger(__name__)


def main() -> int:
    """Parse the configured input; return a process exit code."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        person = parse_person(settings.person_input)
    except ParsePersonError as exc:
        logger.error("parse failed kind=%s reason=%s", exc.kind, exc)
        return 1

    logger.info("parsed person name_len=%d", len(person.name))
    print(repr(person))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
