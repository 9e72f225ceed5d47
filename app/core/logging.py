import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure centralized application logging.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # SQL echo is controlled by DEBUG on the engine, keep the logger quiet
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
