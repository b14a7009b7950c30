# money_plant/init_db_py.py
import logging
import sys

from .config import Config
from .db import init_db

logger = logging.getLogger("money-plant.init-db")


def main(argv=None):
    """Create the Money Plant tables in DB_PATH (or the path given on the command line)."""
    argv = sys.argv[1:] if argv is None else argv
    db_path = argv[0] if argv else Config.DB_PATH

    logging.basicConfig(level=Config.LOG_LEVEL)
    init_db(db_path)
    logger.info(f"Database initialized successfully at {db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
