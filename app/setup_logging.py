import logging, sys
from app.settings import LOG_LEVEL

def setup_logging(level: str = LOG_LEVEL):
    """Configure the root logger once; later calls only adjust the level."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_catalog_handler", False) for h in logger.handlers):
        return  # don’t double add during reload
    h = logging.StreamHandler(sys.stdout)
    h._catalog_handler = True
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    ))
    logger.addHandler(h)
