import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from cdt.common.setup import PATHS
from datetime import datetime

LOGGER_NAME = "countdowntimer"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5
DEBUG_RUNS_KEPT = 10

# Adds the handler under the given name unless the logger already has one by that name, so re-imports don't
# double every line.
def _attach(logger, handler_name, handler, level):
    if any(h.get_name() == handler_name for h in logger.handlers):
        handler.close()
        return
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.set_name(handler_name)
    logger.addHandler(handler)

# Deletes all but the newest `keep` per-run debug logs.
def _prune_debug_runs(debug_dir: Path, keep: int):
    runs = sorted(debug_dir.glob(f"{LOGGER_NAME}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

# Builds the app logger: INFO and up to a rotating log plus latest.log (current run only), and everything
# including DEBUG to a per-run file under logs/debug.
def get_logger(log_dir: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    log_dir = log_dir or PATHS.logs
    debug_dir = log_dir / "debug"
    debug_dir.mkdir(parents=True, exist_ok=True)
    # Leave room for this run's file
    _prune_debug_runs(debug_dir, DEBUG_RUNS_KEPT - 1)

    _attach(logger, "persistent",
            RotatingFileHandler(log_dir / f"{LOGGER_NAME}.log", maxBytes=ROTATE_BYTES,
                                backupCount=ROTATE_BACKUPS, encoding="utf-8", delay=True),
            logging.INFO)
    _attach(logger, "latest",
            logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8", delay=True),
            logging.INFO)
    _attach(logger, "debug_run",
            logging.FileHandler(debug_dir / f"{LOGGER_NAME}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log",
                                encoding="utf-8", delay=True),
            logging.DEBUG)
    return logger

log = get_logger()
log.info("=== INITIALIZED NEW SESSION ===")
