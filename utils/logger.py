import logging
import sys
import shutil
from datetime import datetime
from pathlib import Path
from appdirs import user_data_dir

APP_NAME = "BookmarksNavigator"
MAX_LOG_BACKUPS = 2

def _rotate_logs(log_dir: Path, current_log: Path) -> None:
    """Move the previous log aside, keeping at most MAX_LOG_BACKUPS backups"""
    if not current_log.exists():
        return

    backup_log = log_dir / f"bookmarks_navigator_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    backup_files = sorted(log_dir.glob("bookmarks_navigator_*.log"), reverse=True)

    # If we have 2 or more backups, remove the oldest one
    while len(backup_files) >= MAX_LOG_BACKUPS:
        backup_files[-1].unlink()
        backup_files.pop()

    shutil.move(str(current_log), str(backup_log))

# Configure logging
def setup_logging(log_dir: Path = None, level: int = logging.INFO):
    """Configure logging for the application"""
    formatter = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Remove any existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    main_logger = logging.getLogger(APP_NAME)
    main_logger.setLevel(level)

    if log_dir is None:
        log_dir = Path(user_data_dir(APP_NAME)) / "logs"
    current_log = log_dir / "bookmarks_navigator.log"

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        _rotate_logs(log_dir, current_log)
        file_handler = logging.FileHandler(current_log, encoding='utf-8')
    except OSError as e:
        main_logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")
        return None

    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    main_logger.info(f"Application started - Log file created at {current_log}")
    return current_log

# Create logger instance with context
class ContextLogger(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        # Tag the message with the emitting component if given
        component = kwargs.pop('component', None)
        if component:
            msg = f"[{component}] {msg}"
        return msg, kwargs

# Initialize logging when module is imported
setup_logging()

# Create the main logger
logger = ContextLogger(logging.getLogger(APP_NAME), {})
