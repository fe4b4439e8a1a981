"""
Centralized Logging Configuration
Console output plus a size-rotated log file under logs/
"""
import logging
import logging.handlers
from pathlib import Path


def setup_logging(app, log_dir='logs'):
    """
    Setup application-wide logging with file rotation and console output

    Args:
        app: Flask application instance
        log_dir: Directory that receives the rotating log file

    Returns:
        The configured root logger
    """
    log_level = getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO)
    formatter = logging.Formatter(app.config['LOG_FORMAT'])

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / app.config['LOG_FILE']

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Repeated app creation (tests) must not stack handlers
    for handler in list(root_logger.handlers):
        if getattr(handler, '_estimator_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler._estimator_handler = True
    root_logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)
    file_handler._estimator_handler = True
    root_logger.addHandler(file_handler)

    # Quiet chatty third-party loggers
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('openai').setLevel(logging.WARNING)

    app.logger.info(f"Logging initialized at {logging.getLevelName(log_level)} level")
    app.logger.info(f"Log file: {log_file}")

    return root_logger
