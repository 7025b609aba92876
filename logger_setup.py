# logger_setup.py

import logging
import os


def setup_logging(config: dict, base_dir: str = 'runs'):
    """
    Sets up logging for the application.

    Creates a run-specific log directory and configures a dedicated
    application logger (not the root logger) to output to both the console
    and a log file. This keeps pygame and Numba chatter out of our logs.

    Data Contract:
    - Inputs:
        - config (dict): The loaded configuration. Must contain 'run_id' and a
          'logging' dictionary with 'level' and 'format'.
        - base_dir (str): Parent directory for per-run log folders.
    - Outputs: The configured logger.
    - Side Effects:
        - Configures the "particle_rings" logger.
        - Creates directories for log files.
    """
    run_id = config['run_id']
    log_config = config['logging']

    # --- Get a dedicated logger for the application ---
    logger = logging.getLogger("particle_rings")
    logger.setLevel(log_config['level'])
    logger.propagate = False

    # --- Create directories for logs ---
    log_dir = os.path.join(base_dir, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'animation.log')

    formatter = logging.Formatter(log_config['format'])

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    # Clear existing handlers to avoid duplication if this function is called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
