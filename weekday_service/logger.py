import logging
import os


class Logger:
    signal = None
    request = None
    response = None

    @classmethod
    def setup_logger(cls, base_path: str):
        """
        Sets up the service loggers as class attributes:
        - signal: lifecycle events such as startup, shutdown and cache setup.
        - request: incoming calculation requests.
        - response: results, rejected input and unexpected errors.

        Each logger writes to its own file in base_path (signal.log,
        request.log, response.log). Calling this again with the same path
        does not attach duplicate handlers.

        Args:
            base_path (str): The directory where log files will be stored.
        """
        os.makedirs(base_path, exist_ok=True)

        cls.signal = cls._setup_logger("signal", base_path, "signal.log")
        cls.request = cls._setup_logger("request", base_path, "request.log")
        cls.response = cls._setup_logger("response", base_path, "response.log")

        cls.signal.info("Logger setup completed")

    @staticmethod
    def _setup_logger(name: str, base_path: str, log_file: str) -> logging.Logger:
        """
        Configure a named logger with a file handler.

        Args:
            name (str): The name of the logger (e.g., "signal", "request", "response").
            base_path (str): The directory holding the log file.
            log_file (str): The file to write the logs to.

        Returns:
            logging.Logger: The configured logger.
        """
        logger = logging.getLogger(name)
        logger.setLevel(logging.INFO)

        file_path = os.path.abspath(os.path.join(base_path, log_file))
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == file_path:
                return logger

        file_handler = logging.FileHandler(file_path)
        file_handler.setLevel(logging.INFO)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)

        logger.addHandler(file_handler)

        return logger
