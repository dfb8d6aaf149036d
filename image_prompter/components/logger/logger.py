import logging

from image_prompter.components.logger.logger_interface import LoggerInterface


class Logger(LoggerInterface):
    def __init__(self, log_format: str, log_level: str) -> None:
        self.log_format = log_format
        self.log_level = log_level.upper()
        logging.basicConfig(format=self.log_format, level=self.log_level)

    def get_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)
        return logger
