from utils.logger import log_event, logger
from utils.allure_helper import allure_step, attach_file

__all__ = [
    "logger",
    "log_event",
    "allure_step",
    "attach_file",
]
