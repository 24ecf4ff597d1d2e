import logging
import os
from colorama import Fore, Style, init

init(autoreset=True)

SEVERITY_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.MAGENTA
}


def _threshold():
    return getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO)


def logger(message, severity='INFO'):
    severity = severity.upper()
    level = getattr(logging, severity, logging.INFO)
    if level >= _threshold():
        color = SEVERITY_COLORS.get(severity, Fore.WHITE)
        print(f"{color}[{severity}]{Style.RESET_ALL} {message}")
    logging.log(level, message)
