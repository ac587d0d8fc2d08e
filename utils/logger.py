import logging
from colorama import Fore, Style, init

init(autoreset=True)

SEVERITY_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.MAGENTA
}

_log = logging.getLogger('groupie')
_threshold = logging.INFO


def configure_logging(level='INFO'):
    """Set the minimum severity printed to the console and sent to logging"""
    global _threshold
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    _threshold = resolved
    _log.setLevel(resolved)
    return resolved


def logger(message, severity='INFO'):
    level = getattr(logging, severity.upper(), logging.INFO)
    if level < _threshold:
        return
    color = SEVERITY_COLORS.get(severity.upper(), Fore.WHITE)
    print(f"{color}[{severity.upper()}]{Style.RESET_ALL} {message}")
    _log.log(level, message)
