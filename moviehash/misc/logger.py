import logging

from colorlog import ColoredFormatter

from moviehash.models.configuration import Configuration

TRACE_LEVEL = 15  # ... info - trace - debug
logging.addLevelName(TRACE_LEVEL, "TRACE")


class LoggerEx(logging.Logger):
    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


# color formatter
formatter = ColoredFormatter(
    "%(log_color)s[%(asctime)s] [%(filename)s:%(lineno)d] [%(levelname)s] %(message)s",
    datefmt="%d/%m/%y %H:%M:%S",
    log_colors={
        "TRACE": "white",
        "DEBUG": "blue",
        "INFO": "white",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    },
)

handler = logging.StreamHandler()
handler.setFormatter(fmt=formatter)

logger = LoggerEx("moviehash")
logger.addHandler(handler)


def configure(configuration: Configuration) -> None:
    level = logging.getLevelName(configuration.log_level)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {configuration.log_level!r}, using INFO")
        level = logging.INFO
    logger.setLevel(level)


configure(Configuration())
