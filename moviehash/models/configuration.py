import os
from dataclasses import dataclass, field

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "MOVIEHASH_LOG_LEVEL"


@dataclass
class Configuration:
    log_level: str = field(
        default_factory=lambda: os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    )
