from logging.config import dictConfig

from sizedseq.utils.env import getenv_bool

__all__ = ("setup_logging",)


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool = getenv_bool("SIZEDSEQ_DEBUG_LOGGING", __debug__),
    disable_existing_loggers: bool = True,
) -> None:
    """\
    Setup logging configuration for the library and the specified loggers.

    The ``sizedseq`` logger, which reports count invariant violations,
    is always configured.

    Parameters
    ----------
    *loggers: str
        names of additional loggers to configure.
    time: bool = True
        include timestamps in logs.
    debug: bool = __debug__
        include debug logs.
    disable_existing_loggers: bool = True
        disable other loggers which were created before calling the setup.

    NOTE: this function should be run only once on application start
    """
    level: str = "DEBUG" if debug else "INFO"

    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": disable_existing_loggers,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s",
                    "datefmt": "%d/%b/%Y:%H:%M:%S %z",
                }
                if time
                else {
                    "format": "[%(levelname)-4s] [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "level": level,
                    "formatter": "standard",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                name: {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                }
                for name in ("sizedseq", *loggers)
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        },
    )
