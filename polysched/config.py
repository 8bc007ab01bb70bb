"""
Shared constants and the logging configuration applied by entrypoints.

The library itself never configures logging, it only emits through module
loggers. Entrypoints (see `polysched.__main__`) call
`logging.config.dictConfig(logging_config)`.
"""

# colour map markers
NO_EDGE = 0
PENDING = -1

# strain simulation runs the cycle this many times, the second pass sees wrap-around gaps
SIMULATED_CYCLES = 2

# random network generation
EDGE_PROBABILITY = 0.05
DEFAULT_MAX_WEIGHT = 1000

# performance sweep
PERFORMANCE_RUNS = 100
PERFORMANCE_SIZES = range(10, 251, 10)

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            "datefmt": "%H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "level": "INFO",
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "polysched": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
