import structlog, logging, sys


def setup_logging(level: str = "WARNING", fmt: str = "json", stream=None):
    """structlog over stdlib logging on stderr; stdout carries the MCP frames."""
    stream = stream or sys.stderr
    lvl = logging.getLevelName(level.upper())
    logging.basicConfig(level=lvl, format="%(message)s", stream=stream, force=True)
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(lvl),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger()
