import logging
import sys
import structlog

PACKAGE_LOGGER_NAME = "viewkit"

def _pick_renderer(json_logs: bool):
    # json for machine consumption, coloured console output otherwise.
    if json_logs:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

def configure_logging(log_level_str: str = "warning", json_logs: bool = False):
    # routes structlog events for the viewkit package to stderr.
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_pick_renderer(json_logs),
            foreign_pre_chain=[structlog.stdlib.add_log_level],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    structlog.get_logger(__name__).info("logging_configured", level=log_level_str, json_logs=json_logs)
