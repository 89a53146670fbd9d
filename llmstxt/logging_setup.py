import logging
import sys
import structlog

LOGGER_NAME = "llmstxt"

# applied to structlog events and to plain stdlib records alike.
_pre_chain = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]

def _select_renderer(json_logs: bool):
    if json_logs:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

def configure_logging(log_level_str: str = "warning", json_logs: bool = False):
    # routes structlog through the "llmstxt" stdlib logger; -v/-vv on the cli raise the level.
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    structlog.configure(
        processors=_pre_chain + [
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            _select_renderer(json_logs),
        ],
        foreign_pre_chain=_pre_chain,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(log_level)
    # the handler above is the only sink; keep records off the root logger.
    app_logger.propagate = False

    structlog.get_logger(__name__).debug("llmstxt_logging_configured", level=log_level_str, json_logs=json_logs)
