"""
Structured logging for the Open Graph extractor.

Library modules only ask structlog for loggers; the host application owns
the structlog configuration. Applications that want the extractor's own
setup (trace ids, JSON or console output at ``config.LOG_LEVEL``) call
:func:`configure_logging` once at startup.

Every ``parse``/``fetch`` call starts a new trace id, so the log lines of
one fetch, its parse and its validation share the same id.
"""
import uuid
import logging
import structlog
from contextvars import ContextVar
from typing import Any, Dict, Optional

from opengraph.config import config

trace_id_var: ContextVar[str] = ContextVar("opengraph_trace_id", default="")


def new_trace_id() -> str:
    return uuid.uuid4().hex[:8]


def get_trace_id() -> str:
    """Trace id of the current extraction, or '' outside of one."""
    return trace_id_var.get()


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """Start a trace for the current context and return its id."""
    trace_id = trace_id or new_trace_id()
    trace_id_var.set(trace_id)
    return trace_id


def add_trace_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Processor stamping the current extraction's trace id on each entry."""
    trace_id = get_trace_id()
    if trace_id:
        event_dict.setdefault("trace_id", trace_id)
    return event_dict


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None):
    """
    Install the extractor's structlog setup.

    Meant for applications and scripts; importing the library never
    calls this.
    """
    level = (level or config.LOG_LEVEL).upper()
    fmt = fmt or config.LOG_FORMAT

    processors = [
        structlog.contextvars.merge_contextvars,
        add_trace_id,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)


class ComponentLogger:
    """Logger bound to one extraction component (parser, fetcher, extraction)."""

    def __init__(self, component: str):
        self.component = component
        self.logger = get_logger(component)

    def log_decision(self, decision: str, reason: str, url: Optional[str] = None, **extra):
        """Log a decision about the result handed back to the caller."""
        self.logger.info(
            "decision_made",
            component=self.component,
            decision=decision,
            reason=reason,
            url=url,
            **extra
        )

    def log_action(self, action: str, status: str = "started", **extra):
        self.logger.debug(f"action_{status}", component=self.component, action=action, **extra)

    def log_error(self, error: str, error_type: str = "unknown", **extra):
        """Log a failure that was recovered from."""
        self.logger.warning(
            "error_occurred",
            component=self.component,
            error=error,
            error_type=error_type,
            **extra
        )
