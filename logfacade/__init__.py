"""
Minimal logging facade: formats messages and broadcasts them to subscribers
on the next event loop iteration.

    import logfacade

    unsubscribe = logfacade.logSub(lambda message, category: print(message))
    logfacade.log.l("User logged in", {"userId": 123}, "auth")
    # -> '[auth] User logged in {"userId":123}'

``logSub`` returns a closure that removes the registration it created.
"""

from .core.config_manager import ConfigManager
from .core.environment import HostEnvironment, detect_host, install, uninstall
from .core.exceptions import FacadeError, InvalidSubscriberError, SchedulerError, SerializationError
from .core.facade import LoggerFacade, create_logger, format_message
from .core.logging import LoggingSubscriber, setup_logging
from .core.scheduling import EventLoopScheduler, ManualScheduler

_facade_instance = None


def get_facade() -> LoggerFacade:
    """Process-wide default facade, built from the default configuration."""
    global _facade_instance
    if _facade_instance is None:
        config = ConfigManager()
        setup_logging(log_level=config.log_level, log_file=config.log_file)
        _facade_instance = create_logger(config=config)
        install(_facade_instance, host=detect_host(config.install_target))
    return _facade_instance


_exports = install(get_facade(), host=HostEnvironment.MODULE)

log = _exports["log"]
logSub = _exports["logSub"]
logUnsub = _exports["logUnsub"]
log_sub = logSub
log_unsub = logUnsub

__all__ = [
    'log',
    'logSub',
    'logUnsub',
    'log_sub',
    'log_unsub',
    'get_facade',
    'create_logger',
    'format_message',
    'LoggerFacade',
    'ConfigManager',
    'EventLoopScheduler',
    'ManualScheduler',
    'HostEnvironment',
    'detect_host',
    'install',
    'uninstall',
    'LoggingSubscriber',
    'setup_logging',
    'FacadeError',
    'SerializationError',
    'InvalidSubscriberError',
    'SchedulerError',
]
