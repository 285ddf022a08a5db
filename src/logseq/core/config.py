"""
Converter configuration.

A single immutable object carries every toggle the correlation engine and
renderer read. It is built once (usually from CLI options) and passed in at
construction time.
"""

from dataclasses import dataclass

from logseq.core.exceptions import ConfigurationError

__all__ = [
    "DEFAULT_ALLOWED_LOGGERS",
    "DEFAULT_CALLER_IDENTITY",
    "DEFAULT_HOST_SUFFIX",
    "DEFAULT_TITLE",
    "ConverterConfig",
]


DEFAULT_ALLOWED_LOGGERS = ("ApiHttpClient", "CacheForRequestHandler")
DEFAULT_CALLER_IDENTITY = "pfp"
DEFAULT_HOST_SUFFIX = ".intelliflo.com"
DEFAULT_TITLE = "PFP collaboration"


@dataclass(frozen=True)
class ConverterConfig:
    """
    Settings for one conversion run.

    Attributes:
        print_thread_id: Prefix every message with `T:<thread> `
        collapse_to_actual_execution_order: Emit each request dispatch next to
            its response instead of at the request's own position
        caller_identity: Participant name for the calling website
        host_suffix: Domain suffix stripped from hosts to get service names
        title: Diagram title
        allowed_loggers: Logger names whose entries take part in correlation
    """
    print_thread_id: bool = True
    collapse_to_actual_execution_order: bool = False
    caller_identity: str = DEFAULT_CALLER_IDENTITY
    host_suffix: str = DEFAULT_HOST_SUFFIX
    title: str = DEFAULT_TITLE
    allowed_loggers: tuple[str, ...] = DEFAULT_ALLOWED_LOGGERS

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check the configuration for values the engine cannot work with.

        Raises:
            ConfigurationError: If a setting is empty or malformed
        """
        if not self.caller_identity or not self.caller_identity.strip():
            raise ConfigurationError(
                "Caller identity must not be empty", config_key="caller_identity"
            )
        if not self.host_suffix.startswith(".") or len(self.host_suffix) < 2:
            raise ConfigurationError(
                f"Host suffix must start with '.' and name a domain, got '{self.host_suffix}'",
                config_key="host_suffix",
            )
        if not self.allowed_loggers:
            raise ConfigurationError(
                "At least one logger name must be allowed", config_key="allowed_loggers"
            )

    def thread_prefix(self, thread_id: str) -> str:
        """Message prefix for the given thread, empty when thread ids are off."""
        if not self.print_thread_id:
            return ""
        return f"T:{thread_id} "
