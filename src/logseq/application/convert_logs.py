"""
Convert logs use case.

Orchestrates: source -> parsing -> correlation -> rendering -> sink
"""

import logging

from logseq.application.correlate_logs import CorrelateLogsUseCase
from logseq.application.ports import LogSourcePort, OutputSinkPort
from logseq.core.config import ConverterConfig
from logseq.core.models import CorrelationResult
from logseq.parsers.splunk_json import SplunkJSONParser
from logseq.rendering.plantuml import render_plantuml

__all__ = ["ConvertLogsUseCase"]

logger = logging.getLogger(__name__)


class ConvertLogsUseCase:
    """
    Use case: convert a Splunk export into a PlantUML sequence diagram.

    The whole source is parsed and correlated before anything is written,
    so a failure anywhere leaves the sink untouched.

    Example:
        use_case = ConvertLogsUseCase(
            source=FileStreamSource("export.json"),
            sink=FileOutputSink("diagram.puml"),
        )
        result = use_case.execute()
    """

    def __init__(
        self,
        source: LogSourcePort,
        sink: OutputSinkPort,
        config: ConverterConfig | None = None,
        parser: SplunkJSONParser | None = None,
    ):
        """
        Initialize the use case.

        Args:
            source: Log source adapter (file or stdin)
            sink: Destination for the rendered diagram
            config: Conversion settings
            parser: Line parser (defaults to SplunkJSONParser)
        """
        self.source = source
        self.sink = sink
        self.config = config or ConverterConfig()
        self.parser = parser or SplunkJSONParser()

    def execute(self) -> CorrelationResult:
        """
        Execute the conversion.

        Returns:
            The correlation result that was rendered

        Raises:
            LogSeqError: If any line fails to parse or correlate
        """
        entries = list(self.parser.parse_stream(self.source.read_lines()))
        logger.debug(
            "Parsed %d entries from %s",
            len(entries),
            self.source.metadata().get("path", "<unknown>"),
        )

        result = CorrelateLogsUseCase(self.config).execute(entries)
        self.sink.write(render_plantuml(result.activities, self.config.title))
        return result
