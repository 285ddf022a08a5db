"""
Application layer use cases.
"""

from logseq.application.correlate_logs import CorrelateLogsUseCase
from logseq.application.convert_logs import ConvertLogsUseCase

__all__ = ["CorrelateLogsUseCase", "ConvertLogsUseCase"]
