"""Adapter wrapping the OpenAI report writer."""

from typing import Any, Dict

from teamtracker.config import ServiceConfig
from teamtracker.llm_client import ReportWriter

from ...application.ports.report_generator import ReportGeneratorPort


class OpenAIReportGenerator(ReportGeneratorPort):
    """Report generator backed by the OpenAI chat completions API."""

    def __init__(self, config: ServiceConfig):
        self._config = config
        self._writer: ReportWriter | None = None

    def generate(self, instruction: str, context: Dict[str, Any]) -> str:
        if self._writer is None:
            self._config.require_openai()
            self._writer = ReportWriter(
                api_key=self._config.openai_api_key or "",
                model=self._config.openai_model,
                timeout_s=self._config.request_timeout_s,
            )
        return self._writer.write(instruction, context)
