"""Port (interface) for natural-language report generation."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ReportGeneratorPort(ABC):
    """Port for turning computed statistics into coaching text."""

    @abstractmethod
    def generate(self, instruction: str, context: Dict[str, Any]) -> str:
        """Generate report text.

        Args:
            instruction: System instruction describing the report
            context: JSON-serializable statistics the report must use

        Returns:
            Report text, relayed to the caller without validation
        """
        ...
