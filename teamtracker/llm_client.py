from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

from .config import DEFAULT_MODEL
from .errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class ReportWriter:
    api_key: str
    model: str = DEFAULT_MODEL
    timeout_s: float = 30
    client: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = OpenAI(api_key=self.api_key, timeout=self.timeout_s, max_retries=0)

    def write(self, instruction: str, context: Dict[str, Any]) -> str:
        """Send the instruction as the system message and the context as JSON."""
        logger.info("requesting report from %s", self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": instruction},
                    {"role": "user", "content": json.dumps(context, ensure_ascii=True, default=str)},
                ],
            )
        except OpenAIError as exc:
            raise UpstreamError("OpenAI", str(exc), status_code=getattr(exc, "status_code", None)) from exc

        if not response.choices:
            raise UpstreamError("OpenAI", "Response contained no choices")
        return (response.choices[0].message.content or "").strip()
