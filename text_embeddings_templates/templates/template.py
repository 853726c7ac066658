from abc import ABC, abstractmethod
from typing import Optional


class TemplateFormatter(ABC):
    """Formats a query-document pair for models that require structured prompts."""

    @abstractmethod
    def format_rerank(
        self,
        query: str,
        document: str,
        instruction: Optional[str] = None,
    ) -> str:
        raise NotImplementedError
