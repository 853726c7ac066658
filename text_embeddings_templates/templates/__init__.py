from typing import Optional

from text_embeddings_templates.templates.template import TemplateFormatter
from text_embeddings_templates.templates.qwen3_reranker_template import (
    DEFAULT_INSTRUCTION,
    Qwen3RerankerTemplate,
)

__all__ = [
    "DEFAULT_INSTRUCTION",
    "Qwen3RerankerTemplate",
    "TemplateFormatter",
    "get_template_formatter",
    "requires_template",
]


def requires_template(model_name: str) -> bool:
    # Matches Qwen3-Reranker-* and converted *-seq-cls checkpoints, anywhere in the name
    return "Qwen3" in model_name and (
        "Reranker" in model_name or "seq-cls" in model_name
    )


def get_template_formatter(model_name: str) -> Optional[TemplateFormatter]:
    """Return the template formatter for `model_name`, or None if the model takes raw pairs."""
    if requires_template(model_name):
        return Qwen3RerankerTemplate()
    return None
