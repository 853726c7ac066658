""" Prompt templates for rerankers that expect chat formatted inputs """
from text_embeddings_templates.templates import (
    DEFAULT_INSTRUCTION,
    Qwen3RerankerTemplate,
    TemplateFormatter,
    get_template_formatter,
    requires_template,
)
from text_embeddings_templates.inputs import RerankInput, RerankInputBuilder

__all__ = [
    "DEFAULT_INSTRUCTION",
    "Qwen3RerankerTemplate",
    "RerankInput",
    "RerankInputBuilder",
    "TemplateFormatter",
    "get_template_formatter",
    "requires_template",
]
