from dataclasses import dataclass
from typing import Optional

from text_embeddings_templates.templates.template import TemplateFormatter

IM_START = "<|im_start|>"
IM_END = "<|im_end|>"

SYSTEM_PROMPT = (
    "Judge whether the Document meets the requirements based on the Query and "
    'the Instruct provided. Note that the answer can only be "yes" or "no".'
)
DEFAULT_INSTRUCTION = (
    "Given a web search query, retrieve relevant passages that answer the query"
)


@dataclass(frozen=True)
class Qwen3RerankerTemplate(TemplateFormatter):
    """
    Chat template expected by Qwen3 reranker models.

    The prompt is made of a system block carrying the yes/no judging rule, a user
    block carrying the instruction, query and document, and an assistant block
    that is left open so the model continues with a single "yes" or "no" token.

    Query, document and instruction are inserted verbatim: nothing is escaped,
    truncated or validated, so markup tokens inside a document are passed through
    unchanged.
    """

    default_instruction: str = DEFAULT_INSTRUCTION

    def format_rerank(
        self,
        query: str,
        document: str,
        instruction: Optional[str] = None,
    ) -> str:
        if instruction is None:
            instruction = self.default_instruction

        return (
            # System prompt
            f"{IM_START}system\n{SYSTEM_PROMPT}{IM_END}\n"
            # User prompt with instruction, query and document
            f"{IM_START}user\n"
            f"<Instruct>: {instruction}\n"
            f"<Query>: {query}\n"
            f"<Document>: {document}{IM_END}\n"
            # Assistant prompt, no closing marker
            f"{IM_START}assistant\n"
        )
