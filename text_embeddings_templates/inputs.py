from typing import List, Optional, Tuple, Union

from loguru import logger
from opentelemetry import trace

from text_embeddings_templates.templates import TemplateFormatter, get_template_formatter

tracer = trace.get_tracer(__name__)

# A formatted prompt, or the untouched (query, text) pair
RerankInput = Union[str, Tuple[str, str]]


class RerankInputBuilder:
    """
    Builds the inputs handed to the inference engine for a given reranker.

    The template formatter is resolved once from `model_id`. Models that do not
    need a template get the plain `(query, text)` pair, which the engine encodes
    as a regular sentence pair.

    `model_id` and `formatter` are read-only, so a builder can be shared across
    threads.
    """

    def __init__(self, model_id: str):
        self._model_id = model_id
        self._formatter: Optional[TemplateFormatter] = get_template_formatter(model_id)

        if self._formatter is None:
            logger.info(f"No prompt template for {model_id}, using raw query/text pairs")
        else:
            logger.info(
                f"Using {type(self._formatter).__name__} prompt template for {model_id}"
            )

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def formatter(self) -> Optional[TemplateFormatter]:
        return self._formatter

    @property
    def requires_template(self) -> bool:
        return self._formatter is not None

    def build(
        self, query: str, text: str, instruction: Optional[str] = None
    ) -> RerankInput:
        if self._formatter is None:
            if instruction is not None:
                logger.debug(
                    f"Ignoring instruction, {self._model_id} does not use a prompt template"
                )
            return query, text
        return self._formatter.format_rerank(query, text, instruction)

    @tracer.start_as_current_span("build_rerank_inputs")
    def build_batch(
        self, query: str, texts: List[str], instruction: Optional[str] = None
    ) -> List[RerankInput]:
        span = trace.get_current_span()
        span.set_attribute("batch_size", len(texts))
        span.set_attribute("requires_template", self.requires_template)

        return [self.build(query, text, instruction) for text in texts]
