import sys

import pytest
from loguru import logger
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from text_embeddings_templates.templates import Qwen3RerankerTemplate


@pytest.fixture
def template():
    return Qwen3RerankerTemplate()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(messages.append, format="{level}: {message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def span_exporter():
    # The global tracer provider can only be set once per process
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return exporter


@pytest.fixture
def finished_spans(span_exporter):
    span_exporter.clear()
    yield span_exporter.get_finished_spans
    span_exporter.clear()


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # The CLI replaces every handler with one bound to the runner's stderr
    logger.remove()
    logger.add(sys.stderr)
