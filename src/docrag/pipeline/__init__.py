"""End-to-end RAG pipeline — ingest, retrieve, assemble context, synthesize."""

from docrag.pipeline.context import assemble_context
from docrag.pipeline.ingest import IngestPipeline
from docrag.pipeline.schemas import IngestResult, RagAnswer, SourceAttribution
from docrag.pipeline.service import RagPipeline
from docrag.pipeline.synthesizer import AnswerSynthesizer
from docrag.pipeline.validation import validate_question

__all__ = [
    "AnswerSynthesizer",
    "IngestPipeline",
    "IngestResult",
    "RagAnswer",
    "RagPipeline",
    "SourceAttribution",
    "assemble_context",
    "validate_question",
]
