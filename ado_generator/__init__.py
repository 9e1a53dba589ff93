"""
ADO Schema Generator
====================

Classifies a natural-language request into an Andromeda application
archetype, generates the application schema with the archetype's
component schemas as reference, and records every result in an index.
"""

from .categories import Archetype, ArtifactRecord, GenerationContext, GenerationIndex
from .catalog import ArchetypeEntry, CatalogStore
from .classifier import Classifier
from .config import Settings, load_settings
from .context_assembler import ContextAssembler
from .errors import CatalogIntegrityError, GenerationError, ModelInvocationError, PersistenceError
from .llm_utils import LLMResponse, OpenAIChatLLM
from .pipeline import GenerationPipeline, build_pipeline
from .result_store import ResultStore
from .schema_generator import SchemaGenerator

__all__ = [
    "Archetype",
    "ArtifactRecord",
    "GenerationContext",
    "GenerationIndex",
    "ArchetypeEntry",
    "CatalogStore",
    "Classifier",
    "Settings",
    "load_settings",
    "ContextAssembler",
    "GenerationError",
    "ModelInvocationError",
    "CatalogIntegrityError",
    "PersistenceError",
    "LLMResponse",
    "OpenAIChatLLM",
    "GenerationPipeline",
    "build_pipeline",
    "ResultStore",
    "SchemaGenerator",
]
