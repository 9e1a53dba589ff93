"""
Generation Pipeline
===================

classify → assemble context → generate → persist, one query at a time.

The caller owns the GenerationIndex and passes it in; the ResultStore is
the only component that mutates it.
"""

from typing import Callable, List, Optional, Sequence

from .catalog import CatalogStore
from .categories import GenerationIndex
from .classifier import Classifier
from .config import Settings
from .context_assembler import ContextAssembler
from .errors import GenerationError
from .llm_utils import OpenAIChatLLM
from .result_store import ResultStore
from .schema_generator import SchemaGenerator
from .utils import read_text


class GenerationPipeline:
    """Runs the four stages in strict sequence"""

    def __init__(
        self,
        classifier: Classifier,
        assembler: ContextAssembler,
        generator: SchemaGenerator,
        store: ResultStore,
        background_context: str = "",
        debug: bool = False,
    ):
        self.classifier = classifier
        self.assembler = assembler
        self.generator = generator
        self.store = store
        self.background_context = background_context
        self.debug = debug

    @staticmethod
    def _run_stage(stage: str, query: str, step: Callable, *args):
        try:
            return step(*args)
        except GenerationError as e:
            if e.stage is None:
                e.stage = stage
            if e.query is None:
                e.query = query
            raise

    def run_one(self, query: str, index: GenerationIndex) -> str:
        """
        Generate and persist the schema for a single query.

        No stage is skipped: an unknown label still goes through generation
        with an empty context.

        Returns:
            The id of the persisted artifact
        """
        if self.debug:
            print(f"\n📝 Query: {query}")

        label = self._run_stage("classify", query, self.classifier.classify, query, self.background_context)
        context = self._run_stage("assemble", query, self.assembler.assemble, label)
        artifact = self._run_stage("generate", query, self.generator.generate, query, context)
        return self._run_stage("persist", query, self.store.persist, label, artifact, query, index)

    def run_batch(
        self,
        queries: Sequence[str],
        index: GenerationIndex,
        on_result: Optional[Callable[[int, str, str], None]] = None,
    ) -> List[str]:
        """
        Run queries in the given order.

        The first error aborts the batch; everything persisted before it
        stays in the index.

        Args:
            queries: Requests, processed in this order
            index: Index the results are appended to
            on_result: Called with (position, query, artifact_id) after each success

        Returns:
            Artifact ids in query order
        """
        ids = []
        for position, query in enumerate(queries, 1):
            if self.debug:
                print(f"\n[{position}/{len(queries)}]")
            artifact_id = self.run_one(query, index)
            ids.append(artifact_id)
            if on_result:
                on_result(position, query, artifact_id)
        return ids


def build_pipeline(settings: Settings) -> GenerationPipeline:
    """Wire the OpenAI-backed pipeline from settings"""
    classify_llm = OpenAIChatLLM(
        model=settings.model,
        temperature=settings.classify_temperature,
        timeout=settings.request_timeout,
        api_key=settings.api_key,
        debug=settings.debug,
    )
    # Same client, different sampling temperature
    generate_llm = OpenAIChatLLM(
        model=settings.model,
        temperature=settings.generate_temperature,
        timeout=settings.request_timeout,
        client=classify_llm.client,
        debug=settings.debug,
    )

    catalog = CatalogStore(settings.catalog_path, settings.components_dir)
    return GenerationPipeline(
        classifier=Classifier(classify_llm, debug=settings.debug),
        assembler=ContextAssembler(catalog, debug=settings.debug),
        generator=SchemaGenerator(generate_llm, debug=settings.debug),
        store=ResultStore(settings.output_dir, settings.index_path, debug=settings.debug),
        background_context=read_text(settings.context_path, default=""),
        debug=settings.debug,
    )
