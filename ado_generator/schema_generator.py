# ado_generator/schema_generator.py
from .categories import GenerationContext
from .prompt_builder import build_generation_prompt, build_messages


class SchemaGenerator:
    """Second model call: the application schema itself"""

    def __init__(self, llm, debug: bool = False):
        self.llm = llm
        self.debug = debug

    def generate(self, query: str, context: GenerationContext) -> str:
        """
        Generate the schema for `query` using the assembled context.

        The model output is returned verbatim; a response without text
        yields an empty artifact.
        """
        messages = build_messages(build_generation_prompt(query), context.serialize())

        if self.debug:
            print("\n" + "=" * 80)
            print("SCHEMA GENERATION")
            print("=" * 80)
            print(f"Reference components: {len(context.components)}")

        response = self.llm.invoke(messages)
        artifact = response.primary_text or ""

        if self.debug:
            print(f"Generated {len(artifact)} characters")
        return artifact
