from .catalog import CatalogStore
from .categories import GenerationContext
from .errors import CatalogIntegrityError


class ContextAssembler:
    """Turns a classification label into the reference bundle for generation"""

    def __init__(self, catalog: CatalogStore, debug: bool = False):
        self.catalog = catalog
        self.debug = debug

    def assemble(self, label: str) -> GenerationContext:
        """
        Collect the component schemas and description of an archetype.

        An unknown label yields an empty context. A component the catalog
        lists but cannot provide raises CatalogIntegrityError.
        """
        entry = self.catalog.lookup(label)
        if entry is None:
            if self.debug:
                print(f"  ⚠️  No catalog entry for {label!r}, generating without components")
            return GenerationContext()

        components = []
        for name in entry.classes:
            try:
                components.append(self.catalog.fetch_component_schema(name))
            except CatalogIntegrityError as e:
                raise CatalogIntegrityError(
                    f"Archetype '{label}' references component '{name}' that cannot be fetched: {e.message}"
                ) from e

        if self.debug:
            print(f"  Components for {label}: {', '.join(entry.classes) or 'None'}")

        return GenerationContext(components=components, description=entry.descr)
