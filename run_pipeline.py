"""
Pipeline Runner
===============

Generates Andromeda application schemas for a batch of natural-language
requests and records them in the generation index.

By default the demonstration batch from queries.json is run; use --query
for ad-hoc requests or --all for every query in the source.
"""

import sys
import traceback

from ado_generator.batch import DEFAULT_BATCH_PLAN, all_queries, load_queries, select_queries
from ado_generator.config import load_settings
from ado_generator.errors import GenerationError
from ado_generator.pipeline import build_pipeline


def resolve_queries(args, settings):
    """Queries to run, in order"""
    if args.query:
        return list(args.query)
    queries = load_queries(settings.queries_path)
    if args.all:
        return all_queries(queries)
    return select_queries(queries, DEFAULT_BATCH_PLAN)


def run(args) -> int:
    settings = load_settings(args.config)
    if args.debug:
        settings.debug = True

    print("\n" + "=" * 80)
    print("ADO SCHEMA GENERATOR")
    print("=" * 80)

    queries = resolve_queries(args, settings)
    pipeline = build_pipeline(settings)
    index = pipeline.store.load_index()

    print(f"\n⚙️  Model: {settings.model} (timeout {settings.request_timeout}s)")
    print(f"   • Queries: {len(queries)}")
    print(f"   • Index: {settings.index_path} ({len(index)} existing record(s))")
    print(f"   • Output: {settings.output_dir}/")

    def report(position, query, artifact_id):
        print(f"\n[{position}/{len(queries)}] {query}")
        print(f"   ✅ {index.records[-1].label or '<no label>'} → {artifact_id}")

    start = len(index)
    try:
        pipeline.run_batch(queries, index, on_result=report)
    except GenerationError as e:
        print(f"\n❌ Generation failed: {e}")
        if settings.debug:
            traceback.print_exc()
        print(f"   {len(index) - start} of {len(queries)} queries completed before the failure")
        return 1

    print("\n" + "=" * 80)
    print("✅ PIPELINE COMPLETE")
    print("=" * 80)
    print(f"\n📁 Generated {len(index) - start} artifact(s) in {settings.output_dir}/")
    print(f"📋 Index: {settings.index_path} ({len(index)} record(s))")
    return 0


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate Andromeda application schemas from natural-language requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the demonstration batch from queries.json
  python run_pipeline.py

  # Ad-hoc requests
  python run_pipeline.py -q "Create an NFT marketplace" -q "Start a crowdfund for my album"

  # Every query in queries.json, with debug output
  python run_pipeline.py --all --debug
        """
    )
    parser.add_argument(
        "--query", "-q",
        action="append",
        help="Natural-language request to generate (repeatable)"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run every query in the query source instead of the demonstration batch"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="YAML settings file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print prompt sizes, labels and file paths for every stage"
    )

    args = parser.parse_args()

    try:
        exit_code = run(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Pipeline cancelled by user")
        sys.exit(0)
    except Exception as e:
        print(f"\n❌ Unexpected error: {e}")
        traceback.print_exc()
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
