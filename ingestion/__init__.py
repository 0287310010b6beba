"""
Import pipeline for the Lightning node rankings feed.

Modules:
    runner: Orchestrates fetch -> normalize -> upsert for one import
    scheduler: APScheduler job that re-imports at a fixed interval

Subpackages:
    extractors: HTTP client for the rankings feed
    transformers: Mapping of feed records onto table rows
    loaders: Transactional upsert and ordered reads of the nodes table

Architecture:
    Every import is a full refresh of the feed:
    
    1. Extract - One GET, no retries, strict shape validation
    2. Transform - Rename fields, serialize city/country to JSON text
    3. Load - Upsert the whole batch in a single transaction
    
    The scheduler and the admin endpoint both call ingestion.runner.import_nodes.
    They are not serialized against each other; each run is its own
    transaction and the last commit wins.

Usage:
    from ingestion.runner import NodeImportRunner, import_nodes
    from ingestion.scheduler import NodeImportScheduler

Example:
    runner = NodeImportRunner(session_factory, timeout=30.0)
    count = await runner.run("https://mempool.space/api/v1/lightning/nodes/rankings/connectivity")
    print(f"Imported {count} nodes")
"""

__all__ = [
    "NodeAPIExtractor",
    "NodeNormalizer",
    "NodeStore",
    "NodeImportRunner",
    "NodeImportScheduler",
    "import_nodes",
]
