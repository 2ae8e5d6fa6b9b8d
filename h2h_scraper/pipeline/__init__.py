from .store import ReportStore, LocalFileStore, SupabaseStore, build_store
from .orchestrator import FixturesPipeline, RunState

__all__ = [
    "ReportStore",
    "LocalFileStore",
    "SupabaseStore",
    "build_store",
    "FixturesPipeline",
    "RunState",
]
