"""gdelt-factcheck: lexical fact-checking of claims against the GDELT news corpus."""

from gdelt_factcheck.api import create_app
from gdelt_factcheck.config import FactCheckConfig, create_from_config, load_config, resolve_config
from gdelt_factcheck.data import (
    Article,
    ReliabilityVerdict,
    ScoredArticle,
    SearchOutcome,
    SearchStatus,
)
from gdelt_factcheck.pipeline import FactCheckPipeline, build_query
from gdelt_factcheck.reliability import build_reliability, score_articles, score_for_similarity
from gdelt_factcheck.run_logger import RunLogger
from gdelt_factcheck.search import ArticleSearcher, GdeltSearcher, normalize_document
from gdelt_factcheck.text import similarity, tokenize

__all__ = [
    # Models
    "Article",
    "ReliabilityVerdict",
    "ScoredArticle",
    "SearchOutcome",
    "SearchStatus",
    # Functions
    "build_query",
    "build_reliability",
    "normalize_document",
    "score_articles",
    "score_for_similarity",
    "similarity",
    "tokenize",
    # Protocols
    "ArticleSearcher",
    # Searchers
    "GdeltSearcher",
    # Pipelines
    "FactCheckPipeline",
    # Logging
    "RunLogger",
    # API
    "create_app",
    # Config
    "FactCheckConfig",
    "create_from_config",
    "load_config",
    "resolve_config",
]
