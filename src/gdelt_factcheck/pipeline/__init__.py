from gdelt_factcheck.pipeline.factcheck import (
    DEFAULT_MAX_QUERY_LENGTH,
    FactCheckPipeline,
    build_query,
)

__all__ = ["DEFAULT_MAX_QUERY_LENGTH", "FactCheckPipeline", "build_query"]
