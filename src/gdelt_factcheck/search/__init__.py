from gdelt_factcheck.search.base import ArticleSearcher
from gdelt_factcheck.search.gdelt import GDELT_DOC_API_URL, GdeltSearcher, normalize_document

__all__ = [
    "GDELT_DOC_API_URL",
    "ArticleSearcher",
    "GdeltSearcher",
    "normalize_document",
]
