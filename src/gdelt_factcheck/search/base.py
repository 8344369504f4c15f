from typing import Protocol

from gdelt_factcheck.data import Article, SearchOutcome


class ArticleSearcher(Protocol):
    """Interface for retrieving candidate articles for a claim."""

    async def search(self, query: str) -> SearchOutcome:
        """Search for articles matching the query.

        Args:
            query: Search text, already trimmed and truncated.

        Returns:
            Outcome carrying the articles found, or why none were returned.
        """
        ...

    async def fetch_articles(self, query: str) -> list[Article]:
        """Search and collapse any failure into an empty list."""
        ...
