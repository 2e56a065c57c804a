"""Unit tests for SearchQuery parsing and matching."""

from qna.domain.value import SearchQuery


class TestParse:
    """Tests for SearchQuery.parse."""

    def test_empty_search(self):
        """None and blank searches parse to an empty query."""
        assert SearchQuery.parse(None).is_empty
        assert SearchQuery.parse("").is_empty
        assert SearchQuery.parse("   ").is_empty

    def test_tags_and_keywords_are_split(self):
        """Bracketed tokens are tags, the rest are keywords."""
        query = SearchQuery.parse("[React] hooks [javascript] State")

        assert query.tags == ("react", "javascript")
        assert query.keywords == ("hooks", "state")

    def test_empty_brackets_are_ignored(self):
        """An empty tag token should not become a tag."""
        query = SearchQuery.parse("[ ] closures")

        assert query.tags == ()
        assert query.keywords == ("closures",)


class TestMatches:
    """Tests for SearchQuery.matches."""

    def test_matches_tag_case_insensitively(self):
        """A question carrying a searched tag should match."""
        query = SearchQuery.parse("[JavaScript]")

        assert query.matches("Anything", ["javascript"])
        assert not query.matches("Anything", ["react"])

    def test_matches_keyword_in_title(self):
        """A keyword contained in the title should match."""
        query = SearchQuery.parse("closure")

        assert query.matches("JavaScript Closures explained", [])
        assert not query.matches("React hooks", [])

    def test_any_token_is_enough(self):
        """Tags and keywords are alternatives, not all required."""
        query = SearchQuery.parse("[python] hooks")

        assert query.matches("React hooks", ["react"])
        assert query.matches("Unrelated", ["python"])
        assert not query.matches("Unrelated", ["react"])

    def test_empty_query_matches_everything(self):
        """An empty query filters nothing."""
        assert SearchQuery.parse(None).matches("Title", [])
