"""Paragraph source for Wikipedia articles."""

import logging

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from corpusops.errors import InputError, UpstreamError
from corpusops.models import SourceResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "WebOpsBot/1.0"

# Paragraphs of the article body, excluding navigation and sidebars
PARAGRAPH_SELECTOR = "#mw-content-text p"


class WikipediaClient:
    """Fetch and parse Wikipedia articles.

    One blocking GET per article, bounded by a timeout. The connection is
    closed before fetch() returns.
    """

    def __init__(
        self,
        lang: str = "fr",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ):
        self.lang = lang
        self.timeout = timeout
        self.user_agent = user_agent

    def article_url(self, article: str) -> str:
        return f"https://{self.lang}.wikipedia.org/wiki/{article}"

    def fetch(self, article: str) -> BeautifulSoup:
        """Download an article and parse its HTML.

        Args:
            article: Article name as it appears in the URL (e.g. "Go_(langage)")

        Returns:
            Parsed document

        Raises:
            InputError: If the article name is empty
            UpstreamError: On transport errors, non-200 status or bad HTML
        """
        article = article.strip()
        if not article:
            raise InputError("Invalid article name")

        url = self.article_url(article)
        logger.debug(f"GET {url}")

        try:
            with httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException as e:
            raise UpstreamError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Request failed: {type(e).__name__}: {e}") from e

        if response.status_code != 200:
            raise UpstreamError(
                f"HTTP error: {response.status_code} {response.reason_phrase}"
            )

        try:
            return BeautifulSoup(response.text, "html.parser")
        except ParserRejectedMarkup as e:
            raise UpstreamError(f"HTML parsing error: {e}") from e


def extract_paragraphs(document: BeautifulSoup) -> list[str]:
    """Collect the non-empty, stripped paragraph texts of the article body."""
    paragraphs = []
    for node in document.select(PARAGRAPH_SELECTOR):
        text = node.get_text().strip()
        if text:
            paragraphs.append(text)
    return paragraphs


class WebParagraphSource:
    """Adapter turning a parsed article into a corpus of paragraphs."""

    source_type = "web"

    def load(self, document: BeautifulSoup) -> SourceResult:
        """Extract paragraphs. An empty corpus means nothing was found."""
        return SourceResult(units=extract_paragraphs(document))
