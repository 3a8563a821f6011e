"""
A crawler built from queued commands.

The genres page command discovers genre listing pages, listing pages discover
movies (and their own next page), and movie commands extract a title. Every
discovery is a new command on the same queue, so the crawl is just ``work()``.

Pages come from a ``PageSource``. The default one serves bundled sample HTML,
so the example runs without network access.
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar, Dict

from app.exceptions import NotFoundError
from patterns.behavioral.command.queue import CommandQueue, QueuedCommand

QUEUE_NAME = "web_scraping"
GENRES_URL = "https://www.imdb.com/feature/genre/"

GENRE_LINK = re.compile(r'href="(https://www.imdb.com/search/title\?genres=.*?)"')
MOVIE_LINK = re.compile(r'href="(/title/.*?/)\?ref_=adv_li_tt"')
MOVIE_TITLE = re.compile(r'<h1 itemprop="name" class="">(.*?)</h1>')
NEXT_PAGE_MARKER = "Next &#187;</a>"


def _listing(*movie_ids: str, has_next: bool = False) -> str:
    links = "".join(
        f'<h3><a href="/title/{movie_id}/?ref_=adv_li_tt">{movie_id}</a></h3>'
        for movie_id in movie_ids
    )
    next_link = f'<a href="#" class="next-page">{NEXT_PAGE_MARKER}' if has_next else ""
    return f"<html><body>{links}{next_link}</body></html>"


def _movie(title: str) -> str:
    return f'<html><body><h1 itemprop="name" class="">{title}</h1></body></html>'


SAMPLE_PAGES: Dict[str, str] = {
    GENRES_URL: (
        "<html><body>"
        '<a href="https://www.imdb.com/search/title?genres=comedy">Comedy</a>'
        '<a href="https://www.imdb.com/search/title?genres=drama">Drama</a>'
        "</body></html>"
    ),
    "https://www.imdb.com/search/title?genres=comedy&page=1": _listing(
        "tt0107048", "tt0118715", has_next=True
    ),
    "https://www.imdb.com/search/title?genres=comedy&page=2": _listing("tt0053291"),
    "https://www.imdb.com/search/title?genres=drama&page=1": _listing("tt0111161"),
    "https://www.imdb.com/title/tt0107048/": _movie("Groundhog Day"),
    "https://www.imdb.com/title/tt0118715/": _movie("The Big Lebowski"),
    "https://www.imdb.com/title/tt0053291/": _movie("Some Like It Hot"),
    "https://www.imdb.com/title/tt0111161/": _movie("The Shawshank Redemption"),
}


class PageSource(ABC):
    @abstractmethod
    def fetch(self, url: str) -> str:
        pass


class SamplePageSource(PageSource):
    """Serves pages from an in-memory dict"""

    def __init__(self, pages: Dict[str, str] = None):
        self.pages = SAMPLE_PAGES if pages is None else pages

    def fetch(self, url: str) -> str:
        try:
            return self.pages[url]
        except KeyError:
            raise NotFoundError(f"No page stored for {url}", code="PAGE_NOT_FOUND")


class WebScrapingCommand(QueuedCommand):
    url: str

    page_source: ClassVar[PageSource] = SamplePageSource()

    def get_url(self) -> str:
        return self.url

    def execute(self, queue: CommandQueue) -> None:
        html = self.download()
        self.parse(html, queue)
        self.complete(queue)

    def download(self) -> str:
        html = self.page_source.fetch(self.get_url())
        print(f"{type(self).__name__}: Downloaded {self.get_url()}")
        return html

    @abstractmethod
    def parse(self, html: str, queue: CommandQueue) -> None:
        pass


class IMDBGenresScrapingCommand(WebScrapingCommand):
    url: str = GENRES_URL

    def parse(self, html: str, queue: CommandQueue) -> None:
        genre_urls = GENRE_LINK.findall(html)
        print(f"IMDBGenresScrapingCommand: Discovered {len(genre_urls)} genres.")
        for genre_url in genre_urls:
            queue.add(IMDBGenrePageScrapingCommand(url=genre_url))


class IMDBGenrePageScrapingCommand(WebScrapingCommand):
    page: int = 1

    def get_url(self) -> str:
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}page={self.page}"

    def parse(self, html: str, queue: CommandQueue) -> None:
        movie_paths = MOVIE_LINK.findall(html)
        print(f"IMDBGenrePageScrapingCommand: Discovered {len(movie_paths)} movies.")
        for path in movie_paths:
            queue.add(IMDBMovieScrapingCommand(url=f"https://www.imdb.com{path}"))

        if NEXT_PAGE_MARKER in html:
            queue.add(IMDBGenrePageScrapingCommand(url=self.url, page=self.page + 1))


class IMDBMovieScrapingCommand(WebScrapingCommand):
    def parse(self, html: str, queue: CommandQueue) -> None:
        match = MOVIE_TITLE.search(html)
        if match:
            print(f"IMDBMovieScrapingCommand: Parsed movie {match.group(1)}.")


def main() -> None:
    queue = CommandQueue.get(QUEUE_NAME)
    if queue.is_empty():
        queue.add(IMDBGenresScrapingCommand())

    processed = queue.work()
    print(f"Client: Crawl finished after {processed} command(s).")


if __name__ == "__main__":
    main()
