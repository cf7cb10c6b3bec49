"""feedscraper — render scraped social feed items as RSS 2.0."""
__version__ = "1.0.0"
