from bookapi.models.book import BookRecord

__all__ = ["BookRecord"]
