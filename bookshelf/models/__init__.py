"""
Record Models Package

Plain value objects held by the in-memory record store.

Exports:
- Author: An author record
- Book: A book record referencing an author by id
"""

from bookshelf.models.author import Author
from bookshelf.models.book import Book

__all__ = ["Author", "Book"]
