"""
Record Store Tests

Unit tests for RecordStore lookups, appends and seeding.
"""

import dataclasses

import pytest

from bookshelf.models import Author, Book
from bookshelf.seed import AUTHORS_DATA, BOOKS_DATA
from bookshelf.store import RecordStore


class TestSeeding:
    """Tests for create_store()."""

    def test_seeded_store_contents(self, seeded_store):
        """Test the seeded store holds the sample records in order."""
        assert [a.name for a in seeded_store.authors] == [
            "J. K. Rowling",
            "J. R. R. Tolkien",
            "Brent Weeks",
        ]
        assert len(seeded_store.books) == len(BOOKS_DATA)
        assert seeded_store.books[0] == Book(
            id=1, name="Harry Potter and the Chamber of Secrets", author_id=1
        )

    def test_seed_ids_are_sequential(self, seeded_store):
        """Test seed ids run 1..n so appends continue the numbering."""
        assert [a.id for a in seeded_store.authors] == list(
            range(1, len(AUTHORS_DATA) + 1)
        )
        assert [b.id for b in seeded_store.books] == list(
            range(1, len(BOOKS_DATA) + 1)
        )

    def test_unseeded_store_is_empty(self, empty_store):
        """Test create_store(seed=False) starts empty."""
        assert empty_store.authors == []
        assert empty_store.books == []

    def test_stores_are_independent(self, seeded_store, empty_store):
        """Test two stores never share records."""
        seeded_store.add_author("Robin Hobb")

        assert empty_store.authors == []


class TestLookups:
    """Tests for get_author, get_book and books_by_author."""

    def test_get_book_found(self, seeded_store):
        """Test every stored book can be found by its id."""
        for book in seeded_store.books:
            assert seeded_store.get_book(book.id) == book

    def test_get_book_not_found(self, seeded_store):
        """Test unknown book ids return None."""
        assert seeded_store.get_book(999) is None
        assert seeded_store.get_book(0) is None

    def test_get_book_without_id(self, seeded_store):
        """Test a missing id matches nothing."""
        assert seeded_store.get_book(None) is None

    def test_get_author_found(self, seeded_store):
        """Test getting an author by ID."""
        assert seeded_store.get_author(2) == Author(id=2, name="J. R. R. Tolkien")

    def test_get_author_not_found(self, seeded_store):
        """Test unknown and missing author ids return None."""
        assert seeded_store.get_author(42) is None
        assert seeded_store.get_author(None) is None

    def test_books_by_author(self, seeded_store):
        """Test filtering keeps exactly the author's books in insertion order."""
        books = seeded_store.books_by_author(3)

        assert [b.id for b in books] == [7, 8]
        assert all(b.author_id == 3 for b in books)

    def test_books_by_author_matches_filter(self, seeded_store):
        """Test books_by_author agrees with a plain filter for every author."""
        for author in seeded_store.authors:
            expected = [b for b in seeded_store.books if b.author_id == author.id]
            assert seeded_store.books_by_author(author.id) == expected

    def test_books_by_author_empty(self, seeded_store):
        """Test an author without books gets an empty list, not None."""
        author = seeded_store.add_author("Robin Hobb")

        assert seeded_store.books_by_author(author.id) == []

    def test_sequences_are_snapshots(self, seeded_store):
        """Test callers cannot change the store through the returned lists."""
        books = seeded_store.books
        books.clear()

        assert len(seeded_store.books) == len(BOOKS_DATA)


class TestAppends:
    """Tests for add_author and add_book."""

    def test_add_author(self, seeded_store):
        """Test a new author gets id = previous count + 1."""
        before = len(seeded_store.authors)

        author = seeded_store.add_author("Robin Hobb")

        assert author == Author(id=before + 1, name="Robin Hobb")
        assert len(seeded_store.authors) == before + 1
        assert seeded_store.authors[-1] == author

    def test_add_same_author_twice(self, seeded_store):
        """Test repeating the same call creates a second, distinct record."""
        first = seeded_store.add_author("Robin Hobb")
        second = seeded_store.add_author("Robin Hobb")

        assert first.id != second.id
        assert second.id == first.id + 1

    def test_add_book(self, seeded_store):
        """Test a new book is appended and findable."""
        book = seeded_store.add_book("The Hobbit", author_id=2)

        assert book == Book(id=9, name="The Hobbit", author_id=2)
        assert seeded_store.get_book(9) == book
        assert seeded_store.books_by_author(2)[-1] == book

    def test_add_book_dangling_author(self, seeded_store):
        """Test a book may reference an author that does not exist."""
        book = seeded_store.add_book("Orphan", author_id=999)

        assert seeded_store.get_book(book.id) == book
        assert seeded_store.get_author(book.author_id) is None

    def test_add_to_empty_store(self, empty_store):
        """Test numbering starts at 1."""
        author = empty_store.add_author("First")
        book = empty_store.add_book("First Book", author_id=author.id)

        assert author.id == 1
        assert book.id == 1

    def test_records_are_immutable(self):
        """Test stored records cannot be modified in place."""
        store = RecordStore(authors=[Author(id=1, name="A")])

        with pytest.raises(dataclasses.FrozenInstanceError):
            store.authors[0].name = "B"
