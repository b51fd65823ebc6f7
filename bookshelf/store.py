"""
Record Store Module

The store is the only data source of the application: two ordered,
append-only sequences of authors and books kept in process memory.

Lifecycle
=========
1. The application factory builds one store at startup (create_store)
2. The store is attached to app.state and handed to every GraphQL request
   through the resolver context
3. Mutations append records; nothing is ever updated or removed
4. Everything is discarded when the process exits

Identifiers
===========
New records get id = len(sequence) + 1. This only stays unique because
records are never removed; a delete operation would need a separate
monotonic counter.

Concurrency
===========
There is no locking. Resolvers are synchronous and run on the event loop
thread, so each append completes before another request is served.
"""

import logging
from collections.abc import Iterable

from bookshelf.models import Author, Book

logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory store of authors and books.

    Read access is a linear scan by predicate; write access is an append.
    Lookups that find nothing return None (single record) or an empty
    list (filtered records) instead of raising.

    Example:
        store = RecordStore()
        author = store.add_author("Ursula K. Le Guin")
        store.add_book("A Wizard of Earthsea", author_id=author.id)
        store.books_by_author(author.id)
    """

    def __init__(
        self,
        authors: Iterable[Author] = (),
        books: Iterable[Book] = (),
    ):
        self._authors: list[Author] = list(authors)
        self._books: list[Book] = list(books)

    def __repr__(self) -> str:
        return f"RecordStore(authors={len(self._authors)}, books={len(self._books)})"

    # -------------------------------------------------------------------------
    # Read Access
    # -------------------------------------------------------------------------
    @property
    def authors(self) -> list[Author]:
        """All authors in insertion order."""
        return list(self._authors)

    @property
    def books(self) -> list[Book]:
        """All books in insertion order."""
        return list(self._books)

    def get_author(self, author_id: int | None) -> Author | None:
        """
        Find the first author whose id equals author_id.

        Args:
            author_id: Author ID, or None when the caller supplied no id

        Returns:
            The matching author, or None if there is no match
        """
        if author_id is None:
            return None
        return next((a for a in self._authors if a.id == author_id), None)

    def get_book(self, book_id: int | None) -> Book | None:
        """
        Find the first book whose id equals book_id.

        Args:
            book_id: Book ID, or None when the caller supplied no id

        Returns:
            The matching book, or None if there is no match
        """
        if book_id is None:
            return None
        return next((b for b in self._books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> list[Book]:
        """
        All books whose author_id equals author_id, in insertion order.

        Returns an empty list (never None) when the author has no books.
        """
        return [b for b in self._books if b.author_id == author_id]

    # -------------------------------------------------------------------------
    # Write Access
    # -------------------------------------------------------------------------
    def add_author(self, name: str) -> Author:
        """
        Append a new author.

        Args:
            name: Author's full name

        Returns:
            The created author with its assigned id
        """
        author = Author(id=len(self._authors) + 1, name=name)
        self._authors.append(author)
        logger.debug(f"Added author {author.id}: {author.name!r}")
        return author

    def add_book(self, name: str, author_id: int) -> Book:
        """
        Append a new book.

        The author reference is stored as given; no existence check is made.

        Args:
            name: Book title
            author_id: Id of the book's author

        Returns:
            The created book with its assigned id
        """
        book = Book(id=len(self._books) + 1, name=name, author_id=author_id)
        self._books.append(book)
        logger.debug(
            f"Added book {book.id}: {book.name!r} (author_id={book.author_id})"
        )
        return book


def create_store(seed: bool = True) -> RecordStore:
    """
    Create the record store for an application instance.

    Args:
        seed: Load the initial authors and books (see bookshelf.seed)

    Returns:
        A new RecordStore, seeded or empty
    """
    if not seed:
        return RecordStore()

    from bookshelf.seed import seed_authors, seed_books

    store = RecordStore(authors=seed_authors(), books=seed_books())
    logger.info(
        f"Seeded store with {len(store.authors)} authors "
        f"and {len(store.books)} books"
    )
    return store
