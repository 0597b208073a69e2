"""
Exceptions raised by flockcalc.

The calculation layer never raises on bad numbers; these cover the few
places that do fail loudly (row collection, unknown log categories).
"""


class FlockcalcError(Exception):
    """Base class for flockcalc errors."""


class UnknownLogCategory(FlockcalcError, ValueError):
    """A log category name that is not one of feed/weight/mortality/... ."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unknown log category: {category!r}")


class CollectionError(FlockcalcError):
    """
    Every category fetch for a batch failed.

    A partial failure is absorbed (the failing category becomes an empty
    list); only a total failure is surfaced, since an all-zero report would
    be indistinguishable from a brand new batch.
    """

    def __init__(self, batch_id: str, errors: dict[str, BaseException]):
        self.batch_id = batch_id
        self.errors = errors
        categories = ", ".join(sorted(errors))
        super().__init__(
            f"All log fetches failed for batch {batch_id!r} ({categories})"
        )
