"""In-memory unit of work for testing."""

from blog.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are visible at once; commits are only counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
