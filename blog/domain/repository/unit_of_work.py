"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary of one request.

    Use cases that change state call ``commit`` once their writes are done
    and before building the response, so a response is only ever sent for
    a change that is already durable. Anything not committed is rolled back
    when the request ends.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write of the request durable.

        Raises:
            StoreError: If the store refuses the commit
        """
        pass
