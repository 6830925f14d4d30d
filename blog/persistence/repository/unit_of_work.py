"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.repository import UnitOfWork
from blog.persistence.repository.base import store_errors


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with store_errors("unit_of_work.commit"):
            await self.session.commit()
        logfire.debug("Transaction committed")
