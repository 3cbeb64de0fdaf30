from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Transaction boundary over one AsyncSession

    Use cases sharing a session share the transaction: a code counter
    committed by AllocateClientCode stays advanced even when the following
    client code write is rolled back.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        # Expires every loaded instance of the session
        await self.session.rollback()
