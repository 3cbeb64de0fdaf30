"""Clients API Routes

FastAPI routes for client onboarding: sales assignment and account codes.
"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.clients_request import AssignSalesRepRequestSchema, AssignClientCodeRequestSchema
from src.app.use_cases.clients import (
    AllocateClientCode,
    AssignClientCode,
    AssignSalesRep,
    ResolveSalesRepPrefix,
    AssignSalesRepCommandDTO,
    AssignClientCodeCommandDTO,
    SalesRepAssignmentResponseDTO,
    AssignedClientCodeResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyClientCodeSequenceRepository,
    SqlAlchemySalesRepRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.clock import Clock
from src.depends import get_session, get_clock
from src.api.error import ClientError

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post(
    "/{client_id}/assign",
    response_model=SalesRepAssignmentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def assign_sales_rep(
    client_id: str,
    request: Optional[AssignSalesRepRequestSchema] = None,
    session: AsyncSession = Depends(get_session),
):
    """
    Assign a client to the least-loaded sales representative of its country.

    Ties go to the earliest registered representative.

    **Returns:**
    - 200: Assigned representative
    - 404: Client not found
    - 400: No representatives available or assignment failed
    """
    use_case = AssignSalesRep(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
        sales_rep_repo=SqlAlchemySalesRepRepository(session),
        roles=ApplicationConfig.SALES_REP_ROLES,
    )
    result = await use_case.execute(
        AssignSalesRepCommandDTO(client_id=client_id, country=request.country if request else None)
    )

    if result.is_err():
        if result.error.code == "CLIENT_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value


@router.post(
    "/{client_id}/code",
    response_model=AssignedClientCodeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def assign_client_code(
    client_id: str,
    request: Optional[AssignClientCodeRequestSchema] = None,
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    Allocate and store the account code of a client (REP-CC-NNN).

    Without `rep_prefix` the prefix is derived from the client's sales
    owner; a client without an owner receives the TBD-CC-TEMP placeholder.

    **Returns:**
    - 200: Stored code
    - 404: Client not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    client_repo = SqlAlchemyClientRepository(session)

    use_case = AssignClientCode(
        uow=uow,
        client_repo=client_repo,
        allocate_code=AllocateClientCode(
            uow=uow,
            client_repo=client_repo,
            sequence_repo=SqlAlchemyClientCodeSequenceRepository(session),
            clock=clock,
        ),
        resolve_prefix=ResolveSalesRepPrefix(
            SqlAlchemySalesRepRepository(session),
            system_prefix=ApplicationConfig.SYSTEM_REP_PREFIX,
        ),
        max_attempts=ApplicationConfig.CODE_ALLOCATION_MAX_ATTEMPTS,
    )
    result = await use_case.execute(
        AssignClientCodeCommandDTO(client_id=client_id, rep_prefix=request.rep_prefix if request else None)
    )

    if result.is_err():
        if result.error.code == "CLIENT_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
