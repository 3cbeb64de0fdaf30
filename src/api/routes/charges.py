"""Charges API Routes

FastAPI routes for monthly over-space and service charges.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.charges_request import RecomputeChargesRequestSchema, ServiceChargeRequestSchema
from src.app.services.clock import Clock
from src.app.use_cases.billing import (
    RecomputeOverspaceCharge,
    AddServiceCharge,
    GetMonthlyCharges,
    RecomputeOverspaceCommandDTO,
    AddServiceChargeCommandDTO,
    MonthlyChargesResponseDTO,
    OverspaceRecomputeResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyCapacityRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyMonthlyChargeLedgerRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_clock
from src.api.error import ClientError

router = APIRouter(prefix="/billing/charges", tags=["Charges"])

NOT_FOUND_CODES = {"CLIENT_NOT_FOUND", "CHARGES_NOT_FOUND"}


def _raise_for(error):
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(error)


@router.post(
    "/recompute",
    response_model=OverspaceRecomputeResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def recompute_charges(
    request: RecomputeChargesRequestSchema,
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    Recompute the over-space charge of a client for a billing month.

    Called after every warehouse capacity change. The stored over-space
    amount is replaced with the charge for the open over-capacity period
    (every started week counts); service charges are preserved.

    **Returns:**
    - 200: Ledger row and the figures the charge was computed from
    - 404: Client not found
    """
    use_case = RecomputeOverspaceCharge(
        uow=SqlAlchemyUnitOfWork(session),
        capacity_repo=SqlAlchemyCapacityRepository(session),
        ledger_repo=SqlAlchemyMonthlyChargeLedgerRepository(session),
        clock=clock,
        default_rate=ApplicationConfig.OVERSPACE_RATE_PER_CBM_PER_WEEK,
    )
    result = await use_case.execute(
        RecomputeOverspaceCommandDTO(
            client_id=request.client_id,
            month=request.month,
            year=request.year,
        )
    )

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.post(
    "/services",
    response_model=MonthlyChargesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def add_service_charge(
    request: ServiceChargeRequestSchema,
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    Add a one-off service charge (e.g. local collection) to a client's month.

    Charges are accumulated, not deduplicated: send each charge once.

    **Returns:**
    - 200: Ledger row after the charge
    - 404: Client not found
    """
    use_case = AddServiceCharge(
        uow=SqlAlchemyUnitOfWork(session),
        client_repo=SqlAlchemyClientRepository(session),
        ledger_repo=SqlAlchemyMonthlyChargeLedgerRepository(session),
        clock=clock,
    )
    result = await use_case.execute(
        AddServiceChargeCommandDTO(
            client_id=request.client_id,
            amount=request.amount,
            month=request.month,
            year=request.year,
        )
    )

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{client_id}",
    response_model=MonthlyChargesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_monthly_charges(
    client_id: str,
    month: Optional[int] = Query(default=None, ge=1, le=12),
    year: Optional[int] = Query(default=None, ge=2000),
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    Get the charge ledger row of a client (defaults to the current month).

    **Returns:**
    - 200: Ledger row
    - 404: No charges recorded for the month
    """
    use_case = GetMonthlyCharges(SqlAlchemyMonthlyChargeLedgerRepository(session), clock)
    result = await use_case.execute(client_id, month, year)

    if result.is_err():
        _raise_for(result.error)

    return result.value
