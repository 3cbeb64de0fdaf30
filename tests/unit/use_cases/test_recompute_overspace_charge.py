"""Unit tests for RecomputeOverspaceCharge use case

Tests cover:
- Charge zero at or below the effective limit, period closed
- New over-capacity period opens at the clock time
- Started weeks of an open period are charged in full
- Client not found and repository failures
"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.recompute_overspace_charge import RecomputeOverspaceCharge
from src.app.use_cases.billing.dtos import RecomputeOverspaceCommandDTO
from src.domain.capacity_snapshot import CapacitySnapshot
from src.domain.monthly_charge_ledger import MonthlyChargeLedger


def make_ledger(**overrides):
    values = dict(
        id=1,
        client_id="client_123",
        month=3,
        year=2024,
        over_space_amount=Decimal("0"),
        additional_services_amount=Decimal("0"),
        total_amount=Decimal("0"),
        over_space_charged_at=None,
        created_at=datetime(2024, 3, 1),
        updated_at=datetime(2024, 3, 1),
    )
    values.update(overrides)
    return MonthlyChargeLedger(**values)


def make_snapshot(used, limit="10", buffer="0", rate="5"):
    return CapacitySnapshot(
        client_id="client_123",
        used_cbm=Decimal(used),
        base_limit_cbm=Decimal(limit),
        buffer_cbm=Decimal(buffer),
        rate_per_cbm_per_week=Decimal(rate),
    )


@pytest.fixture
def mock_capacity_repo():
    """Mock capacity repository"""
    return MagicMock()


@pytest.fixture
def mock_ledger_repo():
    """Mock ledger repository echoing the written values back as a row"""
    repo = MagicMock()
    repo.get_for_period = AsyncMock(return_value=None)

    async def upsert(client_id, month, year, over_space_amount, period_start, now):
        return make_ledger(
            client_id=client_id,
            month=month,
            year=year,
            over_space_amount=over_space_amount,
            total_amount=over_space_amount,
            over_space_charged_at=period_start,
            updated_at=now,
        )

    repo.upsert_over_space = AsyncMock(side_effect=upsert)
    return repo


@pytest.fixture
def recompute_use_case(mock_uow, mock_capacity_repo, mock_ledger_repo, clock):
    return RecomputeOverspaceCharge(
        uow=mock_uow,
        capacity_repo=mock_capacity_repo,
        ledger_repo=mock_ledger_repo,
        clock=clock,
        default_rate=Decimal("5"),
    )


@pytest.mark.asyncio
class TestRecomputeWithinLimit:

    async def test_no_charge_within_effective_limit(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, mock_uow, clock
    ):
        """
        Given: Client stores 18 m³ with limit 15 and buffer 5
        When: Charge is recomputed
        Then: Over-space amount is zero and no period is recorded
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("18", "15", "5"))

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        assert result.is_ok()
        assert result.value.charges.over_space_amount == Decimal("0")
        assert result.value.weeks_charged == 0
        mock_ledger_repo.upsert_over_space.assert_awaited_once_with(
            client_id="client_123",
            month=3,
            year=2024,
            over_space_amount=Decimal("0"),
            period_start=None,
            now=clock.now(),
        )
        mock_uow.commit.assert_awaited_once()

    async def test_dropping_below_limit_closes_open_period(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, clock
    ):
        """
        Given: Ledger has an open period from 10 days ago
        When: Usage is back within the limit
        Then: Period start is cleared and the charge is zero
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("10"))
        mock_ledger_repo.get_for_period = AsyncMock(
            return_value=make_ledger(over_space_charged_at=clock.now() - timedelta(days=10))
        )

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        assert result.is_ok()
        assert result.value.charges.over_space_charged_at is None
        assert mock_ledger_repo.upsert_over_space.await_args.kwargs["period_start"] is None


@pytest.mark.asyncio
class TestRecomputeOverLimit:

    async def test_first_recompute_opens_period_at_now(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, clock
    ):
        """
        Given: No ledger row and usage 2 m³ above the limit at rate 5
        When: Charge is recomputed
        Then: One week is charged (10) and the period starts now
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("12"))

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.charges.over_space_amount == Decimal("10")
        assert response.charges.over_space_charged_at == clock.now()
        assert response.overage_cbm == Decimal("2")
        assert response.weeks_charged == 1
        assert response.effective_limit_cbm == Decimal("10")

    async def test_partial_weeks_are_charged_in_full(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, clock
    ):
        """
        Given: Open period started 10 days ago, overage 2 m³, rate 5
        When: Charge is recomputed
        Then: Two weeks are charged (20) and the period start is kept
        """
        # Arrange
        period_start = clock.now() - timedelta(days=10)
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("12"))
        mock_ledger_repo.get_for_period = AsyncMock(
            return_value=make_ledger(
                over_space_amount=Decimal("10"),
                total_amount=Decimal("10"),
                over_space_charged_at=period_start,
            )
        )

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        assert result.is_ok()
        assert result.value.weeks_charged == 2
        assert result.value.charges.over_space_amount == Decimal("20")
        call = mock_ledger_repo.upsert_over_space.await_args.kwargs
        assert call["period_start"] == period_start
        assert call["over_space_amount"] == Decimal("20")

    async def test_explicit_period_is_used(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo
    ):
        """
        Given: Command names February 2024
        When: Charge is recomputed
        Then: Ledger lookup and write target February 2024
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("12"))

        # Act
        result = await recompute_use_case.execute(
            RecomputeOverspaceCommandDTO(client_id="client_123", month=2, year=2024)
        )

        # Assert
        assert result.is_ok()
        mock_ledger_repo.get_for_period.assert_awaited_once_with("client_123", 2, 2024)
        assert mock_ledger_repo.upsert_over_space.await_args.kwargs["month"] == 2

    async def test_default_rate_is_passed_to_snapshot(
        self, recompute_use_case, mock_capacity_repo
    ):
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("5"))

        # Act
        await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        mock_capacity_repo.get_snapshot.assert_awaited_once_with("client_123", Decimal("5"))


@pytest.mark.asyncio
class TestRecomputeErrors:

    async def test_client_not_found(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, mock_uow
    ):
        """
        Given: Client does not exist
        When: Charge is recomputed
        Then: CLIENT_NOT_FOUND, nothing written
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=None)

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="missing"))

        # Assert
        assert result.is_err()
        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_ledger_repo.upsert_over_space.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_write_failure_rolls_back(
        self, recompute_use_case, mock_capacity_repo, mock_ledger_repo, mock_uow
    ):
        """
        Given: Ledger write raises
        When: Charge is recomputed
        Then: Unit of work rolled back, RECOMPUTE_OVERSPACE_FAILED returned
        """
        # Arrange
        mock_capacity_repo.get_snapshot = AsyncMock(return_value=make_snapshot("12"))
        mock_ledger_repo.upsert_over_space = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await recompute_use_case.execute(RecomputeOverspaceCommandDTO(client_id="client_123"))

        # Assert
        assert result.is_err()
        assert result.error.code == "RECOMPUTE_OVERSPACE_FAILED"
        assert "Database error" in result.error.reason
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()
