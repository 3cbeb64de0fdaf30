"""Unit tests for AddServiceCharge use case"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from pydantic import ValidationError

from src.app.use_cases.billing.add_service_charge import AddServiceCharge
from src.app.use_cases.billing.dtos import AddServiceChargeCommandDTO
from src.domain.client import Client
from src.domain.monthly_charge_ledger import MonthlyChargeLedger


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Client(id="client_123", name="Nordic Parts", country="DE"))
    return repo


@pytest.fixture
def mock_ledger_repo():
    return MagicMock()


@pytest.fixture
def add_charge_use_case(mock_uow, mock_client_repo, mock_ledger_repo, clock):
    return AddServiceCharge(
        uow=mock_uow,
        client_repo=mock_client_repo,
        ledger_repo=mock_ledger_repo,
        clock=clock,
    )


@pytest.mark.asyncio
class TestAddServiceCharge:

    async def test_adds_amount_for_current_period(
        self, add_charge_use_case, mock_ledger_repo, mock_uow, clock
    ):
        """
        Given: Ledger row with 20 over-space and 10 services
        When: A 15 service charge is added
        Then: Repository accumulates 15 for the clock's month and the row is returned
        """
        # Arrange
        mock_ledger_repo.add_service_amount = AsyncMock(
            return_value=MonthlyChargeLedger(
                id=7,
                client_id="client_123",
                month=3,
                year=2024,
                over_space_amount=Decimal("20"),
                additional_services_amount=Decimal("25"),
                total_amount=Decimal("45"),
                over_space_charged_at=datetime(2024, 3, 1),
                created_at=datetime(2024, 3, 1),
                updated_at=clock.now(),
            )
        )

        # Act
        result = await add_charge_use_case.execute(
            AddServiceChargeCommandDTO(client_id="client_123", amount=Decimal("15"))
        )

        # Assert
        assert result.is_ok()
        assert result.value.additional_services_amount == Decimal("25")
        assert result.value.total_amount == Decimal("45")
        mock_ledger_repo.add_service_amount.assert_awaited_once_with(
            client_id="client_123",
            month=3,
            year=2024,
            amount=Decimal("15"),
            now=clock.now(),
        )
        mock_uow.commit.assert_awaited_once()

    async def test_client_not_found(self, add_charge_use_case, mock_client_repo, mock_ledger_repo, mock_uow):
        # Arrange
        mock_client_repo.get_by_id = AsyncMock(return_value=None)
        mock_ledger_repo.add_service_amount = AsyncMock()

        # Act
        result = await add_charge_use_case.execute(
            AddServiceChargeCommandDTO(client_id="missing", amount=Decimal("15"))
        )

        # Assert
        assert result.is_err()
        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_ledger_repo.add_service_amount.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_write_failure_rolls_back(self, add_charge_use_case, mock_ledger_repo, mock_uow):
        # Arrange
        mock_ledger_repo.add_service_amount = AsyncMock(side_effect=Exception("Database error"))

        # Act
        result = await add_charge_use_case.execute(
            AddServiceChargeCommandDTO(client_id="client_123", amount=Decimal("15"))
        )

        # Assert
        assert result.is_err()
        assert result.error.code == "ADD_SERVICE_CHARGE_FAILED"
        mock_uow.rollback.assert_awaited_once()


class TestAddServiceChargeCommand:

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError):
            AddServiceChargeCommandDTO(client_id="client_123", amount=Decimal(amount))
