from src.domain.monthly_charge_ledger import MonthlyChargeLedger
from .dtos import MonthlyChargesResponseDTO


def to_charges_dto(ledger: MonthlyChargeLedger) -> MonthlyChargesResponseDTO:
    return MonthlyChargesResponseDTO(
        ledger_id=ledger.id,
        client_id=ledger.client_id,
        month=ledger.month,
        year=ledger.year,
        over_space_amount=ledger.over_space_amount,
        additional_services_amount=ledger.additional_services_amount,
        total_amount=ledger.total_amount,
        over_space_charged_at=ledger.over_space_charged_at,
        updated_at=ledger.updated_at,
    )
