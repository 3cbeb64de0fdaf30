"""AssignSalesRep Use Case

Assigns a client without a sales owner to the least-loaded sales representative in its
country.
"""

import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.sales_rep_repository import SalesRepRepository
from src.domain.user import UserRole
from .dtos import AssignSalesRepCommandDTO, SalesRepAssignmentResponseDTO

logger = logging.getLogger(__name__)


class AssignSalesRep:
    """
    Use Case: Balance a new client onto a sales representative

    Business Rules:
    1. Candidates are users with an admin-tier role
    2. Workload = clients owned by the representative in the same country
    3. Lowest workload wins, ties go to the earliest registered representative
    4. Workload count failure degrades to the earliest registered representative
    5. No candidates, missing client or failed write: error result, never raises
    6. A client that already has a sales owner keeps it

    Flow:
    1. Load client, return its current owner if set
    2. Load candidates (ordered by registration)
    3. Count country-scoped workloads
    4. Pick representative
    5. Persist assignment and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        sales_rep_repo: SalesRepRepository,
        roles: List[UserRole],
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.sales_rep_repo = sales_rep_repo
        self.roles = [UserRole(role) for role in roles]

    async def execute(self, command: AssignSalesRepCommandDTO) -> Result[SalesRepAssignmentResponseDTO]:
        """
        Execute sales representative assignment

        Args:
            command: AssignSalesRepCommandDTO with client_id and optional country

        Returns:
            Result[SalesRepAssignmentResponseDTO]: Chosen representative or error
        """
        try:
            client = await self.client_repo.get_by_id(command.client_id)

            if not client:
                logger.error(f"[assignment] Client {command.client_id} not found")
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                        reason="Client does not exist",
                    )
                )

            country = command.country or client.country

            if client.sales_owner_id:
                logger.info(
                    f"[assignment] Client {command.client_id} already owned by {client.sales_owner_id}, keeping it"
                )
                return Return.ok(
                    SalesRepAssignmentResponseDTO(
                        client_id=command.client_id,
                        country=country,
                        sales_owner_id=client.sales_owner_id,
                        already_assigned=True,
                    )
                )

            candidates = await self.sales_rep_repo.list_by_roles(self.roles)

            if not candidates:
                logger.error("[assignment] No sales representatives available for auto-assignment")
                return Return.err(
                    Error(
                        code="NO_SALES_REPRESENTATIVES",
                        message="No sales representatives available",
                        reason=f"No users with roles {[role.value for role in self.roles]}",
                    )
                )

            candidate_ids = [
                rep.id for rep in sorted(candidates, key=lambda rep: (rep.created_at, rep.id))
            ]

            is_fallback = False

            try:
                workloads = await self.client_repo.count_by_sales_owner(country, candidate_ids)
                # min() keeps the first of equal workloads, candidates are in registration order
                chosen_id = min(candidate_ids, key=lambda rep_id: workloads.get(rep_id, 0))
                workload_before = workloads.get(chosen_id, 0)
            except Exception as e:
                await self.uow.rollback()
                chosen_id = candidate_ids[0]
                workload_before = None
                is_fallback = True
                logger.warning(
                    f"[assignment] Workload count failed for {country}, "
                    f"assigning earliest representative {chosen_id}: {e}"
                )

            updated = await self.client_repo.update_sales_owner(command.client_id, chosen_id)

            if not updated:
                await self.uow.rollback()
                logger.error(f"[assignment] Client {command.client_id} disappeared before assignment")
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                        reason="No client row updated",
                    )
                )

            await self.uow.commit()

            logger.info(
                f"[assignment] Client {command.client_id} ({country}) assigned to {chosen_id} "
                f"(workload {workload_before})"
            )

            return Return.ok(
                SalesRepAssignmentResponseDTO(
                    client_id=command.client_id,
                    country=country,
                    sales_owner_id=chosen_id,
                    workload_before=workload_before,
                    is_fallback=is_fallback,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"[assignment] Failed to assign client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="ASSIGN_SALES_REP_FAILED",
                    message="Failed to assign sales representative",
                    reason=str(e),
                )
            )
