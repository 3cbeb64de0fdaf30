"""AssignClientCode Use Case

Allocates a client account code and stores it on the client row, retrying
when the code turns out to be taken.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.client_code import is_temporary_client_code, temporary_client_code
from .allocate_client_code import AllocateClientCode
from .resolve_sales_rep_prefix import ResolveSalesRepPrefix
from .dtos import AssignClientCodeCommandDTO, AssignedClientCodeResponseDTO

logger = logging.getLogger(__name__)


class AssignClientCode:
    """
    Use Case: Assign account code to a client

    Business Rules:
    1. Prefix comes from the command, else from the client's sales owner
    2. Clients without a sales owner get the TBD-CC-TEMP placeholder
    3. A client that already holds a permanent code keeps it
    4. A code already held by another client (unique index) triggers a new
       allocation, up to max_attempts
    5. Client must exist

    Flow:
    1. Load client
    2. Resolve prefix (or store placeholder)
    3. Allocate code and store it, retry on unique violation
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        allocate_code: AllocateClientCode,
        resolve_prefix: ResolveSalesRepPrefix,
        max_attempts: int = 3,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.allocate_code = allocate_code
        self.resolve_prefix = resolve_prefix
        self.max_attempts = max(1, int(max_attempts))

    async def execute(self, command: AssignClientCodeCommandDTO) -> Result[AssignedClientCodeResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(command.client_id)

            if not client:
                logger.error(f"[client-code] Client {command.client_id} not found")
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                        reason="Client does not exist",
                    )
                )

            if client.client_code and not is_temporary_client_code(client.client_code):
                # Permanent codes only change through admin override
                return Return.ok(
                    AssignedClientCodeResponseDTO(
                        client_id=client.id,
                        client_code=client.client_code,
                        attempts=0,
                    )
                )

            rep_prefix = command.rep_prefix
            if rep_prefix is None and client.sales_owner_id:
                rep_prefix = (await self.resolve_prefix.execute(client.sales_owner_id)).value

            if rep_prefix is None:
                code = temporary_client_code(client.country)
                await self.client_repo.update_client_code(client.id, code)
                await self.uow.commit()
                logger.info(f"[client-code] Client {client.id} has no sales owner, stored {code}")
                return Return.ok(
                    AssignedClientCodeResponseDTO(
                        client_id=client.id,
                        client_code=code,
                        is_temporary=True,
                    )
                )

            client_id = client.id
            country = client.country

            for attempt in range(1, self.max_attempts + 1):
                allocation = (await self.allocate_code.execute(rep_prefix, country)).value

                try:
                    await self.client_repo.update_client_code(client_id, allocation.client_code)
                    await self.uow.commit()
                except IntegrityError:
                    await self.uow.rollback()
                    logger.warning(
                        f"[client-code] Code {allocation.client_code} already taken "
                        f"(attempt {attempt}/{self.max_attempts})"
                    )
                    continue

                return Return.ok(
                    AssignedClientCodeResponseDTO(
                        client_id=client_id,
                        client_code=allocation.client_code,
                        is_fallback=allocation.is_fallback,
                        attempts=attempt,
                    )
                )

            logger.error(
                f"[client-code] No free code for client {client_id} after {self.max_attempts} attempts"
            )
            return Return.err(
                Error(
                    code="CLIENT_CODE_CONFLICT",
                    message=f"Could not allocate a free client code for {client_id}",
                    reason=f"{self.max_attempts} allocations collided with existing codes",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"[client-code] Failed for client {command.client_id}: {e}")
            return Return.err(
                Error(
                    code="ASSIGN_CLIENT_CODE_FAILED",
                    message="Failed to assign client code",
                    reason=str(e),
                )
            )
