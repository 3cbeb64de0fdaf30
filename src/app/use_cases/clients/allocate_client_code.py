"""AllocateClientCode Use Case

Allocates the next human-readable client account code for a sales rep
prefix and country.
"""

import logging
from libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.client_code_sequence_repository import ClientCodeSequenceRepository
from src.domain.client_code import (
    code_scan_pattern,
    format_client_code,
    max_sequence,
    random_sequence,
)
from .dtos import ClientCodeResponseDTO

logger = logging.getLogger(__name__)


class AllocateClientCode:
    """
    Use Case: Allocate client account code (REP-CC-NNN)

    Business Rules:
    1. Sequence per (prefix, country) starts at 001 and grows by one
    2. Counter is seeded from the highest existing code on first use
    3. Counter advance is a single atomic statement
    4. Store failure never fails the caller: a random 1-999 suffix is used
       instead and the degradation is logged

    Flow:
    1. Seed counter from existing codes if it does not exist yet
    2. Advance counter
    3. Commit
    4. Format code
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        sequence_repo: ClientCodeSequenceRepository,
        clock: Clock,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.sequence_repo = sequence_repo
        self.clock = clock

    async def execute(self, rep_prefix: str, country: str) -> Result[ClientCodeResponseDTO]:
        """
        Execute code allocation

        Args:
            rep_prefix: Sales rep prefix (2-3 chars)
            country: Country code (ISO 3166-1 alpha-2)

        Returns:
            Result[ClientCodeResponseDTO]: Always ok, is_fallback marks randomized suffixes
        """
        is_fallback = False

        try:
            now = self.clock.now()

            if not await self.sequence_repo.exists(rep_prefix, country):
                existing_codes = await self.client_repo.list_codes_like(
                    code_scan_pattern(rep_prefix, country)
                )
                await self.sequence_repo.seed(rep_prefix, country, max_sequence(existing_codes), now)

            sequence = await self.sequence_repo.next_value(rep_prefix, country, now)
            if sequence is None:
                raise RuntimeError(f"Code sequence {rep_prefix}-{country} missing after seeding")

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            sequence = random_sequence()
            is_fallback = True
            logger.warning(
                f"[client-code] Sequence {rep_prefix}-{country} unavailable, "
                f"using random suffix {sequence:03d}: {e}"
            )

        return Return.ok(
            ClientCodeResponseDTO(
                client_code=format_client_code(rep_prefix, country, sequence),
                rep_prefix=rep_prefix,
                country=country,
                sequence=sequence,
                is_fallback=is_fallback,
            )
        )
