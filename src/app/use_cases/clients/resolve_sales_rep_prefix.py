"""ResolveSalesRepPrefix Use Case

Derives the client code prefix of a sales representative.
"""

import logging
from libs.result import Result, Return
from src.app.repositories.sales_rep_repository import SalesRepRepository
from src.domain.client_code import SYSTEM_PREFIX, derive_sales_rep_prefix

logger = logging.getLogger(__name__)


class ResolveSalesRepPrefix:
    """
    Use Case: Resolve sales rep code prefix

    Initials of the display name, else the email local part, else the
    system prefix. A missing or unreadable representative resolves to the
    system prefix.
    """

    def __init__(self, sales_rep_repo: SalesRepRepository, system_prefix: str = SYSTEM_PREFIX):
        self.sales_rep_repo = sales_rep_repo
        self.system_prefix = system_prefix

    async def execute(self, sales_rep_id: str) -> Result[str]:
        try:
            rep = await self.sales_rep_repo.get_by_id(sales_rep_id)
        except Exception as e:
            logger.warning(f"[client-code] Could not load sales rep {sales_rep_id}: {e}")
            return Return.ok(self.system_prefix)

        if not rep:
            logger.warning(f"[client-code] Sales rep {sales_rep_id} not found, using {self.system_prefix}")
            return Return.ok(self.system_prefix)

        return Return.ok(derive_sales_rep_prefix(rep.name, rep.email, fallback=self.system_prefix))
