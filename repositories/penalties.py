"""
Penalty Repository

Resolves which penalties are in effect for a list under a configuration.
"""
from dataclasses import dataclass
from typing import List

from sqlalchemy import select, and_

from database.models import Penalty, PenaltyApplication, ListPenalty
from .base import BaseRepository


@dataclass
class ActivePenalty:
    """A penalty tagged on a list and configured for a ranking configuration."""
    penalty: Penalty
    application: PenaltyApplication
    list_penalty: ListPenalty


class PenaltyRepository(BaseRepository[Penalty]):
    """Repository for penalty operations."""

    model = Penalty

    async def get_active_for_list(
        self,
        list_id: int,
        ranking_configuration_id: int
    ) -> List[ActivePenalty]:
        """
        Get the active penalty set of a list.

        A penalty is active when it is tagged on the list (ListPenalty)
        and has a PenaltyApplication for the configuration.

        Returns:
            Active penalties ordered by penalty ID
        """
        stmt = (
            select(Penalty, PenaltyApplication, ListPenalty)
            .join(ListPenalty, ListPenalty.penalty_id == Penalty.id)
            .join(
                PenaltyApplication,
                and_(
                    PenaltyApplication.penalty_id == Penalty.id,
                    PenaltyApplication.ranking_configuration_id == ranking_configuration_id,
                )
            )
            .where(ListPenalty.list_id == list_id)
            .order_by(Penalty.id)
        )
        result = await self.session.execute(stmt)
        return [
            ActivePenalty(penalty=penalty, application=application, list_penalty=list_penalty)
            for penalty, application, list_penalty in result.all()
        ]
