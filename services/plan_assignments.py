"""Plan assignment service.

Training, meal and supplement plans are assigned to clients through one
assignment table per plan kind. A client holds at most one assignment row
per kind: assigning a new plan deletes every existing row for that client
and inserts the replacement inside a single transaction, so readers never
see zero or two active rows mid-swap.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import ClientNotFoundError
from core.logger import get_logger
from core.repository import BaseRepository
from database import models

logger = get_logger("services.plan_assignments")

# assignment model -> plan model it points at
PLAN_KINDS = {
    "training": (models.ClientPlan, models.TrainingPlan),
    "meal": (models.MealPlanAssignment, models.MealPlan),
    "supplement": (models.SupplementPlanAssignment, models.SupplementPlan),
}


class AssignmentRepository(BaseRepository):
    """Repository over one of the plan assignment tables."""

    def replace_for_client(
        self,
        client_id: int,
        plan_id: int,
        start_date: Optional[date] = None,
        notes: Optional[str] = None,
    ):
        """Replace whatever the client has with a single active assignment.

        Delete-by-client and insert run in one transaction that is committed
        together or rolled back together.

        Returns:
            The newly inserted assignment.
        """
        try:
            removed = (
                self.session.query(self.model)
                .filter(self.model.client_id == client_id)
                .delete(synchronize_session=False)
            )
            assignment = self.model(
                client_id=client_id,
                plan_id=plan_id,
                is_active=True,
                start_date=start_date,
                notes=notes,
            )
            self.session.add(assignment)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Replacing %s for client %s failed", self.model.__tablename__, client_id)
            raise
        self.session.refresh(assignment)
        logger.info(
            "Client %s assigned plan %s in %s (%s previous row(s) removed)",
            client_id, plan_id, self.model.__tablename__, removed
        )
        return assignment

    def get_active_for_client(self, client_id: int):
        """Return the client's active assignment, newest first, or None."""
        return (
            self.session.query(self.model)
            .filter(self.model.client_id == client_id, self.model.is_active.is_(True))
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .first()
        )

    def list_for_client(self, client_id: int) -> List:
        return self.list_by(order_by=self.model.id, client_id=client_id)

    def clear_for_client(self, client_id: int) -> int:
        """Remove every assignment row for the client; returns rows removed."""
        removed = (
            self.session.query(self.model)
            .filter(self.model.client_id == client_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return removed


class PlanAssignmentService:
    """Assign plans of one kind (training, meal or supplement) to clients."""

    def __init__(self, session: Session, kind: str):
        assignment_model, plan_model = PLAN_KINDS[kind]
        self.session = session
        self.kind = kind
        self.plans = BaseRepository(plan_model, session)
        self.assignments = AssignmentRepository(assignment_model, session)

    def _require_client(self, client_id: int) -> models.Client:
        client = self.session.get(models.Client, client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    def assign(self, client_id: int, plan_id: int, start_date: Optional[date] = None, notes: Optional[str] = None):
        """Make ``plan_id`` the client's only assignment of this kind.

        Raises:
            ClientNotFoundError: If the client does not exist.
            NotFoundError: If the plan does not exist.
        """
        self._require_client(client_id)
        self.plans.get_or_404(plan_id)
        return self.assignments.replace_for_client(client_id, plan_id, start_date=start_date, notes=notes)

    def active_plan(self, client_id: int):
        """Return ``(assignment, plan)`` for the active assignment, or ``(None, None)``."""
        self._require_client(client_id)
        assignment = self.assignments.get_active_for_client(client_id)
        if assignment is None:
            return None, None
        return assignment, self.plans.get_by_id(assignment.plan_id)

    def history(self, client_id: int) -> List:
        self._require_client(client_id)
        return self.assignments.list_for_client(client_id)

    def unassign(self, client_id: int) -> int:
        self._require_client(client_id)
        removed = self.assignments.clear_for_client(client_id)
        logger.info("Cleared %s %s assignment(s) for client %s", removed, self.kind, client_id)
        return removed
