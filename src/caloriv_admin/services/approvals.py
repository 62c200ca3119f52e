"""Loading of pending food and exercise submissions."""

import asyncio
import logging
from dataclasses import dataclass, field

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.domain.catalog import Exercise, Food
from caloriv_admin.services.admin_api import AdminApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingSubmissions:
    """Both pending queues, as loaded together."""

    foods: list[Food] = field(default_factory=list)
    exercises: list[Exercise] = field(default_factory=list)
    error: str | None = None


@dataclass
class ApprovalService:
    """Fetches and resolves user submissions."""

    api: AdminApi

    async def load_pending(self) -> PendingSubmissions:
        """Fetch both queues concurrently and wait for both."""
        foods, exercises = await asyncio.gather(
            self.api.list_food_submissions(),
            self.api.list_exercise_submissions(),
            return_exceptions=True,
        )
        for result in (foods, exercises):
            if isinstance(result, BackendError):
                logger.warning("Failed to load pending submissions: %s", result)
                return PendingSubmissions(
                    error=result.message or "Failed to load submissions"
                )
            if isinstance(result, BaseException):
                raise result
        return PendingSubmissions(foods=foods, exercises=exercises)

    async def resolve(self, kind: str, submission_id: str, action: str) -> None:
        """Approve or reject a single submission."""
        handlers = {
            ("foods", "approve"): self.api.approve_food_submission,
            ("foods", "reject"): self.api.reject_food_submission,
            ("exercises", "approve"): self.api.approve_exercise_submission,
            ("exercises", "reject"): self.api.reject_exercise_submission,
        }
        handler = handlers.get((kind, action))
        if handler is None:
            raise ValueError(f"Unsupported submission action: {kind}/{action}")
        await handler(submission_id)
        logger.info("Submission %s %sd (%s)", submission_id, action, kind)
