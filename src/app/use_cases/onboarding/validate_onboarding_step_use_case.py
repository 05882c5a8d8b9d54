from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.onboarding import OnboardingData, OnboardingWizard
from src.domain.session_context import SessionContext

from .dtos import StepValidationResponse
from .invitation_context import find_accepted_invitation, payload_from_invitation


class ValidateOnboardingStepUseCase:
    """Evaluates one wizard step's validity predicate for the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session: SessionContext, step: int, data: OnboardingData
    ) -> Result[StepValidationResponse]:
        async with self.uow:
            invitation = await find_accepted_invitation(self.uow, session.user_id)

        wizard = OnboardingWizard(
            payload_from_invitation(invitation) if invitation is not None else None, data
        )
        errors = wizard.step_errors(step)
        role = wizard.effective_role

        return Return.ok(
            StepValidationResponse(
                step=step,
                total_steps=wizard.total_steps,
                valid=not errors,
                errors=errors,
                effective_role=role.value if role else None,
            )
        )
