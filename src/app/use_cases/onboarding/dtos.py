"""
Onboarding Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.onboarding import (
    STEP_TITLES,
    InvitationPayload,
    OnboardingData,
    OnboardingWizard,
)


class StepInfo(BaseModel):
    number: int
    title: str


class OnboardingPlanResponse(BaseModel):
    """
    Everything the onboarding page needs on mount: how many steps to show,
    the invitation it was opened with (if any) and prefilled fields.
    """

    total_steps: int
    steps: List[StepInfo]
    invitation: Optional[InvitationPayload] = None
    invitation_error: Optional[str] = None
    onboarding_completed: bool = False
    prefill: OnboardingData

    @classmethod
    def from_wizard(
        cls,
        wizard: OnboardingWizard,
        invitation_error: Optional[str] = None,
        onboarding_completed: bool = False,
    ) -> "OnboardingPlanResponse":
        return cls(
            total_steps=wizard.total_steps,
            steps=[StepInfo(number=int(s), title=STEP_TITLES[s]) for s in wizard.steps],
            invitation=wizard.invitation,
            invitation_error=invitation_error,
            onboarding_completed=onboarding_completed,
            prefill=wizard.data,
        )


class StepValidationResponse(BaseModel):
    step: int
    total_steps: int
    valid: bool
    errors: List[str]
    effective_role: Optional[str] = None
