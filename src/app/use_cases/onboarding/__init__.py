"""
Onboarding Use Cases

Wizard context on page load, per-step validation and finalization.
"""

from .complete_onboarding_use_case import CompleteOnboardingUseCase
from .dtos import OnboardingPlanResponse, StepInfo, StepValidationResponse
from .load_onboarding_context_use_case import LoadOnboardingContextUseCase
from .validate_onboarding_step_use_case import ValidateOnboardingStepUseCase

__all__ = [
    "CompleteOnboardingUseCase",
    "LoadOnboardingContextUseCase",
    "ValidateOnboardingStepUseCase",
    "OnboardingPlanResponse",
    "StepInfo",
    "StepValidationResponse",
]
