"""
Onboarding Wizard

Step machine behind the provider onboarding form:

    step 1 (contact info) -> step 2 (role credentials)
        -> step 3 (organization, standalone signups only) -> complete

The total step count is fixed when the wizard is built: two steps when the
provider arrived with an invitation, three otherwise. Nothing is persisted
until the final profile update is built and written by the caller.
"""

from enum import IntEnum
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .entities.enums import AdminType, UserRole
from .validation import (
    normalize_npi,
    validate_npi,
    validate_professional_email,
    validate_required,
    validate_specialties,
)


class WizardStep(IntEnum):
    contact_info = 1
    credentials = 2
    organization = 3


STEP_TITLES = {
    WizardStep.contact_info: "Contact Information",
    WizardStep.credentials: "Professional Details",
    WizardStep.organization: "Organization Information",
}


class InvitationPayload(BaseModel):
    """Role data handed to the wizard by a successful invitation acceptance"""

    role: UserRole
    specialties: List[str] = Field(default_factory=list)
    admin_type: Optional[AdminType] = None
    organization_id: Optional[UUID] = None


class OnboardingData(BaseModel):
    """Fields collected across the wizard steps"""

    professional_email: str = ""
    professional_phone: str = ""
    role: Optional[UserRole] = None
    specialties: List[str] = Field(default_factory=list)
    npi_number: str = ""
    admin_type: Optional[AdminType] = None
    organization_name: str = ""
    department: str = ""

    @field_validator("npi_number", mode="before")
    @classmethod
    def keep_digits_only(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if value is not None and not isinstance(value, str):
            # Left for the str field check to reject
            return value
        return normalize_npi(value)


class OnboardingWizard:
    def __init__(
        self,
        invitation: Optional[InvitationPayload] = None,
        data: Optional[OnboardingData] = None,
    ):
        self.invitation = invitation
        self.data = data.model_copy(deep=True) if data is not None else OnboardingData()
        self.total_steps = 2 if invitation is not None else 3
        self.current_step = 1

        if invitation is not None:
            if invitation.specialties and not self.data.specialties:
                self.data.specialties = list(invitation.specialties)
            if invitation.admin_type and self.data.admin_type is None:
                self.data.admin_type = invitation.admin_type

    @property
    def steps(self) -> List[WizardStep]:
        return [WizardStep(n) for n in range(1, self.total_steps + 1)]

    @property
    def is_last_step(self) -> bool:
        return self.current_step == self.total_steps

    @property
    def progress(self) -> float:
        return self.current_step / self.total_steps * 100

    @property
    def effective_role(self) -> Optional[UserRole]:
        """
        Invited role wins, then an explicit selection. Without either, the
        role is inferred from what was filled in; an untouched step 2 has no
        role at all.
        """
        if self.invitation is not None:
            return self.invitation.role
        if self.data.role is not None:
            return self.data.role
        if self.data.specialties:
            return UserRole.physician
        if self.data.admin_type is not None:
            return UserRole.administrator
        return None

    def step_errors(self, step: Optional[int] = None) -> List[str]:
        step = WizardStep(step if step is not None else self.current_step)
        if step > self.total_steps:
            return [f"Step {int(step)} is not part of this onboarding flow"]

        data = self.data
        if step == WizardStep.contact_info:
            return validate_professional_email(data.professional_email) + validate_required(
                data.professional_phone, "Professional phone"
            )

        if step == WizardStep.credentials:
            role = self.effective_role
            if role is None:
                return ["Choose a role: physician specialties or an administrator type"]
            if role == UserRole.physician:
                return validate_specialties(data.specialties, required=True) + validate_npi(
                    data.npi_number
                )
            errors = validate_specialties(data.specialties)
            if role == UserRole.administrator and data.admin_type is None:
                errors.append("Administrator type is required")
            return errors

        return validate_required(data.organization_name, "Organization name")

    def is_step_valid(self, step: Optional[int] = None) -> bool:
        return not self.step_errors(step)

    def errors_by_step(self) -> Dict[int, List[str]]:
        errors = {}
        for step in self.steps:
            step_errors = self.step_errors(step)
            if step_errors:
                errors[int(step)] = step_errors
        return errors

    def advance(self) -> bool:
        if self.is_last_step or not self.is_step_valid():
            return False
        self.current_step += 1
        return True

    def back(self) -> bool:
        if self.current_step == 1:
            return False
        self.current_step -= 1
        return True

    def build_profile_update(self) -> Dict[str, Any]:
        """
        Profile fields for the finalization write. Callers must check
        errors_by_step() first; this does not validate.
        """
        data = self.data
        role = self.effective_role

        update: Dict[str, Any] = {
            "professional_email": data.professional_email.strip(),
            "professional_phone": data.professional_phone.strip(),
            "role": role,
            "onboarding_completed": True,
        }
        if data.department.strip():
            update["department"] = data.department.strip()

        if role == UserRole.physician:
            update["specialties"] = list(data.specialties)
            update["npi_number"] = data.npi_number
        elif role == UserRole.administrator:
            update["admin_type"] = data.admin_type

        if self.invitation is not None:
            if self.invitation.organization_id is not None:
                update["organization_id"] = self.invitation.organization_id
        else:
            update["organization_name"] = data.organization_name.strip()
            if role == UserRole.physician and data.specialties:
                update["specialty"] = data.specialties[0]

        return update
