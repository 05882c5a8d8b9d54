from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.domain.entities import AdminType, UserRole
from src.domain.onboarding import (
    InvitationPayload,
    OnboardingData,
    OnboardingWizard,
    WizardStep,
)

VALID_CONTACT = dict(professional_email="dr.grey@seattlegrace.org", professional_phone="206-555-0100")


def test_invited_wizard_has_two_steps_and_prefills():
    invitation = InvitationPayload(
        role=UserRole.physician, specialties=["Cardiology"], organization_id=uuid4()
    )

    wizard = OnboardingWizard(invitation)

    assert wizard.total_steps == 2
    assert wizard.steps == [WizardStep.contact_info, WizardStep.credentials]
    assert wizard.data.specialties == ["Cardiology"]
    assert wizard.effective_role == UserRole.physician


def test_standalone_wizard_has_three_steps():
    wizard = OnboardingWizard()

    assert wizard.total_steps == 3
    assert wizard.current_step == 1
    assert wizard.progress == pytest.approx(100 / 3)


def test_advance_requires_valid_step():
    wizard = OnboardingWizard()

    assert wizard.advance() is False
    assert wizard.current_step == 1

    wizard.data.professional_email = "dr.grey@seattlegrace.org"
    wizard.data.professional_phone = "206-555-0100"
    assert wizard.advance() is True
    assert wizard.current_step == 2


def test_advance_stops_at_last_step_and_back_stops_at_first():
    invitation = InvitationPayload(role=UserRole.super_admin, organization_id=uuid4())
    wizard = OnboardingWizard(invitation, OnboardingData(**VALID_CONTACT))

    assert wizard.advance() is True
    assert wizard.is_last_step
    assert wizard.advance() is False
    assert wizard.current_step == 2

    assert wizard.back() is True
    assert wizard.back() is False
    assert wizard.current_step == 1


def test_contact_step_rejects_malformed_email():
    wizard = OnboardingWizard(
        data=OnboardingData(professional_email="not-an-email", professional_phone="555")
    )

    assert wizard.step_errors(1) == ["Professional email is not a valid address"]


def test_untouched_credentials_step_is_invalid():
    wizard = OnboardingWizard(data=OnboardingData(**VALID_CONTACT))

    assert wizard.effective_role is None
    assert not wizard.is_step_valid(2)


def test_physician_needs_specialties_and_ten_digit_npi():
    invitation = InvitationPayload(role=UserRole.physician, organization_id=uuid4())
    wizard = OnboardingWizard(invitation, OnboardingData(**VALID_CONTACT, npi_number="12345"))

    errors = wizard.step_errors(2)

    assert "Select at least one specialty" in errors
    assert "Credential ID (NPI) must be exactly 10 digits" in errors


def test_physician_with_too_many_specialties_is_invalid():
    data = OnboardingData(
        **VALID_CONTACT,
        specialties=["Cardiology", "Neurology", "Radiology", "Urology"],
        npi_number="1234567890",
    )
    wizard = OnboardingWizard(data=data)

    assert wizard.effective_role == UserRole.physician
    assert wizard.step_errors(2) == ["Select at most 3 specialties"]


def test_npi_input_keeps_digits_only():
    data = OnboardingData(npi_number="123-456-7890")

    assert data.npi_number == "1234567890"


def test_numeric_npi_is_read_as_digits():
    data = OnboardingData(npi_number=1234567890)

    assert data.npi_number == "1234567890"


def test_non_text_npi_is_a_validation_error():
    with pytest.raises(ValidationError):
        OnboardingData(npi_number=["1234567890"])


def test_super_admin_credentials_step_needs_nothing():
    invitation = InvitationPayload(role=UserRole.super_admin, organization_id=uuid4())
    wizard = OnboardingWizard(invitation)

    assert wizard.step_errors(2) == []


def test_standalone_admin_subtype_follows_administrator_branch():
    """Zero specialties and an admin subtype: administrator, step 3 still required"""
    data = OnboardingData(**VALID_CONTACT, admin_type=AdminType.office_admin)
    wizard = OnboardingWizard(data=data)

    assert wizard.effective_role == UserRole.administrator
    assert wizard.is_step_valid(2)
    assert wizard.errors_by_step() == {3: ["Organization name is required"]}

    wizard.data.organization_name = "Grey Sloan Memorial"
    assert wizard.errors_by_step() == {}

    update = wizard.build_profile_update()
    assert update["role"] == UserRole.administrator
    assert update["admin_type"] == AdminType.office_admin
    assert update["organization_name"] == "Grey Sloan Memorial"
    assert "specialties" not in update
    assert "organization_id" not in update


def test_invited_physician_profile_update():
    """Physician invite with Cardiology, both steps filled in"""
    organization_id = uuid4()
    invitation = InvitationPayload(
        role=UserRole.physician, specialties=["Cardiology"], organization_id=organization_id
    )
    wizard = OnboardingWizard(invitation, OnboardingData(**VALID_CONTACT, npi_number="1234567890"))

    assert wizard.errors_by_step() == {}

    update = wizard.build_profile_update()
    assert update["specialties"] == ["Cardiology"]
    assert update["npi_number"] == "1234567890"
    assert update["onboarding_completed"] is True
    assert update["organization_id"] == organization_id
    assert "organization_name" not in update
    assert "specialty" not in update


def test_invited_role_overrides_selected_role():
    invitation = InvitationPayload(
        role=UserRole.administrator, admin_type=AdminType.nurse_rn, organization_id=uuid4()
    )
    wizard = OnboardingWizard(invitation, OnboardingData(role=UserRole.physician))

    assert wizard.effective_role == UserRole.administrator
    assert wizard.data.admin_type == AdminType.nurse_rn


def test_standalone_physician_sets_legacy_specialty():
    data = OnboardingData(
        **VALID_CONTACT,
        specialties=["Pediatrics", "Neurology"],
        npi_number="1234567890",
        organization_name="Northside Pediatrics",
        department="Outpatient",
    )
    wizard = OnboardingWizard(data=data)

    update = wizard.build_profile_update()

    assert update["specialty"] == "Pediatrics"
    assert update["department"] == "Outpatient"


def test_step_three_does_not_exist_for_invited_wizard():
    wizard = OnboardingWizard(InvitationPayload(role=UserRole.super_admin))

    assert wizard.step_errors(3) == ["Step 3 is not part of this onboarding flow"]


def test_administrator_specialties_are_still_checked():
    data = OnboardingData(
        **VALID_CONTACT,
        role=UserRole.administrator,
        admin_type=AdminType.other,
        specialties=["Not A Specialty", "x", "y", "z"],
        organization_name="Front Desk LLC",
    )
    wizard = OnboardingWizard(data=data)

    errors = wizard.errors_by_step()

    assert list(errors) == [2]
    assert "Select at most 3 specialties" in errors[2]
    assert "Unknown specialties: Not A Specialty, x, y, z" in errors[2]


def test_legacy_specialty_is_only_written_for_physicians():
    data = OnboardingData(
        **VALID_CONTACT,
        role=UserRole.administrator,
        admin_type=AdminType.other,
        specialties=["Cardiology"],
        organization_name="Front Desk LLC",
    )
    wizard = OnboardingWizard(data=data)

    assert wizard.errors_by_step() == {}
    update = wizard.build_profile_update()
    assert "specialty" not in update
    assert "specialties" not in update
