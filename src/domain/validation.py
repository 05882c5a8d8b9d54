"""
Provider Field Validation

Pure checks shared by invitation creation and the onboarding wizard.
Each returns a list of human-readable problems; an empty list means valid.
"""

import re
from typing import Iterable, List, Optional

from email_validator import EmailNotValidError, validate_email

MAX_SPECIALTIES = 3
NPI_LENGTH = 10

MEDICAL_SPECIALTIES = (
    "Internal Medicine",
    "Family Medicine",
    "Cardiology",
    "Dermatology",
    "Emergency Medicine",
    "Endocrinology",
    "Gastroenterology",
    "Hematology/Oncology",
    "Infectious Disease",
    "Nephrology",
    "Neurology",
    "Obstetrics/Gynecology",
    "Ophthalmology",
    "Orthopedic Surgery",
    "Otolaryngology",
    "Pathology",
    "Pediatrics",
    "Psychiatry",
    "Pulmonology",
    "Radiology",
    "Surgery",
    "Urology",
    "Other",
)

_NPI_PATTERN = re.compile(r"^\d{10}$")


def normalize_npi(value: Optional[str]) -> str:
    """Strip everything but digits, as the credential input field does"""
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def is_valid_npi(value: Optional[str]) -> bool:
    return bool(value) and _NPI_PATTERN.match(value) is not None


def validate_specialties(specialties: Iterable[str], required: bool = False) -> List[str]:
    specialties = list(specialties or [])
    errors = []

    if required and not specialties:
        errors.append("Select at least one specialty")
    if len(specialties) > MAX_SPECIALTIES:
        errors.append(f"Select at most {MAX_SPECIALTIES} specialties")
    if len(set(specialties)) != len(specialties):
        errors.append("Specialties must not repeat")

    unknown = [s for s in specialties if s not in MEDICAL_SPECIALTIES]
    if unknown:
        errors.append(f"Unknown specialties: {', '.join(unknown)}")

    return errors


def validate_npi(value: Optional[str]) -> List[str]:
    if not value:
        return ["Credential ID (NPI) is required"]
    if not is_valid_npi(value):
        return [f"Credential ID (NPI) must be exactly {NPI_LENGTH} digits"]
    return []


def validate_professional_email(value: Optional[str]) -> List[str]:
    if not value or not value.strip():
        return ["Professional email is required"]
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ["Professional email is not a valid address"]
    return []


def validate_required(value: Optional[str], label: str) -> List[str]:
    if not value or not value.strip():
        return [f"{label} is required"]
    return []
