from urllib.parse import urlencode

from config import ApplicationConfig


def build_invitation_link(token: str) -> str:
    """Onboarding URL carrying the invitation token as the `token` query parameter"""
    base = ApplicationConfig.APP_BASE_URL.rstrip("/")
    return f"{base}{ApplicationConfig.ONBOARDING_PATH}?{urlencode({'token': token})}"
