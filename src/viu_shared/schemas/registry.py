"""Name -> schema lookup for request payloads.

Names are kebab-case (``register``, ``create-project``) so they read well
on the command line.
"""

from __future__ import annotations

from viu_shared.schemas import auth, base, entities
from viu_shared.validation.schema import Schema

SCHEMAS: dict[str, Schema] = {
    # auth
    "login": auth.LOGIN_REQUEST,
    "register": auth.REGISTER_REQUEST,
    "refresh-token": auth.REFRESH_TOKEN_REQUEST,
    "token-payload": auth.TOKEN_PAYLOAD,
    "forgot-password": auth.FORGOT_PASSWORD_REQUEST,
    "reset-password": auth.RESET_PASSWORD_REQUEST,
    "change-password": auth.CHANGE_PASSWORD_REQUEST,
    "verify-email": auth.VERIFY_EMAIL_REQUEST,
    "resend-verification": auth.RESEND_VERIFICATION_REQUEST,
    "send-phone-verification": auth.SEND_PHONE_VERIFICATION_REQUEST,
    "verify-phone": auth.VERIFY_PHONE_REQUEST,
    "logout": auth.LOGOUT_REQUEST,
    "revoke-session": auth.REVOKE_SESSION_REQUEST,
    "google-auth": auth.GOOGLE_AUTH_REQUEST,
    "setup-2fa": auth.SETUP_2FA_REQUEST,
    "verify-2fa": auth.VERIFY_2FA_REQUEST,
    "disable-2fa": auth.DISABLE_2FA_REQUEST,
    "permission": auth.PERMISSION,
    "validate-permission": auth.VALIDATE_PERMISSION_REQUEST,
    # entities
    "create-user": entities.CREATE_USER_REQUEST,
    "update-user": entities.UPDATE_USER_REQUEST,
    "create-project": entities.CREATE_PROJECT_REQUEST,
    "update-project": entities.UPDATE_PROJECT_REQUEST,
    "create-art": entities.CREATE_ART_REQUEST,
    "update-art": entities.UPDATE_ART_REQUEST,
    "create-feedback": entities.CREATE_FEEDBACK_REQUEST,
    "create-audio-feedback": entities.CREATE_AUDIO_FEEDBACK_REQUEST,
    "update-feedback": entities.UPDATE_FEEDBACK_REQUEST,
    "create-approval": entities.CREATE_APPROVAL_REQUEST,
    "create-task": entities.CREATE_TASK_REQUEST,
    "update-task": entities.UPDATE_TASK_REQUEST,
    "mark-notifications-read": entities.MARK_NOTIFICATIONS_READ_REQUEST,
    # shared
    "pagination": base.PAGINATION_PARAMS,
    "user-settings": base.USER_SETTINGS,
    "report-period": base.REPORT_PERIOD,
    "search": base.SEARCH_REQUEST,
}


def get_schema(name: str) -> Schema:
    """Return the schema registered as *name*.

    Raises:
        KeyError: *name* is not registered.
    """
    try:
        return SCHEMAS[name]
    except KeyError:
        raise KeyError(f"Unknown schema {name!r}") from None


def schema_names() -> list[str]:
    return sorted(SCHEMAS)
