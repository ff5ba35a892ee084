# File: /second_brain_api/core/auth_errors.py | Version: 1.0 | Title: Named authentication errors (stable messages + status codes)
from __future__ import annotations

from typing import Optional

from second_brain_api.core.exceptions import AppError

AUTH_ERROR_MESSAGES = {
    "INVALID_CREDENTIALS": "Invalid email or password",
    "ACCOUNT_DEACTIVATED": "Account is deactivated. Please contact support.",
    "OAUTH_ACCOUNT": "Please use Google login for this account",
    "TOKEN_MISSING": "Authentication token is required",
    "TOKEN_INVALID": "Invalid authentication token",
    "TOKEN_EXPIRED": "Session has expired. Please login again.",
    "REFRESH_TOKEN_INVALID": "Invalid refresh token",
    "REFRESH_TOKEN_EXPIRED": "Refresh token has expired. Please login again.",
    "USER_NOT_FOUND": "User not found",
    "USER_INACTIVE": "User account is inactive",
    "PASSWORD_MISMATCH": "Current password is incorrect",
    "OAUTH_ONLY_ACCOUNT": "Cannot change password for OAuth accounts",
    "RESET_TOKEN_INVALID": "Invalid or expired reset token",
    "RESET_TOKEN_EXPIRED": "Password reset token has expired",
    "RESET_NOT_AVAILABLE": "Password reset is not available for OAuth accounts",
    "OAUTH_CODE_INVALID": "Invalid OAuth authorization code",
    "OAUTH_STATE_INVALID": "Invalid OAuth state parameter",
    "OAUTH_TOKEN_EXCHANGE_FAILED": "Failed to exchange OAuth code for token",
    "OAUTH_PROFILE_FETCH_FAILED": "Failed to fetch OAuth user profile",
    "EMAIL_ALREADY_EXISTS": "An account with this email address already exists",
    "USERNAME_ALREADY_EXISTS": "This username is already taken",
    "INVALID_EMAIL_FORMAT": "Please provide a valid email address",
    "INVALID_USERNAME_FORMAT": (
        "Username must be 3-30 characters, containing only letters, numbers, and underscores"
    ),
    "INVALID_PASSWORD_FORMAT": (
        "Password must be at least 8 characters with uppercase, lowercase, number, and special character"
    ),
}


class AuthError(AppError):
    status_code = 401
    code = "AUTHENTICATION_FAILED"
    key: str = ""

    def __init__(self, reason: Optional[str] = None) -> None:
        message = AUTH_ERROR_MESSAGES.get(self.key, "Authentication failed")
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code=self.key or None)


# ---- 401 ----


class InvalidCredentialsError(AuthError):
    key = "INVALID_CREDENTIALS"


class AccountDeactivatedError(AuthError):
    key = "ACCOUNT_DEACTIVATED"


class OAuthAccountError(AuthError):
    key = "OAUTH_ACCOUNT"


class TokenMissingError(AuthError):
    key = "TOKEN_MISSING"


class TokenInvalidError(AuthError):
    key = "TOKEN_INVALID"


class TokenExpiredError(AuthError):
    key = "TOKEN_EXPIRED"


class RefreshTokenInvalidError(AuthError):
    key = "REFRESH_TOKEN_INVALID"


class RefreshTokenExpiredError(AuthError):
    key = "REFRESH_TOKEN_EXPIRED"


class UserInactiveError(AuthError):
    key = "USER_INACTIVE"


class PasswordMismatchError(AuthError):
    key = "PASSWORD_MISMATCH"


# ---- 403 ----


class OAuthOnlyAccountError(AuthError):
    status_code = 403
    key = "OAUTH_ONLY_ACCOUNT"


class ResetNotAvailableError(AuthError):
    status_code = 403
    key = "RESET_NOT_AVAILABLE"


# ---- 404 / 409 ----


class UserNotFoundError(AuthError):
    status_code = 404
    key = "USER_NOT_FOUND"


class EmailAlreadyExistsError(AuthError):
    status_code = 409
    key = "EMAIL_ALREADY_EXISTS"


class UsernameAlreadyExistsError(AuthError):
    status_code = 409
    key = "USERNAME_ALREADY_EXISTS"


# ---- 400 (input / token format) ----


class ResetTokenInvalidError(AuthError):
    status_code = 400
    key = "RESET_TOKEN_INVALID"


class ResetTokenExpiredError(AuthError):
    status_code = 400
    key = "RESET_TOKEN_EXPIRED"


class OAuthCodeInvalidError(AuthError):
    status_code = 400
    key = "OAUTH_CODE_INVALID"


class OAuthStateInvalidError(AuthError):
    status_code = 400
    key = "OAUTH_STATE_INVALID"


class InvalidEmailFormatError(AuthError):
    status_code = 400
    key = "INVALID_EMAIL_FORMAT"


class InvalidUsernameFormatError(AuthError):
    status_code = 400
    key = "INVALID_USERNAME_FORMAT"


class InvalidPasswordFormatError(AuthError):
    status_code = 400
    key = "INVALID_PASSWORD_FORMAT"


# ---- 502 (upstream provider) ----


class OAuthTokenExchangeFailedError(AuthError):
    status_code = 502
    key = "OAUTH_TOKEN_EXCHANGE_FAILED"


class OAuthProfileFetchFailedError(AuthError):
    status_code = 502
    key = "OAUTH_PROFILE_FETCH_FAILED"
