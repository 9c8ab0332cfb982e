from __future__ import annotations

REST_API_PATH = "/rest/v1"
AUTH_API_PATH = "/auth/v1"
TOKEN_API_PATH = f"{AUTH_API_PATH}/token"
SIGNUP_API_PATH = f"{AUTH_API_PATH}/signup"
MAGIC_LINK_API_PATH = f"{AUTH_API_PATH}/magiclink"
RECOVER_API_PATH = f"{AUTH_API_PATH}/recover"
VERIFY_API_PATH = f"{AUTH_API_PATH}/verify"
USER_API_PATH = f"{AUTH_API_PATH}/user"
LOGOUT_API_PATH = f"{AUTH_API_PATH}/logout"
INVITE_API_PATH = f"{AUTH_API_PATH}/invite"
RESET_API_PATH = f"{AUTH_API_PATH}/reset"

ERROR_MESSAGES = {
    "INVALID_RESPONSE": "Invalid response from server",
    "REQUEST_FAILED": "Request failed",
    "INVALID_CONFIG": "Invalid client configuration",
    "NETWORK_ERROR": "Network error occurred",
    "PARSE_ERROR": "Failed to parse response",
}

DEFAULT_TIMEOUT_S = 15.0
USER_AGENT = "supabase-rest-client/0.1.0"
