"""Constants for sdls authentication."""

from __future__ import annotations

# 1Password CLI
OP_BINARY = "op"
OP_TIMEOUT_SECONDS = 60
FORCE_OP_CLI_ENV_VAR = "SDLS_FORCE_OP_CLI"

# Synology endpoints
AUTH_ENDPOINT = "/webapi/auth.cgi"
TASK_ENDPOINT = "/webapi/DownloadStation/task.cgi"

AUTH_PARAMS = {
    "api": "SYNO.API.Auth",
    "version": "6",
    "method": "login",
    "session": "FileStation",
    "format": "cookie",
}

TASK_PARAMS = {
    "api": "SYNO.DownloadStation.Task",
    "version": "1",
    "method": "create",
    "session": "DownloadStation",
}

OTP_ERROR_TYPE = "otp"
MAX_LOGIN_ATTEMPTS = 2

# Prompt labels
USERNAME_PROMPT = "Please enter your username:"
PASSWORD_PROMPT = "Please enter your password:"
OTP_PROMPT = "Please enter your OTP code:"

# Error messages
ERROR_OTP_UNAVAILABLE = "Could not retrieve OTP"
ERROR_AUTH_FAILED = "Authentication failed"
ERROR_MISSING_SID = "Login response did not include a session id"
