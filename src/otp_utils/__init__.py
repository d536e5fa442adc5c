"""
otp-utils: HMAC-based and time-based one-time passwords

This package generates and validates HOTP (RFC 4226) and TOTP (RFC 6238)
codes, and builds `otpauth://` URIs for provisioning authenticator apps.
"""

__version__ = "0.1.0"

from .config import HmacOneTimePasswordConfig, TimeBasedOneTimePasswordConfig, TimeUnit
from .google_authenticator import GoogleAuthenticator
from .hmac_algorithm import HmacAlgorithm
from .hotp import HmacOneTimePasswordGenerator
from .otpauth_uri import HotpUriBuilder, OtpAuthUriBuilder, TotpUriBuilder
from .random_secret import RandomSecretGenerator
from .totp import TimeBasedOneTimePasswordGenerator

__all__ = [
    "GoogleAuthenticator",
    "HmacAlgorithm",
    "HmacOneTimePasswordConfig",
    "HmacOneTimePasswordGenerator",
    "HotpUriBuilder",
    "OtpAuthUriBuilder",
    "RandomSecretGenerator",
    "TimeBasedOneTimePasswordConfig",
    "TimeBasedOneTimePasswordGenerator",
    "TimeUnit",
    "TotpUriBuilder",
]
