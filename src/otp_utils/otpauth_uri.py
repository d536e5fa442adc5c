"""
Builders for `otpauth://` provisioning URIs.

See also:
    https://github.com/google/google-authenticator/wiki/Key-Uri-Format
"""

from __future__ import annotations

import io
import logging
from typing import Dict, Optional, Union
from urllib.parse import SplitResult, quote_plus, urlsplit

from .config import TimeUnit
from .hmac_algorithm import HmacAlgorithm

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


def remove_base32_padding(base32_secret: bytes) -> bytes:
    """Drop every '=' padding byte from a Base32 secret, keeping the order of the rest."""
    return base32_secret.replace(b"=", b"")


def _encode_component(value: str) -> str:
    # form encoding: only A-Za-z0-9 and .-*_ stay literal, space becomes +
    return quote_plus(value, safe="*", encoding=_ENCODING).replace("~", "%7E")


def _contains_colon(value: str) -> bool:
    return ":" in value or "%3a" in value.lower()


class OtpAuthUriBuilder:
    """
    Accumulates the parts of an `otpauth://` URI.

    Use `for_totp` or `for_hotp` to create a builder. Setters return the
    builder itself so calls can be chained. Query parameters keep their
    insertion order and the secret is always appended last.
    """

    def __init__(self, otp_type: str, base32_secret: Union[bytes, str], remove_padding: bool = True):
        if isinstance(base32_secret, str):
            base32_secret = base32_secret.encode(_ENCODING)
        self._type = otp_type
        self._base32_secret = remove_base32_padding(base32_secret) if remove_padding else bytes(base32_secret)
        self._label: Optional[str] = None
        self._parameters: Dict[str, str] = {}

    @staticmethod
    def for_totp(base32_secret: Union[bytes, str]) -> TotpUriBuilder:
        return TotpUriBuilder(base32_secret)

    @staticmethod
    def for_hotp(initial_counter: int, base32_secret: Union[bytes, str]) -> HotpUriBuilder:
        return HotpUriBuilder(initial_counter, base32_secret)

    def label(self, account_name: str, issuer: Optional[str] = None, encode_separator: bool = False):
        """
        Set the label path segment, `issuer:account_name` or just `account_name`.

        Args:
            account_name: Name of the user account.
            issuer: Optional provider name shown as the prefix.
            encode_separator: Write the separating colon as `%3A`.

        Raises:
            ValueError: If the account name or the issuer contains a colon,
                literal or percent-encoded.
        """
        if _contains_colon(account_name) or (issuer is not None and _contains_colon(issuer)):
            raise ValueError("Neither the account name nor the issuer are allowed to contain a colon.")

        encoded_account_name = _encode_component(account_name)
        if issuer is not None:
            separator = "%3A" if encode_separator else ":"
            self._label = _encode_component(issuer) + separator + encoded_account_name
        else:
            self._label = encoded_account_name
        return self

    def issuer(self, issuer: str):
        self._parameters["issuer"] = _encode_component(issuer)
        return self

    def algorithm(self, algorithm: HmacAlgorithm):
        self._parameters["algorithm"] = algorithm.name
        return self

    def digits(self, digits: int):
        self._parameters["digits"] = str(digits)
        return self

    def build_to_string(self) -> str:
        """
        Build the URI as a string.

        The secret ends up in an immutable string that cannot be wiped;
        prefer `build_to_bytes` where that matters.
        """
        return self._build_without_secret() + "secret=" + self._base32_secret.decode(_ENCODING)

    def build_to_uri(self) -> SplitResult:
        return urlsplit(self.build_to_string())

    def build_to_bytes(self) -> bytes:
        """Build the URI as bytes without creating a string that contains the secret."""
        buffer = io.BytesIO()
        buffer.write(self._build_without_secret().encode(_ENCODING))
        buffer.write(b"secret=")
        buffer.write(self._base32_secret)
        return buffer.getvalue()

    def _build_without_secret(self) -> str:
        query = "".join(f"{key}={value}&" for key, value in self._parameters.items())
        logger.debug(f"Building otpauth URI of type {self._type} with parameters {list(self._parameters)}")
        return f"otpauth://{self._type}/{self._label or ''}?{query}"


class TotpUriBuilder(OtpAuthUriBuilder):
    """Builder for `otpauth://totp/` URIs."""

    def __init__(self, base32_secret: Union[bytes, str], remove_padding: bool = True):
        super().__init__("totp", base32_secret, remove_padding)

    def period(self, time_step: int, time_step_unit: TimeUnit = TimeUnit.SECONDS) -> TotpUriBuilder:
        """Set the time step, always written in whole seconds."""
        self._parameters["period"] = str(time_step_unit.to_seconds(time_step))
        return self


class HotpUriBuilder(OtpAuthUriBuilder):
    """Builder for `otpauth://hotp/` URIs. The counter parameter is mandatory."""

    def __init__(self, initial_counter: int, base32_secret: Union[bytes, str], remove_padding: bool = True):
        super().__init__("hotp", base32_secret, remove_padding)
        self.counter(initial_counter)

    def counter(self, counter: int) -> HotpUriBuilder:
        self._parameters["counter"] = str(counter)
        return self
