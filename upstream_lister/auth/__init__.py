"""
인증 패키지

호출자 인증 컨텍스트와 go 명령으로의 인증 정보 전파를 제공합니다.
"""

from .context import credentials_from_context, credentials_scope, reset_credentials, set_credentials
from .netrc import CredentialPropagator, matches_auth_pattern, netrc_filename, write_temporary_netrc

__all__ = [
    "credentials_from_context",
    "credentials_scope",
    "reset_credentials",
    "set_credentials",
    "CredentialPropagator",
    "matches_auth_pattern",
    "netrc_filename",
    "write_temporary_netrc",
]
