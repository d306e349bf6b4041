"""Device-login CLI.

OAuth 2.0 Device Authorization Grant(RFC 8628)로 인증 서버에 로그인하는 CLI입니다.
"""
