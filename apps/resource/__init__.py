"""Protected Resource API.

인증 서버가 발급한 JWT를 JWKS로 검증하는 예제 리소스 서버입니다.
"""
