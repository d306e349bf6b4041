"""Auth Gateway.

외부 인증 서버 앞단의 HTTP 게이트웨이와 디바이스 승인 페이지입니다.
"""
