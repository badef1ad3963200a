import sys
import os
from datetime import timedelta
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.security import create_token

def create_test_token(username: str = "testadmin", is_admin: bool = True) -> str:
    """테스트용 액세스 토큰 발급 (기본값: 관리자)"""
    token = create_token(username, is_admin=is_admin, expires_delta=timedelta(days=1))
    print("✅ 테스트 토큰 발급 완료")
    print(f"   사용자: {username}")
    print(f"   관리자: {is_admin}")
    print(f"   Authorization: Bearer {token}")
    return token

if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "testadmin"
    admin = "--user" not in sys.argv[2:]
    create_test_token(name, admin)
