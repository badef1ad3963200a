from app.database.PostgreSQL import Base, engine, SessionLocal

# DB 세션을 제공하는 의존성 함수
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 테이블 등록은 app.models 패키지 import 시 이루어짐 (순환 import 방지)
