from decimal import Decimal
from sqlalchemy.orm import Session
from dotenv import load_dotenv

# 환경변수 로드
load_dotenv()
from app.database import Base, SessionLocal, engine
from app import models  # noqa: F401
from app.database.executor import run_query
from app.services import company_service, job_service

initial_companies = [
    {"handle": "anderson-arias-morrow", "name": "Anderson, Arias and Morrow",
     "description": "Somebody program how I. Face give away discussion view act inside.",
     "numEmployees": 245, "logoUrl": "/logos/logo3.png"},
    {"handle": "bauer-gallagher", "name": "Bauer-Gallagher",
     "description": "Difficult ready trip question produce produce someone.",
     "numEmployees": 862, "logoUrl": None},
    {"handle": "watson-davis", "name": "Watson-Davis",
     "description": "Year join loss.", "numEmployees": 819, "logoUrl": "/logos/logo3.png"},
]

initial_jobs = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"),
     "company_handle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": None,
     "company_handle": "anderson-arias-morrow"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0.082"),
     "company_handle": "bauer-gallagher"},
]

def insert_companies(db: Session):
    for company in initial_companies:
        exists = run_query(db, "SELECT handle FROM companies WHERE handle = $1", [company["handle"]])
        if not exists:
            company_service.create(db, company)
    print("초기 회사 목록 삽입 완료")

def insert_jobs(db: Session):
    for job in initial_jobs:
        exists = run_query(
            db,
            "SELECT id FROM jobs WHERE title = $1 AND company_handle = $2",
            [job["title"], job["company_handle"]],
        )
        if not exists:
            job_service.create(db, job)
    print("초기 채용공고 목록 삽입 완료")

def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        insert_companies(db)
        insert_jobs(db)
    finally:
        db.close()

if __name__ == "__main__":
    main()
