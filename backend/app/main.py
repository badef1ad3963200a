from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.config import settings
from app.database import Base, engine
from app import models  # noqa: F401  테이블 등록
from app.routers import companies, jobs
from app.utils.exceptions import AppException, app_exception_handler
from app.utils.logger import app_logger

# 앱 시작 시 데이터베이스 초기화 (PostgreSQL 테이블 생성)
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    app_logger.info("데이터베이스 테이블 초기화 완료")
    yield

# FastAPI 앱 생성
app = FastAPI(
    title="Jobly API",
    lifespan=lifespan
)

@app.get("/")
async def root():
    """API 루트 경로"""
    return {
        "message": "Jobly API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": [
            "/companies/",
            "/jobs/"
        ]
    }

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 에러 응답 포맷 통일
app.add_exception_handler(AppException, app_exception_handler)

# 라우터 등록
app.include_router(companies.router)
app.include_router(jobs.router)
