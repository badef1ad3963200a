from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True, index=True)  # 공고 ID
    title = Column(Text, nullable=False)  # 공고 제목
    salary = Column(Integer, nullable=True)  # 연봉
    equity = Column(Numeric, nullable=True)  # 지분 (0 ~ 1)
    company_handle = Column(String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False)  # 회사 참조

    company = relationship("Company", back_populates="jobs")
