from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)  # 회사 식별자 (변경 불가)
    name = Column(Text, unique=True, nullable=False)  # 회사명
    num_employees = Column(Integer, nullable=True)  # 직원 수
    description = Column(Text, nullable=False)  # 회사 소개
    logo_url = Column(Text, nullable=True)  # 로고 이미지 URL

    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan", passive_deletes=True)
