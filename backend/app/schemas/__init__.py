# Company schemas
from .company import (
    CompanyCreate, CompanyUpdate, CompanyResponse, CompanyDetailResponse,
    CompanyOut, CompanyDetailOut, CompanyListOut
)

# Job schemas
from .job import (
    JobCreate, JobUpdate, JobResponse, JobDetailResponse,
    JobOut, JobDetailOut, JobListOut
)

__all__ = [
    # Company
    "CompanyCreate", "CompanyUpdate", "CompanyResponse", "CompanyDetailResponse",
    "CompanyOut", "CompanyDetailOut", "CompanyListOut",
    # Job
    "JobCreate", "JobUpdate", "JobResponse", "JobDetailResponse",
    "JobOut", "JobDetailOut", "JobListOut",
]
