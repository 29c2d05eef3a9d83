# __init__.py
from jobly.schemas.company import (
	CompanyDetail,
	CompanyNew,
	CompanyRead,
	CompanyUpdate,
)
from jobly.schemas.job import JobNew, JobRead, JobUpdate
from jobly.schemas.user import Token, TokenData, UserCreate, UserLogin, UserRead

__all__ = [
	"CompanyDetail",
	"CompanyNew",
	"CompanyRead",
	"CompanyUpdate",
	"JobNew",
	"JobRead",
	"JobUpdate",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
]
