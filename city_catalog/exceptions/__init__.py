from .base import AppError
from .city_exceptions import *
