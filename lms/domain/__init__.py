# lms/domain/__init__.py

"""
Main module for the domain components of the application.

This module exports the domain exceptions for easier importing.
"""

from lms.domain.exceptions import (
    DomainException,               # Pure base exception of the domain
    InvalidCredentialsException,
    DatabaseOperationException,
    InvalidInputException,
    InvalidTimeFormatException,
    OutsideAcademicPeriodException,
)
