class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class AttendanceError(DomainError):
    """Base for attendance rule violations reported back to the caller."""

    code = "attendance_error"


class DuplicateCheckIn(AttendanceError):
    code = "duplicate_check_in"


class MissingCheckIn(AttendanceError):
    """Check-out attempted without a prior check-in for the day."""

    code = "missing_check_in"


class DuplicateCheckOut(AttendanceError):
    code = "duplicate_check_out"


class EmployeeNotFound(AttendanceError):
    code = "employee_not_found"


class EmployeeInactive(AttendanceError):
    code = "employee_inactive"


class RecordNotFound(AttendanceError):
    code = "record_not_found"


class RecordConflict(Exception):
    """Unique (employee_id, work_date) key violated at the storage layer."""


class StorageError(Exception):
    """Transient storage failure (connection lost, server gone away).

    Not a business rule violation; callers may retry.
    """

    retryable = True
