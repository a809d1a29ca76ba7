# File: src/registrar/api/enrollments.py
"""Enrollment API endpoints."""

from fastapi import APIRouter, Depends, status

from registrar.api.dependencies import get_enrollment_service
from registrar.core.error_mapper import ENROLLMENT
from registrar.core.errors import EnrollmentNotFoundError, InvalidIdentifierError
from registrar.core.validators import has_identifier_length
from registrar.models.enrollment_schemas import EnrollmentRequest, EnrollmentResponse
from registrar.services.enrollment_service import EnrollmentService

router = APIRouter(prefix="/api/v1/enrollments", tags=["enrollments"])


def _require_enrollment_id(enrollment_id: str) -> str:
    """Reject path ids of the wrong length before touching the service."""
    if not has_identifier_length(enrollment_id):
        raise InvalidIdentifierError(ENROLLMENT, enrollment_id)
    return enrollment_id


def _found(response: EnrollmentResponse | None, enrollment_id: str) -> EnrollmentResponse:
    if response is None:
        raise EnrollmentNotFoundError(enrollment_id)
    return response


@router.get("", response_model=list[EnrollmentResponse])
async def get_all_enrollments(
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """List every enrollment."""
    return [enrollment async for enrollment in service.get_all_enrollments()]


@router.get("/{enrollment_id}", response_model=EnrollmentResponse)
async def get_enrollment_by_enrollment_id(
    enrollment_id: str,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Get a single enrollment by its enrollmentId."""
    _require_enrollment_id(enrollment_id)
    return _found(await service.get_enrollment_by_enrollment_id(enrollment_id), enrollment_id)


@router.post("", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
async def add_enrollment(
    enrollment: EnrollmentRequest,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Enroll a student in a course, snapshotting both from their services."""
    return await service.add_enrollment(enrollment)


@router.put("/{enrollment_id}", response_model=EnrollmentResponse)
async def update_enrollment(
    enrollment_id: str,
    enrollment: EnrollmentRequest,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Replace an enrollment's content, keeping its enrollmentId."""
    _require_enrollment_id(enrollment_id)
    return _found(await service.update_enrollment(enrollment, enrollment_id), enrollment_id)


@router.delete("/{enrollment_id}", response_model=EnrollmentResponse)
async def delete_enrollment(
    enrollment_id: str,
    service: EnrollmentService = Depends(get_enrollment_service),
):
    """Delete an enrollment and return what was removed."""
    _require_enrollment_id(enrollment_id)
    return _found(
        await service.delete_enrollment_by_enrollment_id(enrollment_id), enrollment_id
    )
