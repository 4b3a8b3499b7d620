"""
Employees API - CRUD endpoints for employee records
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from constants import HTTPStatus
from dependencies import get_employee_mapper, get_employee_repository
from dtos.employee_dto import EmployeeDto
from exceptions import EntityNotFoundError, ValidationError
from mappers import IEmployeeMapper
from repositories import IEmployeeRepository
from utils.error_handlers import handle_api_errors
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=List[EmployeeDto])
@handle_api_errors("List employees")
async def get_all(
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """Get every employee (empty list when there are none)."""
    employees = await repo.get_all()
    return mapper.to_dto_list(employees)


@router.get("/{id}", response_model=EmployeeDto, name="get_by_id")
@handle_api_errors("Get employee")
async def get_by_id(
    id: int,
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """
    Get a specific employee.

    Raises:
        HTTPException: 404 if no employee has this id
    """
    employee = await repo.get_by_id(id)
    if employee is None:
        raise EntityNotFoundError("Employee", id)
    return mapper.to_dto(employee)


@router.post("", response_model=EmployeeDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Insert employee")
async def insert(
    dto: EmployeeDto,
    request: Request,
    response: Response,
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """
    Create an employee.

    Returns the stored record with a Location header pointing at GET /employees/{id}.
    """
    employee = mapper.to_entity(dto)
    await repo.insert(employee)
    response.headers["Location"] = str(request.url_for("get_by_id", id=employee.id))
    logger.info(f"Created employee {employee.id}")
    return mapper.to_dto(employee)


@router.put("/{id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Update employee")
async def update(
    id: int,
    dto: EmployeeDto,
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """
    Replace an employee's names.

    The path id must equal the body id; a mismatch is rejected with 400
    before storage is touched. Salary and manager are left as stored.
    """
    if id != dto.id:
        raise ValidationError(
            f"Path id {id} does not match body id {dto.id}",
            {"id": dto.id}
        )

    await repo.update(mapper.to_entity(dto))
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete("/{id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Delete employee")
async def delete(
    id: int,
    repo: IEmployeeRepository = Depends(get_employee_repository),
):
    """
    Delete an employee.

    A missing employee is answered with 400, not 404.
    """
    employee = await repo.get_by_id(id)
    if employee is None:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=f"Employee '{id}' does not exist"
        )

    await repo.delete(employee)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.get("/{id}/manager", response_model=EmployeeDto)
@handle_api_errors("Get employee manager")
async def get_manager(
    id: int,
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """
    Get the manager of an employee.

    Raises:
        HTTPException: 404 if the employee does not exist or has no manager
    """
    employee = await repo.get_by_id(id)
    if employee is None:
        raise EntityNotFoundError("Employee", id)

    manager = await repo.get_manager(employee)
    if manager is None:
        raise EntityNotFoundError("Employee", id, message=f"Employee '{id}' has no manager")
    return mapper.to_dto(manager)


@router.get("/{id}/reports", response_model=List[EmployeeDto])
@handle_api_errors("Get direct reports")
async def get_direct_reports(
    id: int,
    repo: IEmployeeRepository = Depends(get_employee_repository),
    mapper: IEmployeeMapper = Depends(get_employee_mapper),
):
    """Get the employees whose manager is this employee."""
    employee = await repo.get_by_id(id)
    if employee is None:
        raise EntityNotFoundError("Employee", id)

    reports = await repo.get_direct_reports(id)
    return mapper.to_dto_list(reports)
