from decimal import Decimal

from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from constants import EmployeeLimits
from database import Base


class Employee(Base):
    """
    An employee record.

    manager_id optionally points at another employee in the same table.
    The `manager` relationship exists for joins and eager loading only;
    async code should resolve it through EmployeeRepository.get_manager()
    rather than touching the attribute (implicit lazy loads are not
    available on an AsyncSession).
    """
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(EmployeeLimits.NAME_MAX_LENGTH), nullable=False)
    middle_name = Column(String(EmployeeLimits.NAME_MAX_LENGTH))
    last_name = Column(String(EmployeeLimits.NAME_MAX_LENGTH), nullable=False)
    salary = Column(
        Numeric(EmployeeLimits.SALARY_PRECISION, EmployeeLimits.SALARY_SCALE),
        nullable=False,
        default=Decimal('0.00'),
    )
    manager_id = Column(Integer, ForeignKey('employees.id', ondelete='SET NULL'))

    manager = relationship("Employee", remote_side=[id], lazy='raise')

    __table_args__ = (
        CheckConstraint("first_name != ''", name='ck_employees_first_name'),
        CheckConstraint("last_name != ''", name='ck_employees_last_name'),
        CheckConstraint(f"length(first_name) <= {EmployeeLimits.NAME_MAX_LENGTH}", name='ck_employees_first_name_length'),
        CheckConstraint(f"length(middle_name) <= {EmployeeLimits.NAME_MAX_LENGTH}", name='ck_employees_middle_name_length'),
        CheckConstraint(f"length(last_name) <= {EmployeeLimits.NAME_MAX_LENGTH}", name='ck_employees_last_name_length'),
        Index('ix_employees_manager_id', 'manager_id'),
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} {self.first_name} {self.last_name}>"
