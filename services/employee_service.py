"""Staff records"""

from repositories import EmployeeRepository
from services.entity_service import EntityService


class EmployeeService(EntityService):
    entity_label = "Employee"

    def __init__(self, employees: EmployeeRepository):
        super().__init__(employees, "restaurant.employee")
