"""
Employee Repository - Data access layer for staff records
"""

from repositories.base import BaseRepository


class EmployeeRepository(BaseRepository):
    id_field = "employee_id"
