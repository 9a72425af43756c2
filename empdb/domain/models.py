"""
Domain models for the employee record store.

`Employee` is one row of the table. It is frozen: the table replaces a stored
instance when the salary changes, so values handed to callers never alias
table state.
"""
from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

CSV_HEADER = "ID,Name,Age,Address,Salary"


class Employee(BaseModel):
    """
    Representation of a single row in the employee table.
    """

    id: int = Field(..., description="Identity assigned by the table at insert time.")
    name: str = Field(..., description="Employee name.")
    age: int = Field(..., description="Age in years.")
    address: str = Field(..., description="Free-form address.")
    salary: int = Field(..., description="Current salary.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def with_salary(self, salary: int) -> "Employee":
        """Return a copy of this record carrying a new salary."""
        return self.model_copy(update={"salary": salary})

    def csv_line(self) -> str:
        # No quoting: commas inside name/address are written as-is.
        return f"{self.id},{self.name},{self.age},{self.address},{self.salary}"

    def __str__(self) -> str:
        return (
            f"ID : {self.id} | Name : {self.name} | Age : {self.age} | "
            f"Address : {self.address} | Salary : {self.salary}"
        )


@dataclass(frozen=True)
class SalarySummary:
    """Aggregate view over the salaries currently in a table."""

    count: int
    max_salary: int
    min_salary: int
    average_salary: float


__all__ = ["CSV_HEADER", "Employee", "SalarySummary"]
