"""
Domain package for the employee record store.

Exports the row model and the aggregate summary type. Keep this package
focused on data definitions; table behavior lives in `empdb.table`.
"""

from empdb.domain.models import CSV_HEADER, Employee, SalarySummary

__all__ = [
    "CSV_HEADER",
    "Employee",
    "SalarySummary",
]
