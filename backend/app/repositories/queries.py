"""
Native SQL for employee lookups that are not plain ORM expressions.
Use with parameter binding (named :params); column list matches the Employee mapping.
"""

# ---------------------------------------------------------------------------
# Unique employee by first and last name.
# Mapped back onto the ORM entity via select(Employee).from_statement(...).
# ---------------------------------------------------------------------------
SQL_EMPLOYEE_BY_NAMES = """
SELECT
    e.id,
    e.first_name,
    e.last_name,
    e.email
FROM employees e
WHERE e.first_name = :first_name
  AND e.last_name = :last_name
"""
