import logging
import math

from .config import COL_SYNONYMS, NULL_STRINGS
from .errors import EmptyInputError
from .models import Employee

logger = logging.getLogger(__name__)

POLICIES = ("strict", "permissive")


# -------------------------------------------
# HELPERS
# -------------------------------------------
def is_null(x):
    if x is None:
        return True
    if isinstance(x, float) and math.isnan(x):
        return True
    if isinstance(x, str) and x.strip().lower() in NULL_STRINGS:
        return True
    return False


def clean_value(x):
    """Stripped string, or "" for anything null-like."""
    if is_null(x):
        return ""
    return str(x).strip()


def _lower_keys(row):
    # First spelling wins when two headers only differ by case
    out = {}
    for key, value in row.items():
        out.setdefault(str(key).strip().lower(), value)
    return out


def resolve_field(row, spellings):
    """Value of the first accepted spelling that is present and non-empty."""
    for spelling in spellings:
        value = clean_value(row.get(spelling))
        if value:
            return value
    return ""


# -------------------------------------------
# NORMALIZER
# -------------------------------------------
def normalize_row(row):
    row = _lower_keys(row)
    fields = {f: resolve_field(row, spellings) for f, spellings in COL_SYNONYMS.items()}
    return Employee(**fields)


def normalize_rows(rows, policy="strict"):
    """
    Map raw reader rows to canonical Employee records, keeping input order.

    strict     - rows without an id or a name are dropped (and logged)
    permissive - every row is kept, missing fields stay ""

    Raises EmptyInputError when nothing usable is left.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown row policy {policy!r}; expected one of {POLICIES}")

    employees = []
    dropped = 0
    for row_num, row in enumerate(rows, start=1):
        emp = normalize_row(row)
        if policy == "strict" and not (emp.id and emp.name):
            missing = "id" if not emp.id else "name"
            logger.warning("Row %d has no %s, skipping", row_num, missing)
            dropped += 1
            continue
        employees.append(emp)

    if dropped:
        logger.warning("Dropped %d row(s) missing id or name", dropped)

    if not employees:
        raise EmptyInputError("No employee data found")

    logger.info("Normalized %d employee record(s)", len(employees))
    return employees
