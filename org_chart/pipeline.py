from .config import DEFAULT_GROUP_LABEL
from .forest import build_forest, build_forests_by_group
from .normalize import normalize_rows
from .reader import read_rows


def load_employees(path, sheet_name=0, policy="strict"):
    rows = read_rows(path, sheet_name=sheet_name)
    return normalize_rows(rows, policy=policy)


def load_forest(path, sheet_name=0, policy="strict", **forest_options):
    """File -> forest of TreeNodes. See build_forest for forest_options."""
    employees = load_employees(path, sheet_name=sheet_name, policy=policy)
    return build_forest(employees, **forest_options)


def load_forests_by_group(path, key="organization", default_label=DEFAULT_GROUP_LABEL,
                          sheet_name=0, policy="strict", **forest_options):
    """File -> {group label: forest}, one independent chart per group."""
    employees = load_employees(path, sheet_name=sheet_name, policy=policy)
    return build_forests_by_group(employees, key=key, default_label=default_label,
                                  **forest_options)
