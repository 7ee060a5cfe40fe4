"""
Reporting-line reconstruction.

Turns the flat employee -> manager relation into a forest of TreeNodes:
every employee whose manager is missing, blank or unknown becomes a root,
everyone else is appended to their manager's children in input order.
"""

import logging
from collections import Counter
from dataclasses import fields

from .config import DEFAULT_GROUP_LABEL
from .errors import DuplicateIdError, EmptyInputError, UnlinkableHierarchyError
from .models import Employee, TreeNode

logger = logging.getLogger(__name__)

DUPLICATE_MODES = ("reject", "overwrite")
GROUP_FIELDS = tuple(f.name for f in fields(Employee))


def duplicate_ids(employees):
    """Ids used by more than one employee, in order of first repeat."""
    counts = Counter(emp.id for emp in employees if emp.id)
    return [uid for uid, n in counts.items() if n > 1]


# -------------------------------------------
# TRAVERSAL
# -------------------------------------------
def iter_nodes(forest):
    """Pre-order depth-first walk over every node reachable from the roots."""
    seen = set()
    stack = list(reversed(forest))

    while stack:
        node = stack.pop()
        if node in seen:
            continue

        seen.add(node)
        yield node

        stack.extend(reversed(node.children))


# -------------------------------------------
# SINGLE FOREST
# -------------------------------------------
def build_forest(employees, duplicates="reject", break_self_references=True):
    """
    Link employees to their managers and return the root nodes.

    duplicates="reject" raises DuplicateIdError when an id repeats.
    duplicates="overwrite" keeps the last row for an id: links resolve to
    its node and earlier rows with that id are left out of the forest.

    With break_self_references, someone listed as their own manager is
    made a root instead of being linked under themselves.
    """
    employees = list(employees)
    if not employees:
        raise EmptyInputError("No employee data found")
    if duplicates not in DUPLICATE_MODES:
        raise ValueError(f"Unknown duplicates mode {duplicates!r}; expected one of {DUPLICATE_MODES}")

    if duplicates == "reject":
        dups = duplicate_ids(employees)
        if dups:
            raise DuplicateIdError(dups)

    # First pass: create nodes
    nodes = []
    id_to_node = {}
    for emp in employees:
        node = TreeNode(emp)
        nodes.append(node)
        # id-less rows (permissive input) can never be a manager
        if emp.id:
            id_to_node[emp.id] = node

    # Second pass: link reports to managers
    roots = []
    orphaned = 0
    for emp, node in zip(employees, nodes):
        if emp.id and id_to_node[emp.id] is not node:
            logger.warning("Employee id %r repeats; earlier row (%s) is overwritten", emp.id, emp.name)
            orphaned += 1
            continue

        manager_id = emp.manager_id
        if manager_id and manager_id == emp.id and break_self_references:
            logger.warning("%s (%s) reports to themselves; treating as root", emp.name, emp.id)
            manager_id = ""

        manager = id_to_node.get(manager_id) if manager_id else None
        if manager is not None:
            manager.children.append(node)
        else:
            if manager_id:
                logger.info("Manager %r of %s not found; treating as root", manager_id, emp.name)
            roots.append(node)

    placed = len(nodes) - orphaned
    reachable = sum(1 for _ in iter_nodes(roots))
    if reachable < placed:
        logger.warning("%d employee(s) are in a manager cycle and unreachable from any root",
                       placed - reachable)

    if not roots:
        raise UnlinkableHierarchyError("Could not build org tree. Check manager IDs.")

    logger.info("Built %d root(s) from %d employee(s)", len(roots), len(employees))
    if len(roots) > 1:
        logger.info("Multiple roots detected; the chart will have multiple top-level trees")
    return roots


# -------------------------------------------
# GROUPED FORESTS
# -------------------------------------------
def group_employees(employees, key="organization", default_label=DEFAULT_GROUP_LABEL):
    """Stable partition of employees by one of their fields."""
    if key not in GROUP_FIELDS:
        raise ValueError(f"Cannot group by {key!r}; expected one of {GROUP_FIELDS}")

    groups = {}
    for emp in employees:
        label = getattr(emp, key) or default_label
        groups.setdefault(label, []).append(emp)
    return groups


def build_forests_by_group(employees, key="organization", default_label=DEFAULT_GROUP_LABEL,
                           **forest_options):
    """
    Build one forest per group label. Manager links never cross groups:
    an employee whose manager sits in another group is a root in their own.
    """
    employees = list(employees)
    if not employees:
        raise EmptyInputError("No employee data found")

    # ids are unique per batch, not just per group
    if forest_options.get("duplicates", "reject") == "reject":
        dups = duplicate_ids(employees)
        if dups:
            raise DuplicateIdError(dups)

    result = {}
    for label, members in group_employees(employees, key, default_label).items():
        try:
            result[label] = build_forest(members, **forest_options)
        except UnlinkableHierarchyError as exc:
            raise UnlinkableHierarchyError(f"{label}: {exc}") from exc

    logger.info("Built %d group(s) keyed by %s", len(result), key)
    return result


# -------------------------------------------
# EXPORT
# -------------------------------------------
def forest_to_dicts(forest):
    return [node.to_dict() for node in forest]


def groups_to_dicts(groups):
    return {label: forest_to_dicts(forest) for label, forest in groups.items()}
