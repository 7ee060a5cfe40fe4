from .errors import (
    DuplicateIdError,
    EmptyInputError,
    OrgChartError,
    SourceReadFailure,
    UnlinkableHierarchyError,
)
from .forest import (
    build_forest,
    build_forests_by_group,
    forest_to_dicts,
    group_employees,
    groups_to_dicts,
    iter_nodes,
)
from .models import Employee, TreeNode
from .normalize import normalize_rows
from .pipeline import load_forest, load_forests_by_group
from .reader import read_rows, rows_from_frame

__version__ = "0.1.0"
