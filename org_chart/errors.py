class OrgChartError(Exception):
    """Base class for whole-batch failures raised by org_chart."""


class SourceReadFailure(OrgChartError):
    """The tabular source could not be read or parsed."""


class EmptyInputError(OrgChartError, ValueError):
    """No usable employee rows were found."""


class UnlinkableHierarchyError(OrgChartError, RuntimeError):
    """Employees exist but no root could be found to hang the chart from."""


class DuplicateIdError(OrgChartError, ValueError):
    def __init__(self, ids):
        self.ids = list(ids)
        super().__init__(f"Duplicate employee id(s): {', '.join(self.ids)}")
