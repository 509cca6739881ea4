from .company_record import CompanyRecord
from .relation_record import RelationRecord
from .company_node import CompanyNode
from .flat_company_view import FlatCompanyView
from .filter_spec import FilterSpec, ValueRange, YearRange
from .dimension import Dimension
from .dashboard_metrics import DashboardMetrics, TierShare

__all__ = [
    "CompanyRecord",
    "RelationRecord",
    "CompanyNode",
    "FlatCompanyView",
    "FilterSpec",
    "ValueRange",
    "YearRange",
    "Dimension",
    "DashboardMetrics",
    "TierShare",
]
