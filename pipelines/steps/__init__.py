# Namespace for pipeline steps
from .flatten_hierarchy import FlattenHierarchy  # noqa: F401
from .filter_views import FilterViews  # noqa: F401
from .group_views import GroupViews  # noqa: F401
