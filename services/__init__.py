# services/__init__.py
from .results import FetchResult
from .stats_service import (
     ACTIVITY_FEED_LIMIT,
     build_activity_feed,
     compute_stats,
     summarize_property,
)
from .dashboard_repository import (
     list_properties_for_user,
     list_recent_maintenance_requests,
     list_recent_payments,
)
from .tenant_service import TenantService

__all__ = [
     "FetchResult",
     "ACTIVITY_FEED_LIMIT",
     "build_activity_feed",
     "compute_stats",
     "summarize_property",
     "list_properties_for_user",
     "list_recent_maintenance_requests",
     "list_recent_payments",
     "TenantService",
]
