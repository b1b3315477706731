# routers/__init__.py
from . import dashboard, documents, maintenance, payments, properties, tenants, units, uploads

api_routers = [
     properties.router,
     units.router,
     tenants.router,
     payments.router,
     maintenance.router,
     documents.router,
     uploads.router,
     dashboard.router,
]

__all__ = ["api_routers"]
