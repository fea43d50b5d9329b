from adapters.api.routes.admin import routes as admin_routes
from adapters.api.routes.data import routes as data_routes
from adapters.api.routes.seo import routes as seo_routes
from adapters.api.routes.steamgriddb import routes as steamgriddb_routes

routes = [
    steamgriddb_routes,
    seo_routes,
    data_routes,
    admin_routes,
]

__all__ = ["routes"]
