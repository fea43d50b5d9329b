from core.services.seo_service import SeoService
from core.services.page_service import PageMetadataService, STATIC_PAGES
from core.services.access_service import AccessService

__all__ = [
    "SeoService",
    "PageMetadataService",
    "STATIC_PAGES",
    "AccessService",
]
