"""URL configuration for Storefront."""

from django.urls import include, path

from apps.brands.urls import router as brand_router
from apps.products.urls import router as product_router

from .views import root


urlpatterns = [
    path("", root, name="root"),
    path("", include(product_router.urls)),
    path("", include(brand_router.urls)),
]
