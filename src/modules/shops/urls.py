"""Shop URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.shops.views import ShopViewSet

router = SimpleRouter(trailing_slash=False)
router.register("shops", ShopViewSet, basename="shop")

urlpatterns = router.urls
