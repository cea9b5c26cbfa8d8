# config/urls.py
from django.contrib import admin
from django.urls import path

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from currentlog.views_api import (
    IndicatorView,
    IndicatorDetailView,
    LogCollectionView,
    LogRecentView,
    LogBatchView,
)

urlpatterns = [
    path("admin/", admin.site.urls),

    # ---- OpenAPI/Swagger (sidecar 사용) ----
    path("api/schema/",  SpectacularAPIView.as_view(), name="schema"),
    path("api/swagger/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/",   SpectacularRedocView.as_view(url_name="schema"),   name="redoc"),

    # ---- indicator ----
    path("api/indicator/", IndicatorView.as_view(), name="api-indicator"),
    path("api/indicator/<str:indicator_id>/", IndicatorDetailView.as_view(), name="api-indicator-detail"),

    # ---- log tables (log1..log6) ----
    path("api/<str:partition>/", LogCollectionView.as_view(), name="api-log"),
    path("api/<str:partition>/recent/", LogRecentView.as_view(), name="api-log-recent"),
    path("api/<str:partition>/indicator/<str:indicator_id>/", LogCollectionView.as_view(), name="api-log-indicator"),
    path(
        "api/<str:partition>/indicator/<str:indicator_id>/<str:identifier>/",
        LogBatchView.as_view(),
        name="api-log-indicator-batch",
    ),
    path("api/<str:partition>/<str:identifier>/", LogBatchView.as_view(), name="api-log-batch"),
]
