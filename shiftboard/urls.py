from django.contrib import admin
from django.urls import include, path

# Root URL routes. The JSON scheduling API is versioned under /api/v1/.
urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include("apps.scheduling.urls")),
]
