from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("flashcards.api.urls")),
    path("api/v1/", include("accounts.urls")),
]
