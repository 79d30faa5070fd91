"""Routing for article endpoints."""

from django.urls import path

from .views import ArticleCreateView, ArticleDetailView

urlpatterns = [
    path("articles", ArticleCreateView.as_view(), name="article-create"),
    path("articles/<path:slug>", ArticleDetailView.as_view(), name="article-detail"),
]
