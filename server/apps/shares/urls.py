"""URL routes for shares app."""

from django.urls import path

from server.apps.shares import views

app_name = 'shares'

urlpatterns = [
    # Upload handshake
    path(
        'api/uploads/request',
        views.request_upload_view,
        name='request-upload',
    ),
    path(
        'api/uploads/finalize',
        views.finalize_upload_view,
        name='finalize-upload',
    ),

    # Link resolution
    path('api/files/<str:slug>', views.get_file_view, name='get-file'),
    path('api/stats', views.get_file_stats_view, name='file-stats'),
    path('api/health', views.health_check_view, name='health'),
    path('f/<str:slug>', views.share_link_view, name='share-link'),
]
