from django.urls import path
from . import views

urlpatterns = [
    path("admin/editor/images/", views.editor_image_upload, name="editor_image_upload"),
    path("admin/editor/embed/", views.embed, name="editor_embed"),
    path("admin/editor/preview/", views.preview, name="editor_preview"),
    path("admin/editor/config/", views.editor_config, name="editor_config"),
    path("admin/uploads/images/", views.form_image_upload, name="form_image_upload"),
]
