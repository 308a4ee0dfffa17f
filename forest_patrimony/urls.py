"""URL patterns for the forest patrimony GraphQL endpoint."""

from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from graphene_file_upload.django import FileUploadGraphQLView

from .schema import schema

urlpatterns = [
    path(
        "graphql/",
        csrf_exempt(FileUploadGraphQLView.as_view(graphiql=False, schema=schema)),
        name="forest_patrimony_graphql",
    ),
]
