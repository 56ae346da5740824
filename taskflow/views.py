# taskflow/views.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from taskflow_user.permissions import RolePermission


class ServiceView(APIView):
    """
    Base for the resource endpoints.

    Subclasses set ``resource`` (checked by ``RolePermission`` before any
    handler runs) and ``service_class``, which receives the authenticated
    user and does the actual work.
    """
    permission_classes = [RolePermission]
    resource = None
    service_class = None

    def get_service(self):
        return self.service_class(self.request.user)


class ResourceListView(ServiceView):

    def get(self, request):
        """List every record visible to the caller."""
        return Response(self.get_service().list())

    def post(self, request):
        """
        Create a record from the request body.

        Returns:
            Response: the canonical record, including resolved relations, with HTTP 201.
        """
        return Response(self.get_service().create(request.data), status=status.HTTP_201_CREATED)


class ResourceDetailView(ServiceView):

    def get(self, request, pk):
        return Response(self.get_service().get(pk))

    def put(self, request, pk):
        """Apply the supplied fields; omitted fields keep their current values."""
        return Response(self.get_service().update(pk, request.data))

    def patch(self, request, pk):
        return self.put(request, pk)

    def delete(self, request, pk):
        self.get_service().delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
