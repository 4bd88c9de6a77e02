import logging

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny

from api.permissions import IsAdmin
from api.serializers import UserModelSerializer, CreateUserSerializer, UpdateUserSerializer
from api.services import UserService

logger = logging.getLogger(__name__)

class UserViewSet(viewsets.ViewSet):
    user_service = UserService()

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        if self.action in ["list", "list_by_role", "destroy_all"]:
            return [IsAdmin()]

        return [IsAuthenticated()]

    def create(self, request):
        """
        Create a new user. Open to everyone.
        POST /api/users
        Body:
        {
            "username": string,
            "name": string,
            "surname": string,
            "password": string,
            "role": "Customer" | "Manager" | "Admin"
        }
        """
        serializer = CreateUserSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        self.user_service.create_user(**serializer.validated_data)
        return Response(status=status.HTTP_200_OK)

    def list(self, request):
        """
        Retrieve all users. Admins only.
        GET /api/users
        """
        users = self.user_service.get_users()
        return Response(UserModelSerializer(users, many=True).data)

    def list_by_role(self, request, role=None):
        """
        Retrieve all users with a role. Admins only.
        GET /api/users/roles/{role}
        """
        users = self.user_service.get_users_by_role(role)
        return Response(UserModelSerializer(users, many=True).data)

    def retrieve(self, request, username=None):
        """
        Retrieve a user by username. Non-admins can only retrieve themselves.
        GET /api/users/{username}
        """
        user = self.user_service.get_user_by_username(request.user, username)
        return Response(UserModelSerializer(user).data)

    def partial_update(self, request, username=None):
        """
        Update the personal information of a user.
        PATCH /api/users/{username}
        Body:
        {
            "name": string,
            "surname": string,
            "address": string,
            "birthdate": "YYYY-MM-DD"
        }
        """
        serializer = UpdateUserSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        user = self.user_service.update_user_info(request.user, username=username, **serializer.validated_data)
        return Response(UserModelSerializer(user).data)

    def destroy(self, request, username=None):
        """
        Delete a user. Admins can delete any non-admin, others only themselves.
        DELETE /api/users/{username}
        """
        self.user_service.delete_user(request.user, username)
        logger.debug(f"User {username} deleted by {request.user.username}")
        return Response(status=status.HTTP_200_OK)

    def destroy_all(self, request):
        """
        Delete every non-admin user. Admins only.
        DELETE /api/users
        """
        self.user_service.delete_all()
        return Response(status=status.HTTP_200_OK)
