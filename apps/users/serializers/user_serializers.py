"""
User serializers for profile and login operations.
"""
from rest_framework import serializers
from ..models import User


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for the signed-in employee.
    Used for: GET /api/users/me/
    """
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'first_name', 'last_name', 'full_name',
            'employee_number', 'role', 'created_at'
        ]
        read_only_fields = fields


class PasswordLoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(max_length=128, write_only=True)
