from rest_framework import serializers

from patients.models import User


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('username is required')
        return v

    def validate_password(self, v):
        if not v:
            raise serializers.ValidationError('password is required')
        return v


class RegisterSerializer(LoginSerializer):
    username = serializers.CharField(max_length=150)
    role = serializers.CharField(required=False, allow_blank=True)

    def validate_role(self, v):
        # unknown roles fall back to a plain user account
        return v if v in dict(User.ROLE_CHOICES) else User.ROLE_USER
