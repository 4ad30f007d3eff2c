"""
Authentication views.

Register and log in staff accounts, exchange refresh tokens, and revoke
them on logout.  Tokens are simplejwt JWTs carrying the user's ``id`` and
``role`` claims.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.serializers import TokenRefreshSerializer

from patients.authentication import BearerJWTAuthentication
from patients.models import User
from patients.permissions import is_admin
from patients.serializers.auth import LoginSerializer, RegisterSerializer

logger = logging.getLogger(__name__)


def user_payload(user: User) -> dict:
    return {'id': user.id, 'username': user.username, 'role': user.role}


def issue_tokens(user: User) -> RefreshToken:
    """Return a refresh token whose access token carries ``id`` and ``role``."""
    refresh = RefreshToken.for_user(user)
    # for_user stringifies the id claim on newer simplejwt releases
    refresh['id'] = user.id
    refresh['role'] = user.role
    return refresh


def _optional_user(request):
    """The bearer of a valid token, or ``None``; a bad token is ignored here."""
    try:
        result = BearerJWTAuthentication().authenticate(request)
    except (AuthenticationFailed, InvalidToken):
        return None
    return result[0] if result else None


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    """Create a staff account.

    Only an authenticated admin may hand out the ``admin`` role; any other
    caller always gets a plain ``user`` account.
    """
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    role = vd.get('role') or User.ROLE_USER
    if role == User.ROLE_ADMIN and not is_admin(_optional_user(request)):
        role = User.ROLE_USER

    with transaction.atomic():
        if User.objects.filter(username=vd['username']).exists():
            return Response({'ok': False, 'message': 'User already exists'}, status=status.HTTP_400_BAD_REQUEST)
        user = User.objects.create_user(username=vd['username'], password=vd['password'], role=role)

    logger.info("registered user %s (%s)", user.username, user.role)
    return Response(
        {'message': 'User created successfully', 'user': user_payload(user)},
        status=status.HTTP_201_CREATED,
    )


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Username/password login; returns a bearer access token and a refresh token."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = authenticate(request, username=vd['username'], password=vd['password'])
    if not user:
        logger.warning("failed login for %s from %s", vd['username'], request.META.get('REMOTE_ADDR'))
        return Response({'ok': False, 'message': 'Invalid credentials'}, status=status.HTTP_400_BAD_REQUEST)

    logger.info("login ok for %s", user.username)
    refresh = issue_tokens(user)
    return Response({
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'user': user_payload(user),
    })


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def refresh_view(request):
    """Return a new access token from a refresh token."""
    s = TokenRefreshSerializer(data=request.data)
    try:
        s.is_valid(raise_exception=True)
    except TokenError as e:
        raise InvalidToken(e.args[0])
    data = dict(s.validated_data)
    data['token'] = data.pop('access')
    return Response(data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """Blacklist the given refresh token, or all of the caller's tokens."""
    refresh = request.data.get('refresh')
    count = 0
    if refresh:
        try:
            RefreshToken(refresh).blacklist()
        except TokenError as e:
            return Response({'ok': False, 'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        count = 1
    else:
        for token in OutstandingToken.objects.filter(user=request.user):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            count += int(created)
    logger.info("user %s logged out, %d token(s) revoked", request.user.username, count)
    return Response({'ok': True, 'blacklisted': count})
