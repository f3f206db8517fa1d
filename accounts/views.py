"""
Accounts app views

Endpoints describing the current user and the sections they can open.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .navigation import navigation_for
from .serializers import UserSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def navigation(request):
    """
    Return the current user and their navigation menu.

    GET /api/navigation/
    """
    return Response({
        'user': UserSerializer(request.user).data,
        'items': navigation_for(request.user),
    })
