from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.rooms.services import get_room_for_user, NotInRoomError

from .exceptions import NotRoomOwnerError
from .serializers import ActivitySerializer
from .services import list_activities, clear_activities


@extend_schema(
    responses={200: ActivitySerializer(many=True)},
    description="Get the activity feed of the current user's room, newest first.",
    tags=['activities'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def room_activities(request):
    """List activities for the user's room."""
    try:
        room = get_room_for_user(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = ActivitySerializer(list_activities(room=room), many=True)
    return Response(serializer.data)


@extend_schema(
    request=None,
    responses={200: None},
    description="Clear the room's activity feed (owner only).",
    tags=['activities'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def clear(request):
    """Owner clears all activities for their room."""
    try:
        room = get_room_for_user(user=request.user)
        clear_activities(room=room, user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotRoomOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({'message': 'Activities cleared successfully.'})
