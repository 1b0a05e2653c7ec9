from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    RoomSerializer,
    RoomCreateSerializer,
    JoinRoomSerializer,
    PublicRoomSerializer,
    PublicRoomFilterSerializer,
)

from apps.rooms.services import (
    create_room,
    delete_room,
    toggle_lock,
    list_public_rooms,
    get_room_for_user,
    join_room,
    leave_room,
    remove_member,
    # Exceptions
    RoomNotFoundError,
    NotInRoomError,
    AlreadyInRoomError,
    RoomFullError,
    NotRoomOwnerError,
    CannotRemoveSelfError,
    NotMemberError,
)


# Response serializers for API documentation
class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    responses={200: RoomSerializer, 404: ErrorResponseSerializer},
    description="Get the room the current user belongs to.",
    tags=['rooms'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_room(request):
    """Get the current user's room."""
    try:
        room = get_room_for_user(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(RoomSerializer(room).data)


@extend_schema(
    request=RoomCreateSerializer,
    responses={201: RoomSerializer, 400: ErrorResponseSerializer},
    description="Create a room; the creator becomes owner and first member.",
    tags=['rooms'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create(request):
    """Create a new room."""
    serializer = RoomCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        room = create_room(owner=request.user, **serializer.validated_data)
    except AlreadyInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(RoomSerializer(room).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=JoinRoomSerializer,
    responses={200: RoomSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Join a room using its join code.",
    tags=['rooms'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def join(request):
    """Join a room with a join code."""
    serializer = JoinRoomSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        room = join_room(user=request.user, join_code=serializer.validated_data['join_code'])
    except RoomNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (AlreadyInRoomError, RoomFullError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(RoomSerializer(room).data)


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer, 404: ErrorResponseSerializer},
    description="Leave the current room. An owner hands the room over or deletes it if alone.",
    tags=['rooms'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def leave(request):
    """Leave the current room."""
    try:
        room_deleted = leave_room(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    if room_deleted:
        return Response({'message': 'Room deleted as you were the last member.'})
    return Response({'message': 'You have left the room successfully.'})


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Delete the room with all its expenses, settlements and activity (owner only).",
    tags=['rooms'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete(request):
    """Delete the owner's room."""
    try:
        delete_room(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotRoomOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({'message': 'Room and all associated data have been deleted successfully.'})


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer},
    description="Remove a member from the room (owner only).",
    tags=['rooms'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove(request, member_id):
    """Remove a member from the owner's room."""
    try:
        remove_member(owner=request.user, user_id=member_id)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotRoomOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except CannotRemoveSelfError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotMemberError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'message': 'Member removed successfully.'})


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Lock or unlock the room (owner only). Unlocked rooms are listed publicly.",
    tags=['rooms'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def toggle(request):
    """Flip the room between locked and public."""
    try:
        room = toggle_lock(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotRoomOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    status_text = 'unlocked' if room.is_public else 'locked'
    return Response({'message': f'Room is now {status_text}.', 'is_public': room.is_public})


@extend_schema(
    parameters=[PublicRoomFilterSerializer],
    responses={200: PublicRoomSerializer(many=True)},
    description="List public rooms, optionally filtered by location.",
    tags=['rooms'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def public_rooms(request):
    """Browse public rooms without signing in."""
    filter_serializer = PublicRoomFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    rooms = list_public_rooms(location=filter_serializer.validated_data.get('location'))
    return Response(PublicRoomSerializer(rooms, many=True).data)
