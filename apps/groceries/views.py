from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.expenses.serializers import ExpenseSerializer
from apps.expenses.services import InvalidAmountError
from apps.rooms.services import get_room_for_user, NotInRoomError
from apps.rooms.views import MessageResponseSerializer, ErrorResponseSerializer

from .exceptions import GroceryItemNotFoundError, AlreadyPurchasedError
from .serializers import GroceryItemSerializer, GroceryItemCreateSerializer, PurchaseSerializer
from .services import list_grocery_items, add_grocery_item, purchase_grocery_item


@extend_schema(
    responses={200: GroceryItemSerializer(many=True), 404: ErrorResponseSerializer},
    description="Items on the room's grocery list that are not bought yet, newest first.",
    tags=['groceries'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def grocery_list(request):
    try:
        room = get_room_for_user(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(GroceryItemSerializer(list_grocery_items(room=room), many=True).data)


@extend_schema(
    request=GroceryItemCreateSerializer,
    responses={201: GroceryItemSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Add an item to the room's grocery list.",
    tags=['groceries'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def add(request):
    """Add a grocery item."""
    try:
        room = get_room_for_user(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = GroceryItemCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    item = add_grocery_item(room=room, user=request.user, name=serializer.validated_data['name'])
    return Response(GroceryItemSerializer(item).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=PurchaseSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Mark an item as purchased and add its price as an expense.",
    tags=['groceries'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def purchase(request, item_id):
    """Buy a grocery item."""
    try:
        room = get_room_for_user(user=request.user)
    except NotInRoomError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    serializer = PurchaseSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        expense = purchase_grocery_item(
            item_id=item_id,
            room=room,
            user=request.user,
            amount=serializer.validated_data['amount'],
        )
    except GroceryItemNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (AlreadyPurchasedError, InvalidAmountError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Item marked as purchased and expense added.',
        'expense': ExpenseSerializer(expense).data,
    })
