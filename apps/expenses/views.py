from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Expense
from .serializers import (
    ExpenseSerializer,
    ExpenseCreateSerializer,
    SettlementSerializer,
    SplitSummarySerializer,
    ChartDataSerializer,
    LedgerClearedSerializer,
)
from .services import (
    add_expense,
    list_expenses,
    delete_expense,
    clear_room_ledger,
    get_split_summary,
    get_chart_data,
    settle_up,
    # Exceptions
    NoOutstandingBalanceError,
    InvalidAmountError,
    ExpenseNotFoundError,
    InsufficientPermissionsError,
)
from apps.rooms.services import get_room_for_user, NotInRoomError


# Response serializers for API documentation
class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ExpenseViewSet(viewsets.GenericViewSet):
    """
    Expenses and settlements of the current user's room.

    list: Room expenses, newest first
    create: Add an expense paid by the current user
    destroy: Delete an expense (room owner or the payer)
    split: Total, per-head share and every member's balance
    chart_data: Contribution per member for charts
    settle: Pay off the current user's outstanding balance
    clear: Delete all expenses and settlements (owner only)
    """

    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Expense.objects.none()
        room = get_room_for_user(user=self.request.user)
        return list_expenses(room=room)

    @extend_schema(
        responses={200: ExpenseSerializer(many=True), 404: ErrorResponseSerializer},
        tags=['expenses'],
    )
    def list(self, request):
        try:
            queryset = self.get_queryset()
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        serializer = ExpenseSerializer(queryset, many=True)
        return Response(serializer.data)

    @extend_schema(
        request=ExpenseCreateSerializer,
        responses={201: ExpenseSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=['expenses'],
    )
    def create(self, request):
        serializer = ExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            room = get_room_for_user(user=request.user)
            expense = add_expense(
                room=room,
                user=request.user,
                description=serializer.validated_data['description'],
                amount=serializer.validated_data['amount'],
            )
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidAmountError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={
            200: MessageResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['expenses'],
    )
    def destroy(self, request, pk=None):
        try:
            room = get_room_for_user(user=request.user)
            delete_expense(expense_id=pk, room=room, user=request.user)
        except (NotInRoomError, ExpenseNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response({'message': 'Expense deleted successfully.'})

    @extend_schema(
        responses={200: SplitSummarySerializer, 404: ErrorResponseSerializer},
        description="Total, per-head share and balances. Positive 'owes' means the member owes the group.",
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'])
    def split(self, request):
        """
        GET /api/expenses/split/
        """
        try:
            room = get_room_for_user(user=request.user)
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        summary = get_split_summary(room=room)
        return Response(SplitSummarySerializer(summary).data)

    @extend_schema(
        responses={200: ChartDataSerializer, 404: ErrorResponseSerializer},
        tags=['expenses'],
    )
    @action(detail=False, methods=['get'], url_path='chart-data')
    def chart_data(self, request):
        """
        GET /api/expenses/chart-data/
        """
        try:
            room = get_room_for_user(user=request.user)
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        data = get_chart_data(room=room)
        return Response(ChartDataSerializer({'data': data}).data)

    @extend_schema(
        request=None,
        responses={201: SettlementSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        description="Settle the current user's outstanding balance with the room.",
        tags=['expenses'],
    )
    @action(detail=False, methods=['post'])
    def settle(self, request):
        """
        POST /api/expenses/settle/
        """
        try:
            room = get_room_for_user(user=request.user)
            settlement = settle_up(room_id=room.id, user=request.user)
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NoOutstandingBalanceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SettlementSerializer(settlement).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=None,
        responses={200: LedgerClearedSerializer, 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        description="Delete all expenses and settlements of the room (owner only).",
        tags=['expenses'],
    )
    @action(detail=False, methods=['delete'])
    def clear(self, request):
        """
        DELETE /api/expenses/clear/
        """
        try:
            room = get_room_for_user(user=request.user)
            deleted = clear_room_ledger(room=room, user=request.user)
        except NotInRoomError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientPermissionsError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response({
            'message': 'All expenses and settlements cleared.',
            'expenses_deleted': deleted['expenses'],
            'settlements_deleted': deleted['settlements'],
        })
